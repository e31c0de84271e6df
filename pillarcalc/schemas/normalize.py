"""Lenient parsing of raw form values before they reach the calculator."""

from __future__ import annotations

import math
import re
from typing import Any, Optional

from pillarcalc.models import TaxSavingMode

_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")

_MODES = {mode.value: mode for mode in TaxSavingMode}


def parse_number(value: Any, fallback: Optional[float] = 0.0) -> Optional[float]:
    """
    Read a number the way a browser form field is read.

    Accepts a decimal comma ("5,5"), keeps only the leading numeric part
    ("12abc" -> 12.0) and returns ``fallback`` for anything else.
    """
    if value is None or isinstance(value, bool):
        return fallback
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        match = _FLOAT_PREFIX.match(value.replace(",", ".", 1))
        if match is None:
            return fallback
        number = float(match.group())
    else:
        return fallback
    return number if math.isfinite(number) else fallback


def parse_int(value: Any, fallback: int) -> int:
    if value is None or isinstance(value, bool):
        return fallback
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else fallback
    if isinstance(value, str):
        match = _INT_PREFIX.match(value)
        return int(match.group()) if match else fallback
    return fallback


def clamp(value, low, high):
    return max(low, min(high, value))


def parse_tax_saving_mode(value: Any) -> TaxSavingMode:
    # unrecognized values fall back to reinvesting, the form's first option
    if isinstance(value, TaxSavingMode):
        return value
    if isinstance(value, str):
        return _MODES.get(value.strip().lower(), TaxSavingMode.REINVEST)
    return TaxSavingMode.REINVEST
