"""Year-by-year compounding of a savings account with fees and a tax credit."""

from __future__ import annotations

import math
from typing import List

from pillarcalc.config import MAX_HORIZON_YEARS, MIN_HORIZON_YEARS
from pillarcalc.models import (
    ContractViolation,
    SimulationParameters,
    SimulationResult,
    TaxSavingMode,
    YearRow,
)


def _check_preconditions(params: SimulationParameters) -> None:
    errors: List[str] = []
    if not MIN_HORIZON_YEARS <= params.horizon_years <= MAX_HORIZON_YEARS:
        errors.append(
            f"horizon_years must be between {MIN_HORIZON_YEARS} and {MAX_HORIZON_YEARS}, "
            f"got {params.horizon_years}"
        )
    if not math.isfinite(params.annual_growth_rate):
        errors.append(f"annual_growth_rate must be finite, got {params.annual_growth_rate}")
    for name in ("yearly_contribution", "entry_fee_rate", "management_fee_rate", "tax_credit_rate"):
        value = getattr(params, name)
        if not math.isfinite(value) or value < 0:
            errors.append(f"{name} must be finite and non-negative, got {value}")
    ceiling = params.deductible_ceiling
    if ceiling is not None and (not math.isfinite(ceiling) or ceiling < 0):
        errors.append(f"deductible_ceiling must be finite and non-negative, got {ceiling}")
    if errors:
        raise ContractViolation(errors)


def _reinvested_saving(mode: TaxSavingMode, tax_saving: float) -> tuple[float, float]:
    """Split a year's tax saving into (reinvested now, deferred to the end)."""
    if mode is TaxSavingMode.REINVEST:
        return tax_saving, 0.0
    if mode is TaxSavingMode.DEFER_TO_END:
        return 0.0, tax_saving
    if mode is TaxSavingMode.IGNORE:
        return 0.0, 0.0
    raise ValueError(f"unsupported tax saving mode: {mode!r}")


def simulate(params: SimulationParameters) -> SimulationResult:
    """
    Build the yearly ledger for one account.

    Order of operations (per year):
      1) Tax saving on the deductible part of the contribution (capped by the ceiling).
      2) Reinvest it, defer it to the end of the horizon, or drop it.
      3) Entry fee on the whole gross contribution, reinvested saving included.
      4) Growth and management fee both computed on starting capital + net contribution;
         the fee is taken out of the year's growth, not charged against principal.
    """
    _check_preconditions(params)

    if params.deductible_ceiling is None:
        deductible_base = params.yearly_contribution
    else:
        deductible_base = min(params.yearly_contribution, params.deductible_ceiling)
    tax_saving = deductible_base * params.tax_credit_rate

    starting_capital = 0.0
    cumulative_fees = 0.0
    deferred_total = 0.0
    rows: List[YearRow] = []

    for year in range(1, params.horizon_years + 1):
        reinvested, deferred = _reinvested_saving(params.tax_saving_mode, tax_saving)
        deferred_total += deferred

        gross_contribution = params.yearly_contribution + reinvested
        entry_fee = gross_contribution * params.entry_fee_rate
        net_contribution = gross_contribution - entry_fee

        managed_base = starting_capital + net_contribution
        management_fee = managed_base * params.management_fee_rate
        interest = managed_base * params.annual_growth_rate - management_fee
        ending_capital = starting_capital + net_contribution + interest

        cumulative_fees += entry_fee + management_fee

        rows.append(
            YearRow(
                year=year,
                starting_capital=starting_capital,
                gross_contribution=gross_contribution,
                net_contribution=net_contribution,
                interest_earned=interest,
                ending_capital=ending_capital,
                entry_fee_paid=entry_fee,
                management_fee_paid=management_fee,
                cumulative_fees_to_date=cumulative_fees,
            )
        )
        starting_capital = ending_capital

    return SimulationResult(rows=tuple(rows), deferred_tax_saving_total=deferred_total)
