from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ContractViolation(AssertionError):
    """Raised when the core receives parameters the caller should have normalized."""

    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


class TaxSavingMode(str, Enum):
    REINVEST = "reinvest"
    DEFER_TO_END = "end"
    IGNORE = "none"


class Record(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class SimulationParameters(Record):
    annual_growth_rate: float
    entry_fee_rate: float = 0.0
    management_fee_rate: float = 0.0
    yearly_contribution: float
    horizon_years: int
    tax_credit_rate: float = 0.0
    tax_saving_mode: TaxSavingMode = TaxSavingMode.REINVEST
    # None means every euro of the contribution earns the credit
    deductible_ceiling: Optional[float] = None


class YearRow(Record):
    year: int
    starting_capital: float
    gross_contribution: float
    net_contribution: float
    interest_earned: float
    ending_capital: float
    entry_fee_paid: float
    management_fee_paid: float
    cumulative_fees_to_date: float


class SimulationResult(Record):
    rows: Tuple[YearRow, ...]
    deferred_tax_saving_total: float = 0.0


class ScenarioSummary(Record):
    total_contributions: float
    capital_before_tax: float
    profit: float
    tax_owed: float
    capital_after_tax: float
    capital_after_tax_including_deferred: float
    total_fees: float


class ScenarioOutcome(Record):
    final_tax_rate: float
    result: SimulationResult
    summary: ScenarioSummary


class ChartSeries(Record):
    """Per-year series for the comparison charts, aligned on ``years``."""

    years: List[int]
    pillar_capital: List[float]
    brokerage_capital: List[float]
    pillar_fees: List[float]
    brokerage_fees: List[float]


class ComparisonResult(Record):
    pillar: ScenarioOutcome
    brokerage: ScenarioOutcome
    chart: ChartSeries
    difference: float
