"""Request and response contracts for the calculator endpoints."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from pillarcalc.config import MAX_HORIZON_YEARS, MIN_HORIZON_YEARS
from pillarcalc.models import (
    ChartSeries,
    ScenarioOutcome,
    ScenarioSummary,
    SimulationParameters,
    TaxSavingMode,
    YearRow,
)
from pillarcalc.schemas.normalize import clamp, parse_int, parse_number, parse_tax_saving_mode


class CamelModel(BaseModel):
    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)


class SharedAssumptions(CamelModel):
    """Market and saving assumptions common to both accounts."""

    growth_rate: float = Field(0.0, description="Annual return as a decimal (e.g. 0.05 for 5%).")
    contribution: float = Field(0.0, ge=0, description="Amount paid in at the start of each year.")
    tax_ceiling: Optional[float] = Field(
        None,
        ge=0,
        description="Yearly contribution eligible for the tax credit; null means no ceiling.",
    )
    years: int = Field(MIN_HORIZON_YEARS, ge=MIN_HORIZON_YEARS, le=MAX_HORIZON_YEARS)

    @field_validator("growth_rate", mode="before")
    @classmethod
    def _parse_growth(cls, value: Any) -> float:
        return parse_number(value)

    @field_validator("contribution", mode="before")
    @classmethod
    def _parse_contribution(cls, value: Any) -> float:
        return max(0.0, parse_number(value))

    @field_validator("tax_ceiling", mode="before")
    @classmethod
    def _parse_ceiling(cls, value: Any) -> Optional[float]:
        ceiling = parse_number(value, fallback=None)
        return None if ceiling is None else max(0.0, ceiling)

    @field_validator("years", mode="before")
    @classmethod
    def _clamp_years(cls, value: Any) -> int:
        return clamp(parse_int(value, MIN_HORIZON_YEARS), MIN_HORIZON_YEARS, MAX_HORIZON_YEARS)


class FeeInputs(CamelModel):
    entry_fee: float = Field(0.0, ge=0, description="Fee on each contribution, as a decimal.")
    management_fee: float = Field(0.0, ge=0, description="Yearly fee on managed assets, as a decimal.")

    @field_validator("entry_fee", "management_fee", mode="before")
    @classmethod
    def _parse_fee(cls, value: Any) -> float:
        return max(0.0, parse_number(value))


class PillarInputs(FeeInputs):
    tax_credit_rate: float = Field(0.0, ge=0, description="Marginal tax rate credited on deductible contributions.")
    tax_saving_mode: TaxSavingMode = TaxSavingMode.REINVEST

    @field_validator("tax_credit_rate", mode="before")
    @classmethod
    def _parse_credit(cls, value: Any) -> float:
        return max(0.0, parse_number(value))

    @field_validator("tax_saving_mode", mode="before")
    @classmethod
    def _parse_mode(cls, value: Any) -> TaxSavingMode:
        return parse_tax_saving_mode(value)


class BrokerageInputs(FeeInputs):
    pass


class ScenarioRequest(SharedAssumptions, PillarInputs):
    """Inputs for a single account run."""

    final_tax_rate: float = Field(0.0, ge=0, description="Tax on profit when the account is paid out.")

    @field_validator("final_tax_rate", mode="before")
    @classmethod
    def _parse_final_tax(cls, value: Any) -> float:
        return max(0.0, parse_number(value))

    def to_parameters(self) -> SimulationParameters:
        return SimulationParameters(
            annual_growth_rate=self.growth_rate,
            entry_fee_rate=self.entry_fee,
            management_fee_rate=self.management_fee,
            yearly_contribution=self.contribution,
            horizon_years=self.years,
            tax_credit_rate=self.tax_credit_rate,
            tax_saving_mode=self.tax_saving_mode,
            deductible_ceiling=self.tax_ceiling,
        )


class ComparisonRequest(SharedAssumptions):
    """Shared assumptions plus the fee and tax settings of each account."""

    pillar: PillarInputs = Field(default_factory=PillarInputs)
    brokerage: BrokerageInputs = Field(default_factory=BrokerageInputs)

    def pillar_parameters(self) -> SimulationParameters:
        return SimulationParameters(
            annual_growth_rate=self.growth_rate,
            entry_fee_rate=self.pillar.entry_fee,
            management_fee_rate=self.pillar.management_fee,
            yearly_contribution=self.contribution,
            horizon_years=self.years,
            tax_credit_rate=self.pillar.tax_credit_rate,
            tax_saving_mode=self.pillar.tax_saving_mode,
            deductible_ceiling=self.tax_ceiling,
        )

    def brokerage_parameters(self) -> SimulationParameters:
        # no tax credit on a brokerage account
        return SimulationParameters(
            annual_growth_rate=self.growth_rate,
            entry_fee_rate=self.brokerage.entry_fee,
            management_fee_rate=self.brokerage.management_fee,
            yearly_contribution=self.contribution,
            horizon_years=self.years,
            tax_credit_rate=0.0,
            tax_saving_mode=TaxSavingMode.IGNORE,
        )


class ScenarioResponse(CamelModel):
    final_tax_rate: float
    rows: List[YearRow]
    deferred_tax_saving_total: float
    summary: ScenarioSummary

    @classmethod
    def from_outcome(cls, outcome: ScenarioOutcome) -> "ScenarioResponse":
        return cls(
            final_tax_rate=outcome.final_tax_rate,
            rows=list(outcome.result.rows),
            deferred_tax_saving_total=outcome.result.deferred_tax_saving_total,
            summary=outcome.summary,
        )


class ComparisonResponse(CamelModel):
    pillar: ScenarioResponse
    brokerage: ScenarioResponse
    chart: ChartSeries
    difference: float


class HealthResponse(BaseModel):
    status: str
