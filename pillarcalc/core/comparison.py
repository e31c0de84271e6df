from __future__ import annotations

from typing import List

from pillarcalc.core.simulation import simulate
from pillarcalc.core.summary import summarize
from pillarcalc.models import (
    ChartSeries,
    ComparisonResult,
    ScenarioOutcome,
    SimulationParameters,
)


def run_scenario(params: SimulationParameters, final_tax_rate: float) -> ScenarioOutcome:
    result = simulate(params)
    return ScenarioOutcome(
        final_tax_rate=final_tax_rate,
        result=result,
        summary=summarize(result, final_tax_rate),
    )


def _capital_series(outcome: ScenarioOutcome) -> List[float]:
    # last bar shows what is left after the final tax, deferred savings included
    series = [row.ending_capital for row in outcome.result.rows]
    if series:
        series[-1] = outcome.summary.capital_after_tax_including_deferred
    return series


def build_chart_series(pillar: ScenarioOutcome, brokerage: ScenarioOutcome) -> ChartSeries:
    return ChartSeries(
        years=[row.year for row in pillar.result.rows],
        pillar_capital=_capital_series(pillar),
        brokerage_capital=_capital_series(brokerage),
        pillar_fees=[row.cumulative_fees_to_date for row in pillar.result.rows],
        brokerage_fees=[row.cumulative_fees_to_date for row in brokerage.result.rows],
    )


def compare_accounts(
    pillar: SimulationParameters,
    brokerage: SimulationParameters,
    pillar_final_tax_rate: float,
    brokerage_final_tax_rate: float,
) -> ComparisonResult:
    """
    Run the pillar 3 account and the brokerage account side by side.

    Both parameter sets must cover the same horizon so the chart series line up.
    """
    if pillar.horizon_years != brokerage.horizon_years:
        raise ValueError(
            f"horizons differ: pillar={pillar.horizon_years} brokerage={brokerage.horizon_years}"
        )

    pillar_outcome = run_scenario(pillar, pillar_final_tax_rate)
    brokerage_outcome = run_scenario(brokerage, brokerage_final_tax_rate)

    return ComparisonResult(
        pillar=pillar_outcome,
        brokerage=brokerage_outcome,
        chart=build_chart_series(pillar_outcome, brokerage_outcome),
        difference=(
            pillar_outcome.summary.capital_after_tax_including_deferred
            - brokerage_outcome.summary.capital_after_tax_including_deferred
        ),
    )
