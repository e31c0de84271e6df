"""Totals, final tax and fees derived from a simulated ledger."""

from __future__ import annotations

from pillarcalc.models import ScenarioSummary, SimulationResult


def summarize(result: SimulationResult, final_tax_rate_on_profit: float) -> ScenarioSummary:
    """Reduce the rows to the end-of-horizon figures; losses are not taxed."""
    if not result.rows:
        return ScenarioSummary(
            total_contributions=0.0,
            capital_before_tax=0.0,
            profit=0.0,
            tax_owed=0.0,
            capital_after_tax=0.0,
            capital_after_tax_including_deferred=0.0,
            total_fees=0.0,
        )

    last = result.rows[-1]
    total_contributions = sum(row.net_contribution for row in result.rows)
    capital_before_tax = last.ending_capital
    profit = max(0.0, capital_before_tax - total_contributions)
    tax_owed = profit * final_tax_rate_on_profit
    capital_after_tax = capital_before_tax - tax_owed

    return ScenarioSummary(
        total_contributions=total_contributions,
        capital_before_tax=capital_before_tax,
        profit=profit,
        tax_owed=tax_owed,
        capital_after_tax=capital_after_tax,
        capital_after_tax_including_deferred=capital_after_tax + result.deferred_tax_saving_total,
        total_fees=last.cumulative_fees_to_date,
    )
