from __future__ import annotations

from math import isclose

import pytest

from pillarcalc.core.comparison import build_chart_series, compare_accounts, run_scenario
from pillarcalc.models import SimulationParameters, TaxSavingMode
from pillarcalc.schemas.accounts import ComparisonRequest


def comparison_request(**overrides) -> ComparisonRequest:
    payload = {
        "growthRate": 0.05,
        "contribution": 3200,
        "taxCeiling": 3200,
        "years": 20,
        "pillar": {
            "entryFee": 0.03,
            "managementFee": 0.01,
            "taxCreditRate": 0.30,
            "taxSavingMode": "reinvest",
        },
        "brokerage": {"entryFee": 0.0, "managementFee": 0.002},
    }
    payload.update(overrides)
    return ComparisonRequest.model_validate(payload)


def test_brokerage_has_no_tax_credit():
    params = comparison_request().brokerage_parameters()

    assert params.tax_credit_rate == 0.0
    assert params.tax_saving_mode is TaxSavingMode.IGNORE
    assert params.deductible_ceiling is None


def test_chart_series_align_with_rows():
    request = comparison_request()
    result = compare_accounts(
        request.pillar_parameters(),
        request.brokerage_parameters(),
        pillar_final_tax_rate=0.20,
        brokerage_final_tax_rate=0.0,
    )

    chart = result.chart
    assert chart.years == list(range(1, 21))
    assert len(chart.pillar_capital) == len(chart.brokerage_capital) == 20
    assert chart.pillar_fees[-1] == result.pillar.summary.total_fees
    assert chart.brokerage_fees[-1] == result.brokerage.summary.total_fees


def test_last_chart_point_is_after_tax():
    request = comparison_request(years=10)
    result = compare_accounts(
        request.pillar_parameters(),
        request.brokerage_parameters(),
        pillar_final_tax_rate=0.20,
        brokerage_final_tax_rate=0.0,
    )

    pillar_rows = result.pillar.result.rows
    assert result.chart.pillar_capital[:-1] == [row.ending_capital for row in pillar_rows[:-1]]
    assert result.chart.pillar_capital[-1] == result.pillar.summary.capital_after_tax_including_deferred
    assert result.chart.pillar_capital[-1] < pillar_rows[-1].ending_capital
    # untaxed brokerage keeps its ending capital
    assert isclose(result.chart.brokerage_capital[-1], result.brokerage.result.rows[-1].ending_capital)


def test_difference_compares_final_capital():
    request = comparison_request()
    result = compare_accounts(
        request.pillar_parameters(),
        request.brokerage_parameters(),
        pillar_final_tax_rate=0.20,
        brokerage_final_tax_rate=0.0,
    )

    expected = (
        result.pillar.summary.capital_after_tax_including_deferred
        - result.brokerage.summary.capital_after_tax_including_deferred
    )
    assert isclose(result.difference, expected)


def test_tax_credit_favours_the_pillar_account_with_equal_fees():
    request = comparison_request(
        pillar={"entryFee": 0.0, "managementFee": 0.0, "taxCreditRate": 0.30},
        brokerage={"entryFee": 0.0, "managementFee": 0.0},
    )
    result = compare_accounts(
        request.pillar_parameters(),
        request.brokerage_parameters(),
        pillar_final_tax_rate=0.20,
        brokerage_final_tax_rate=0.0,
    )

    assert result.difference > 0


def test_scenario_keeps_its_tax_rate():
    outcome = run_scenario(
        SimulationParameters(annual_growth_rate=0.05, yearly_contribution=1000.0, horizon_years=1),
        0.20,
    )

    assert outcome.final_tax_rate == 0.20
    assert isclose(outcome.summary.tax_owed, 10.0)


def test_chart_series_for_empty_ledger():
    outcome = run_scenario(
        SimulationParameters(annual_growth_rate=0.05, yearly_contribution=1000.0, horizon_years=1),
        0.0,
    )
    empty = outcome.model_copy(update={"result": outcome.result.model_copy(update={"rows": ()})})

    chart = build_chart_series(empty, empty)

    assert chart.years == []
    assert chart.pillar_capital == []


def test_mismatched_horizons_are_rejected():
    short = SimulationParameters(annual_growth_rate=0.05, yearly_contribution=1000.0, horizon_years=1)
    long = short.model_copy(update={"horizon_years": 5})

    with pytest.raises(ValueError):
        compare_accounts(short, long, 0.2, 0.0)
