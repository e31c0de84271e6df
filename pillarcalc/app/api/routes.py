"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from pillarcalc.config import DEFAULT_REQUEST
from pillarcalc.core.comparison import compare_accounts, run_scenario
from pillarcalc.schemas.accounts import (
    ComparisonRequest,
    ComparisonResponse,
    HealthResponse,
    ScenarioRequest,
    ScenarioResponse,
)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    current_app.logger.warning("rejected %s: %d validation error(s)", request.path, exc.error_count())
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    return jsonify(HealthResponse(status="ok").model_dump())


@api_bp.get("/defaults")
def defaults() -> Any:
    """Starting values for the comparison form."""
    payload = ComparisonRequest.model_validate(DEFAULT_REQUEST)
    return jsonify(payload.model_dump(mode="json", by_alias=True))


@api_bp.post("/calc/scenario")
def scenario() -> Any:
    """Yearly ledger and summary for one account."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = ScenarioRequest.model_validate(raw_payload)
    current_app.logger.info(
        "scenario: years=%d mode=%s", payload.years, payload.tax_saving_mode.value
    )
    outcome = run_scenario(payload.to_parameters(), payload.final_tax_rate)
    response = ScenarioResponse.from_outcome(outcome)
    return jsonify(response.model_dump(mode="json", by_alias=True))


@api_bp.post("/calc/comparison")
def comparison() -> Any:
    """Pillar 3 account against a brokerage account with the same contributions."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = ComparisonRequest.model_validate(raw_payload)
    current_app.logger.info(
        "comparison: years=%d mode=%s", payload.years, payload.pillar.tax_saving_mode.value
    )
    result = compare_accounts(
        payload.pillar_parameters(),
        payload.brokerage_parameters(),
        pillar_final_tax_rate=current_app.config["PILLAR_FINAL_TAX_RATE"],
        brokerage_final_tax_rate=current_app.config["BROKERAGE_FINAL_TAX_RATE"],
    )
    response = ComparisonResponse(
        pillar=ScenarioResponse.from_outcome(result.pillar),
        brokerage=ScenarioResponse.from_outcome(result.brokerage),
        chart=result.chart,
        difference=result.difference,
    )
    return jsonify(response.model_dump(mode="json", by_alias=True))
