"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from compound_backend.core.formatting import format_live_input
from compound_backend.core.projection import chart_data, project, summarize, total_months
from compound_backend.logging_config import get_logger
from compound_backend.schemas.formatting import LiveInputRequest, LiveInputResponse
from compound_backend.schemas.projection import ProjectionInput, ProjectionResponse

api_bp = Blueprint("api", __name__)

logger = get_logger(__name__)


def _json_object() -> Dict[str, Any]:
    """Request body as a dict; anything else (bad JSON, a list, ...) reads as empty."""
    payload = request.get_json(force=True, silent=True)
    return payload if isinstance(payload, dict) else {}


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("rejected %s payload: %d error(s)", request.path, exc.error_count())
    return (
        jsonify(
            {"detail": exc.errors(include_url=False, include_context=False, include_input=False)}
        ),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify({"message": "pong"})


@api_bp.post("/calc/compound-interest")
def compound_interest() -> Any:
    """Month-by-month projection with summary totals and chart arrays."""
    inputs = ProjectionInput.model_validate(_json_object())
    logger.debug(
        "projecting %d months at %s%% %s",
        total_months(inputs.horizon, inputs.horizon_unit),
        inputs.nominal_rate,
        inputs.rate_basis.value,
    )

    series = project(inputs)
    response = ProjectionResponse(
        points=series.points,
        summary=summarize(series),
        chart=chart_data(series),
    )
    # non-finite floats serialize as null
    return current_app.response_class(
        response.model_dump_json(by_alias=True),
        mimetype="application/json",
    )


@api_bp.post("/format/live-input")
def live_input() -> Any:
    """Regroup a money field and return where the cursor should land."""
    payload = LiveInputRequest.model_validate(_json_object())
    cursor = len(payload.text) if payload.cursor is None else payload.cursor

    text, new_cursor = format_live_input(payload.text, cursor)
    response = LiveInputResponse(text=text, cursor=new_cursor)
    return jsonify(response.model_dump())
