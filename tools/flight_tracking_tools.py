from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from pydantic import ValidationError

from models.outcomes import (
    TrackingConfigError,
    TrackingNotFound,
    TrackingOutcome,
    TrackingSuccess,
    TrackingUpstreamError,
    TrackingValidationError,
)
from models.schemas import ErrorResponse, FlightTrackingRequest, TrackFlightParameters
from settings import resolve_aviation_stack_api_key
from tools.aviationstack_client import AviationStackAPIError, AviationStackClient

logger = logging.getLogger(__name__)

CredentialResolver = Callable[[], Optional[str]]

INVALID_REQUEST_MESSAGE = "Invalid request parameters"
MISSING_API_KEY_MESSAGE = "Aviation Stack API key not configured"
GENERIC_FAILURE_MESSAGE = "Failed to track flight. Please try again later."


class FlightTrackingError(RuntimeError):
    pass


def not_found_message(flight_number: str) -> str:
    return f"No flight data found for flight {flight_number}"


def validate_flight_query(payload: Any) -> FlightTrackingRequest | TrackingValidationError:
    try:
        return FlightTrackingRequest.model_validate(payload)
    except ValidationError as exc:
        details: List[Dict[str, Any]] = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
            for err in exc.errors()
        ]
        return TrackingValidationError(details=details)


def normalize_flight_response(payload: Any, flight_number: str) -> TrackingSuccess | TrackingNotFound:
    records = payload.get("data") if isinstance(payload, dict) else None
    if not records:
        return TrackingNotFound(flight_number=flight_number)
    return TrackingSuccess(payload=payload)


async def run_flight_tracking(
    payload: Any,
    *,
    resolve_credential: CredentialResolver,
    client: AviationStackClient,
) -> TrackingOutcome:
    """Validate, resolve the credential, call the provider once, and classify the result.

    Transport failures and undecodable bodies are not modelled here and
    propagate to the caller's boundary.
    """
    query = validate_flight_query(payload)
    if isinstance(query, TrackingValidationError):
        return query

    access_key = resolve_credential()
    if not access_key:
        return TrackingConfigError()

    try:
        body = await client.get_flights(access_key, query.flight_number)
    except AviationStackAPIError as exc:
        return TrackingUpstreamError(status_code=exc.status_code)
    return normalize_flight_response(body, query.flight_number)


def to_http_response(outcome: TrackingOutcome) -> Tuple[int, Dict[str, Any]]:
    if isinstance(outcome, TrackingSuccess):
        return 200, outcome.payload
    if isinstance(outcome, TrackingNotFound):
        return 404, ErrorResponse(error=not_found_message(outcome.flight_number)).model_dump(exclude_none=True)
    if isinstance(outcome, TrackingValidationError):
        return 400, ErrorResponse(error=INVALID_REQUEST_MESSAGE, details=outcome.details).model_dump()
    if isinstance(outcome, TrackingConfigError):
        return 500, ErrorResponse(error=MISSING_API_KEY_MESSAGE).model_dump(exclude_none=True)
    return 500, ErrorResponse(error=GENERIC_FAILURE_MESSAGE).model_dump(exclude_none=True)


def unwrap_tool_result(outcome: TrackingOutcome) -> Dict[str, Any]:
    if isinstance(outcome, TrackingSuccess):
        return outcome.payload
    if isinstance(outcome, TrackingNotFound):
        raise FlightTrackingError(not_found_message(outcome.flight_number))
    if isinstance(outcome, TrackingValidationError):
        raise FlightTrackingError(INVALID_REQUEST_MESSAGE)
    if isinstance(outcome, TrackingConfigError):
        raise FlightTrackingError(MISSING_API_KEY_MESSAGE)
    raise FlightTrackingError(GENERIC_FAILURE_MESSAGE)


class TrackFlightTool:
    name = "track_flight"
    description = "Track flight information and status in real-time"
    parameters = TrackFlightParameters

    def __init__(
        self,
        resolve_credential: CredentialResolver | None = None,
        client: AviationStackClient | None = None,
    ) -> None:
        self.resolve_credential = resolve_credential or resolve_aviation_stack_api_key
        self.client = client or AviationStackClient()

    def function_spec(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "parameters": self.parameters.model_json_schema(),
        }

    async def execute(self, arguments: Mapping[str, Any]) -> Dict[str, Any]:
        try:
            outcome = await run_flight_tracking(
                arguments,
                resolve_credential=self.resolve_credential,
                client=self.client,
            )
        except Exception:
            logger.exception("flight_tracking_tool_failed tool=%s", self.name, extra={"tool": self.name})
            raise FlightTrackingError(GENERIC_FAILURE_MESSAGE) from None
        if not isinstance(outcome, TrackingSuccess):
            outcome_name = type(outcome).__name__
            logger.info(
                "flight_tracking_tool_unsuccessful tool=%s outcome=%s",
                self.name,
                outcome_name,
                extra={"tool": self.name, "outcome": outcome_name},
            )
        return unwrap_tool_result(outcome)
