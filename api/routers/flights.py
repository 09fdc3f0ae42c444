from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from tools.flight_tracking_tools import GENERIC_FAILURE_MESSAGE, run_flight_tracking, to_http_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/flights", tags=["flights"])


@router.post("/track")
async def track_flight(request: Request):
    try:
        payload = await request.json()
        outcome = await run_flight_tracking(
            payload,
            resolve_credential=request.app.state.credential_resolver,
            client=request.app.state.flight_client,
        )
    except Exception:
        logger.exception("flight_tracking_failed path=%s", request.url.path, extra={"path": request.url.path})
        return JSONResponse({"error": GENERIC_FAILURE_MESSAGE}, status_code=500)
    status_code, body = to_http_response(outcome)
    if status_code >= 400:
        outcome_name = type(outcome).__name__
        logger.info(
            "flight_tracking_unsuccessful status_code=%s outcome=%s",
            status_code,
            outcome_name,
            extra={"status_code": status_code, "outcome": outcome_name},
        )
    return JSONResponse(body, status_code=status_code)
