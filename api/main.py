from __future__ import annotations

from fastapi import FastAPI

from agents.flight_agent import FlightTrackingAgent
from api.middleware.logging import RequestLoggingMiddleware
from api.routers import chat, flights
from settings import SETTINGS, resolve_aviation_stack_api_key
from tools import build_tool_registry
from tools.aviationstack_client import AviationStackClient
from tools.flight_tracking_tools import CredentialResolver, TrackFlightTool


def create_app(
    credential_resolver: CredentialResolver | None = None,
    flight_client: AviationStackClient | None = None,
) -> FastAPI:
    app = FastAPI(title="Flight Tracker", version="0.1.0", debug=SETTINGS.debug)
    app.add_middleware(RequestLoggingMiddleware)

    app.state.credential_resolver = credential_resolver or resolve_aviation_stack_api_key
    app.state.flight_client = flight_client or AviationStackClient()
    app.state.tools = build_tool_registry(
        TrackFlightTool(resolve_credential=app.state.credential_resolver, client=app.state.flight_client)
    )
    app.state.flight_agent = FlightTrackingAgent(tools=app.state.tools)

    api_prefix = "/api/v1"
    app.include_router(flights.router, prefix=api_prefix)
    app.include_router(chat.router, prefix=api_prefix)

    @app.get("/health")
    async def health():
        return {
            "ok": True,
            "service": SETTINGS.service_name,
            "credential_configured": bool(app.state.credential_resolver()),
        }

    return app
