from __future__ import annotations

from typing import Dict

from .aviationstack_client import AviationStackAPIError, AviationStackClient
from .flight_tracking_tools import FlightTrackingError, TrackFlightTool


def build_tool_registry(track_flight: TrackFlightTool) -> Dict[str, TrackFlightTool]:
    return {track_flight.name: track_flight}


__all__ = [
    "AviationStackAPIError",
    "AviationStackClient",
    "FlightTrackingError",
    "TrackFlightTool",
    "build_tool_registry",
]
