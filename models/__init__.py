from .outcomes import (
    TrackingConfigError,
    TrackingNotFound,
    TrackingOutcome,
    TrackingSuccess,
    TrackingUpstreamError,
    TrackingValidationError,
)
from .schemas import (
    ChatMessageRequest,
    ChatResponse,
    ErrorResponse,
    FlightTrackingRequest,
    ToolInvocation,
    TrackFlightParameters,
)

__all__ = [
    "ChatMessageRequest",
    "ChatResponse",
    "ErrorResponse",
    "FlightTrackingRequest",
    "ToolInvocation",
    "TrackFlightParameters",
    "TrackingConfigError",
    "TrackingNotFound",
    "TrackingOutcome",
    "TrackingSuccess",
    "TrackingUpstreamError",
    "TrackingValidationError",
]
