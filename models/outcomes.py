"""Tagged result of one flight-tracking invocation.

Exactly one variant is produced per call. The HTTP and tool entry points
project these onto their own output shapes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union


@dataclass(frozen=True)
class TrackingSuccess:
    payload: Dict[str, Any]


@dataclass(frozen=True)
class TrackingNotFound:
    flight_number: str


@dataclass(frozen=True)
class TrackingConfigError:
    pass


@dataclass(frozen=True)
class TrackingUpstreamError:
    status_code: int


@dataclass(frozen=True)
class TrackingValidationError:
    details: List[Dict[str, Any]] = field(default_factory=list)


TrackingOutcome = Union[
    TrackingSuccess,
    TrackingNotFound,
    TrackingConfigError,
    TrackingUpstreamError,
    TrackingValidationError,
]
