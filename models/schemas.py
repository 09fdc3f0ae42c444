from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


FLIGHT_NUMBER_DESCRIPTION = "The flight number to track (IATA format, e.g., AA1234, BA456)"


class FlightTrackingRequest(BaseModel):
    flight_number: str = Field(..., strict=True, description="The flight number to track (IATA format)")


class TrackFlightParameters(BaseModel):
    flight_number: str = Field(
        ...,
        strict=True,
        description=FLIGHT_NUMBER_DESCRIPTION,
        examples=["AA1234", "BA456"],
    )


class ErrorResponse(BaseModel):
    error: str
    details: Optional[List[Dict[str, Any]]] = None


class ToolInvocation(BaseModel):
    tool_call_id: str
    tool_name: str
    args: Dict[str, Any] = Field(default_factory=dict)
    state: Literal["call", "result"] = "call"
    result: Optional[Dict[str, Any]] = None
    duration_ms: int = 0


class ChatMessageRequest(BaseModel):
    session_id: str
    content: str


class ChatResponse(BaseModel):
    session_id: str
    agent: str
    response_text: str
    tool_invocations: List[ToolInvocation] = Field(default_factory=list)
    next_actions: List[str] = Field(default_factory=list)
