from __future__ import annotations

import logging
import re
import uuid
from typing import Any, Dict, Mapping, Optional

from agents.base import BaseAgent
from models.schemas import ChatMessageRequest, ChatResponse, ToolInvocation
from tools.flight_tracking_tools import FlightTrackingError

logger = logging.getLogger(__name__)

# Airline designator (two letters, or letter+digit) followed by up to four digits.
FLIGHT_CODE_RE = re.compile(r"\b([A-Z]{2}|[A-Z]\d|\d[A-Z])(\d{1,4})\b")

EXAMPLE_QUERIES = [
    "Track flight AA1234",
    "What's the status of United flight UA456?",
    "Is Delta 789 on time?",
    "Show me information for British Airways BA123",
    "Track my flight LH890 from Frankfurt to New York",
]


class FlightTrackingAgent(BaseAgent):
    def __init__(self, tools: Mapping[str, Any]) -> None:
        super().__init__(name="flight_tracking_agent")
        self.tools = tools

    async def process(self, message: ChatMessageRequest) -> ChatResponse:
        flight_number = self.extract_flight_number(message.content)
        if not flight_number:
            return ChatResponse(
                session_id=message.session_id,
                agent=self.name,
                response_text=(
                    "I can track a flight for you. Which flight number should I look up? "
                    "Please use the airline code and number, for example AA1234."
                ),
                next_actions=["provide_flight_number"],
            )

        tool = self.tools["track_flight"]
        invocation = ToolInvocation(
            tool_call_id=f"call_{uuid.uuid4().hex[:12]}",
            tool_name=tool.name,
            args={"flight_number": flight_number},
        )
        try:
            payload, duration_ms = await self.timed(tool.execute(invocation.args))
        except FlightTrackingError as exc:
            logger.info(
                "track_flight_returned_error flight_number=%s error=%s",
                flight_number,
                exc,
                extra={"flight_number": flight_number, "error": str(exc)},
            )
            invocation.state = "result"
            invocation.result = {"error": str(exc)}
            return ChatResponse(
                session_id=message.session_id,
                agent=self.name,
                response_text=f"I couldn't get an update for flight {flight_number}. {exc}",
                tool_invocations=[invocation],
                next_actions=["check_flight_number", "try_again_later"],
            )

        invocation.state = "result"
        invocation.result = payload
        invocation.duration_ms = duration_ms
        return ChatResponse(
            session_id=message.session_id,
            agent=self.name,
            response_text=self._summarize(flight_number, payload),
            tool_invocations=[invocation],
        )

    def extract_flight_number(self, text: str) -> Optional[str]:
        match = FLIGHT_CODE_RE.search((text or "").upper())
        if not match:
            return None
        return f"{match.group(1)}{match.group(2)}"

    def _summarize(self, flight_number: str, payload: Dict[str, Any]) -> str:
        records = payload.get("data")
        first = records[0] if isinstance(records, list) and isinstance(records[0], dict) else {}
        status = str(first.get("flight_status") or "unknown").replace("_", " ")
        departure = self._airport(first.get("departure"))
        arrival = self._airport(first.get("arrival"))
        text = f"Flight {flight_number} is currently {status}."
        if departure and arrival:
            text += f" It departs {departure} and arrives at {arrival}."
        return text

    def _airport(self, leg: Any) -> Optional[str]:
        if not isinstance(leg, dict):
            return None
        return leg.get("airport") or leg.get("iata")
