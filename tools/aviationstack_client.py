from __future__ import annotations

import logging
from typing import Any, Dict

import httpx

from settings import SETTINGS

logger = logging.getLogger(__name__)

# httpx logs full request URLs at INFO and the access key is a query parameter.
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


class AviationStackAPIError(RuntimeError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"Aviation Stack API responded with status: {status_code}")
        self.status_code = status_code


class AviationStackClient:
    """Single-shot client for the Aviation Stack flight lookup endpoint.

    One GET per call, no retries, and the httpx default timeout. A custom
    transport can be supplied for tests.
    """

    def __init__(self, base_url: str | None = None, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.base_url = (base_url or SETTINGS.aviation_stack_base_url).rstrip("/")
        self._transport = transport

    async def get_flights(self, access_key: str, flight_iata: str) -> Dict[str, Any]:
        async with httpx.AsyncClient(transport=self._transport) as client:
            resp = await client.get(
                f"{self.base_url}/flights",
                params={"access_key": access_key, "flight_iata": flight_iata},
                headers={"Content-Type": "application/json"},
            )
        if not resp.is_success:
            logger.warning(
                "aviation_stack_non_success status_code=%s flight_iata=%s",
                resp.status_code,
                flight_iata,
                extra={"status_code": resp.status_code, "flight_iata": flight_iata},
            )
            raise AviationStackAPIError(resp.status_code)
        return resp.json()
