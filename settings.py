from __future__ import annotations

import os
from dataclasses import dataclass


AVIATION_STACK_API_KEY_ENV = "AVIATION_STACK_API_KEY"


def _bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    service_name: str = os.getenv("SERVICE_NAME", "flight-tracker")
    aviation_stack_base_url: str = os.getenv("AVIATION_STACK_BASE_URL", "https://api.aviationstack.com/v1")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    debug: bool = _bool("DEBUG", False)


SETTINGS = Settings()


def resolve_aviation_stack_api_key() -> str | None:
    # Read on every call so a rotated key is picked up without a restart.
    value = os.getenv(AVIATION_STACK_API_KEY_ENV, "").strip()
    return value or None
