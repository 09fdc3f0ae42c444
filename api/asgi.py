from __future__ import annotations

import logging

from api.main import create_app
from settings import SETTINGS

logging.basicConfig(
    level=SETTINGS.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logging.getLogger("httpx").setLevel(logging.WARNING)

app = create_app()
