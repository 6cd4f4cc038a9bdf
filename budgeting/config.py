"""Paths, log level and port, each overridable through the environment."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

PROFILES_PATH = Path(os.getenv("BUDGET_PROFILES_PATH", Path("user_data") / "profiles.json"))
LOG_LEVEL = os.getenv("BUDGET_LOG_LEVEL", "INFO")
API_PORT = int(os.getenv("BUDGET_API_PORT", "8000"))

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    numeric_level = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(level=numeric_level, handlers=[handler], force=True)
