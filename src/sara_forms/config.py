from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env if present
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    log_level: str = os.getenv("SARA_LOG_LEVEL", "INFO")
    api_title: str = os.getenv("SARA_API_TITLE", "SARA Forms")
    metrics_enabled: bool = _env_flag("SARA_METRICS_ENABLED", "true")


settings = Settings()
