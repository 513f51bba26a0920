"""Centralised settings for the pi-manager client.

Values can be overridden via environment variables or a `.env` file in the
project root (loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Backend
    # ------------------------------------------------------------------
    api_host: str = field(
        default_factory=lambda: os.environ.get(
            "PIMANAGER_HOST", "http://127.0.0.1:2001"
        ).rstrip("/")
    )


# Module-level singleton — import this everywhere:
#   from pimanager.config import settings
settings = Settings()
