"""Configuration loaded from environment variables."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


# Source resolution
SOURCE_ROOT: Path = Path(os.getenv("SOURCE_ROOT", "."))
SOURCE_BASE_URL: str = os.getenv("SOURCE_BASE_URL", "")
FETCH_TIMEOUT: float = float(os.getenv("FETCH_TIMEOUT", "30"))

# Server
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "8000"))
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
