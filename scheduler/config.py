"""Environment-variable-based configuration for the nightly scheduler."""

from __future__ import annotations

import os
from pathlib import Path

CLUB_DATA_PATH: Path = Path(
    os.environ.get("CLUB_DATA_PATH", "streamlit_app/clubs/my_club.json")
)
NIGHTLY_HOUR: int = int(os.environ.get("SCHEDULER_HOUR", "21"))
NIGHTLY_MINUTE: int = int(os.environ.get("SCHEDULER_MINUTE", "0"))
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")
