"""Environment-variable-based configuration for the command-line tool."""

from __future__ import annotations

import os

DEFAULT_WEIGHT_KG: float = float(os.environ.get("TRACKER_WEIGHT_KG", "75.0"))
DEFAULT_HEIGHT_M: float = float(os.environ.get("TRACKER_HEIGHT_M", "1.75"))
LOG_LEVEL: str = os.environ.get("TRACKER_LOG_LEVEL", "INFO").upper()
