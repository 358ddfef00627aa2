"""
Configuration - Environment settings and logging setup.

Environment:
    RPS_LOG_LEVEL        Logging level name (default WARNING)
    RPS_SESSION_MAX_AGE  Seconds before an open session counts as stale (default 3600)
"""

from __future__ import annotations
import logging
import os

RPS_LOG_LEVEL = os.getenv("RPS_LOG_LEVEL", "WARNING")
SESSION_MAX_AGE = float(os.getenv("RPS_SESSION_MAX_AGE", "3600"))

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str | None = None):
    """Configure root logging. Falls back to RPS_LOG_LEVEL."""
    level_name = (level or RPS_LOG_LEVEL).upper()
    numeric = logging.getLevelName(level_name)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level_name}")
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
