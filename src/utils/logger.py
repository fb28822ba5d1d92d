"""Centralised Loguru logger shared by the dashboard modules."""
from __future__ import annotations

import sys

from loguru import logger

DEFAULT_LEVEL = "INFO"


def configure_logging(level: str | None = None) -> None:
    """Replace the default sink with a stderr sink at ``level``."""

    resolved = (level or DEFAULT_LEVEL).upper()
    logger.remove()
    logger.add(
        sys.stderr,
        level=resolved,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{line} - {message}",
    )


__all__ = ["configure_logging", "logger"]
