"""Human readable relative timestamps."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

_UNITS: tuple[tuple[str, int], ...] = (
    ("day", 86400),
    ("hour", 3600),
    ("minute", 60),
)


def format_relative_time(moment: datetime, now: Optional[datetime] = None) -> str:
    """Render ``moment`` relative to ``now``, e.g. ``"5 minutes ago"``."""

    reference = now or datetime.now()
    seconds = int((reference - moment).total_seconds())
    future = seconds < 0
    seconds = abs(seconds)

    if seconds < 60:
        return "just now" if not future else "in less than a minute"

    for unit, size in _UNITS:
        if seconds >= size:
            amount = seconds // size
            label = f"{amount} {unit}" + ("s" if amount != 1 else "")
            return f"in {label}" if future else f"{label} ago"

    return "just now"


__all__ = ["format_relative_time"]
