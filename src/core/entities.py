"""Core entities for the emergency incident dashboard."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

INCIDENT_CATEGORIES: tuple[str, ...] = (
    "flooding",
    "power_outage",
    "air_quality",
    "violence",
    "fire",
    "medical",
    "traffic",
    "weather",
)
SEVERITIES: tuple[str, ...] = ("low", "medium", "high", "critical")
STATUSES: tuple[str, ...] = ("active", "investigating", "resolved")
TABS: tuple[str, ...] = ("dashboard", "map", "report")

MAX_CONFIDENCE = 100


def _require_member(field_name: str, value: str, allowed: tuple[str, ...]) -> None:
    if value not in allowed:
        raise ValueError(
            f"Invalid {field_name} '{value}'. Expected one of: " + ", ".join(allowed)
        )


def severity_rank(severity: str) -> int:
    """Return the position of ``severity`` in the ordered severity scale."""

    _require_member("severity", severity, SEVERITIES)
    return SEVERITIES.index(severity)


@dataclass(frozen=True)
class Coordinates:
    """A latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class Incident:
    """Domain entity representing a reported emergency."""

    id: str
    category: str
    title: str
    description: str
    latitude: float
    longitude: float
    severity: str
    status: str
    reported_at: datetime
    reported_by: str
    confidence: int
    affected_radius: int
    upvotes: int = 0
    downvotes: int = 0
    verified_by_authority: bool = False

    def __post_init__(self) -> None:
        _require_member("category", self.category, INCIDENT_CATEGORIES)
        _require_member("severity", self.severity, SEVERITIES)
        _require_member("status", self.status, STATUSES)
        if not 0 <= self.confidence <= MAX_CONFIDENCE:
            raise ValueError(f"Confidence must be within [0, 100], got {self.confidence}")
        if self.affected_radius < 0:
            raise ValueError(f"Affected radius cannot be negative, got {self.affected_radius}")
        if self.upvotes < 0 or self.downvotes < 0:
            raise ValueError("Vote counters cannot be negative.")

    @property
    def coordinates(self) -> Coordinates:
        return Coordinates(latitude=self.latitude, longitude=self.longitude)


@dataclass(frozen=True)
class IncidentStats:
    """Aggregate counters shown on the dashboard header cards."""

    total_active: int
    total_resolved: int
    critical_alerts: int
    average_response_time: float
    ai_accuracy: float


@dataclass(frozen=True)
class Notification:
    """A dismissible alert that references an incident by id."""

    id: str
    incident_id: str
    title: str
    message: str
    severity: str
    timestamp: datetime
    read: bool = False

    def __post_init__(self) -> None:
        _require_member("severity", self.severity, SEVERITIES)


@dataclass(frozen=True)
class ReportDraft:
    """The in-progress content of the report form."""

    category: str = "flooding"
    title: str = ""
    description: str = ""
    severity: str = "medium"

    def is_complete(self) -> bool:
        return bool(self.title.strip()) and bool(self.description.strip())


@dataclass(frozen=True)
class IncidentReport:
    """Partial incident produced by the report form and completed by the session."""

    category: str
    title: str
    description: str
    severity: str
    latitude: Optional[float]
    longitude: Optional[float]
    confidence: Optional[int] = None
    affected_radius: Optional[int] = None


__all__ = [
    "Coordinates",
    "INCIDENT_CATEGORIES",
    "Incident",
    "IncidentReport",
    "IncidentStats",
    "MAX_CONFIDENCE",
    "Notification",
    "ReportDraft",
    "SEVERITIES",
    "STATUSES",
    "TABS",
    "severity_rank",
]
