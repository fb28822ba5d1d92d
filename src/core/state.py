"""Explicit state container owned by the dashboard session."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from src.core.entities import Coordinates, Incident, IncidentStats, Notification


@dataclass
class DashboardState:
    """Everything the dashboard renders, replaced whole on each transition."""

    incidents: list[Incident] = field(default_factory=list)
    stats: Optional[IncidentStats] = None
    notifications: list[Notification] = field(default_factory=list)
    selected_incident_id: Optional[str] = None
    active_tab: str = "dashboard"
    user_location: Optional[Coordinates] = None


__all__ = ["DashboardState"]
