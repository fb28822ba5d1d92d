"""Application shell: the single owner of the dashboard state."""
from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional, Protocol, Sequence
from uuid import uuid4

from src.core.entities import (
    MAX_CONFIDENCE,
    TABS,
    Coordinates,
    Incident,
    IncidentReport,
    IncidentStats,
    Notification,
)
from src.core.state import DashboardState
from src.infrastructure.scheduling.periodic import PeriodicUpdateScheduler
from src.use_cases.simulate_updates import SimulateUpdatesUseCase
from src.utils.logger import logger

DEFAULT_CONFIDENCE = 85
DEFAULT_AFFECTED_RADIUS = 800
SUBMITTER_LABEL = "You"


class UserLocator(Protocol):
    def locate(self) -> Coordinates:
        ...


class DashboardSession:
    """Own incidents, statistics and notifications and apply every transition.

    Views read :attr:`state` and call back into the operations below; each
    operation replaces the affected collections as a whole. A periodic
    scheduler perturbs the state between mount and teardown.
    """

    def __init__(
        self,
        incident_source: Callable[[], Sequence[Incident]],
        stats_source: Callable[[], IncidentStats],
        notification_source: Callable[[], Sequence[Notification]],
        locator: UserLocator,
        updater: SimulateUpdatesUseCase,
        interval_seconds: float = 10.0,
        clock: Callable[[], float] | None = None,
        now_provider: Callable[[], datetime] | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._incident_source = incident_source
        self._stats_source = stats_source
        self._notification_source = notification_source
        self._locator = locator
        self._updater = updater
        self._now_provider = now_provider or datetime.now
        self._id_factory = id_factory or (lambda: uuid4().hex[:12])
        self._scheduler = PeriodicUpdateScheduler(
            self.apply_simulated_update,
            interval_seconds=interval_seconds,
            clock=clock,
        )
        self._mounted = False
        self.state = DashboardState()

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def scheduler(self) -> PeriodicUpdateScheduler:
        return self._scheduler

    def mount(self) -> None:
        if self._mounted:
            return

        self.state.incidents = list(self._incident_source())
        self.state.stats = self._stats_source()
        self.state.notifications = list(self._notification_source())
        self.state.user_location = self._locator.locate()
        self._scheduler.start()
        self._mounted = True
        logger.info(
            "Dashboard mounted with {} incidents and {} notifications",
            len(self.state.incidents),
            len(self.state.notifications),
        )

    def teardown(self) -> None:
        self._scheduler.stop()
        if self._mounted:
            logger.info("Dashboard session torn down")
        self._mounted = False

    def poll_updates(self) -> int:
        return self._scheduler.poll()

    # -- user actions -------------------------------------------------

    def select_incident(self, incident_id: str) -> Optional[Incident]:
        incident = self.find_incident(incident_id)
        if incident is None:
            logger.warning("Cannot select unknown incident {}", incident_id)
            return None

        self.state.selected_incident_id = incident.id
        self.state.active_tab = "map"
        return incident

    def set_active_tab(self, tab: str) -> None:
        if tab not in TABS:
            raise ValueError(f"Unknown tab '{tab}'. Expected one of: " + ", ".join(TABS))
        self.state.active_tab = tab

    def dismiss_notification(self, notification_id: str) -> bool:
        remaining = [item for item in self.state.notifications if item.id != notification_id]
        if len(remaining) == len(self.state.notifications):
            logger.warning("Cannot dismiss unknown notification {}", notification_id)
            return False

        self.state.notifications = remaining
        return True

    def mark_notification_read(self, notification_id: str) -> bool:
        found = False
        updated: list[Notification] = []
        for item in self.state.notifications:
            if item.id == notification_id:
                found = True
                item = replace(item, read=True)
            updated.append(item)

        if not found:
            logger.warning("Cannot mark unknown notification {} as read", notification_id)
            return False

        self.state.notifications = updated
        return True

    def submit_report(self, report: IncidentReport) -> Incident:
        location = self._validate_report(report)

        now = self._now_provider()
        confidence = report.confidence if report.confidence is not None else DEFAULT_CONFIDENCE
        radius = report.affected_radius if report.affected_radius is not None else DEFAULT_AFFECTED_RADIUS
        incident = Incident(
            id=f"incident-{self._id_factory()}",
            category=report.category,
            title=report.title,
            description=report.description,
            latitude=location.latitude,
            longitude=location.longitude,
            severity=report.severity,
            status="investigating",
            reported_at=now,
            reported_by=SUBMITTER_LABEL,
            confidence=min(MAX_CONFIDENCE, confidence),
            affected_radius=radius,
            upvotes=1,
            downvotes=0,
            verified_by_authority=False,
        )
        success = Notification(
            id=f"alert-success-{self._id_factory()}",
            incident_id=incident.id,
            title="Report Submitted Successfully",
            message="Your emergency report has been processed and is now visible to the community.",
            severity="medium",
            timestamp=now,
            read=False,
        )

        self.state.incidents = [incident, *self.state.incidents]
        self.state.selected_incident_id = incident.id
        self.state.active_tab = "map"
        self.state.notifications = [success, *self.state.notifications][: self._updater.notification_limit]
        if self.state.stats is not None:
            self.state.stats = replace(self.state.stats, total_active=self.state.stats.total_active + 1)

        logger.info("Report {} submitted ({}, {})", incident.id, incident.category, incident.severity)
        return incident

    # -- periodic process ---------------------------------------------

    def apply_simulated_update(self) -> None:
        incidents, notifications = self._updater.execute(
            self.state.incidents, self.state.notifications
        )
        self.state.incidents = incidents
        self.state.notifications = notifications

    # -- derived views ------------------------------------------------

    def find_incident(self, incident_id: Optional[str]) -> Optional[Incident]:
        if incident_id is None:
            return None
        for incident in self.state.incidents:
            if incident.id == incident_id:
                return incident
        return None

    def selected_incident(self) -> Optional[Incident]:
        return self.find_incident(self.state.selected_incident_id)

    def active_incidents(self) -> list[Incident]:
        return [incident for incident in self.state.incidents if incident.status == "active"]

    def nearby_incidents(self, limit: int = 5) -> list[Incident]:
        return self.state.incidents[: max(0, limit)]

    def unread_count(self) -> int:
        return sum(1 for item in self.state.notifications if not item.read)

    @staticmethod
    def _validate_report(report: IncidentReport) -> Coordinates:
        missing = [
            name
            for name, value in (
                ("title", report.title.strip()),
                ("description", report.description.strip()),
                ("category", report.category),
                ("severity", report.severity),
            )
            if not value
        ]
        if report.latitude is None or report.longitude is None:
            missing.append("coordinates")
        if missing:
            raise ValueError("Report is missing required fields: " + ", ".join(missing))
        return Coordinates(latitude=float(report.latitude), longitude=float(report.longitude))


__all__ = [
    "DEFAULT_AFFECTED_RADIUS",
    "DEFAULT_CONFIDENCE",
    "DashboardSession",
    "SUBMITTER_LABEL",
]
