"""Use case emulating live activity on the incident feed."""
from __future__ import annotations

import random
from dataclasses import replace
from datetime import datetime
from typing import Callable, Sequence
from uuid import uuid4

from src.core.entities import MAX_CONFIDENCE, SEVERITIES, Incident, Notification
from src.utils.logger import logger

DEFAULT_NOTIFICATION_LIMIT = 10
DEFAULT_NOTIFICATION_CHANCE = 0.3
# Random alerts reference ids in the generator's range; they may not exist.
_REFERENCED_INCIDENT_RANGE = 50


class SimulateUpdatesUseCase:
    """Apply one simulated tick to the incident and notification collections."""

    def __init__(
        self,
        rng: random.Random | None = None,
        notification_chance: float = DEFAULT_NOTIFICATION_CHANCE,
        notification_limit: int = DEFAULT_NOTIFICATION_LIMIT,
        now_provider: Callable[[], datetime] | None = None,
    ) -> None:
        if not 0.0 <= notification_chance <= 1.0:
            raise ValueError("Notification chance must be within [0, 1].")
        if notification_limit < 1:
            raise ValueError("Notification limit must be at least 1.")
        self._rng = rng or random.Random()
        self._notification_chance = notification_chance
        self._notification_limit = notification_limit
        self._now_provider = now_provider or datetime.now

    @property
    def notification_limit(self) -> int:
        return self._notification_limit

    def execute(
        self,
        incidents: Sequence[Incident],
        notifications: Sequence[Notification],
    ) -> tuple[list[Incident], list[Notification]]:
        updated_incidents = self._bump_random_incident(incidents)
        updated_notifications = list(notifications)

        if self._rng.random() < self._notification_chance:
            alert = self._build_detection_alert()
            logger.debug("Simulated alert {} for {}", alert.id, alert.incident_id)
            updated_notifications.insert(0, alert)

        return updated_incidents, updated_notifications[: self._notification_limit]

    def _bump_random_incident(self, incidents: Sequence[Incident]) -> list[Incident]:
        updated = list(incidents)
        if not updated:
            return updated

        index = self._rng.randrange(len(updated))
        target = updated[index]
        updated[index] = replace(
            target,
            upvotes=target.upvotes + self._rng.randrange(0, 3),
            confidence=min(MAX_CONFIDENCE, target.confidence + self._rng.randrange(0, 5)),
        )
        logger.debug(
            "Simulated activity on {}: upvotes {} -> {}, confidence {} -> {}",
            target.id,
            target.upvotes,
            updated[index].upvotes,
            target.confidence,
            updated[index].confidence,
        )
        return updated

    def _build_detection_alert(self) -> Notification:
        return Notification(
            id=f"alert-{uuid4().hex[:12]}",
            incident_id=f"incident-{self._rng.randrange(_REFERENCED_INCIDENT_RANGE)}",
            title="New Emergency Detected",
            message="AI has detected a potential emergency in your area.",
            severity=self._rng.choice(SEVERITIES),
            timestamp=self._now_provider(),
            read=False,
        )


__all__ = ["SimulateUpdatesUseCase"]
