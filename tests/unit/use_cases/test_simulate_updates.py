"""Tests for the simulated live-update tick."""
from __future__ import annotations

import random
from dataclasses import replace
from datetime import datetime

import pytest

from src.core.entities import SEVERITIES
from src.infrastructure.mock.generators import generate_mock_incidents, generate_mock_notifications
from src.use_cases.simulate_updates import SimulateUpdatesUseCase

NOW = datetime(2024, 6, 1, 12, 0)


def test_tick_bumps_exactly_one_incident_within_bounds() -> None:
    incidents = generate_mock_incidents(random.Random(5), count=10, now=NOW)
    use_case = SimulateUpdatesUseCase(rng=random.Random(5), notification_chance=0.0)

    updated, _ = use_case.execute(incidents, [])

    changed = [(old, new) for old, new in zip(incidents, updated) if old != new]
    assert len(changed) <= 1
    for old, new in changed:
        assert old.id == new.id
        assert 0 <= new.upvotes - old.upvotes <= 2
        assert 0 <= new.confidence - old.confidence <= 4
        assert new.downvotes == old.downvotes


def test_confidence_never_exceeds_upper_bound() -> None:
    incidents = [
        replace(incident, confidence=99)
        for incident in generate_mock_incidents(random.Random(2), count=3, now=NOW)
    ]
    use_case = SimulateUpdatesUseCase(rng=random.Random(2), notification_chance=0.0)

    for _ in range(500):
        incidents, _ = use_case.execute(incidents, [])

    assert all(incident.confidence <= 100 for incident in incidents)
    assert any(incident.confidence == 100 for incident in incidents)


def test_votes_never_decrease() -> None:
    incidents = generate_mock_incidents(random.Random(9), count=5, now=NOW)
    use_case = SimulateUpdatesUseCase(rng=random.Random(9), notification_chance=0.0)
    updated = incidents

    for _ in range(100):
        updated, _ = use_case.execute(updated, [])

    for before, after in zip(incidents, updated):
        assert after.upvotes >= before.upvotes
        assert after.downvotes == before.downvotes


def test_notification_feed_is_capped() -> None:
    use_case = SimulateUpdatesUseCase(
        rng=random.Random(4), notification_chance=1.0, now_provider=lambda: NOW
    )
    notifications = generate_mock_notifications(now=NOW)
    incidents = generate_mock_incidents(random.Random(4), count=5, now=NOW)

    for _ in range(40):
        incidents, notifications = use_case.execute(incidents, notifications)
        assert len(notifications) <= 10

    assert len(notifications) == 10
    newest = notifications[0]
    assert newest.title == "New Emergency Detected"
    assert newest.severity in SEVERITIES
    assert newest.timestamp == NOW
    assert newest.incident_id.startswith("incident-")


def test_no_notification_when_chance_is_zero() -> None:
    use_case = SimulateUpdatesUseCase(rng=random.Random(4), notification_chance=0.0)
    notifications = generate_mock_notifications(now=NOW)

    _, updated = use_case.execute([], notifications)

    assert updated == notifications


def test_empty_incident_collection_is_left_alone() -> None:
    use_case = SimulateUpdatesUseCase(rng=random.Random(1), notification_chance=0.0)

    incidents, _ = use_case.execute([], [])

    assert incidents == []


@pytest.mark.parametrize(
    "kwargs",
    [{"notification_chance": 1.5}, {"notification_chance": -0.1}, {"notification_limit": 0}],
)
def test_rejects_invalid_settings(kwargs) -> None:
    with pytest.raises(ValueError):
        SimulateUpdatesUseCase(**kwargs)
