"""Unit tests for the core entities."""
from __future__ import annotations

from datetime import datetime

import pytest

from src.core.entities import Incident, Notification, ReportDraft, severity_rank


def make_incident(**overrides) -> Incident:
    fields = dict(
        id="incident-1",
        category="fire",
        title="Fire Emergency",
        description="Smoke seen from the warehouse",
        latitude=40.71,
        longitude=-74.0,
        severity="high",
        status="active",
        reported_at=datetime(2024, 5, 1, 12, 0),
        reported_by="Local Resident",
        confidence=90,
        affected_radius=1200,
        upvotes=3,
        downvotes=1,
        verified_by_authority=True,
    )
    fields.update(overrides)
    return Incident(**fields)


def test_incident_accepts_valid_values() -> None:
    incident = make_incident()

    assert incident.coordinates.latitude == 40.71
    assert incident.coordinates.longitude == -74.0


@pytest.mark.parametrize(
    "overrides",
    [
        {"category": "earthquake"},
        {"severity": "extreme"},
        {"status": "closed"},
        {"confidence": 101},
        {"confidence": -1},
        {"affected_radius": -5},
        {"upvotes": -1},
    ],
)
def test_incident_rejects_out_of_range_values(overrides) -> None:
    with pytest.raises(ValueError):
        make_incident(**overrides)


def test_notification_rejects_unknown_severity() -> None:
    with pytest.raises(ValueError):
        Notification(
            id="alert-1",
            incident_id="incident-1",
            title="Alert",
            message="Message",
            severity="urgent",
            timestamp=datetime(2024, 5, 1),
        )


def test_severity_rank_is_ordered() -> None:
    ranks = [severity_rank(level) for level in ("low", "medium", "high", "critical")]

    assert ranks == sorted(ranks)
    assert len(set(ranks)) == 4


def test_report_draft_requires_title_and_description() -> None:
    assert not ReportDraft(title="   ", description="Water rising").is_complete()
    assert not ReportDraft(title="Flood", description="").is_complete()
    assert ReportDraft(title="Flood", description="Water rising").is_complete()
