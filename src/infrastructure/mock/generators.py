"""Synthetic data factories used to populate the dashboard at start-up."""
from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Mapping, Optional

from src.core.entities import (
    INCIDENT_CATEGORIES,
    SEVERITIES,
    STATUSES,
    Incident,
    IncidentStats,
    Notification,
)

DEFAULT_INCIDENT_COUNT = 50

CATEGORY_TITLES: Mapping[str, tuple[str, ...]] = {
    "flooding": ("Waterlogging on Main Street", "Severe Flooding in Downtown", "Road Flooding Alert"),
    "power_outage": ("Power Outage in Sector 5", "Electricity Disruption", "Grid Failure Reported"),
    "air_quality": ("Poor Air Quality Alert", "Smog Advisory", "Pollution Spike Detected"),
    "violence": ("Security Incident Reported", "Safety Concern in Area", "Disturbance Alert"),
    "fire": ("Fire Emergency", "Smoke Detected", "Fire Hazard Alert"),
    "medical": ("Medical Emergency", "Health Crisis", "Medical Assistance Needed"),
    "traffic": ("Major Traffic Jam", "Road Accident", "Traffic Disruption"),
    "weather": ("Severe Weather Alert", "Storm Warning", "Weather Emergency"),
}

REPORTER_LABELS: tuple[str, ...] = (
    "Community Member",
    "Local Resident",
    "Emergency Responder",
    "Authority Official",
)


@dataclass(frozen=True)
class CityAnchor:
    name: str
    latitude: float
    longitude: float


CITY_ANCHORS: tuple[CityAnchor, ...] = (
    CityAnchor("New York", 40.7128, -74.0060),
    CityAnchor("Los Angeles", 34.0522, -118.2437),
    CityAnchor("Chicago", 41.8781, -87.6298),
    CityAnchor("Houston", 29.7604, -95.3698),
    CityAnchor("Baltimore", 39.2904, -76.6122),
    CityAnchor("Miami", 25.7617, -80.1918),
)

# Incidents are scattered within +/- 0.05 degrees of their city anchor.
_COORDINATE_SPREAD = 0.1
_REPORT_WINDOW = timedelta(days=7)


def generate_mock_incidents(
    rng: Optional[random.Random] = None,
    count: int = DEFAULT_INCIDENT_COUNT,
    now: Optional[datetime] = None,
) -> list[Incident]:
    """Return ``count`` synthetic incidents scattered around a few US cities."""

    if count < 0:
        raise ValueError("Incident count cannot be negative.")

    rng = rng or random.Random()
    reference = now or datetime.now()
    incidents: list[Incident] = []
    for index in range(count):
        anchor = rng.choice(CITY_ANCHORS)
        category = rng.choice(INCIDENT_CATEGORIES)
        title = rng.choice(CATEGORY_TITLES[category])
        confidence = rng.randrange(70, 100)
        incidents.append(
            Incident(
                id=f"incident-{index + 1}",
                category=category,
                title=title,
                description=(
                    f"{title} - Community reported incident requiring immediate attention. "
                    f"AI classification confidence: {confidence}%"
                ),
                latitude=anchor.latitude + (rng.random() - 0.5) * _COORDINATE_SPREAD,
                longitude=anchor.longitude + (rng.random() - 0.5) * _COORDINATE_SPREAD,
                severity=rng.choice(SEVERITIES),
                status=rng.choice(STATUSES),
                reported_at=reference - rng.random() * _REPORT_WINDOW,
                reported_by=rng.choice(REPORTER_LABELS),
                confidence=confidence,
                affected_radius=rng.randrange(500, 2500),
                upvotes=rng.randrange(0, 50),
                downvotes=rng.randrange(0, 10),
                verified_by_authority=rng.random() > 0.6,
            )
        )
    return incidents


def generate_mock_stats() -> IncidentStats:
    return IncidentStats(
        total_active=23,
        total_resolved=156,
        critical_alerts=4,
        average_response_time=12.5,
        ai_accuracy=94.2,
    )


def generate_mock_notifications(now: Optional[datetime] = None) -> list[Notification]:
    """Return the seed alert feed, newest first."""

    reference = now or datetime.now()
    return [
        Notification(
            id="alert-1",
            incident_id="incident-1",
            title="Critical Flooding Alert",
            message="Severe waterlogging detected in downtown area. Avoid Main Street.",
            severity="critical",
            timestamp=reference - timedelta(minutes=5),
            read=False,
        ),
        Notification(
            id="alert-2",
            incident_id="incident-2",
            title="Power Outage Update",
            message="Power has been restored to Sector 5. All systems operational.",
            severity="medium",
            timestamp=reference - timedelta(minutes=15),
            read=False,
        ),
        Notification(
            id="alert-3",
            incident_id="incident-3",
            title="Air Quality Advisory",
            message="Poor air quality detected. Recommended to stay indoors.",
            severity="high",
            timestamp=reference - timedelta(minutes=20),
            read=True,
        ),
    ]


__all__ = [
    "CATEGORY_TITLES",
    "CITY_ANCHORS",
    "CityAnchor",
    "DEFAULT_INCIDENT_COUNT",
    "REPORTER_LABELS",
    "generate_mock_incidents",
    "generate_mock_notifications",
    "generate_mock_stats",
]
