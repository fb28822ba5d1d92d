"""Tests for the pure formatting helpers behind the Streamlit views."""
from __future__ import annotations

import random
from dataclasses import replace
from datetime import datetime, timedelta

import pytest

pytest.importorskip("streamlit")

from src.core.entities import Coordinates, Notification
from src.infrastructure.mock.generators import (
    generate_mock_incidents,
    generate_mock_notifications,
    generate_mock_stats,
)
from src.interface.web.incident_list import MAX_LISTED_INCIDENTS, build_incident_cards
from src.interface.web.notification_panel import count_unread, format_notification
from src.interface.web.report_form import describe_location
from src.interface.web.stats_cards import stats_metrics

NOW = datetime(2024, 6, 1, 12, 0)


def test_incident_cards_are_capped_and_highlight_selection() -> None:
    incidents = generate_mock_incidents(random.Random(30), count=25, now=NOW)

    cards = build_incident_cards(incidents, selected_id=incidents[1].id, now=NOW)

    assert len(cards) == MAX_LISTED_INCIDENTS
    assert [card.selected for card in cards].count(True) == 1
    assert cards[1].selected
    assert [card.incident_id for card in cards] == [incident.id for incident in incidents[:10]]


def test_incident_card_content() -> None:
    incident = replace(
        generate_mock_incidents(random.Random(30), count=1, now=NOW)[0],
        category="fire",
        title="Smoke Detected",
        severity="critical",
        status="investigating",
        affected_radius=1200,
        upvotes=7,
        downvotes=2,
        confidence=91,
        verified_by_authority=True,
        reported_at=NOW - timedelta(hours=2),
    )

    card = build_incident_cards([incident], now=NOW)[0]

    assert card.heading.startswith("🔥 **Smoke Detected**")
    assert "🛡️" in card.heading
    assert "1200m radius" in card.details
    assert "2 hours ago" in card.details
    assert "CRITICAL" in card.badges
    assert "INVESTIGATING" in card.badges
    assert card.trust == "▲ 7 · ▼ 2 · 🤖 91%"
    assert not card.selected


def test_unread_count_and_notification_text() -> None:
    notifications = generate_mock_notifications(now=NOW)

    assert count_unread(notifications) == 2
    assert count_unread([]) == 0

    unread_text = format_notification(notifications[0], now=NOW)
    read_text = format_notification(notifications[2], now=NOW)
    assert "**Critical Flooding Alert**" in unread_text
    assert "5 minutes ago" in unread_text
    assert "**" not in read_text.splitlines()[0]


def test_read_notifications_use_neutral_icon() -> None:
    notification = Notification(
        id="n",
        incident_id="incident-1",
        title="Update",
        message="Resolved",
        severity="critical",
        timestamp=NOW,
        read=True,
    )

    assert format_notification(notification, now=NOW).startswith("✉️")


def test_stats_metrics_format_units() -> None:
    metrics = stats_metrics(generate_mock_stats())

    labels = [label for label, *_ in metrics]
    values = {label: value for label, value, *_ in metrics}
    assert labels == [
        "Active Emergencies",
        "Resolved Today",
        "Critical Alerts",
        "Avg Response Time",
        "AI Accuracy",
    ]
    assert values["Active Emergencies"] == "23"
    assert values["Avg Response Time"] == "12.5min"
    assert values["AI Accuracy"] == "94.2%"


def test_describe_location() -> None:
    assert describe_location(None) == "📍 Location will be auto-detected"
    assert describe_location(Coordinates(40.71281, -74.00601)) == "📍 Location: 40.7128, -74.0060"
