"""Tests for the pandas-backed incident summaries."""
from __future__ import annotations

import random
from dataclasses import replace
from datetime import datetime

import pytest

pd = pytest.importorskip("pandas")

from src.core.entities import INCIDENT_CATEGORIES, SEVERITIES
from src.infrastructure.mock.generators import generate_mock_incidents
from src.infrastructure.reports.incident_summary import IncidentSummaryAnalyzer

NOW = datetime(2024, 6, 1, 12, 0)


def test_compute_metrics_counts_every_category_and_severity() -> None:
    incidents = generate_mock_incidents(random.Random(21), count=30, now=NOW)
    analyzer = IncidentSummaryAnalyzer()

    metrics = analyzer.compute_metrics(incidents)

    assert metrics["total_incidents"] == 30
    assert list(metrics["category_counts"]) == list(INCIDENT_CATEGORIES)
    assert list(metrics["severity_counts"]) == list(SEVERITIES)
    assert sum(metrics["category_counts"].values()) == 30
    assert sum(metrics["severity_counts"].values()) == 30
    assert sum(metrics["status_counts"].values()) == 30
    assert 0.0 <= metrics["verified_share"] <= 1.0
    assert 70 <= metrics["mean_confidence"] < 100


def test_compute_metrics_handles_empty_collection() -> None:
    metrics = IncidentSummaryAnalyzer().compute_metrics([])

    assert metrics["total_incidents"] == 0
    assert set(metrics["category_counts"].values()) == {0}
    assert metrics["status_counts"] == {}
    assert metrics["mean_confidence"] == 0.0


def test_breakdown_frame_is_category_by_severity() -> None:
    base = generate_mock_incidents(random.Random(3), count=1, now=NOW)[0]
    incidents = [
        replace(base, id="a", category="fire", severity="critical"),
        replace(base, id="b", category="fire", severity="critical"),
        replace(base, id="c", category="traffic", severity="low"),
    ]

    table = IncidentSummaryAnalyzer().breakdown_frame(incidents)

    assert list(table.index) == list(INCIDENT_CATEGORIES)
    assert list(table.columns) == list(SEVERITIES)
    assert table.loc["fire", "critical"] == 2
    assert table.loc["traffic", "low"] == 1
    assert int(table.to_numpy().sum()) == 3


def test_to_frame_exposes_incident_fields() -> None:
    incidents = generate_mock_incidents(random.Random(3), count=4, now=NOW)

    frame = IncidentSummaryAnalyzer().to_frame(incidents)

    assert len(frame) == 4
    assert {"id", "category", "severity", "confidence", "reported_at"} <= set(frame.columns)
