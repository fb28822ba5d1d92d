"""Header metrics and the incident breakdown chart."""
from __future__ import annotations

from typing import Sequence

import streamlit as st

from src.core.entities import Incident, IncidentStats
from src.infrastructure.reports.incident_summary import IncidentSummaryAnalyzer


def stats_metrics(stats: IncidentStats) -> list[tuple[str, str, str, str]]:
    """Return ``(label, value, delta, delta_color)`` tuples for ``st.metric``."""

    return [
        ("Active Emergencies", str(stats.total_active), "+3 from yesterday", "inverse"),
        ("Resolved Today", str(stats.total_resolved), "+12 from yesterday", "normal"),
        ("Critical Alerts", str(stats.critical_alerts), "2 new this hour", "inverse"),
        ("Avg Response Time", f"{stats.average_response_time}min", "-2min improvement", "inverse"),
        ("AI Accuracy", f"{stats.ai_accuracy}%", "+1.2% this month", "normal"),
    ]


def render_stats_cards(stats: IncidentStats) -> None:
    columns = st.columns(5)
    for column, (label, value, delta, delta_color) in zip(columns, stats_metrics(stats)):
        column.metric(label, value, delta=delta, delta_color=delta_color)


def render_incident_breakdown(
    incidents: Sequence[Incident], analyzer: IncidentSummaryAnalyzer
) -> None:
    st.markdown("#### Incidents by category and severity")
    st.bar_chart(analyzer.breakdown_frame(incidents), stack=True)

    metrics = analyzer.compute_metrics(incidents)
    col1, col2, col3 = st.columns(3)
    col1.metric("Incidents tracked", metrics["total_incidents"])
    col2.metric("Verified by authority", f"{metrics['verified_share']:.0%}")
    col3.metric("Mean AI confidence", f"{metrics['mean_confidence']:.1f}%")


__all__ = ["render_incident_breakdown", "render_stats_cards", "stats_metrics"]
