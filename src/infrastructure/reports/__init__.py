"""Infrastructure helpers for summarising the incident collection."""

from .incident_summary import IncidentSummaryAnalyzer

__all__ = ["IncidentSummaryAnalyzer"]
