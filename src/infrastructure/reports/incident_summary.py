"""Tabular summaries of the incident collection."""
from __future__ import annotations

from dataclasses import asdict
from typing import Any, Mapping, Sequence

import pandas as pd

from src.core.entities import INCIDENT_CATEGORIES, SEVERITIES, Incident


class IncidentSummaryAnalyzer:
    """Compute category and severity breakdowns for the dashboard charts."""

    def to_frame(self, incidents: Sequence[Incident]) -> pd.DataFrame:
        columns = list(Incident.__dataclass_fields__)
        if not incidents:
            return pd.DataFrame(columns=columns)
        return pd.DataFrame([asdict(incident) for incident in incidents], columns=columns)

    def compute_metrics(self, incidents: Sequence[Incident]) -> Mapping[str, Any]:
        frame = self.to_frame(incidents)
        total = int(len(frame))

        category_counts = self._ordered_counts(frame, "category", INCIDENT_CATEGORIES)
        severity_counts = self._ordered_counts(frame, "severity", SEVERITIES)
        status_counts = {
            str(status): int(count)
            for status, count in frame["status"].value_counts().sort_index().items()
        }

        metrics: dict[str, Any] = {
            "total_incidents": total,
            "category_counts": category_counts,
            "severity_counts": severity_counts,
            "status_counts": status_counts,
            "verified_share": round(float(frame["verified_by_authority"].mean()), 4) if total else 0.0,
            "mean_confidence": round(float(frame["confidence"].mean()), 2) if total else 0.0,
        }
        return metrics

    def breakdown_frame(self, incidents: Sequence[Incident]) -> pd.DataFrame:
        """Return a category x severity count table ready for ``st.bar_chart``."""

        frame = self.to_frame(incidents)
        if frame.empty:
            return pd.DataFrame(0, index=list(INCIDENT_CATEGORIES), columns=list(SEVERITIES))

        table = pd.crosstab(frame["category"], frame["severity"])
        return table.reindex(index=list(INCIDENT_CATEGORIES), columns=list(SEVERITIES), fill_value=0)

    @staticmethod
    def _ordered_counts(frame: pd.DataFrame, column: str, order: Sequence[str]) -> dict[str, int]:
        counts = frame[column].value_counts()
        return {value: int(counts.get(value, 0)) for value in order}


__all__ = ["IncidentSummaryAnalyzer"]
