"""Use case turning a report draft into a scored, located incident report."""
from __future__ import annotations

import random
from typing import Optional, Protocol

from src.core.entities import Coordinates, IncidentReport, ReportDraft
from src.infrastructure.classification.providers import ClassificationResult
from src.utils.logger import logger

# Reports without a user location land within +/- 0.005 degrees of the fallback.
_FALLBACK_JITTER = 0.01


class ClassificationProvider(Protocol):
    def classify(self, draft: ReportDraft) -> ClassificationResult:
        ...


class AnalyzeReportUseCase:
    """Score a draft through the classification provider and attach a location."""

    def __init__(
        self,
        provider: ClassificationProvider,
        fallback_location: Coordinates,
        rng: random.Random | None = None,
    ) -> None:
        self._provider = provider
        self._fallback_location = fallback_location
        self._rng = rng or random.Random()

    def execute(
        self,
        draft: ReportDraft,
        user_location: Optional[Coordinates] = None,
    ) -> IncidentReport:
        if not draft.is_complete():
            raise ValueError("A report needs a non-empty title and description.")

        logger.info("Analyzing report '{}' ({}, {})", draft.title, draft.category, draft.severity)
        result = self._provider.classify(draft)
        location = user_location or self._jittered_fallback()

        return IncidentReport(
            category=draft.category,
            title=draft.title.strip(),
            description=draft.description.strip(),
            severity=draft.severity,
            latitude=location.latitude,
            longitude=location.longitude,
            confidence=result.confidence,
            affected_radius=result.affected_radius,
        )

    def _jittered_fallback(self) -> Coordinates:
        return Coordinates(
            latitude=self._fallback_location.latitude + (self._rng.random() - 0.5) * _FALLBACK_JITTER,
            longitude=self._fallback_location.longitude + (self._rng.random() - 0.5) * _FALLBACK_JITTER,
        )


__all__ = ["AnalyzeReportUseCase", "ClassificationProvider"]
