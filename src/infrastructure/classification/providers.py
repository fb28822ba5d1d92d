"""Classification providers that score submitted incident reports."""
from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Callable, Optional

from src.core.entities import ReportDraft
from src.utils.logger import logger


@dataclass(frozen=True)
class ClassificationResult:
    """Scores attached to a report before it is submitted."""

    confidence: Optional[int]
    affected_radius: Optional[int]


class SimulatedClassificationProvider:
    """Emulate an automated analysis step with a fixed delay and random scores.

    No model is involved: confidence is drawn from ``[80, 100)`` and the
    affected radius from ``[500, 2000)`` meters using the injected random
    source, after waiting ``delay_seconds`` through ``sleeper``.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        delay_seconds: float = 2.0,
        sleeper: Callable[[float], None] | None = None,
    ) -> None:
        if delay_seconds < 0:
            raise ValueError("Processing delay cannot be negative.")
        self._rng = rng or random.Random()
        self._delay_seconds = delay_seconds
        self._sleeper = sleeper or time.sleep

    def classify(self, draft: ReportDraft) -> ClassificationResult:
        logger.debug("Simulating analysis of report '{}'", draft.title)
        if self._delay_seconds:
            self._sleeper(self._delay_seconds)
        return ClassificationResult(
            confidence=self._rng.randrange(80, 100),
            affected_radius=self._rng.randrange(500, 2000),
        )


@dataclass(frozen=True)
class FixedClassificationProvider:
    """Deterministic provider returning preconfigured scores without delay."""

    confidence: Optional[int] = None
    affected_radius: Optional[int] = None

    def classify(self, draft: ReportDraft) -> ClassificationResult:
        logger.debug("Returning fixed scores for report '{}'", draft.title)
        return ClassificationResult(
            confidence=self.confidence,
            affected_radius=self.affected_radius,
        )


__all__ = [
    "ClassificationResult",
    "FixedClassificationProvider",
    "SimulatedClassificationProvider",
]
