"""Derived, never-persisted scoring results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from vendscore.models.enums import Decision, ScoreScale


@dataclass(frozen=True)
class Insufficient:
    """Too few metrics rated to produce a meaningful score.

    ``value`` stays 0.0 so callers that only read the float keep working, but
    ``is_insufficient`` lets them tell this apart from a genuine low score.
    """

    rated: int = 0
    required: int = 0

    @property
    def value(self) -> float:
        return 0.0

    @property
    def is_insufficient(self) -> bool:
        return True


@dataclass(frozen=True)
class Scored:
    value: float

    @property
    def is_insufficient(self) -> bool:
        return False


ScoreResult = Union[Insufficient, Scored]


@dataclass(frozen=True)
class Recommendation:
    decision: Decision | None
    score: ScoreResult
    scale: ScoreScale = ScoreScale.FIVE_POINT

    @property
    def insufficient_data(self) -> bool:
        return self.decision is None

    @property
    def label(self) -> str:
        if self.decision is None:
            return "Insufficient Data"
        return self.decision.display_name


@dataclass(frozen=True)
class ScoreBreakdown:
    general_score: ScoreResult
    type_specific_score: ScoreResult
    financial_score: ScoreResult
    overall_score: ScoreResult

    def as_dict(self) -> dict:
        def _value(result: ScoreResult) -> float | None:
            return None if result.is_insufficient else round(result.value, 4)

        return {
            "general_score": _value(self.general_score),
            "type_specific_score": _value(self.type_specific_score),
            "financial_score": _value(self.financial_score),
            "overall_score": _value(self.overall_score),
        }
