"""
Map a score to a recommendation.

Two scales are in use:

    0-5   [4.0, 5.0] Greenlight   [3.0, 4.0) Watchlist   below Pass
    0-1   >= 0.75    Greenlight   [0.60, 0.75) Watchlist  below Pass

An Insufficient result never reaches the thresholds; it yields a
recommendation with no decision, rendered as "Insufficient Data".
"""

from vendscore.config import Settings, settings as default_settings
from vendscore.models.enums import Decision, ScoreScale
from vendscore.models.results import Recommendation, ScoreResult

# (lower bound, label) for 0-5 scores, highest first
_RATING_BANDS: list[tuple[float, str]] = [
    (4.5, "Excellent"),
    (3.5, "Very Good"),
    (2.5, "Good"),
    (1.5, "Fair"),
    (0.5, "Poor"),
]


class DecisionClassifier:
    def __init__(self, config: Settings | None = None) -> None:
        config = config or default_settings
        self.thresholds: dict[ScoreScale, tuple[float, float]] = {
            ScoreScale.FIVE_POINT: (config.greenlight_threshold, config.watchlist_threshold),
            ScoreScale.UNIT: (config.greenlight_threshold_unit, config.watchlist_threshold_unit),
        }

    def decide(self, value: float, scale: ScoreScale = ScoreScale.FIVE_POINT) -> Decision:
        if not 0.0 <= value <= scale.maximum:
            raise ValueError(f"Score {value} outside the {scale.value} scale [0, {scale.maximum}]")

        greenlight, watchlist = self.thresholds[scale]
        if value >= greenlight:
            return Decision.GREENLIGHT
        if value >= watchlist:
            return Decision.WATCHLIST
        return Decision.PASS

    def classify(
        self,
        result: ScoreResult,
        scale: ScoreScale = ScoreScale.FIVE_POINT,
    ) -> Recommendation:
        if result.is_insufficient:
            return Recommendation(decision=None, score=result, scale=scale)
        return Recommendation(decision=self.decide(result.value, scale), score=result, scale=scale)


def rating_band(result: ScoreResult) -> str:
    """Qualitative band for a 0-5 score."""
    if result.is_insufficient:
        return "Not Rated"
    for lower, label in _RATING_BANDS:
        if result.value >= lower:
            return label
    return "Not Rated"
