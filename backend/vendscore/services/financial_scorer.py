"""
Financial sub-score on the shared 0-5 scale.

Each figure that has been entered (> 0) contributes one capped partial score:

    revenue   revenue / 10,000          (10k/period earns the full 5)
    cost      10,000 / cost             (cheaper placements score higher)
    margin    margin_pct / 20           (100% margin earns the full 5)
    roi       roi_pct / 50              (250% ROI earns the full 5)

The sub-score is the mean of the partials present. With no figures entered
the result is Insufficient rather than a score of zero.
"""

import math

from vendscore.models.financial import FinancialRecord
from vendscore.models.results import Insufficient, Scored, ScoreResult


def _clamp(value: float, lo: float = 0.0, hi: float = 5.0) -> float:
    """Clamp *value* to [lo, hi]."""
    return max(lo, min(hi, value))


class FinancialScorer:
    MAX_PARTIAL = 5.0

    REVENUE_SCALE = 10_000.0
    COST_SCALE = 10_000.0
    MARGIN_SCALE = 20.0
    ROI_SCALE = 50.0

    def partial_scores(self, record: FinancialRecord) -> dict[str, float]:
        """Capped partial score per entered figure."""
        partials: dict[str, float] = {}

        if record.revenue_projection > 0:
            partials["revenue"] = _clamp(record.revenue_projection / self.REVENUE_SCALE, hi=self.MAX_PARTIAL)

        if record.cost_projection > 0:
            partials["cost"] = _clamp(self.COST_SCALE / record.cost_projection, hi=self.MAX_PARTIAL)

        if record.profit_margin > 0:
            partials["margin"] = _clamp(record.profit_margin / self.MARGIN_SCALE, hi=self.MAX_PARTIAL)

        if record.roi_percentage > 0:
            partials["roi"] = _clamp(record.roi_percentage / self.ROI_SCALE, hi=self.MAX_PARTIAL)

        return partials

    def score(self, record: FinancialRecord) -> ScoreResult:
        partials = self.partial_scores(record)
        if not partials:
            return Insufficient(rated=0, required=1)
        return Scored(math.fsum(partials.values()) / len(partials))


def financial_score(record: FinancialRecord) -> ScoreResult:
    return FinancialScorer().score(record)
