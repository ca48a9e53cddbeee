from vendscore.models.enums import CombinationRule, Decision, MetricCategory, ScoreScale, SiteType
from vendscore.models.results import Insufficient, Recommendation, ScoreBreakdown, Scored, ScoreResult
from vendscore.models.metric import MetricDefinition, MetricInstance, SiteMetrics
from vendscore.models.scorecard import SCORECARD_FIELDS, ScoreCardField, TypeSpecificScoreCard
from vendscore.models.financial import FinancialRecord
from vendscore.models.site import Site

__all__ = [
    "CombinationRule",
    "Decision",
    "MetricCategory",
    "ScoreScale",
    "SiteType",
    "Insufficient",
    "Recommendation",
    "ScoreBreakdown",
    "Scored",
    "ScoreResult",
    "MetricDefinition",
    "MetricInstance",
    "SiteMetrics",
    "SCORECARD_FIELDS",
    "ScoreCardField",
    "TypeSpecificScoreCard",
    "FinancialRecord",
    "Site",
]
