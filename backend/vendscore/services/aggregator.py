"""
Pure reductions from rated metrics to scores.

    category_score   unweighted mean, display aggregate only
    weighted_score   sum(rating * weight) / sum(weight) over rated instances,
                     each rating first rescaled from its own range onto 0-5,
                     gated by a minimum rated count
    mean_score       plain mean of rated values, same gate (type-specific
                     scorecards)

Sums use math.fsum so the result does not depend on instance order.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import TYPE_CHECKING

from vendscore.models.results import Insufficient, Scored, ScoreResult

if TYPE_CHECKING:
    from vendscore.models.metric import MetricInstance
    from vendscore.services.metric_registry import MetricRegistry

# Catalog ratings are rescaled onto 0-5 before weighting
SCORE_MAX = 5.0

# Weight used for instances whose definition has left the catalog
FALLBACK_WEIGHT = 1.0


def category_score(instances: Iterable[MetricInstance]) -> float:
    ratings = [i.rating for i in instances if i.is_rated]
    if not ratings:
        return 0.0
    return math.fsum(ratings) / len(ratings)


def weighted_score(
    instances: Iterable[MetricInstance],
    registry: MetricRegistry,
    minimum_rated: int = 3,
) -> ScoreResult:
    rated = [i for i in instances if i.is_rated]
    if len(rated) < minimum_rated:
        return Insufficient(rated=len(rated), required=minimum_rated)

    weights = []
    scaled = []
    for instance in rated:
        definition = registry.get_definition(instance.definition_key)
        if definition is None:
            weights.append(FALLBACK_WEIGHT)
            scaled.append(min(float(instance.rating), SCORE_MAX))
        else:
            weights.append(definition.weight)
            scaled.append(instance.rating * SCORE_MAX / definition.max_rating)

    total_weight = math.fsum(weights)
    if total_weight <= 0:
        # Every rated metric carries zero weight; nothing to average
        return Insufficient(rated=len(rated), required=minimum_rated)

    weighted_sum = math.fsum(r * w for r, w in zip(scaled, weights))
    return Scored(weighted_sum / total_weight)


def mean_score(ratings: Iterable[int], minimum_rated: int = 3) -> ScoreResult:
    rated = [r for r in ratings if r > 0]
    if len(rated) < minimum_rated:
        return Insufficient(rated=len(rated), required=minimum_rated)
    return Scored(math.fsum(rated) / len(rated))
