from __future__ import annotations

import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import TYPE_CHECKING

import structlog

from vendscore.exceptions import InvalidRatingError
from vendscore.models.enums import MetricCategory, SiteType
from vendscore.models.results import ScoreResult
from vendscore.services import aggregator
from vendscore.utils.date_helpers import utcnow

if TYPE_CHECKING:
    from vendscore.services.metric_registry import MetricRegistry

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class MetricDefinition:
    """A rateable criterion in the catalog. Immutable once created."""

    key: str
    title: str
    description: str
    category: MetricCategory
    weight: float = 1.0
    is_required: bool = False
    applicable_types: frozenset[SiteType] = frozenset(SiteType)
    min_rating: int = 1
    max_rating: int = 5
    rating_labels: Mapping[int, str] = field(default_factory=dict, hash=False, compare=False)

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("Metric key must not be empty")
        if self.weight < 0:
            raise ValueError(f"Metric '{self.key}' has negative weight {self.weight}")
        if self.min_rating < 1:
            # 0 is reserved for "not rated"
            raise ValueError(f"Metric '{self.key}' has min_rating {self.min_rating} < 1")
        if self.min_rating > self.max_rating:
            raise ValueError(
                f"Metric '{self.key}' has min_rating {self.min_rating} > max_rating {self.max_rating}"
            )
        object.__setattr__(self, "applicable_types", frozenset(SiteType(t) for t in self.applicable_types))
        object.__setattr__(self, "rating_labels", MappingProxyType(dict(self.rating_labels)))

    @property
    def rating_range(self) -> tuple[int, int]:
        return self.min_rating, self.max_rating

    def is_applicable(self, site_type: SiteType) -> bool:
        return site_type in self.applicable_types

    def rating_label(self, rating: int) -> str:
        return self.rating_labels.get(rating, f"Rating {rating}")

    def validate_rating(self, rating: int) -> None:
        """Raise InvalidRatingError unless rating is 0 (unrated) or within range."""
        if rating == 0:
            return
        if not self.min_rating <= rating <= self.max_rating:
            raise InvalidRatingError(self.key, rating, self.min_rating, self.max_rating)


@dataclass
class MetricInstance:
    definition_key: str
    rating: int = 0
    notes: str = ""
    rated_at: datetime | None = None

    @property
    def is_rated(self) -> bool:
        return self.rating > 0

    def apply(self, rating: int, notes: str, now: datetime) -> None:
        # rated_at marks the first non-zero rating and resets with the rating
        if rating > 0 and self.rated_at is None:
            self.rated_at = now
        elif rating == 0:
            self.rated_at = None
        self.rating = rating
        self.notes = notes


class SiteMetrics:
    """Per-site ratings against the shared catalog.

    Instances are created lazily on first update. Reads of keys the catalog
    does not know return neutral defaults; updates of such keys are logged
    and ignored.
    """

    def __init__(
        self,
        site_id: str,
        site_type: SiteType,
        registry: MetricRegistry,
        instances: Iterable[MetricInstance] = (),
        last_updated: datetime | None = None,
    ) -> None:
        self.site_id = site_id
        self.site_type = SiteType(site_type)
        self.registry = registry
        self._instances: dict[str, MetricInstance] = {i.definition_key: i for i in instances}
        self.last_updated = last_updated or utcnow()
        self._lock = threading.Lock()

    @property
    def instances(self) -> list[MetricInstance]:
        return list(self._instances.values())

    def get_instance(self, key: str) -> MetricInstance | None:
        return self._instances.get(key)

    def get_rating(self, key: str) -> int:
        instance = self._instances.get(key)
        return instance.rating if instance else 0

    def get_notes(self, key: str) -> str:
        instance = self._instances.get(key)
        return instance.notes if instance else ""

    def update_metric(self, key: str, rating: int, notes: str = "") -> bool:
        """Upsert a rating. Returns False when the key was ignored."""
        definition = self.registry.get_definition(key)
        if definition is None:
            logger.warning("metrics.unknown_key", site_id=self.site_id, key=key)
            return False
        if not definition.is_applicable(self.site_type):
            logger.warning(
                "metrics.not_applicable",
                site_id=self.site_id,
                key=key,
                site_type=self.site_type.value,
            )
            return False

        definition.validate_rating(rating)

        with self._lock:
            now = utcnow()
            instance = self._instances.get(key)
            if instance is None:
                instance = MetricInstance(definition_key=key)
                self._instances[key] = instance
            instance.apply(rating, notes, now)
            self.last_updated = now
        return True

    def rated_count(self) -> int:
        return sum(1 for i in self._instances.values() if i.is_rated)

    def instances_in(self, category: MetricCategory) -> list[MetricInstance]:
        keys = {d.key for d in self.registry.metrics_for(self.site_type, category)}
        return [i for i in self._instances.values() if i.definition_key in keys]

    def category_score(self, category: MetricCategory) -> float:
        """Unweighted mean of rated instances in the category (display only)."""
        return aggregator.category_score(self.instances_in(category))

    def overall_score(self, minimum_rated: int = 3) -> ScoreResult:
        return aggregator.weighted_score(self.instances, self.registry, minimum_rated)

    def unrated_required(self) -> list[MetricDefinition]:
        return [
            d for d in self.registry.required_metrics_for(self.site_type)
            if self.get_rating(d.key) == 0
        ]

    def completion_percentage(self) -> float:
        applicable = self.registry.metrics_for(self.site_type)
        if not applicable:
            return 0.0
        rated = sum(1 for d in applicable if self.get_rating(d.key) > 0)
        return rated / len(applicable)
