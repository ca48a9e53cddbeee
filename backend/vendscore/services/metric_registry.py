"""
MetricRegistry -- the catalog of rateable metrics.

Seeded lazily on first read, exactly once, under a lock. Definitions are held
in a single immutable snapshot that is swapped atomically on ``register`` so
concurrent readers never observe a partially populated catalog and never
need the lock.
"""

from __future__ import annotations

import math
import threading
from collections.abc import Callable, Iterable

import structlog

from vendscore.exceptions import DuplicateKeyError, UnknownMetricKeyError
from vendscore.models.enums import MetricCategory, SiteType
from vendscore.models.metric import MetricDefinition

logger = structlog.get_logger(__name__)

SeedFn = Callable[[], Iterable[MetricDefinition]]


class _Snapshot:
    __slots__ = ("definitions", "by_key")

    def __init__(self, definitions: tuple[MetricDefinition, ...]) -> None:
        self.definitions = definitions
        self.by_key = {d.key: d for d in definitions}


class MetricRegistry:
    """Read-mostly catalog of :class:`MetricDefinition` objects."""

    def __init__(self, seed: SeedFn | None = None) -> None:
        self._seed = seed
        self._snapshot = _Snapshot(())
        self._seeded = seed is None
        self._lock = threading.Lock()

    @classmethod
    def with_defaults(cls) -> MetricRegistry:
        from vendscore.seed.default_metrics import default_metric_definitions

        return cls(seed=default_metric_definitions)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def _ensure_seeded(self) -> None:
        if self._seeded:
            return
        with self._lock:
            if self._seeded:
                return
            definitions: list[MetricDefinition] = []
            seen: set[str] = set()
            for definition in self._seed():
                if definition.key in seen:
                    raise DuplicateKeyError(definition.key)
                seen.add(definition.key)
                definitions.append(definition)
            self._snapshot = _Snapshot(tuple(definitions))
            self._seeded = True
            logger.info("registry.seeded", definitions=len(definitions))

    def register(self, definition: MetricDefinition) -> None:
        self._ensure_seeded()
        with self._lock:
            current = self._snapshot
            if definition.key in current.by_key:
                raise DuplicateKeyError(definition.key)
            self._snapshot = _Snapshot(current.definitions + (definition,))
        logger.debug("registry.registered", key=definition.key)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def _current(self) -> _Snapshot:
        self._ensure_seeded()
        return self._snapshot

    def __len__(self) -> int:
        return len(self._current().definitions)

    def __contains__(self, key: object) -> bool:
        return key in self._current().by_key

    def all_definitions(self) -> list[MetricDefinition]:
        return list(self._current().definitions)

    def get_definition(self, key: str) -> MetricDefinition | None:
        return self._current().by_key.get(key)

    def require(self, key: str) -> MetricDefinition:
        definition = self.get_definition(key)
        if definition is None:
            raise UnknownMetricKeyError(key)
        return definition

    def weight_for(self, key: str, default: float = 1.0) -> float:
        definition = self.get_definition(key)
        return definition.weight if definition else default

    def metrics_for(
        self,
        site_type: SiteType,
        category: MetricCategory | None = None,
    ) -> list[MetricDefinition]:
        site_type = SiteType(site_type)
        return [
            d for d in self._current().definitions
            if d.is_applicable(site_type) and (category is None or d.category == category)
        ]

    def required_metrics_for(self, site_type: SiteType) -> list[MetricDefinition]:
        return [d for d in self.metrics_for(site_type) if d.is_required]

    def categories_for(self, site_type: SiteType) -> list[MetricCategory]:
        categories = {d.category for d in self.metrics_for(site_type)}
        return sorted(categories, key=lambda c: c.display_name)

    def general_metrics(self) -> list[MetricDefinition]:
        """Definitions that apply to every site type."""
        all_types = frozenset(SiteType)
        return [d for d in self._current().definitions if d.applicable_types == all_types]

    def specialized_metrics(self, site_type: SiteType) -> list[MetricDefinition]:
        """Definitions that apply to this site type only."""
        only = frozenset({SiteType(site_type)})
        return [d for d in self._current().definitions if d.applicable_types == only]

    def total_weight(self, site_type: SiteType) -> float:
        return math.fsum(d.weight for d in self.metrics_for(site_type))


_default_registry: MetricRegistry | None = None
_default_lock = threading.Lock()


def get_default_registry() -> MetricRegistry:
    """Process-wide registry seeded with the default catalog.

    Prefer passing a registry explicitly; this exists for hosts that want the
    seed-once-per-process lifecycle without wiring it themselves.
    """
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = MetricRegistry.with_defaults()
    return _default_registry
