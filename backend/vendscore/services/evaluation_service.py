"""
EvaluationService -- the single entry point for hosts (UI, API, batch jobs).

Composes the catalog, the per-site stores, the scorers and the classifier:

    general score        catalog-weighted mean of the site's rated metrics
    type-specific score  plain mean of the legacy scorecard fields
    financial score      mean of capped partials from the financial record
    overall score        unweighted mean of the three above

Which score is classified is chosen by ``combination_rule``. The catalog-
weighted general score is canonical; ``blended_mean`` and ``dashboard_60_40``
reproduce older views and are kept for side-by-side comparison.
"""

from __future__ import annotations

import math

import structlog

from vendscore.config import Settings, settings as default_settings
from vendscore.exceptions import SiteTypeMismatchError
from vendscore.models.enums import CombinationRule, ScoreScale, SiteType
from vendscore.models.financial import FinancialRecord, non_negative
from vendscore.models.metric import MetricInstance, SiteMetrics
from vendscore.models.results import Insufficient, Recommendation, ScoreBreakdown, Scored, ScoreResult
from vendscore.models.scorecard import MAX_FIELD_RATING, TypeSpecificScoreCard
from vendscore.models.site import Site, new_site_id
from vendscore.schemas import (
    FinancialSnapshot,
    MetricInstanceSnapshot,
    ScoreCardEntrySnapshot,
    ScoreCardSnapshot,
    SiteSnapshot,
)
from vendscore.services.decision_classifier import DecisionClassifier
from vendscore.services.financial_scorer import FinancialScorer
from vendscore.services.metric_registry import MetricRegistry, get_default_registry

logger = structlog.get_logger(__name__)

FOOT_TRAFFIC_KEY = "general_foot_traffic"

# Legacy dashboard blend: 60% foot traffic, 40% type-specific, on 0-1
DASHBOARD_FOOT_TRAFFIC_SHARE = 0.6
DASHBOARD_TYPE_SPECIFIC_SHARE = 0.4

_FINANCIAL_UPDATERS = {
    "revenue_projection": "update_revenue",
    "cost_projection": "update_cost",
    "profit_margin": "update_profit_margin",
    "payback_period": "update_payback_period",
    "roi_percentage": "update_roi",
}


class EvaluationService:
    """Create sites, record ratings and turn them into recommendations."""

    def __init__(
        self,
        registry: MetricRegistry | None = None,
        config: Settings | None = None,
    ) -> None:
        self.registry = registry or get_default_registry()
        self.settings = config or default_settings
        self.classifier = DecisionClassifier(self.settings)
        self.financial_scorer = FinancialScorer()

    # ------------------------------------------------------------------
    # Site lifecycle
    # ------------------------------------------------------------------

    def create_site(
        self,
        name: str,
        address: str,
        site_type: SiteType | str,
        comment: str = "",
    ) -> Site:
        if not name or not name.strip():
            raise ValueError("Site name is required")
        if not address or not address.strip():
            raise ValueError("Site address is required")

        site_type = SiteType(site_type)
        site_id = new_site_id()
        site = Site(
            id=site_id,
            name=name.strip(),
            address=address.strip(),
            site_type=site_type,
            comment=comment,
            metrics=SiteMetrics(site_id=site_id, site_type=site_type, registry=self.registry),
            scorecard=TypeSpecificScoreCard(site_type),
            financials=FinancialRecord(),
        )

        logger.info(
            "evaluation.site_created",
            site_id=site.id,
            site_type=site_type.value,
            applicable_metrics=len(self.registry.metrics_for(site_type)),
        )
        return site

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def update_metric(self, site: Site, key: str, rating: int, notes: str = "") -> bool:
        updated = site.metrics.update_metric(key, rating, notes)
        if updated:
            site.touch()
        return updated

    def update_type_metric(self, site: Site, field_tag: str, rating: int, notes: str = "") -> bool:
        updated = site.scorecard.update_metric(field_tag, rating, notes)
        if updated:
            site.touch()
        return updated

    def update_financials(self, site: Site, notes: dict[str, str] | None = None, **figures: float) -> None:
        """Update any of the financial figures by field name.

        Revenue and cost are applied first so that explicitly passed margin
        or ROI figures win over the values recomputed from the projections.
        """
        unknown = set(figures) - set(_FINANCIAL_UPDATERS)
        if unknown:
            raise ValueError(f"Unknown financial fields: {', '.join(sorted(unknown))}")
        # Validate everything first so a bad figure leaves the record untouched
        for field_name, value in figures.items():
            if value is not None:
                non_negative(field_name, value)

        notes = notes or {}
        for field_name, method_name in _FINANCIAL_UPDATERS.items():
            if field_name in figures and figures[field_name] is not None:
                getattr(site.financials, method_name)(figures[field_name], notes.get(field_name, ""))
        site.touch()

    def migrate_scorecard(self, site: Site) -> int:
        """Copy rated scorecard fields into the catalog instance store.

        Scorecard tags are the catalog keys of the matching specialized set,
        so each rated field overwrites the instance of the same key. Unrated
        fields are left alone. Returns the number of fields copied.
        """
        migrated = 0
        for tag, entry in site.scorecard.to_dict().items():
            if entry["rating"] > 0 and site.metrics.update_metric(tag, entry["rating"], entry["notes"]):
                migrated += 1
        if migrated:
            site.touch()

        logger.info("evaluation.scorecard_migrated", site_id=site.id, migrated=migrated)
        return migrated

    # ------------------------------------------------------------------
    # Scores
    # ------------------------------------------------------------------

    def general_score(self, site: Site) -> ScoreResult:
        return site.metrics.overall_score(self.settings.minimum_rated_metrics)

    def type_specific_score(self, site: Site) -> ScoreResult:
        return site.scorecard.calculate_overall_score(self.settings.type_specific_minimum_rated)

    def financial_score(self, site: Site) -> ScoreResult:
        return self.financial_scorer.score(site.financials)

    def score_breakdown(self, site: Site) -> ScoreBreakdown:
        general = self.general_score(site)
        type_specific = self.type_specific_score(site)
        financial = self.financial_score(site)

        components = (general, type_specific, financial)
        scored = [c for c in components if not c.is_insufficient]
        if len(scored) < len(components):
            overall: ScoreResult = Insufficient(rated=len(scored), required=len(components))
        else:
            overall = Scored(math.fsum(c.value for c in components) / len(components))

        return ScoreBreakdown(
            general_score=general,
            type_specific_score=type_specific,
            financial_score=financial,
            overall_score=overall,
        )

    def dashboard_score(self, site: Site) -> ScoreResult:
        """Legacy 60/40 blend of foot traffic and type-specific score, on 0-1."""
        foot_traffic = site.metrics.get_rating(FOOT_TRAFFIC_KEY)
        type_specific = self.type_specific_score(site)
        if foot_traffic == 0 or type_specific.is_insufficient:
            rated = int(foot_traffic > 0) + int(not type_specific.is_insufficient)
            return Insufficient(rated=rated, required=2)

        max_rating = self.registry.require(FOOT_TRAFFIC_KEY).max_rating
        value = (
            foot_traffic / max_rating * DASHBOARD_FOOT_TRAFFIC_SHARE
            + type_specific.value / MAX_FIELD_RATING * DASHBOARD_TYPE_SPECIFIC_SHARE
        )
        return Scored(min(value, 1.0))

    def recommend(self, site: Site, rule: CombinationRule | str | None = None) -> Recommendation:
        rule = CombinationRule(rule or self.settings.combination_rule)

        if rule is CombinationRule.CATALOG_WEIGHTED:
            recommendation = self.classifier.classify(self.general_score(site), ScoreScale.FIVE_POINT)
        elif rule is CombinationRule.BLENDED_MEAN:
            recommendation = self.classifier.classify(
                self.score_breakdown(site).overall_score, ScoreScale.FIVE_POINT
            )
        else:
            recommendation = self.classifier.classify(self.dashboard_score(site), ScoreScale.UNIT)

        logger.debug(
            "evaluation.recommended",
            site_id=site.id,
            rule=rule.value,
            label=recommendation.label,
            score=recommendation.score.value,
        )
        return recommendation

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def required_status(self, site: Site) -> tuple[int, int]:
        """(rated, total) over the required metrics for the site's type."""
        required = self.registry.required_metrics_for(site.site_type)
        rated = sum(1 for d in required if site.metrics.get_rating(d.key) > 0)
        return rated, len(required)

    def validate_for_completion(self, site: Site) -> list[str]:
        """Advisory warnings about missing input. Never raises."""
        warnings = []

        unrated = site.metrics.unrated_required()
        if unrated:
            titles = ", ".join(d.title for d in unrated)
            warnings.append(f"General metrics are incomplete: {titles} not rated")

        if site.scorecard.rated_count() < 1:
            warnings.append(f"{site.site_type.display_name} metrics are incomplete: no metrics rated")

        if not site.financials.has_figures():
            warnings.append("Financial information is incomplete: no figures entered")

        return warnings

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def to_snapshot(self, site: Site) -> SiteSnapshot:
        fin = site.financials
        return SiteSnapshot(
            id=site.id,
            name=site.name,
            address=site.address,
            site_type=site.site_type,
            comment=site.comment,
            created_at=site.created_at,
            updated_at=site.updated_at,
            metrics_last_updated=site.metrics.last_updated,
            metrics=[
                MetricInstanceSnapshot(
                    definition_key=i.definition_key,
                    rating=i.rating,
                    notes=i.notes,
                    rated_at=i.rated_at,
                )
                for i in site.metrics.instances
            ],
            scorecard=ScoreCardSnapshot(
                site_type=site.scorecard.site_type,
                entries={
                    tag: ScoreCardEntrySnapshot(**entry)
                    for tag, entry in site.scorecard.to_dict().items()
                },
            ),
            financials=FinancialSnapshot(
                revenue_projection=fin.revenue_projection,
                cost_projection=fin.cost_projection,
                profit_margin=fin.profit_margin,
                payback_period=fin.payback_period,
                roi_percentage=fin.roi_percentage,
                revenue_notes=fin.revenue_notes,
                cost_notes=fin.cost_notes,
                profit_notes=fin.profit_notes,
                payback_notes=fin.payback_notes,
                roi_notes=fin.roi_notes,
            ),
        )

    def load_site(self, snapshot: SiteSnapshot) -> Site:
        """Rebuild a site from stored data, re-validating every rating."""
        if snapshot.scorecard.site_type != snapshot.site_type:
            raise SiteTypeMismatchError(snapshot.site_type.value, snapshot.scorecard.site_type.value)

        instances = []
        for item in snapshot.metrics:
            definition = self.registry.get_definition(item.definition_key)
            if definition is None:
                # Kept so the rating survives until the catalog catches up
                logger.warning(
                    "evaluation.legacy_metric_key",
                    site_id=snapshot.id,
                    key=item.definition_key,
                )
            else:
                definition.validate_rating(item.rating)
            instances.append(
                MetricInstance(
                    definition_key=item.definition_key,
                    rating=item.rating,
                    notes=item.notes,
                    rated_at=(item.rated_at or snapshot.metrics_last_updated) if item.rating > 0 else None,
                )
            )

        site = Site(
            id=snapshot.id,
            name=snapshot.name,
            address=snapshot.address,
            site_type=snapshot.site_type,
            comment=snapshot.comment,
            created_at=snapshot.created_at,
            updated_at=snapshot.updated_at,
            metrics=SiteMetrics(
                site_id=snapshot.id,
                site_type=snapshot.site_type,
                registry=self.registry,
                instances=instances,
                last_updated=snapshot.metrics_last_updated,
            ),
            scorecard=TypeSpecificScoreCard(
                snapshot.site_type,
                ratings={
                    tag: (entry.rating, entry.notes)
                    for tag, entry in snapshot.scorecard.entries.items()
                },
            ),
            financials=FinancialRecord(**snapshot.financials.model_dump()),
        )

        logger.info(
            "evaluation.site_loaded",
            site_id=site.id,
            site_type=site.site_type.value,
            rated_metrics=site.metrics.rated_count(),
        )
        return site
