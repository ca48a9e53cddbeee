"""Tests for the per-site metric instance store."""

import threading

import pytest

from vendscore.exceptions import InvalidRatingError
from vendscore.models.enums import MetricCategory, SiteType
from vendscore.models.metric import MetricInstance, SiteMetrics


@pytest.fixture
def metrics(registry):
    return SiteMetrics(site_id="site-1", site_type=SiteType.OFFICE, registry=registry)


class TestUpdateMetric:
    def test_creates_instance_on_first_update(self, metrics):
        assert metrics.get_instance("general_foot_traffic") is None
        assert metrics.update_metric("general_foot_traffic", 4, "lunch rush") is True
        assert metrics.get_rating("general_foot_traffic") == 4
        assert metrics.get_notes("general_foot_traffic") == "lunch rush"

    def test_upsert_keeps_single_instance(self, metrics):
        metrics.update_metric("general_foot_traffic", 4)
        metrics.update_metric("general_foot_traffic", 2)
        assert len(metrics.instances) == 1
        assert metrics.get_rating("general_foot_traffic") == 2

    def test_repeated_update_is_idempotent(self, metrics):
        metrics.update_metric("general_security", 3, "guard desk")
        first = metrics.get_instance("general_security").rated_at
        metrics.update_metric("general_security", 3, "guard desk")
        instance = metrics.get_instance("general_security")
        assert len(metrics.instances) == 1
        assert instance.rated_at == first
        assert (instance.rating, instance.notes) == (3, "guard desk")

    def test_zero_clears_rated_at(self, metrics):
        metrics.update_metric("general_security", 3)
        metrics.update_metric("general_security", 0)
        assert metrics.get_instance("general_security").rated_at is None

    def test_bumps_last_updated(self, metrics):
        before = metrics.last_updated
        metrics.update_metric("general_competition", 3)
        assert metrics.last_updated >= before

    def test_unknown_key_ignored(self, metrics):
        assert metrics.update_metric("no_such_metric", 3) is False
        assert metrics.instances == []

    def test_key_for_other_site_type_ignored(self, metrics):
        assert metrics.update_metric("hospital_patient_volume", 3) is False
        assert metrics.get_rating("hospital_patient_volume") == 0

    def test_invalid_rating_raises(self, metrics):
        with pytest.raises(InvalidRatingError):
            metrics.update_metric("general_foot_traffic", 6)
        assert metrics.get_instance("general_foot_traffic") is None

    def test_reads_of_unknown_keys_are_neutral(self, metrics):
        assert metrics.get_rating("whatever") == 0
        assert metrics.get_notes("whatever") == ""

    def test_concurrent_updates_are_serialized(self, metrics):
        keys = [d.key for d in metrics.registry.metrics_for(SiteType.OFFICE)]

        def rate(rating):
            for key in keys:
                metrics.update_metric(key, rating)

        threads = [threading.Thread(target=rate, args=(r,)) for r in range(1, 6)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(metrics.instances) == len(keys)
        assert all(1 <= i.rating <= 5 for i in metrics.instances)


class TestOverallScore:
    def test_insufficient_below_three_rated(self, metrics):
        metrics.update_metric("general_foot_traffic", 5)
        metrics.update_metric("general_demographics", 5)
        result = metrics.overall_score()
        assert result.is_insufficient
        assert result.value == 0.0
        assert result.rated == 2
        assert result.required == 3

    def test_weighted_mean(self, metrics):
        metrics.update_metric("general_foot_traffic", 5)  # 0.15
        metrics.update_metric("general_demographics", 3)  # 0.10
        metrics.update_metric("general_competition", 4)  # 0.10
        result = metrics.overall_score()
        assert not result.is_insufficient
        assert result.value == pytest.approx((5 * 0.15 + 3 * 0.10 + 4 * 0.10) / 0.35)

    @pytest.mark.parametrize("ratings", [(1, 1, 1), (5, 5, 5), (1, 5, 2), (4, 2, 3)])
    def test_value_within_rating_range(self, metrics, ratings):
        keys = ("general_foot_traffic", "general_amenities", "office_transit_hub")
        for key, rating in zip(keys, ratings):
            metrics.update_metric(key, rating)
        value = metrics.overall_score().value
        assert min(ratings) - 1e-9 <= value <= max(ratings) + 1e-9

    def test_unrated_instances_do_not_count(self, metrics):
        metrics.update_metric("general_foot_traffic", 5)
        metrics.update_metric("general_demographics", 5)
        metrics.update_metric("general_competition", 5)
        metrics.update_metric("general_security", 0)
        assert metrics.overall_score().value == pytest.approx(5.0)

    def test_clearing_a_rating_drops_below_gate(self, metrics):
        for key in ("general_foot_traffic", "general_demographics", "general_competition"):
            metrics.update_metric(key, 4)
        metrics.update_metric("general_competition", 0)
        assert metrics.overall_score().is_insufficient

    def test_custom_minimum(self, metrics):
        metrics.update_metric("general_foot_traffic", 4)
        assert metrics.overall_score(minimum_rated=1).value == pytest.approx(4.0)

    def test_legacy_instance_uses_fallback_weight(self, registry):
        metrics = SiteMetrics(
            site_id="site-2",
            site_type=SiteType.OFFICE,
            registry=registry,
            instances=[MetricInstance("retired_metric", rating=1)],
        )
        metrics.update_metric("general_foot_traffic", 5)
        metrics.update_metric("general_demographics", 5)
        expected = (1 * 1.0 + 5 * 0.15 + 5 * 0.10) / (1.0 + 0.15 + 0.10)
        assert metrics.overall_score().value == pytest.approx(expected)


class TestCategoriesAndCompletion:
    def test_category_score_is_unweighted(self, metrics):
        metrics.update_metric("general_competition", 2)
        metrics.update_metric("office_tenant_amenities", 4)
        assert metrics.category_score(MetricCategory.COMPETITION) == pytest.approx(3.0)

    def test_empty_category_scores_zero(self, metrics):
        assert metrics.category_score(MetricCategory.SECURITY) == 0.0

    def test_instances_in_category(self, metrics):
        metrics.update_metric("general_visibility", 3)
        metrics.update_metric("office_layout_type", 4)
        metrics.update_metric("general_foot_traffic", 5)
        keys = {i.definition_key for i in metrics.instances_in(MetricCategory.LAYOUT)}
        assert keys == {"general_visibility", "office_layout_type"}

    def test_unrated_required(self, metrics):
        metrics.update_metric("general_foot_traffic", 4)
        metrics.update_metric("general_competition", 3)
        keys = {d.key for d in metrics.unrated_required()}
        assert keys == {"general_demographics", "general_commission"}

    def test_completion_percentage(self, metrics):
        assert metrics.completion_percentage() == 0.0
        metrics.update_metric("general_foot_traffic", 4)
        metrics.update_metric("office_common_areas", 4)
        # 8 general + 6 office metrics
        assert metrics.completion_percentage() == pytest.approx(2 / 14)
