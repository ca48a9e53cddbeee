"""Tests for the fixed-field type-specific scorecards."""

import pytest

from vendscore.exceptions import InvalidRatingError, UnknownMetricKeyError
from vendscore.models.enums import SiteType
from vendscore.models.scorecard import SCORECARD_FIELDS, TypeSpecificScoreCard
from vendscore.seed.default_metrics import specialized_keys


class TestSchema:
    @pytest.mark.parametrize(
        "site_type,count",
        [
            (SiteType.OFFICE, 6),
            (SiteType.HOSPITAL, 6),
            (SiteType.SCHOOL, 6),
            (SiteType.RESIDENTIAL, 7),
        ],
    )
    def test_field_count(self, site_type, count):
        assert TypeSpecificScoreCard(site_type).field_count() == count

    @pytest.mark.parametrize("site_type", list(SiteType))
    def test_field_tags_match_catalog_keys(self, site_type):
        tags = [f.tag for f in SCORECARD_FIELDS[site_type]]
        assert tags == specialized_keys(site_type)

    def test_every_site_type_has_a_schema(self):
        assert set(SCORECARD_FIELDS) == set(SiteType)


class TestOfficeScoreCard:
    def test_three_rated_gives_mean(self):
        card = TypeSpecificScoreCard(SiteType.OFFICE)
        card.update_metric("office_common_areas", 4)
        card.update_metric("office_hours_access", 5)
        card.update_metric("office_tenant_amenities", 3)
        result = card.calculate_overall_score()
        assert not result.is_insufficient
        assert result.value == pytest.approx(4.0)

    def test_two_rated_is_insufficient(self):
        card = TypeSpecificScoreCard(SiteType.OFFICE)
        card.update_metric("office_common_areas", 4)
        card.update_metric("office_hours_access", 5)
        result = card.calculate_overall_score()
        assert result.is_insufficient
        assert result.value == 0.0

    def test_unknown_field_ignored(self):
        card = TypeSpecificScoreCard(SiteType.OFFICE)
        assert card.update_metric("hospital_patient_volume", 4) is False
        assert card.rated_count() == 0

    def test_get_metric(self):
        card = TypeSpecificScoreCard(SiteType.OFFICE)
        card.update_metric("office_transit_hub", 2, "bus stop only")
        assert card.get_metric("office_transit_hub") == (2, "bus stop only")
        assert card.get_metric("office_layout_type") == (0, "")
        assert card.get_metric("bogus") == (0, "")

    @pytest.mark.parametrize("rating", [-1, 6])
    def test_out_of_range_rating(self, rating):
        card = TypeSpecificScoreCard(SiteType.OFFICE)
        with pytest.raises(InvalidRatingError):
            card.update_metric("office_common_areas", rating)

    def test_zero_clears_field(self):
        card = TypeSpecificScoreCard(SiteType.OFFICE)
        card.update_metric("office_common_areas", 4)
        card.update_metric("office_common_areas", 0)
        assert card.rated_count() == 0


class TestResidentialScoreCard:
    def test_completion_percentage(self):
        card = TypeSpecificScoreCard(SiteType.RESIDENTIAL)
        card.update_metric("residential_unit_count", 3)
        card.update_metric("residential_building_layout", 4)
        assert card.completion_percentage() == pytest.approx(2 / 7)

    def test_mean_ignores_unrated(self):
        card = TypeSpecificScoreCard(SiteType.RESIDENTIAL)
        for tag, rating in [
            ("residential_unit_count", 2),
            ("residential_occupancy_rate", 4),
            ("residential_food_service", 5),
            ("residential_hours_operation", 1),
        ]:
            card.update_metric(tag, rating)
        assert card.calculate_overall_score().value == pytest.approx(3.0)


class TestConstruction:
    def test_initial_ratings(self):
        card = TypeSpecificScoreCard(
            SiteType.HOSPITAL,
            ratings={"hospital_patient_volume": (5, "400 beds")},
        )
        assert card.get_metric("hospital_patient_volume") == (5, "400 beds")

    def test_initial_unknown_tag_raises(self):
        with pytest.raises(UnknownMetricKeyError):
            TypeSpecificScoreCard(SiteType.HOSPITAL, ratings={"office_common_areas": (3, "")})

    def test_initial_invalid_rating_raises(self):
        with pytest.raises(InvalidRatingError):
            TypeSpecificScoreCard(SiteType.SCHOOL, ratings={"school_staff_size": (9, "")})

    def test_to_dict_covers_all_fields(self):
        card = TypeSpecificScoreCard(SiteType.SCHOOL)
        card.update_metric("school_campus_layout", 3, "two buildings")
        data = card.to_dict()
        assert len(data) == 6
        assert data["school_campus_layout"] == {"rating": 3, "notes": "two buildings"}
        assert data["school_staff_size"] == {"rating": 0, "notes": ""}
