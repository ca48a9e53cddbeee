"""
Type-specific scorecards -- the legacy fixed-field rating model.

One scorecard per site, tagged with its site type. The tag selects a fixed
field schema (``SCORECARD_FIELDS``); fields cannot be added or removed after
construction. Each field holds a 0-5 rating plus notes, and the score is the
plain mean of rated fields once at least three are rated.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from dataclasses import dataclass

import structlog

from vendscore.exceptions import InvalidRatingError, UnknownMetricKeyError
from vendscore.models.enums import SiteType
from vendscore.models.results import ScoreResult
from vendscore.services import aggregator

logger = structlog.get_logger(__name__)

MAX_FIELD_RATING = 5
DEFAULT_MINIMUM_RATED = 3


@dataclass(frozen=True)
class ScoreCardField:
    tag: str
    title: str


SCORECARD_FIELDS: dict[SiteType, tuple[ScoreCardField, ...]] = {
    SiteType.OFFICE: (
        ScoreCardField("office_common_areas", "Common Areas"),
        ScoreCardField("office_hours_access", "Hours & Access"),
        ScoreCardField("office_tenant_amenities", "Tenant Amenities"),
        ScoreCardField("office_transit_hub", "Hub Proximity & Transit"),
        ScoreCardField("office_branding_restrictions", "Branding Restrictions"),
        ScoreCardField("office_layout_type", "Layout Type"),
    ),
    SiteType.HOSPITAL: (
        ScoreCardField("hospital_patient_volume", "Patient Volume"),
        ScoreCardField("hospital_staff_size", "Staff Size"),
        ScoreCardField("hospital_visitor_traffic", "Visitor Traffic"),
        ScoreCardField("hospital_food_service", "Food Service"),
        ScoreCardField("hospital_vending_restrictions", "Vending Restrictions"),
        ScoreCardField("hospital_hours_operation", "Hours of Operation"),
    ),
    SiteType.SCHOOL: (
        ScoreCardField("school_student_population", "Student Population"),
        ScoreCardField("school_staff_size", "Staff Size"),
        ScoreCardField("school_food_service", "Food Service"),
        ScoreCardField("school_vending_restrictions", "Vending Restrictions"),
        ScoreCardField("school_hours_operation", "Hours of Operation"),
        ScoreCardField("school_campus_layout", "Campus Layout"),
    ),
    SiteType.RESIDENTIAL: (
        ScoreCardField("residential_unit_count", "Unit Count"),
        ScoreCardField("residential_occupancy_rate", "Occupancy Rate"),
        ScoreCardField("residential_demographics", "Demographics"),
        ScoreCardField("residential_food_service", "Food Service"),
        ScoreCardField("residential_vending_restrictions", "Vending Restrictions"),
        ScoreCardField("residential_hours_operation", "Hours of Operation"),
        ScoreCardField("residential_building_layout", "Building Layout"),
    ),
}


@dataclass
class FieldRating:
    rating: int = 0
    notes: str = ""


class TypeSpecificScoreCard:
    def __init__(
        self,
        site_type: SiteType,
        ratings: Mapping[str, tuple[int, str]] | None = None,
    ) -> None:
        self.site_type = SiteType(site_type)
        self.fields = SCORECARD_FIELDS[self.site_type]
        self._entries: dict[str, FieldRating] = {f.tag: FieldRating() for f in self.fields}
        self._lock = threading.Lock()

        for tag, (rating, notes) in (ratings or {}).items():
            if tag not in self._entries:
                raise UnknownMetricKeyError(tag, scope=f"{self.site_type.value} scorecard")
            self._validate(tag, rating)
            self._entries[tag] = FieldRating(rating, notes)

    def __repr__(self) -> str:
        return (
            f"TypeSpecificScoreCard(site_type={self.site_type.value!r}, "
            f"rated={self.rated_count()}/{self.field_count()})"
        )

    @property
    def field_tags(self) -> list[str]:
        return [f.tag for f in self.fields]

    @staticmethod
    def _validate(tag: str, rating: int) -> None:
        if not 0 <= rating <= MAX_FIELD_RATING:
            raise InvalidRatingError(tag, rating, 1, MAX_FIELD_RATING)

    def update_metric(self, field_tag: str, rating: int, notes: str = "") -> bool:
        """Set a field's rating and notes. Returns False for unknown tags."""
        if field_tag not in self._entries:
            logger.warning(
                "scorecard.unknown_field",
                site_type=self.site_type.value,
                field_tag=field_tag,
            )
            return False
        self._validate(field_tag, rating)
        with self._lock:
            self._entries[field_tag] = FieldRating(rating, notes)
        return True

    def get_metric(self, field_tag: str) -> tuple[int, str]:
        entry = self._entries.get(field_tag)
        if entry is None:
            return 0, ""
        return entry.rating, entry.notes

    def ratings(self) -> dict[str, int]:
        return {tag: entry.rating for tag, entry in self._entries.items()}

    def calculate_overall_score(self, minimum_rated: int = DEFAULT_MINIMUM_RATED) -> ScoreResult:
        return aggregator.mean_score(self.ratings().values(), minimum_rated)

    def rated_count(self) -> int:
        return sum(1 for entry in self._entries.values() if entry.rating > 0)

    def field_count(self) -> int:
        return len(self.fields)

    def completion_percentage(self) -> float:
        return self.rated_count() / self.field_count()

    def to_dict(self) -> dict[str, dict]:
        return {
            tag: {"rating": entry.rating, "notes": entry.notes}
            for tag, entry in self._entries.items()
        }
