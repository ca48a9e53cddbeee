import enum


class SiteType(str, enum.Enum):
    OFFICE = "office"
    HOSPITAL = "hospital"
    SCHOOL = "school"
    RESIDENTIAL = "residential"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class MetricCategory(str, enum.Enum):
    """Grouping tag for metrics. Display only, no scoring logic."""

    FOOT_TRAFFIC = "foot_traffic"
    DEMOGRAPHICS = "demographics"
    COMPETITION = "competition"
    ACCESSIBILITY = "accessibility"
    SECURITY = "security"
    AMENITIES = "amenities"
    OPERATIONS = "operations"
    FINANCIAL = "financial"
    LAYOUT = "layout"
    RESTRICTIONS = "restrictions"

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()


class Decision(str, enum.Enum):
    GREENLIGHT = "greenlight"
    WATCHLIST = "watchlist"
    PASS = "pass"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class ScoreScale(str, enum.Enum):
    FIVE_POINT = "five_point"  # 0-5
    UNIT = "unit"  # 0-1

    @property
    def maximum(self) -> float:
        return 5.0 if self is ScoreScale.FIVE_POINT else 1.0


class CombinationRule(str, enum.Enum):
    """How the component scores are reduced to the score that gets classified.

    ``CATALOG_WEIGHTED`` is canonical; the other two reproduce older views and
    are kept for comparison only.
    """

    CATALOG_WEIGHTED = "catalog_weighted"
    BLENDED_MEAN = "blended_mean"
    DASHBOARD_60_40 = "dashboard_60_40"
