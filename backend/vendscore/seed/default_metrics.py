"""Default metric catalog.

The general set applies to every site type and carries 75% of the total
weight. Each site type adds a specialized set worth the remaining 25%, so a
fully rated site of any type weighs in at 1.0.
"""

from vendscore.models.enums import MetricCategory, SiteType
from vendscore.models.metric import MetricDefinition

GENERAL_WEIGHT_SHARE = 0.75
SPECIALIZED_WEIGHT_SHARE = 0.25

_RESTRICTION_LABELS = {
    1: "Many restrictions",
    2: "Several restrictions",
    3: "Some restrictions",
    4: "Few restrictions",
    5: "No restrictions",
}

_FOOD_SERVICE_LABELS = {
    1: "Full-service cafeteria",
    2: "Multiple food options",
    3: "Limited food options",
    4: "Basic vending only",
    5: "No food service",
}

_LAYOUT_LABELS = {
    1: "Poor layout",
    2: "Fair layout",
    3: "Good layout",
    4: "Very good layout",
    5: "Excellent layout",
}

GENERAL_METRICS = [
    {
        "key": "general_foot_traffic",
        "title": "Foot Traffic",
        "description": "Daily foot traffic volume. Higher traffic increases sales potential.",
        "category": MetricCategory.FOOT_TRAFFIC,
        "weight": 0.15,
        "is_required": True,
        "rating_labels": {1: "< 100", 2: "100-200", 3: "200-350", 4: "350-500", 5: "> 500"},
    },
    {
        "key": "general_demographics",
        "title": "Target Demographics",
        "description": "Alignment with target customer demographic profile.",
        "category": MetricCategory.DEMOGRAPHICS,
        "weight": 0.10,
        "is_required": True,
        "rating_labels": {
            1: "No Match",
            2: "Poor Match",
            3: "Fair Match",
            4: "Good Match",
            5: "Excellent Match",
        },
    },
    {
        "key": "general_competition",
        "title": "Competition",
        "description": "Proximity and strength of competing food/beverage options.",
        "category": MetricCategory.COMPETITION,
        "weight": 0.10,
        "is_required": True,
        "rating_labels": {
            1: "High competition",
            2: "Moderate-high competition",
            3: "Moderate competition",
            4: "Low competition",
            5: "Zero competition",
        },
    },
    {
        "key": "general_accessibility",
        "title": "Parking & Transit",
        "description": "Ease of access for service vehicles and logistics.",
        "category": MetricCategory.ACCESSIBILITY,
        "weight": 0.10,
        "rating_labels": {
            1: "No loading access",
            2: "Difficult access",
            3: "Acceptable access",
            4: "Good access",
            5: "Dedicated loading zone",
        },
    },
    {
        "key": "general_security",
        "title": "Security",
        "description": "Security measures and theft prevention capabilities.",
        "category": MetricCategory.SECURITY,
        "weight": 0.06,
        "rating_labels": {
            1: "No CCTV or security",
            2: "Limited security",
            3: "Part-time monitoring",
            4: "CCTV + staff presence",
            5: "Full security system",
        },
    },
    {
        "key": "general_visibility",
        "title": "Visibility & Location",
        "description": "Visibility and accessibility of potential vending locations.",
        "category": MetricCategory.LAYOUT,
        "weight": 0.08,
        "rating_labels": {
            1: "Hidden location",
            2: "Side corridor",
            3: "Secondary traffic flow",
            4: "Clear sightline",
            5: "Prime high-traffic spot",
        },
    },
    {
        "key": "general_amenities",
        "title": "Adjacent Amenities",
        "description": "Nearby amenities that drive foot traffic (elevators, mailrooms, ATMs).",
        "category": MetricCategory.AMENITIES,
        "weight": 0.04,
        "rating_labels": {
            1: "No amenities",
            2: "1 traffic booster",
            3: "2 traffic boosters",
            4: "3 traffic boosters",
            5: "4+ traffic boosters",
        },
    },
    {
        "key": "general_commission",
        "title": "Host Commission",
        "description": "Commission percentage charged by location host.",
        "category": MetricCategory.FINANCIAL,
        "weight": 0.12,
        "is_required": True,
        "rating_labels": {
            1: "Above 20%",
            2: "16-20%",
            3: "11-15%",
            4: "6-10%",
            5: "5% or lower",
        },
    },
]

SPECIALIZED_METRICS: dict[SiteType, list[dict]] = {
    SiteType.OFFICE: [
        {
            "key": "office_common_areas",
            "title": "Common Areas",
            "description": "Availability and quality of common areas like break rooms and lounges.",
            "category": MetricCategory.AMENITIES,
            "weight": 0.06,
            "rating_labels": {
                1: "None",
                2: "Small kitchenette only",
                3: "Lounge or shared break area",
                4: "Lounge + café nook",
                5: "Lounge + cafeteria / multiple hubs",
            },
        },
        {
            "key": "office_hours_access",
            "title": "Hours & Access",
            "description": "Building access hours and flexibility for vending operations.",
            "category": MetricCategory.OPERATIONS,
            "weight": 0.05,
            "rating_labels": {
                1: "9-5 only, strict access",
                2: "9-7, limited evenings",
                3: "Extended weekdays",
                4: "Weekdays + some weekends",
                5: "24/7 with tenant badge",
            },
        },
        {
            "key": "office_tenant_amenities",
            "title": "Tenant Food Amenities",
            "description": "Existing food and beverage options for tenants.",
            "category": MetricCategory.COMPETITION,
            "weight": 0.05,
            "rating_labels": {
                1: "Full cafeteria / subsidized food",
                2: "Multiple food vendors",
                3: "Limited café / snack cart",
                4: "Coffee only",
                5: "None",
            },
        },
        {
            "key": "office_transit_hub",
            "title": "Hub Proximity & Transit",
            "description": "Proximity to transportation hubs and transit options.",
            "category": MetricCategory.ACCESSIBILITY,
            "weight": 0.04,
            "rating_labels": {
                1: "Remote from hubs, poor transit",
                2: "Edge of hub / infrequent transit",
                3: "Near hub or decent transit",
                4: "In hub + good transit",
                5: "Prime hub + major transit interchange",
            },
        },
        {
            "key": "office_branding_restrictions",
            "title": "Branding Restrictions",
            "description": "Restrictions on signage and branding for vending machines.",
            "category": MetricCategory.RESTRICTIONS,
            "weight": 0.02,
            "rating_labels": {
                1: "Severe (no signage, approvals slow)",
                2: "Heavy (strict size/colour limits)",
                3: "Moderate (some constraints)",
                4: "Light (basic guidelines)",
                5: "Minimal/none",
            },
        },
        {
            "key": "office_layout_type",
            "title": "Layout Type",
            "description": "Building layout and tenant density characteristics.",
            "category": MetricCategory.LAYOUT,
            "weight": 0.03,
            "rating_labels": {
                1: "Single-tenant, low density",
                2: "Single-tenant, medium density",
                3: "Multi-tenant (2-3)",
                4: "Multi-tenant (4-6)",
                5: "Multi-tenant (7+ diverse tenants)",
            },
        },
    ],
    SiteType.HOSPITAL: [
        {
            "key": "hospital_patient_volume",
            "title": "Patient Volume",
            "description": "Daily patient volume and flow patterns.",
            "category": MetricCategory.FOOT_TRAFFIC,
            "weight": 0.06,
            "rating_labels": {
                1: "<100 patients/day",
                2: "100-300 patients/day",
                3: "300-500 patients/day",
                4: "500-800 patients/day",
                5: "800+ patients/day",
            },
        },
        {
            "key": "hospital_staff_size",
            "title": "Staff Size",
            "description": "Number of staff members and their distribution.",
            "category": MetricCategory.DEMOGRAPHICS,
            "weight": 0.04,
            "rating_labels": {
                1: "<50 staff",
                2: "50-100 staff",
                3: "100-200 staff",
                4: "200-400 staff",
                5: "400+ staff",
            },
        },
        {
            "key": "hospital_visitor_traffic",
            "title": "Visitor Traffic",
            "description": "Visitor flow patterns and volume.",
            "category": MetricCategory.FOOT_TRAFFIC,
            "weight": 0.04,
            "rating_labels": {
                1: "Minimal visitors",
                2: "Low visitor traffic",
                3: "Moderate visitor traffic",
                4: "High visitor traffic",
                5: "Very high visitor traffic",
            },
        },
        {
            "key": "hospital_food_service",
            "title": "Food Service",
            "description": "Existing food service options and competition level.",
            "category": MetricCategory.COMPETITION,
            "weight": 0.05,
            "rating_labels": _FOOD_SERVICE_LABELS,
        },
        {
            "key": "hospital_vending_restrictions",
            "title": "Vending Restrictions",
            "description": "Healthcare-specific restrictions on vending operations.",
            "category": MetricCategory.RESTRICTIONS,
            "weight": 0.03,
            "rating_labels": _RESTRICTION_LABELS,
        },
        {
            "key": "hospital_hours_operation",
            "title": "Hours of Operation",
            "description": "Facility operating hours and accessibility.",
            "category": MetricCategory.OPERATIONS,
            "weight": 0.03,
            "rating_labels": {
                1: "Limited hours",
                2: "Standard business hours",
                3: "Extended hours",
                4: "Long hours",
                5: "24/7 operation",
            },
        },
    ],
    SiteType.SCHOOL: [
        {
            "key": "school_student_population",
            "title": "Student Population",
            "description": "Number of students and enrollment patterns.",
            "category": MetricCategory.DEMOGRAPHICS,
            "weight": 0.07,
            "rating_labels": {
                1: "<500 students",
                2: "500-999 students",
                3: "1,000-1,999 students",
                4: "2,000-4,999 students",
                5: "5,000+ students",
            },
        },
        {
            "key": "school_staff_size",
            "title": "Staff Size",
            "description": "Number of faculty and staff members.",
            "category": MetricCategory.DEMOGRAPHICS,
            "weight": 0.03,
            "rating_labels": {
                1: "<50 staff",
                2: "50-99 staff",
                3: "100-199 staff",
                4: "200-399 staff",
                5: "400+ staff",
            },
        },
        {
            "key": "school_food_service",
            "title": "Food Service",
            "description": "Existing cafeteria and food service competition.",
            "category": MetricCategory.COMPETITION,
            "weight": 0.05,
            "rating_labels": _FOOD_SERVICE_LABELS,
        },
        {
            "key": "school_vending_restrictions",
            "title": "Vending Restrictions",
            "description": "Educational institution restrictions on vending.",
            "category": MetricCategory.RESTRICTIONS,
            "weight": 0.04,
            "rating_labels": _RESTRICTION_LABELS,
        },
        {
            "key": "school_hours_operation",
            "title": "Hours of Operation",
            "description": "School operating hours and access patterns.",
            "category": MetricCategory.OPERATIONS,
            "weight": 0.03,
            "rating_labels": {
                1: "Limited hours",
                2: "Standard school hours",
                3: "Extended hours",
                4: "Long hours",
                5: "24/7 access",
            },
        },
        {
            "key": "school_campus_layout",
            "title": "Campus Layout",
            "description": "Campus layout and building distribution for optimal placement.",
            "category": MetricCategory.LAYOUT,
            "weight": 0.03,
            "rating_labels": _LAYOUT_LABELS,
        },
    ],
    SiteType.RESIDENTIAL: [
        {
            "key": "residential_unit_count",
            "title": "Unit Count",
            "description": "Number of residential units in the building.",
            "category": MetricCategory.DEMOGRAPHICS,
            "weight": 0.05,
            "rating_labels": {
                1: "<100 units",
                2: "100-149 units",
                3: "150-249 units",
                4: "250-349 units",
                5: "350+ units",
            },
        },
        {
            "key": "residential_occupancy_rate",
            "title": "Occupancy Rate",
            "description": "Current occupancy rate and tenant stability.",
            "category": MetricCategory.DEMOGRAPHICS,
            "weight": 0.03,
            "rating_labels": {1: "<80%", 2: "80-89%", 3: "90-94%", 4: "95-97%", 5: "98-100%"},
        },
        {
            "key": "residential_demographics",
            "title": "Resident Demographics",
            "description": "Demographic profile and purchasing patterns of residents.",
            "category": MetricCategory.DEMOGRAPHICS,
            "weight": 0.04,
            "rating_labels": {
                1: "Limited appeal",
                2: "Some appeal",
                3: "Moderate appeal",
                4: "High appeal",
                5: "Very high appeal",
            },
        },
        {
            "key": "residential_food_service",
            "title": "Food Service",
            "description": "Existing food service options in the building.",
            "category": MetricCategory.COMPETITION,
            "weight": 0.04,
            "rating_labels": {
                1: "Full-service options",
                2: "Multiple alternatives",
                3: "Limited alternatives",
                4: "Basic options only",
                5: "No food service",
            },
        },
        {
            "key": "residential_vending_restrictions",
            "title": "Vending Restrictions",
            "description": "Building management restrictions on vending operations.",
            "category": MetricCategory.RESTRICTIONS,
            "weight": 0.03,
            "rating_labels": _RESTRICTION_LABELS,
        },
        {
            "key": "residential_hours_operation",
            "title": "Hours of Operation",
            "description": "Building access hours and resident activity patterns.",
            "category": MetricCategory.OPERATIONS,
            "weight": 0.03,
            "rating_labels": {
                1: "Limited hours",
                2: "Standard hours",
                3: "Extended hours",
                4: "Long hours",
                5: "24/7 access",
            },
        },
        {
            "key": "residential_building_layout",
            "title": "Building Layout",
            "description": "Building layout and common area distribution.",
            "category": MetricCategory.LAYOUT,
            "weight": 0.03,
            "rating_labels": _LAYOUT_LABELS,
        },
    ],
}


def specialized_keys(site_type: SiteType) -> list[str]:
    """Keys of the specialized set, in catalog order."""
    return [data["key"] for data in SPECIALIZED_METRICS[SiteType(site_type)]]


def default_metric_definitions() -> list[MetricDefinition]:
    """Build the default catalog: general set first, then one set per site type."""
    definitions = [MetricDefinition(**data) for data in GENERAL_METRICS]
    for site_type, metrics in SPECIALIZED_METRICS.items():
        for data in metrics:
            definitions.append(MetricDefinition(applicable_types=frozenset({site_type}), **data))
    return definitions
