"""Plain-data snapshots exchanged with external storage.

The engine never persists anything itself; hosts call ``to_snapshot`` after a
mutation, store the JSON, and hand it back through ``load_site``.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from vendscore.models.enums import SiteType


class MetricInstanceSnapshot(BaseModel):
    definition_key: str
    rating: int = Field(0, ge=0)
    notes: str = ""
    rated_at: datetime | None = None


class ScoreCardEntrySnapshot(BaseModel):
    rating: int = Field(0, ge=0, le=5)
    notes: str = ""


class ScoreCardSnapshot(BaseModel):
    site_type: SiteType
    entries: dict[str, ScoreCardEntrySnapshot] = Field(default_factory=dict)


class FinancialSnapshot(BaseModel):
    revenue_projection: float = Field(0.0, ge=0)
    cost_projection: float = Field(0.0, ge=0)
    profit_margin: float = Field(0.0, ge=0)
    payback_period: int = Field(0, ge=0)
    roi_percentage: float = Field(0.0, ge=0)
    revenue_notes: str = ""
    cost_notes: str = ""
    profit_notes: str = ""
    payback_notes: str = ""
    roi_notes: str = ""


class SiteSnapshot(BaseModel):
    id: str
    name: str
    address: str
    site_type: SiteType
    comment: str = ""
    created_at: datetime
    updated_at: datetime
    metrics_last_updated: datetime
    metrics: list[MetricInstanceSnapshot] = Field(default_factory=list)
    scorecard: ScoreCardSnapshot
    financials: FinancialSnapshot = Field(default_factory=FinancialSnapshot)
