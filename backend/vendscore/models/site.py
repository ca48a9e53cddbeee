import uuid
from dataclasses import dataclass, field
from datetime import datetime

from vendscore.models.enums import SiteType
from vendscore.models.financial import FinancialRecord
from vendscore.models.metric import SiteMetrics
from vendscore.models.scorecard import TypeSpecificScoreCard
from vendscore.utils.date_helpers import utcnow


def new_site_id() -> str:
    return str(uuid.uuid4())


@dataclass
class Site:
    """A candidate placement and everything rated about it.

    Owns exactly one SiteMetrics, one FinancialRecord and the one scorecard
    matching its site type.
    """

    name: str
    address: str
    site_type: SiteType
    metrics: SiteMetrics
    scorecard: TypeSpecificScoreCard
    financials: FinancialRecord = field(default_factory=FinancialRecord)
    comment: str = ""
    id: str = field(default_factory=new_site_id)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def touch(self) -> None:
        self.updated_at = utcnow()
