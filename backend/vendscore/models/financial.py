from __future__ import annotations

import threading
from dataclasses import dataclass, field


def non_negative(name: str, value: float) -> float:
    if value < 0:
        raise ValueError(f"{name} cannot be negative (got {value})")
    return value


@dataclass
class FinancialRecord:
    """Projected economics of a placement. All figures default to 0 (not entered)."""

    revenue_projection: float = 0.0
    cost_projection: float = 0.0
    profit_margin: float = 0.0  # percent
    payback_period: int = 0  # months
    roi_percentage: float = 0.0

    revenue_notes: str = ""
    cost_notes: str = ""
    profit_notes: str = ""
    payback_notes: str = ""
    roi_notes: str = ""

    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        non_negative("revenue_projection", self.revenue_projection)
        non_negative("cost_projection", self.cost_projection)
        non_negative("profit_margin", self.profit_margin)
        non_negative("payback_period", self.payback_period)
        non_negative("roi_percentage", self.roi_percentage)

    @property
    def net_profit(self) -> float:
        return self.revenue_projection - self.cost_projection

    @property
    def profit_margin_from_projection(self) -> float:
        if self.revenue_projection <= 0:
            return 0.0
        return self.net_profit / self.revenue_projection * 100

    def has_figures(self) -> bool:
        return any(
            value > 0
            for value in (
                self.revenue_projection,
                self.cost_projection,
                self.profit_margin,
                self.payback_period,
                self.roi_percentage,
            )
        )

    def update_revenue(self, value: float, notes: str = "") -> None:
        with self._lock:
            self.revenue_projection = non_negative("revenue_projection", value)
            self.revenue_notes = notes
            self._recalculate()

    def update_cost(self, value: float, notes: str = "") -> None:
        with self._lock:
            self.cost_projection = non_negative("cost_projection", value)
            self.cost_notes = notes
            self._recalculate()

    def update_profit_margin(self, value: float, notes: str = "") -> None:
        with self._lock:
            self.profit_margin = non_negative("profit_margin", value)
            self.profit_notes = notes

    def update_payback_period(self, months: int, notes: str = "") -> None:
        with self._lock:
            self.payback_period = int(non_negative("payback_period", months))
            self.payback_notes = notes

    def update_roi(self, value: float, notes: str = "") -> None:
        with self._lock:
            self.roi_percentage = non_negative("roi_percentage", value)
            self.roi_notes = notes

    def _recalculate(self) -> None:
        # Derived figures follow the projections; a loss clamps to 0 (not entered)
        if self.revenue_projection > 0:
            self.profit_margin = max(0.0, self.net_profit / self.revenue_projection * 100)
        if self.cost_projection > 0:
            self.roi_percentage = max(0.0, self.net_profit / self.cost_projection * 100)
