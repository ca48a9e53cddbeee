"""Tests for the financial record and its derived figures."""

import pytest

from vendscore.models.financial import FinancialRecord


@pytest.fixture
def record():
    return FinancialRecord()


class TestDefaults:
    def test_all_figures_zero(self, record):
        assert record.revenue_projection == 0.0
        assert record.payback_period == 0
        assert record.has_figures() is False

    def test_negative_figure_rejected(self):
        with pytest.raises(ValueError):
            FinancialRecord(cost_projection=-1)

    def test_any_figure_counts(self):
        assert FinancialRecord(payback_period=12).has_figures() is True


class TestRecalculation:
    def test_revenue_then_cost(self, record):
        record.update_revenue(10_000)
        record.update_cost(4_000)
        assert record.net_profit == 6_000
        assert record.profit_margin == pytest.approx(60.0)
        assert record.roi_percentage == pytest.approx(150.0)

    def test_cost_without_revenue_leaves_margin(self, record):
        record.update_cost(4_000)
        assert record.profit_margin == 0.0
        # Loss of 4,000 on 4,000 cost clamps ROI to 0
        assert record.roi_percentage == 0.0

    def test_loss_clamps_margin(self, record):
        record.update_revenue(1_000)
        record.update_cost(3_000)
        assert record.net_profit == -2_000
        assert record.profit_margin == 0.0
        assert record.roi_percentage == 0.0

    def test_margin_from_projection_not_clamped(self, record):
        record.update_revenue(1_000)
        record.update_cost(3_000)
        assert record.profit_margin_from_projection == pytest.approx(-200.0)

    def test_direct_updates_override(self, record):
        record.update_revenue(10_000)
        record.update_profit_margin(12.5, "after commission")
        record.update_roi(30)
        assert record.profit_margin == 12.5
        assert record.profit_notes == "after commission"
        assert record.roi_percentage == 30

    def test_payback_period_months(self, record):
        record.update_payback_period(18, "machine lease")
        assert record.payback_period == 18
        assert record.payback_notes == "machine lease"

    def test_negative_update_rejected(self, record):
        with pytest.raises(ValueError):
            record.update_revenue(-5)
