"""Regression: the reference 201-500 employee SaaS prospect.

Inputs: 15 hrs/week at $100/hr, $50K revenue lost, one non-churn use case,
SaaS benchmark 20%, investment $36K.
"""

import pytest

from activate_roi.models.enums import Scenario


@pytest.fixture
def projections(calculator, saas_profile, default_pain):
    return calculator.compute_all(saas_profile, default_pain, ["lead_scoring"])


class TestModerate:
    def test_components(self, projections):
        p = projections[Scenario.MODERATE]
        assert p.time_savings == pytest.approx(78_000)
        assert p.rev_impact == pytest.approx(10_000)
        assert p.churn_reduction == 0.0
        assert p.data_quality == pytest.approx(45_000)

    def test_totals(self, projections):
        p = projections[Scenario.MODERATE]
        assert p.total_value == pytest.approx(133_000)
        assert p.investment_cost == 36_000
        assert p.roi_ratio == pytest.approx(3.694, abs=1e-3)
        assert p.payback_days == 99


class TestAggressive:
    def test_components(self, projections):
        p = projections[Scenario.AGGRESSIVE]
        assert p.time_savings == pytest.approx(117_000)
        assert p.rev_impact == pytest.approx(15_000)
        assert p.data_quality == pytest.approx(67_500)

    def test_totals(self, projections):
        p = projections[Scenario.AGGRESSIVE]
        assert p.total_value == pytest.approx(199_500)
        assert p.roi_ratio == pytest.approx(5.54, abs=1e-2)
        assert p.payback_days == 66


class TestConservative:
    def test_totals(self, projections):
        p = projections[Scenario.CONSERVATIVE]
        # 46,800 + 6,000 + 0 + 27,000
        assert p.total_value == pytest.approx(79_800)
        assert p.payback_days == 165
