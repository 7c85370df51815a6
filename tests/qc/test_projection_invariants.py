"""QC: projection invariants across a spread of valid inputs."""

import itertools

import pytest

from activate_roi.models.enums import Scenario
from activate_roi.models.inputs import PainInputs, Profile

INDUSTRIES = ["SaaS", "Healthcare", "Other"]
SIZES = ["1-50", "501-1000", "5000+"]
PAINS = [
    PainInputs(hours_per_week=1, hourly_cost=50, revenue_lost=10_000),
    PainInputs(),
    PainInputs(hours_per_week=40, hourly_cost=150, revenue_lost=500_000),
]
SELECTIONS = [[], ["lead_scoring"], ["health_scoring", "ad_audiences", "ops_automation"]]

CASES = list(itertools.product(INDUSTRIES, SIZES, PAINS, SELECTIONS))


@pytest.mark.parametrize("industry,size,pain,selection", CASES)
def test_invariants(calculator, industry, size, pain, selection):
    profile = Profile(company="QC Corp", industry=industry, size=size)
    results = calculator.compute_all(profile, pain, selection)

    for p in results.values():
        components = p.time_savings + p.rev_impact + p.churn_reduction + p.data_quality
        assert p.total_value == pytest.approx(components)
        assert p.roi_ratio * p.investment_cost == pytest.approx(p.total_value)
        assert abs(p.payback_days - 365 * p.investment_cost / p.total_value) <= 0.5

    conservative = results[Scenario.CONSERVATIVE].total_value
    moderate = results[Scenario.MODERATE].total_value
    aggressive = results[Scenario.AGGRESSIVE].total_value
    assert conservative < moderate < aggressive


def test_components_linear_in_multiplier(calculator):
    profile = Profile(company="QC Corp")
    results = calculator.compute_all(profile, PainInputs(), ["health_scoring"])
    moderate = results[Scenario.MODERATE]
    for scenario, p in results.items():
        for component, value in p.component_values.items():
            assert value == pytest.approx(moderate.component_values[component] * p.multiplier)
