"""Core ROI calculation engine.

Takes the wizard inputs + reference data -> produces an ROIProjection per
scenario. Nothing is cached; every call recomputes from its arguments.
"""

from __future__ import annotations

import logging
from collections.abc import Collection
from typing import Optional

# Ensure all formulas are registered on import
import activate_roi.kpi_library.formulas  # noqa: F401
from activate_roi.engine.result import ProjectionInputs, ROIProjection
from activate_roi.engine.rounding import round_half_up
from activate_roi.kpi_library.registry import ValueComponent, get_all_components
from activate_roi.models.enums import Scenario
from activate_roi.models.inputs import PainInputs, Profile
from activate_roi.reference.loader import get_default_reference_data
from activate_roi.reference.schema import ReferenceData

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365


def payback_days(investment_cost: float, total_value: float) -> int:
    """Days of value needed to cover the investment, rounded half up."""
    return round_half_up(DAYS_PER_YEAR * investment_cost / total_value)


class ROICalculator:
    """Stateless engine that runs ROI projections."""

    def __init__(self, reference_data: Optional[ReferenceData] = None) -> None:
        self.reference_data = reference_data or get_default_reference_data()

    def build_inputs(
        self,
        profile: Profile,
        pain: PainInputs,
        selected_use_cases: Collection[str],
    ) -> ProjectionInputs:
        """Resolve benchmarks and constants into formula-ready inputs."""
        ref = self.reference_data
        benchmark = ref.benchmark_for(profile.industry)
        return ProjectionInputs(
            hours_per_week=pain.hours_per_week,
            hourly_cost=pain.hourly_cost,
            weeks_per_year=ref.flat_values.weeks_per_year,
            revenue_lost=pain.revenue_lost,
            benchmark_rev_impact=benchmark.rev_impact,
            use_case_count=len(set(selected_use_cases)),
            has_churn_use_case=ref.churn_use_case_id in selected_use_cases,
            churn_reduction_base=ref.flat_values.churn_reduction,
            data_quality_base=ref.flat_values.data_quality,
        )

    def compute(
        self,
        profile: Profile,
        pain: PainInputs,
        selected_use_cases: Collection[str],
        scenario: Scenario,
    ) -> ROIProjection:
        """Project annual value, cost and payback for one scenario."""
        scenario = Scenario(scenario)
        inputs = self.build_inputs(profile, pain, selected_use_cases)
        multiplier = self.reference_data.scenarios.get_multiplier(scenario.value)

        component_values: dict[str, float] = {}
        for component in get_all_components().values():
            component_values[component.id] = self._calculate_component(
                component, inputs, multiplier
            )

        total_value = sum(component_values.values())
        investment_cost = self.reference_data.pricing.cost_for(profile.size)

        return ROIProjection(
            scenario=scenario,
            multiplier=multiplier,
            component_values=component_values,
            total_value=total_value,
            investment_cost=investment_cost,
            roi_ratio=total_value / investment_cost,
            payback_days=payback_days(investment_cost, total_value),
        )

    def compute_all(
        self,
        profile: Profile,
        pain: PainInputs,
        selected_use_cases: Collection[str],
    ) -> dict[Scenario, ROIProjection]:
        """Run the projection across all three scenarios."""
        return {
            scenario: self.compute(profile, pain, selected_use_cases, scenario)
            for scenario in Scenario
        }

    @staticmethod
    def _calculate_component(
        component: ValueComponent,
        inputs: ProjectionInputs,
        multiplier: float,
    ) -> float:
        kwargs = {name: inputs.get(name) for name in component.required_inputs}
        kwargs["multiplier"] = multiplier
        value = component.formula_fn(**kwargs)
        logger.debug("Component %s = %.2f (x%.2f)", component.id, value, multiplier)
        return value


def compute_projection(
    profile: Profile,
    pain: PainInputs,
    selected_use_cases: Collection[str],
    scenario: Scenario,
    reference_data: Optional[ReferenceData] = None,
) -> ROIProjection:
    """Module-level shortcut for ``ROICalculator(reference_data).compute(...)``."""
    return ROICalculator(reference_data).compute(profile, pain, selected_use_cases, scenario)
