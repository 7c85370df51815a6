"""Immutable projection data structures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from activate_roi.models.enums import Scenario


@dataclass(frozen=True)
class ProjectionInputs:
    """Flat, formula-ready view of the wizard inputs for one calculation."""

    hours_per_week: float
    hourly_cost: float
    weeks_per_year: int
    revenue_lost: float
    benchmark_rev_impact: float
    use_case_count: int
    has_churn_use_case: bool
    churn_reduction_base: float
    data_quality_base: float

    def get(self, field_name: str) -> Any:
        return getattr(self, field_name)


@dataclass(frozen=True)
class ROIProjection:
    """Annual value projection for a single scenario."""

    scenario: Scenario
    multiplier: float
    component_values: dict[str, float]
    total_value: float
    investment_cost: float
    roi_ratio: float
    payback_days: int

    @property
    def time_savings(self) -> float:
        return self.component_values.get("time_savings", 0.0)

    @property
    def rev_impact(self) -> float:
        return self.component_values.get("rev_impact", 0.0)

    @property
    def churn_reduction(self) -> float:
        return self.component_values.get("churn_reduction", 0.0)

    @property
    def data_quality(self) -> float:
        return self.component_values.get("data_quality", 0.0)

    def to_dict(self) -> dict[str, Any]:
        """Flattened projection fields, as merged into the report payload."""
        return {
            **self.component_values,
            "total_value": self.total_value,
            "investment_cost": self.investment_cost,
            "roi_ratio": self.roi_ratio,
            "payback_days": self.payback_days,
        }
