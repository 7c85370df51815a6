"""Derived views over a generated report payload.

These feed the report renderer: value breakdown, payback curve, scenario
comparison and the executive summary sentence. All are recomputed from the
payload on each call.
"""

from __future__ import annotations

from dataclasses import dataclass

import activate_roi.kpi_library.formulas  # noqa: F401
from activate_roi.engine.rounding import round_half_up
from activate_roi.kpi_library.registry import get_all_components
from activate_roi.models.enums import Scenario
from activate_roi.wizard.state import ReportPayload

DAYS_PER_MONTH = 30
PAYBACK_MONTHS = 12


@dataclass(frozen=True)
class ValueCategory:
    id: str
    label: str
    sublabel: str
    value: float
    share_pct: int


@dataclass(frozen=True)
class PaybackPoint:
    month: str
    month_num: int
    value: int
    cost: float


@dataclass(frozen=True)
class ScenarioRow:
    scenario: Scenario
    roi_ratio: float
    total_value: float
    payback_days: int
    selected: bool


def value_categories(payload: ReportPayload) -> list[ValueCategory]:
    """Non-zero value components with their whole-percent share of total value."""
    total = payload.total_value
    categories: list[ValueCategory] = []
    for component in get_all_components().values():
        value = payload.projection.component_values.get(component.id, 0.0)
        if value <= 0:
            continue
        categories.append(
            ValueCategory(
                id=component.id,
                label=component.label,
                sublabel=component.sublabel,
                value=value,
                share_pct=round_half_up(value / total * 100),
            )
        )
    return categories


def payback_curve(payload: ReportPayload) -> list[PaybackPoint]:
    """Cumulative value month by month against the flat annual investment."""
    monthly = payload.total_value / PAYBACK_MONTHS
    return [
        PaybackPoint(
            month="Start" if i == 0 else f"M{i}",
            month_num=i,
            value=round_half_up(monthly * i),
            cost=payload.investment_cost,
        )
        for i in range(PAYBACK_MONTHS + 1)
    ]


def payback_months(payload: ReportPayload) -> float:
    return payload.payback_days / DAYS_PER_MONTH


def scenario_comparison(payload: ReportPayload) -> list[ScenarioRow]:
    return [
        ScenarioRow(
            scenario=scenario,
            roi_ratio=projection.roi_ratio,
            total_value=projection.total_value,
            payback_days=projection.payback_days,
            selected=scenario == payload.scenario,
        )
        for scenario, projection in payload.all_scenarios.items()
    ]


def net_annual_value(payload: ReportPayload) -> float:
    """Total annual value left after the annual investment."""
    return payload.total_value - payload.investment_cost


def executive_summary(payload: ReportPayload) -> str:
    """One-paragraph summary naming only the components that contribute."""
    projection = payload.projection
    parts = [f"save ${round_half_up(projection.time_savings):,} in operational costs"]
    if projection.rev_impact > 0:
        parts.append(f"generate ${round_half_up(projection.rev_impact):,} in incremental revenue")
    if projection.churn_reduction > 0:
        parts.append(
            f"reduce churn-related losses by ${round_half_up(projection.churn_reduction):,}"
        )

    return (
        f"By activating warehouse data, {payload.profile.company} is projected to "
        f"{', '.join(parts)}, resulting in a total annual value of "
        f"${round_half_up(projection.total_value):,} against an investment of "
        f"${round_half_up(projection.investment_cost):,}. That is a "
        f"{round_half_up(projection.roi_ratio, 1):.1f}:1 ROI with payback in "
        f"{projection.payback_days} days."
    )
