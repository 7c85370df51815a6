"""Value component formulas for the data activation ROI model.

Each function is a pure calculation with no side effects. All monetary
values are annual USD. Every component is linear in the scenario multiplier.
"""

from activate_roi.kpi_library.registry import register_component


@register_component(
    component_id="time_savings",
    label="Operational Efficiency",
    sublabel="Time savings from automation",
    description=(
        "Cost of manual data work eliminated by automated syncs. "
        "Formula: hours_per_week * hourly_cost * weeks_per_year * multiplier."
    ),
    required_inputs=["hours_per_week", "hourly_cost", "weeks_per_year"],
)
def calc_time_savings(
    hours_per_week: float,
    hourly_cost: float,
    weeks_per_year: int,
    multiplier: float,
) -> float:
    """Time_Savings = hours/week x hourly_cost x 52 x multiplier"""
    if hours_per_week < 0:
        raise ValueError("hours_per_week cannot be negative")
    if hourly_cost < 0:
        raise ValueError("hourly_cost cannot be negative")
    return hours_per_week * hourly_cost * weeks_per_year * multiplier


@register_component(
    component_id="rev_impact",
    label="Revenue Impact",
    sublabel="Better data → better selling",
    description=(
        "Revenue recovered by putting warehouse data in front of go-to-market teams. "
        "Formula: revenue_lost * (benchmark_rev_impact / 100) * multiplier * use_case_count."
    ),
    required_inputs=["revenue_lost", "benchmark_rev_impact", "use_case_count"],
)
def calc_rev_impact(
    revenue_lost: float,
    benchmark_rev_impact: float,
    use_case_count: int,
    multiplier: float,
) -> float:
    """Rev_Impact = revenue_lost x benchmark% x multiplier x |use cases|"""
    if revenue_lost < 0:
        raise ValueError("revenue_lost cannot be negative")
    if use_case_count < 0:
        raise ValueError("use_case_count cannot be negative")
    return revenue_lost * (benchmark_rev_impact / 100) * multiplier * use_case_count


@register_component(
    component_id="churn_reduction",
    label="Churn Reduction",
    sublabel="Proactive customer success",
    description=(
        "Retained revenue from acting on customer health signals. Only applies "
        "when the health scoring use case is selected. "
        "Formula: churn_reduction_base * multiplier."
    ),
    required_inputs=["has_churn_use_case", "churn_reduction_base"],
)
def calc_churn_reduction(
    has_churn_use_case: bool,
    churn_reduction_base: float,
    multiplier: float,
) -> float:
    """Churn_Reduction = 180,000 x multiplier when health scoring is selected, else 0"""
    if not has_churn_use_case:
        return 0.0
    return churn_reduction_base * multiplier


@register_component(
    component_id="data_quality",
    label="Data Quality",
    sublabel="Fewer errors, better compliance",
    description=(
        "Flat value of governed, consistent data across tools. "
        "Formula: data_quality_base * multiplier."
    ),
    required_inputs=["data_quality_base"],
)
def calc_data_quality(data_quality_base: float, multiplier: float) -> float:
    """Data_Quality = 45,000 x multiplier"""
    return data_quality_base * multiplier
