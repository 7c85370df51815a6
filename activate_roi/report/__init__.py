from .animation import animated_value, ease_out_cubic
from .builder import (
    PaybackPoint,
    ScenarioRow,
    ValueCategory,
    executive_summary,
    net_annual_value,
    payback_curve,
    payback_months,
    scenario_comparison,
    value_categories,
)

__all__ = [
    "PaybackPoint",
    "ScenarioRow",
    "ValueCategory",
    "animated_value",
    "ease_out_cubic",
    "executive_summary",
    "net_annual_value",
    "payback_curve",
    "payback_months",
    "scenario_comparison",
    "value_categories",
]
