from .calculator import ROICalculator, compute_projection, payback_days
from .rounding import round_half_up
from .result import ProjectionInputs, ROIProjection

__all__ = [
    "ProjectionInputs",
    "ROICalculator",
    "ROIProjection",
    "compute_projection",
    "payback_days",
    "round_half_up",
]
