# Ensure all formulas are registered on import
from . import formulas  # noqa: F401
from .registry import ValueComponent, get_all_components, get_component, register_component

__all__ = ["ValueComponent", "get_all_components", "get_component", "register_component"]
