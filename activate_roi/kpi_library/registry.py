from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

# Global registry -- maps component_id -> ValueComponent, in registration order
_REGISTRY: dict[str, ValueComponent] = {}


@dataclass(frozen=True)
class ValueComponent:
    """One additive term of the annual value projection."""

    id: str
    label: str
    sublabel: str
    description: str
    required_inputs: list[str]  # ProjectionInputs field names
    formula_fn: Callable[..., float]


def register_component(
    component_id: str,
    label: str,
    sublabel: str,
    description: str,
    required_inputs: list[str],
) -> Callable:
    """Decorator to register a formula function as a value component.

    Every formula also receives the scenario ``multiplier`` keyword.
    """

    def decorator(fn: Callable[..., float]) -> Callable[..., float]:
        definition = ValueComponent(
            id=component_id,
            label=label,
            sublabel=sublabel,
            description=description,
            required_inputs=required_inputs,
            formula_fn=fn,
        )
        _REGISTRY[component_id] = definition
        return fn

    return decorator


def get_component(component_id: str) -> Optional[ValueComponent]:
    """Look up a value component by ID."""
    return _REGISTRY.get(component_id)


def get_all_components() -> dict[str, ValueComponent]:
    """Return the full registry (read-only copy)."""
    return dict(_REGISTRY)
