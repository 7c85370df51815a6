"""Step transition table for the five-step ROI wizard.

Each step declares its label, the gate that must pass before the user may
leave it forwards, and where advance/retreat lead. The functions here are
pure: they read a WizardState and return the step it should move to.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from activate_roi.models.enums import WizardStep

from .state import WizardState


def _always(state: WizardState) -> bool:
    return True


def _company_named(state: WizardState) -> bool:
    return state.profile.is_named


def _use_case_selected(state: WizardState) -> bool:
    return len(state.selected_use_cases) > 0


@dataclass(frozen=True)
class StepDefinition:
    step: WizardStep
    label: str
    gate: Callable[[WizardState], bool]
    next_step: WizardStep
    prev_step: WizardStep


STEP_TABLE: dict[WizardStep, StepDefinition] = {
    WizardStep.PROFILE: StepDefinition(
        WizardStep.PROFILE, "Prospect Profile", _company_named,
        WizardStep.USE_CASES, WizardStep.PROFILE,
    ),
    WizardStep.USE_CASES: StepDefinition(
        WizardStep.USE_CASES, "Use Cases", _use_case_selected,
        WizardStep.PAIN, WizardStep.PROFILE,
    ),
    WizardStep.PAIN: StepDefinition(
        WizardStep.PAIN, "Quantify Pain", _always,
        WizardStep.ASSUMPTIONS, WizardStep.USE_CASES,
    ),
    WizardStep.ASSUMPTIONS: StepDefinition(
        WizardStep.ASSUMPTIONS, "Assumptions", _always,
        WizardStep.REVIEW, WizardStep.PAIN,
    ),
    # Last step: advancing stays put, Generate is the way out
    WizardStep.REVIEW: StepDefinition(
        WizardStep.REVIEW, "Generate", _always,
        WizardStep.REVIEW, WizardStep.ASSUMPTIONS,
    ),
}


def step_label(step: WizardStep) -> str:
    return STEP_TABLE[step].label


def gate_passes(state: WizardState) -> bool:
    """Whether the current step's required input is present."""
    return STEP_TABLE[state.current_step].gate(state)


def step_after_advance(state: WizardState) -> WizardStep:
    if not gate_passes(state):
        return state.current_step
    return STEP_TABLE[state.current_step].next_step


def step_after_retreat(state: WizardState) -> WizardStep:
    return STEP_TABLE[state.current_step].prev_step


def step_after_jump(state: WizardState, target: int) -> WizardStep:
    """Jumping is only allowed back to a step already reached."""
    if target < WizardStep.PROFILE or target > state.current_step:
        return state.current_step
    return WizardStep(target)
