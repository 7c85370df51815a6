from .machine import WizardStateMachine
from .state import ReportPayload, WizardState
from .steps import STEP_TABLE, StepDefinition, step_label

__all__ = [
    "STEP_TABLE",
    "ReportPayload",
    "StepDefinition",
    "WizardState",
    "WizardStateMachine",
    "step_label",
]
