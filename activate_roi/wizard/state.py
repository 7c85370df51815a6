from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from activate_roi.engine.result import ROIProjection
from activate_roi.models.enums import Scenario, WizardStep
from activate_roi.models.inputs import PainInputs, Profile
from activate_roi.reference.schema import UseCase


@dataclass
class WizardState:
    """Everything the user has entered so far, plus where they are."""

    current_step: WizardStep = WizardStep.PROFILE
    profile: Profile = field(default_factory=Profile)
    pain: PainInputs = field(default_factory=PainInputs)
    selected_use_cases: list[str] = field(default_factory=list)
    scenario: Scenario = Scenario.MODERATE


@dataclass(frozen=True)
class ReportPayload:
    """Finalized report handed to the report view on Generate."""

    profile: Profile
    ae_name: str
    selected_use_cases: list[UseCase]
    pain: PainInputs
    scenario: Scenario
    projection: ROIProjection
    all_scenarios: dict[Scenario, ROIProjection]

    @property
    def total_value(self) -> float:
        return self.projection.total_value

    @property
    def roi_ratio(self) -> float:
        return self.projection.roi_ratio

    @property
    def investment_cost(self) -> float:
        return self.projection.investment_cost

    @property
    def payback_days(self) -> int:
        return self.projection.payback_days

    def to_dict(self) -> dict[str, Any]:
        """Flat JSON-ready payload: profile fields and projection fields at top level."""
        return {
            **self.profile.model_dump(),
            "ae_name": self.ae_name,
            "selected_use_cases": [uc.model_dump() for uc in self.selected_use_cases],
            "pain": self.pain.model_dump(mode="json"),
            "scenario": self.scenario.value,
            **self.projection.to_dict(),
            "all_scenarios": {
                scenario.value: projection.to_dict()
                for scenario, projection in self.all_scenarios.items()
            },
        }
