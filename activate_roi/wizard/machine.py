"""WizardStateMachine: owns the wizard's input state and step transitions."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from activate_roi.config.settings import Settings
from activate_roi.engine.calculator import ROICalculator
from activate_roi.engine.result import ROIProjection
from activate_roi.models.enums import Scenario, WizardStep
from activate_roi.models.inputs import PainInputs, Profile
from activate_roi.reference.loader import get_default_reference_data
from activate_roi.reference.schema import ReferenceData

from .state import ReportPayload, WizardState
from .steps import (
    gate_passes,
    step_after_advance,
    step_after_jump,
    step_after_retreat,
    step_label,
)

logger = logging.getLogger(__name__)

ReportHandler = Callable[[ReportPayload], None]


class WizardStateMachine:
    """Five-step ROI builder flow.

    Field updates are validated against the reference data; blocked
    transitions are no-ops that return False. Projections are computed on
    every call and never stored.
    """

    def __init__(
        self,
        reference_data: Optional[ReferenceData] = None,
        settings: Optional[Settings] = None,
        on_generate: Optional[ReportHandler] = None,
    ) -> None:
        self.reference_data = reference_data or get_default_reference_data()
        self.settings = settings or Settings()
        self.calculator = ROICalculator(self.reference_data)
        self.on_generate = on_generate
        self.state = WizardState()

    # -- navigation ---------------------------------------------------------

    @property
    def current_step(self) -> WizardStep:
        return self.state.current_step

    @property
    def current_label(self) -> str:
        return step_label(self.state.current_step)

    def can_advance(self) -> bool:
        return gate_passes(self.state)

    def advance(self) -> bool:
        if not self.can_advance():
            logger.debug("Advance blocked on step %s", self.state.current_step.name)
            return False
        return self._move_to(step_after_advance(self.state))

    def retreat(self) -> bool:
        return self._move_to(step_after_retreat(self.state))

    def jump_to(self, step: int) -> bool:
        return self._move_to(step_after_jump(self.state, step))

    def _move_to(self, target: WizardStep) -> bool:
        if target == self.state.current_step:
            return False
        logger.debug("Wizard step %s -> %s", self.state.current_step.name, target.name)
        self.state.current_step = target
        return True

    # -- field updates ------------------------------------------------------

    def update_profile(self, **fields: Any) -> Profile:
        self.state.profile = Profile.model_validate(
            {**self.state.profile.model_dump(), **fields},
            context={"reference_data": self.reference_data},
        )
        return self.state.profile

    def update_pain(self, **fields: Any) -> PainInputs:
        self.state.pain = PainInputs.model_validate(
            {**self.state.pain.model_dump(), **fields},
            context={"reference_data": self.reference_data},
        )
        return self.state.pain

    def toggle_use_case(self, use_case_id: str) -> list[str]:
        """Add the use case if absent, remove it if present."""
        if self.reference_data.get_use_case(use_case_id) is None:
            raise ValueError(
                f"Unknown use case '{use_case_id}'; "
                f"expected one of {self.reference_data.use_case_ids()}"
            )
        selected = self.state.selected_use_cases
        if use_case_id in selected:
            self.state.selected_use_cases = [uc for uc in selected if uc != use_case_id]
        else:
            self.state.selected_use_cases = [*selected, use_case_id]
        return list(self.state.selected_use_cases)

    def set_scenario(self, scenario: Scenario | str) -> Scenario:
        self.state.scenario = Scenario(scenario)
        return self.state.scenario

    def reset(self) -> None:
        """Back to the initial step with default inputs."""
        self.state = WizardState()

    # -- projections --------------------------------------------------------

    def preview(self, scenario: Scenario | str | None = None) -> ROIProjection:
        """What-if projection for any scenario without changing the selection."""
        chosen = Scenario(scenario) if scenario is not None else self.state.scenario
        return self.calculator.compute(
            self.state.profile, self.state.pain, self.state.selected_use_cases, chosen
        )

    def preview_all(self) -> dict[Scenario, ROIProjection]:
        return self.calculator.compute_all(
            self.state.profile, self.state.pain, self.state.selected_use_cases
        )

    def generate(self) -> ReportPayload:
        """Package the finalized report and hand it to the report view."""
        if self.state.current_step != WizardStep.REVIEW:
            raise ValueError(
                f"generate() is only available on the {step_label(WizardStep.REVIEW)!r} step, "
                f"current step is {self.current_label!r}"
            )

        all_scenarios = self.preview_all()
        payload = ReportPayload(
            profile=self.state.profile,
            ae_name=self.settings.ae_name,
            selected_use_cases=[
                self.reference_data.get_use_case(uc_id)
                for uc_id in self.state.selected_use_cases
            ],
            pain=self.state.pain,
            scenario=self.state.scenario,
            projection=self.preview(),
            all_scenarios=all_scenarios,
        )
        logger.info(
            "Generated ROI report for %s: %s scenario, %.1f:1 ROI",
            payload.profile.company,
            payload.scenario.value,
            payload.roi_ratio,
        )
        if self.on_generate is not None:
            self.on_generate(payload)
        return payload
