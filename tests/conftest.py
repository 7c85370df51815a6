"""Shared test fixtures for the ActivateROI test suite."""

from datetime import date

import pytest

from activate_roi.config.settings import Settings
from activate_roi.engine.calculator import ROICalculator
from activate_roi.models.enums import DealStage, ReportStatus
from activate_roi.models.inputs import PainInputs, Profile
from activate_roi.models.report_record import ReportRecord
from activate_roi.reference.loader import load_reference_data
from activate_roi.wizard.machine import WizardStateMachine


def make_record(
    id="rpt-x",
    prospect="Acme",
    industry="SaaS",
    ae="Kevin Park",
    total_value=100_000,
    roi_ratio=3.0,
    created=date(2026, 10, 1),
    **overrides,
):
    """Helper to create a ReportRecord with minimal boilerplate.

    Extra keyword arguments go straight to the model, so misspelled fields fail.
    """
    return ReportRecord(
        id=id,
        prospect=prospect,
        industry=industry,
        ae=ae,
        use_cases=overrides.pop("use_cases", ["Lead Scoring"]),
        total_value=total_value,
        roi_ratio=roi_ratio,
        deal_stage=overrides.pop("deal_stage", DealStage.PROPOSAL),
        status=overrides.pop("status", ReportStatus.SENT),
        created=created,
        **overrides,
    )


@pytest.fixture
def reference_data():
    return load_reference_data()


@pytest.fixture
def calculator(reference_data):
    return ROICalculator(reference_data)


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def saas_profile() -> Profile:
    """201-500 employee SaaS prospect: $36K investment, 20% revenue benchmark."""
    return Profile(company="Acme Analytics", industry="SaaS", size="201-500")


@pytest.fixture
def default_pain() -> PainInputs:
    """Wizard defaults: 15 hrs/week at $100/hr, $50K revenue lost."""
    return PainInputs()


@pytest.fixture
def wizard(reference_data, settings):
    return WizardStateMachine(reference_data=reference_data, settings=settings)


@pytest.fixture
def review_wizard(wizard):
    """Wizard walked through to the review step with one non-churn use case."""
    wizard.update_profile(company="Acme Analytics")
    wizard.advance()
    wizard.toggle_use_case("lead_scoring")
    wizard.advance()
    wizard.advance()
    wizard.advance()
    return wizard


@pytest.fixture
def three_records():
    return [
        make_record(id="a", prospect="Alpha", total_value=50_000, roi_ratio=2.0, created=date(2026, 9, 1)),
        make_record(id="b", prospect="Bravo", total_value=200_000, roi_ratio=6.5, created=date(2026, 8, 1)),
        make_record(id="c", prospect="Charlie", total_value=120_000, roi_ratio=4.0, created=date(2026, 10, 1)),
    ]
