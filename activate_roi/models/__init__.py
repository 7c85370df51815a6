from .enums import (
    DataIssueFrequency,
    DealStage,
    Page,
    ReportStatus,
    Scenario,
    SortKey,
    WizardStep,
)
from .inputs import PainInputs, Profile
from .report_record import ReportRecord

__all__ = [
    "DataIssueFrequency",
    "DealStage",
    "Page",
    "PainInputs",
    "Profile",
    "ReportRecord",
    "ReportStatus",
    "Scenario",
    "SortKey",
    "WizardStep",
]
