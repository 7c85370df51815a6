from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from .enums import DealStage, ReportStatus


class ReportRecord(BaseModel):
    """Summary of a previously generated ROI report, as listed in the library."""

    model_config = ConfigDict(extra="forbid")

    id: str
    prospect: str
    industry: str
    ae: str
    use_cases: list[str] = Field(default_factory=list)
    total_value: float = Field(ge=0)
    roi_ratio: float = Field(ge=0)
    deal_stage: DealStage
    status: ReportStatus
    created: date
