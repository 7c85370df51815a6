"""Validated wizard inputs: the prospect profile and the quantified pain.

Option-set fields are checked against the reference data passed in the
validation context (``context={"reference_data": ...}``), or against the
process default when no context is given.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .enums import DataIssueFrequency


def _reference_data(info: ValidationInfo):
    if info.context and info.context.get("reference_data") is not None:
        return info.context["reference_data"]
    # Import lazily so models stay importable without touching the data files
    from activate_roi.reference.loader import get_default_reference_data

    return get_default_reference_data()


def _check_option(value: str, options: list[str], field_name: str) -> str:
    if value not in options:
        raise ValueError(f"{field_name} must be one of {options}, got '{value}'")
    return value


class Profile(BaseModel):
    """Prospect company profile (wizard step 0)."""

    model_config = ConfigDict(extra="forbid")

    company: str = ""
    industry: str = "SaaS"
    size: str = "201-500"
    warehouse: str = "Snowflake"
    current_state: str = "Manual CSV exports"

    @field_validator("industry")
    @classmethod
    def industry_known(cls, v: str, info: ValidationInfo) -> str:
        return _check_option(v, _reference_data(info).industries, "industry")

    @field_validator("size")
    @classmethod
    def size_known(cls, v: str, info: ValidationInfo) -> str:
        return _check_option(v, _reference_data(info).company_sizes, "size")

    @field_validator("warehouse")
    @classmethod
    def warehouse_known(cls, v: str, info: ValidationInfo) -> str:
        return _check_option(v, _reference_data(info).warehouses, "warehouse")

    @field_validator("current_state")
    @classmethod
    def current_state_known(cls, v: str, info: ValidationInfo) -> str:
        return _check_option(v, _reference_data(info).current_states, "current_state")

    @property
    def is_named(self) -> bool:
        return len(self.company) > 0


class PainInputs(BaseModel):
    """Quantified manual-process pain (wizard step 2)."""

    model_config = ConfigDict(extra="forbid")

    hours_per_week: float = Field(default=15, ge=1, le=40)
    people_involved: int = Field(default=3, ge=1, le=20)
    hourly_cost: int = 100
    data_issue_frequency: DataIssueFrequency = DataIssueFrequency.WEEKLY
    revenue_lost: float = Field(default=50_000, ge=10_000, le=500_000)

    @field_validator("hourly_cost")
    @classmethod
    def hourly_cost_offered(cls, v: int, info: ValidationInfo) -> int:
        options = _reference_data(info).hourly_costs
        if v not in options:
            raise ValueError(f"hourly_cost must be one of {options}, got {v}")
        return v

    @field_validator("revenue_lost")
    @classmethod
    def revenue_lost_on_step(cls, v: float) -> float:
        if v % 10_000 != 0:
            raise ValueError(f"revenue_lost must be a multiple of 10,000, got {v}")
        return v
