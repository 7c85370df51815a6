"""Pydantic models for the static reference data the ROI builder consumes."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class UseCase(BaseModel):
    """A single entry of the use-case catalog."""

    id: str = Field(min_length=1)
    label: str = Field(min_length=1)
    description: str = ""
    icon: str = Field(description="Icon reference understood by the renderer")


class BenchmarkEntry(BaseModel):
    """Industry benchmark used by the revenue-impact formula."""

    rev_impact: float = Field(ge=0, le=100, description="Revenue impact in percent")


class ScenarioMultipliers(BaseModel):
    """Value multiplier applied to every component for each scenario."""

    conservative: float = Field(gt=0)
    moderate: float = Field(gt=0)
    aggressive: float = Field(gt=0)

    @model_validator(mode="after")
    def strictly_increasing(self) -> ScenarioMultipliers:
        if not (self.conservative < self.moderate < self.aggressive):
            raise ValueError(
                f"Scenario multipliers must be ordered: conservative ({self.conservative}) "
                f"< moderate ({self.moderate}) < aggressive ({self.aggressive})"
            )
        return self

    def get_multiplier(self, scenario_value: str) -> float:
        return getattr(self, scenario_value)


class CostTier(BaseModel):
    """Annual investment cost for one company-size band."""

    size: str
    cost: float = Field(gt=0)


class InvestmentPricing(BaseModel):
    """Exact-match size -> cost table with a default for unlisted sizes."""

    tiers: list[CostTier] = Field(default_factory=list)
    default_cost: float = Field(gt=0)

    @field_validator("tiers")
    @classmethod
    def sizes_unique(cls, v: list[CostTier]) -> list[CostTier]:
        sizes = [t.size for t in v]
        if len(sizes) != len(set(sizes)):
            raise ValueError(f"Duplicate size in cost tiers: {sizes}")
        return v

    def cost_for(self, size: str) -> float:
        for tier in self.tiers:
            if tier.size == size:
                return tier.cost
        return self.default_cost


class FlatValues(BaseModel):
    """Constants used by the flat value components (pre-multiplier)."""

    churn_reduction: float = Field(ge=0)
    data_quality: float = Field(gt=0)
    weeks_per_year: int = Field(default=52, gt=0)


class ReferenceData(BaseModel):
    """Top-level reference data: option sets, catalog and lookup tables."""

    id: str
    version: str
    industries: list[str] = Field(min_length=1)
    company_sizes: list[str] = Field(min_length=1)
    warehouses: list[str] = Field(min_length=1)
    current_states: list[str] = Field(min_length=1)
    hourly_costs: list[int] = Field(min_length=1)
    use_cases: list[UseCase] = Field(min_length=1)
    churn_use_case_id: str
    benchmarks: dict[str, BenchmarkEntry]
    fallback_industry: str = "Other"
    scenarios: ScenarioMultipliers
    pricing: InvestmentPricing
    flat_values: FlatValues

    @field_validator("use_cases")
    @classmethod
    def use_case_ids_unique(cls, v: list[UseCase]) -> list[UseCase]:
        ids = [uc.id for uc in v]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Use-case ids must be unique, got {ids}")
        return v

    @model_validator(mode="after")
    def lookups_resolve(self) -> ReferenceData:
        if self.fallback_industry not in self.benchmarks:
            raise ValueError(
                f"Benchmark table must contain the fallback industry '{self.fallback_industry}'"
            )
        if self.get_use_case(self.churn_use_case_id) is None:
            raise ValueError(
                f"churn_use_case_id '{self.churn_use_case_id}' is not in the use-case catalog"
            )
        return self

    def get_use_case(self, use_case_id: str) -> Optional[UseCase]:
        for uc in self.use_cases:
            if uc.id == use_case_id:
                return uc
        return None

    def use_case_ids(self) -> list[str]:
        return [uc.id for uc in self.use_cases]

    def benchmark_for(self, industry: str) -> BenchmarkEntry:
        """Benchmark for an industry, falling back to the 'Other' entry."""
        entry = self.benchmarks.get(industry)
        return entry if entry is not None else self.benchmarks[self.fallback_industry]
