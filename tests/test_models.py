"""Tests for Profile, PainInputs and ReportRecord validation."""

from datetime import date

import pytest
from pydantic import ValidationError

from activate_roi.models.enums import DataIssueFrequency, DealStage, ReportStatus
from activate_roi.models.inputs import PainInputs, Profile
from activate_roi.models.report_record import ReportRecord
from tests.conftest import make_record


class TestProfile:
    def test_defaults(self):
        profile = Profile()
        assert profile.company == ""
        assert profile.industry == "SaaS"
        assert profile.size == "201-500"
        assert profile.warehouse == "Snowflake"
        assert profile.current_state == "Manual CSV exports"
        assert not profile.is_named

    def test_named_company(self):
        assert Profile(company="Acme").is_named

    def test_unknown_industry_rejected(self):
        with pytest.raises(ValidationError, match="industry must be one of"):
            Profile(industry="Aerospace")

    def test_unknown_size_rejected(self):
        with pytest.raises(ValidationError, match="size must be one of"):
            Profile(size="10000+")

    def test_unknown_warehouse_rejected(self):
        with pytest.raises(ValidationError):
            Profile(warehouse="Excel")

    def test_extra_field_rejected(self):
        with pytest.raises(ValidationError):
            Profile(compnay="typo")

    def test_validates_against_context_reference_data(self, reference_data):
        custom = reference_data.model_copy(update={"industries": ["Robotics", "Other"]})
        profile = Profile.model_validate(
            {"company": "Botco", "industry": "Robotics"},
            context={"reference_data": custom},
        )
        assert profile.industry == "Robotics"


class TestPainInputs:
    def test_defaults(self):
        pain = PainInputs()
        assert pain.hours_per_week == 15
        assert pain.people_involved == 3
        assert pain.hourly_cost == 100
        assert pain.data_issue_frequency is DataIssueFrequency.WEEKLY
        assert pain.revenue_lost == 50_000

    @pytest.mark.parametrize("hours", [0, 41])
    def test_hours_out_of_range(self, hours):
        with pytest.raises(ValidationError):
            PainInputs(hours_per_week=hours)

    @pytest.mark.parametrize("people", [0, 21])
    def test_people_out_of_range(self, people):
        with pytest.raises(ValidationError):
            PainInputs(people_involved=people)

    def test_hourly_cost_must_be_offered(self):
        with pytest.raises(ValidationError, match="hourly_cost must be one of"):
            PainInputs(hourly_cost=90)

    def test_revenue_lost_bounds(self):
        with pytest.raises(ValidationError):
            PainInputs(revenue_lost=0)
        with pytest.raises(ValidationError):
            PainInputs(revenue_lost=510_000)

    def test_revenue_lost_step(self):
        with pytest.raises(ValidationError, match="multiple of 10,000"):
            PainInputs(revenue_lost=55_000)
        assert PainInputs(revenue_lost=500_000).revenue_lost == 500_000

    def test_frequency_from_string(self):
        assert PainInputs(data_issue_frequency="Daily").data_issue_frequency is DataIssueFrequency.DAILY


class TestReportRecord:
    def test_parses_json_shapes(self):
        record = ReportRecord.model_validate(
            {
                "id": "rpt-1",
                "prospect": "Acme",
                "industry": "SaaS",
                "ae": "Kevin Park",
                "use_cases": ["Lead Scoring"],
                "total_value": 100000,
                "roi_ratio": 2.8,
                "deal_stage": "Closed Won",
                "status": "Draft",
                "created": "2026-10-01",
            }
        )
        assert record.deal_stage is DealStage.CLOSED_WON
        assert record.created == date(2026, 10, 1)

    def test_extra_field_rejected(self):
        with pytest.raises(ValidationError):
            make_record(prospekt="Acme")

    def test_helper_forwards_known_fields(self):
        record = make_record(use_cases=["Ad Audiences"], status="Draft")
        assert record.use_cases == ["Ad Audiences"]
        assert record.status is ReportStatus.DRAFT

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            ReportRecord(
                id="x", prospect="A", industry="SaaS", ae="B",
                total_value=1, roi_ratio=1, deal_stage="Discovery",
                status="Archived", created=date(2026, 1, 1),
            )
