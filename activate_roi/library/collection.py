"""Search, filter, sort and KPI aggregation over the saved report library."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from activate_roi.engine.rounding import round_half_up
from activate_roi.models.enums import SortKey
from activate_roi.models.report_record import ReportRecord

ALL_INDUSTRIES = "All"
DEFAULT_WIN_RATE = 0.67


@dataclass(frozen=True)
class LibraryKPIs:
    """Headline figures over the whole library (never the filtered view)."""

    report_count: int
    average_roi: float
    total_value: float
    win_rate: float

    def cards(self) -> list[dict[str, str]]:
        """Display-ready KPI cards."""
        return [
            {"label": "Reports", "value": str(self.report_count), "sub": "This quarter"},
            {"label": "Avg ROI", "value": f"{self.average_roi:.1f}:1", "sub": "All reports"},
            {"label": "Total Value", "value": f"${round_half_up(self.total_value / 1e6, 1):.1f}M", "sub": "Cumulative"},
            {"label": "Win Rate", "value": f"{self.win_rate:.0%}", "sub": "Reports → Won"},
        ]


def matches(record: ReportRecord, search: str = "", industry: str = ALL_INDUSTRIES) -> bool:
    """Case-insensitive search over prospect, AE and industry, plus industry filter."""
    q = search.lower()
    match_search = (
        not q
        or q in record.prospect.lower()
        or q in record.ae.lower()
        or q in record.industry.lower()
    )
    match_industry = industry == ALL_INDUSTRIES or record.industry == industry
    return match_search and match_industry


def sort_records(records: Iterable[ReportRecord], sort_by: SortKey | str) -> list[ReportRecord]:
    """Descending by ROI, value or creation date; ties keep their input order."""
    try:
        key = SortKey(sort_by)
    except ValueError:
        key = SortKey.CREATED

    if key is SortKey.ROI:
        return sorted(records, key=lambda r: r.roi_ratio, reverse=True)
    if key is SortKey.VALUE:
        return sorted(records, key=lambda r: r.total_value, reverse=True)
    return sorted(records, key=lambda r: r.created, reverse=True)


class ReportCollectionView:
    """Read-only query view over a fixed collection of report records."""

    def __init__(self, records: Sequence[ReportRecord], win_rate: float = DEFAULT_WIN_RATE) -> None:
        self._records: tuple[ReportRecord, ...] = tuple(records)
        self.win_rate = win_rate

    @property
    def records(self) -> tuple[ReportRecord, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def industries(self) -> list[str]:
        """Filter options: 'All' followed by each industry in first-seen order."""
        return [ALL_INDUSTRIES, *dict.fromkeys(r.industry for r in self._records)]

    def query(
        self,
        search: str = "",
        industry: str = ALL_INDUSTRIES,
        sort_by: SortKey | str = SortKey.CREATED,
    ) -> list[ReportRecord]:
        """Filtered and sorted records as a new list."""
        filtered = [r for r in self._records if matches(r, search, industry)]
        return sort_records(filtered, sort_by)

    def kpis(self) -> LibraryKPIs:
        count = len(self._records)
        average = sum(r.roi_ratio for r in self._records) / count if count else 0.0
        return LibraryKPIs(
            report_count=count,
            average_roi=round_half_up(average, 1),
            total_value=sum(r.total_value for r in self._records),
            win_rate=self.win_rate,
        )
