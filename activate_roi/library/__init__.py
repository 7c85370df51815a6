from .collection import ALL_INDUSTRIES, LibraryKPIs, ReportCollectionView, matches, sort_records
from .loader import get_report_library, load_saved_reports

__all__ = [
    "ALL_INDUSTRIES",
    "LibraryKPIs",
    "ReportCollectionView",
    "get_report_library",
    "load_saved_reports",
    "matches",
    "sort_records",
]
