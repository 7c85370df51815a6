"""Load the saved report library from JSON."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import TypeAdapter

from activate_roi.config.settings import Settings
from activate_roi.models.report_record import ReportRecord

from .collection import ReportCollectionView

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"

_RECORDS = TypeAdapter(list[ReportRecord])


def load_saved_reports(file_path: Path | None = None) -> list[ReportRecord]:
    """Load and validate report records; defaults to the bundled sample library."""
    if file_path is None:
        file_path = _DATA_DIR / "saved_reports.json"

    if not file_path.exists():
        raise FileNotFoundError(f"Saved reports not found: {file_path}")

    with open(file_path, "r") as f:
        raw = json.load(f)

    records = _RECORDS.validate_python(raw)
    logger.info("Loaded %d saved reports from %s", len(records), file_path)
    return records


def get_report_library(settings: Optional[Settings] = None) -> ReportCollectionView:
    """Build the library view configured by settings."""
    settings = settings or Settings()
    path = Path(settings.saved_reports_path) if settings.saved_reports_path else None
    return ReportCollectionView(load_saved_reports(path), win_rate=settings.win_rate)
