"""Load and validate reference data (option sets, catalog, lookup tables) from JSON."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path

from activate_roi.config.settings import Settings
from activate_roi.reference.schema import ReferenceData

logger = logging.getLogger(__name__)

# Default directory for reference data files
_CONFIG_DIR = Path(__file__).parent / "configs"


def load_reference_data(file_path: Path | None = None) -> ReferenceData:
    """Load and validate reference data from a JSON file.

    If no path is provided, loads the bundled V1 data.
    """
    if file_path is None:
        file_path = _CONFIG_DIR / "census_activation_v1.json"

    if not file_path.exists():
        raise FileNotFoundError(f"Reference data not found: {file_path}")

    with open(file_path, "r") as f:
        raw = json.load(f)

    data = ReferenceData.model_validate(raw)
    logger.info("Loaded reference data %s v%s from %s", data.id, data.version, file_path)
    return data


@lru_cache(maxsize=1)
def get_default_reference_data() -> ReferenceData:
    """Reference data for this process, honouring ACTIVATE_ROI_REFERENCE_DATA_PATH."""
    override = Settings().reference_data_path
    return load_reference_data(Path(override) if override else None)
