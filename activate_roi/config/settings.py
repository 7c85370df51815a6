from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    ae_name: str = "Kevin Park"
    win_rate: float = 0.67
    reference_data_path: Optional[str] = None
    saved_reports_path: Optional[str] = None
    log_level: str = "INFO"

    class Config:
        env_prefix = "ACTIVATE_ROI_"
        env_file = ".env"
