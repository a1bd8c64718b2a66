from __future__ import annotations

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings, read from ``MLOPSROI_*`` environment variables or ``.env``."""

    log_level: str = "INFO"
    log_file: Optional[str] = None
    output_dir: str = "./outputs"
    currency_symbol: str = "$"
    chart_template: str = "plotly_white"

    model_config = SettingsConfigDict(env_prefix="MLOPSROI_", env_file=".env", extra="ignore")


settings = Settings()
