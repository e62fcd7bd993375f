"""Application settings loaded from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """PlateIQ menu server configuration."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Server
    # Loopback by default; binding elsewhere must be opted into explicitly.
    menu_host: str = "127.0.0.1"
    menu_port: int = 8010
    menu_log_level: str = "info"
    menu_allow_insecure_bind: bool = False

    # Selection defaults (per-call options override these)
    default_optimize_for_biomarkers: bool = True
    default_seasonal_weight: float = Field(default=0.5, ge=0.0, le=1.0)
    default_novelty_weight: float = Field(default=0.5, ge=0.0, le=1.0)
    default_meal_types: list[str] = ["breakfast", "lunch", "dinner"]

    # Engine bounds
    max_candidate_pool: int = Field(default=500, ge=1)
    enrichment_workers: int = Field(default=1, ge=1)

    # Data
    seasonal_data_path: str = ""


def get_settings() -> Settings:
    """Create and return a Settings instance."""
    return Settings()
