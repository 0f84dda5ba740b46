"""Configuration management using Pydantic Settings"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ASSETFLOW_",
        extra="ignore",
    )

    # Service
    service_name: str = "assetflow-engine"
    log_level: str = "INFO"

    # Projection assumptions (placeholder heuristics kept configurable)
    base_income_assumption: float = 2000.0  # Unmodeled income added every month
    history_divisor: int = Field(3, ge=1)  # Smoothing divisor applied to historical expenses
    variable_spend_weight: float = 0.5  # Share of history counted when bills exist
    fallback_monthly_expense: float = 1500.0  # Used when there is no bill or history

    # Horizons
    projection_months: int = 6
    preview_count: int = 4


settings = Settings()
