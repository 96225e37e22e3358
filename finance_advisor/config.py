"""Configuration management using Pydantic Settings"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "finance-advisor"
    log_level: str = "INFO"

    # Analysis
    # "input" keeps the caller's ordering for pattern trends and the recent-anomaly window
    default_order_by: Literal["input", "date"] = "input"
    max_anomaly_alerts: int = 2


settings = Settings()
