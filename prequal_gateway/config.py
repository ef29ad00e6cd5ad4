"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PREQUAL_",
        extra="ignore",
    )

    # Service
    service_name: str = "prequal-gateway"
    log_level: str = "INFO"

    # EMI calculator defaults
    default_tenure_unit: str = "years"


settings = Settings()
