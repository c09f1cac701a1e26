"""
Configuration management for the Truck Fault Tracker backend.
Uses pydantic-settings for environment variable handling.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")

    # API Configuration
    api_title: str = "Truck Fault Tracker API"
    api_version: str = "1.0.0"
    debug: bool = False
    cors_allow_origins: list[str] = ["*"]

    # VIN Configuration
    vin_report_check_digit: bool = True  # adds check_digit_valid to /vin/decode; never affects is_valid


# Global settings instance
settings = Settings()
