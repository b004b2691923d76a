"""
Configuration module for the patient vitals dashboard.
Uses Pydantic BaseSettings for validation - app fails fast if required config is missing.
"""
import logging
from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings with validation.
    Required fields will cause the app to fail fast if not provided.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Patient API Configuration
    patient_api_url: str = Field(
        default="https://fedskillstest.coalitiontechnologies.workers.dev/",
        description="URL of the patient list endpoint"
    )
    patient_api_username: str = Field(
        ...,  # Required - no default means fail fast if missing
        min_length=1,
        description="Basic auth username for the patient API"
    )
    patient_api_password: SecretStr = Field(
        ...,  # Required - never embedded in code
        description="Basic auth password for the patient API"
    )

    # Dashboard Configuration
    dashboard_target_patient: str = Field(
        default="Jessica Taylor",
        min_length=1,
        description="Patient rendered when no name is given explicitly"
    )
    dashboard_output_path: str = Field(
        default="dashboard.html",
        description="File the CLI writes the rendered page to"
    )
    dashboard_host: str = Field(default="0.0.0.0", description="Web app host")
    dashboard_port: int = Field(default=8000, description="Web app port")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Root log level")
    log_format: str = Field(default="json", description="'json' or 'text'")

    @field_validator("patient_api_url")
    @classmethod
    def validate_api_url(cls, value: str) -> str:
        """Reject anything that is not an http(s) URL."""
        if not value.startswith(("http://", "https://")):
            raise ValueError("PATIENT_API_URL must start with http:// or https://")
        return value

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()


@lru_cache()
def get_settings() -> Settings:
    """
    Get the cached settings instance.

    Raises:
        pydantic.ValidationError: If required credentials are missing.
    """
    return Settings()
