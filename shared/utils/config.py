"""
Configuration management using Pydantic Settings.

Loads configuration from environment variables with validation and type safety.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses .env file in development, environment variables in production.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    environment: str = Field(default="development", description="Deployment environment")
    log_level: str = Field(default="INFO", description="Logging verbosity")
    log_format: str = Field(default="text", description="Log format: json or text")
    log_output: str = Field(default="stdout", description="Log destination")
    app_name: str = Field(default="sources-extractor", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")

    # References table rendering
    sources_join_delimiter: str = Field(
        default="\n", description="Delimiter inserted between rendered sources"
    )
    sources_heading: str = Field(
        default="Sources", description="Heading printed above the references table"
    )
    sources_html_output: bool = Field(
        default=False, description="Render HTML markers and escaped sources"
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is valid."""
        allowed = ["development", "testing", "staging", "production"]
        if v not in allowed:
            raise ValueError(f"Environment must be one of {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the logging level name."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of {allowed}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v not in ("text", "json"):
            raise ValueError("Log format must be 'text' or 'json'")
        return v

    @field_validator("log_output")
    @classmethod
    def validate_log_output(cls, v: str) -> str:
        if v not in ("stdout", "file", "both"):
            raise ValueError("Log output must be 'stdout', 'file' or 'both'")
        return v


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Using lru_cache ensures settings are loaded once and reused.
    """
    return Settings()
