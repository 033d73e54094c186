"""Application settings using pydantic-settings.

Settings are loaded from environment variables (or a .env file) with
defaults suitable for development.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class PolicySettings(BaseSettings):
    """Resource-to-policy map configuration.

    Environment variables:
        AUTHZ_POLICY_RESOURCE_POLICIES: JSON object mapping resource class
            paths to policy class paths, e.g.
            {"app.models.Article": "app.policies.ArticlePolicy"}
    """

    model_config = SettingsConfigDict(
        env_prefix="AUTHZ_POLICY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    resource_policies: dict[str, str] = Field(
        default_factory=dict,
        description="Dotted resource class path to dotted policy class path",
    )


class LoggingSettings(BaseSettings):
    """Logging configuration.

    Environment variables:
        AUTHZ_LOG_LEVEL: Minimum log level (default: INFO)
        AUTHZ_LOG_JSON_OUTPUT: Force JSON (true) or console (false) output;
            unset to pick based on the terminal
    """

    model_config = SettingsConfigDict(
        env_prefix="AUTHZ_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = Field(default="INFO", description="Minimum log level")
    json_output: bool | None = Field(
        default=None,
        description="JSON output; None auto-detects from the terminal",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        """Normalize and validate the log level name."""
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(_LOG_LEVELS)}")
        return level


@lru_cache
def get_policy_settings() -> PolicySettings:
    """Get cached policy settings."""
    return PolicySettings()


@lru_cache
def get_logging_settings() -> LoggingSettings:
    """Get cached logging settings."""
    return LoggingSettings()
