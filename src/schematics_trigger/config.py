"""Configuration using pydantic-settings.

Settings come only from environment variables prefixed with
``SCHEMATICS_TRIGGER_``. There is no configuration file.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from schematics_trigger.exceptions import ConfigurationError

DEFAULT_IAM_URL = "https://iam.example-cloud.com/identity/token"
DEFAULT_SCHEMATICS_URL = "https://schematics.example-cloud.com"
DEFAULT_TIMEOUT = 60.0

LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    Optional environment variables:
    - SCHEMATICS_TRIGGER_IAM_URL: Token endpoint
    - SCHEMATICS_TRIGGER_SCHEMATICS_URL: Schematics API base URL
    - SCHEMATICS_TRIGGER_IAM_CLIENT_ID / _IAM_CLIENT_SECRET: Public client credential
    - SCHEMATICS_TRIGGER_TIMEOUT: Seconds per request, "none" to wait forever
    - SCHEMATICS_TRIGGER_LOG_LEVEL: Minimum loguru level
    """

    model_config = SettingsConfigDict(
        env_prefix="SCHEMATICS_TRIGGER_",
        case_sensitive=False,
        extra="ignore",
        env_parse_none_str="none",
    )

    # Endpoints
    iam_url: str = DEFAULT_IAM_URL
    schematics_url: str = DEFAULT_SCHEMATICS_URL

    # Public client credential, the same for every user (bx:bx)
    iam_client_id: str = "bx"
    iam_client_secret: str = "bx"

    timeout: float | None = DEFAULT_TIMEOUT
    log_level: str = "INFO"

    @field_validator("schematics_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("timeout", mode="before")
    @classmethod
    def parse_unbounded_timeout(cls, v: object) -> object:
        if isinstance(v, str) and v.strip().lower() in {"", "none"}:
            return None
        return v

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float | None) -> float | None:
        """Validate timeout is positive when set."""
        if v is not None and v <= 0:
            raise ValueError("timeout must be greater than 0 (use 'none' to disable)")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known loguru level."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {sorted(LOG_LEVELS)}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded once and cached for the lifetime of the process.
    """
    return Settings()


def load_settings() -> Settings:
    """Load settings, converting validation failures to ConfigurationError."""
    try:
        return get_settings()
    except ValidationError as e:
        errors = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
        raise ConfigurationError(
            "Configuration errors:\n  - " + "\n  - ".join(errors)
        ) from e
