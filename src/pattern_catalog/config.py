"""Environment-based configuration for the pattern catalog CLI."""

from pathlib import Path
from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Pattern catalog configuration.

    All settings can be overridden via environment variables with
    PATTERN_CATALOG_ prefix. For example:
        PATTERN_CATALOG_OUTPUT_FILE=/tmp/demo.txt
        PATTERN_CATALOG_RUN_TIMEOUT=5
        PATTERN_CATALOG_LOG_LEVEL=info
    """

    # Append captured text here instead of printing it
    output_file: Path | None = None

    # Deadline for a single run in seconds; None means unbounded
    run_timeout: float | None = None

    log_level: LogLevel = "WARNING"

    model_config = {"env_prefix": "PATTERN_CATALOG_"}

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


def get_settings() -> Settings:
    """Build settings from the current environment.

    Raises:
        pydantic.ValidationError: If an environment variable has an invalid value
    """
    return Settings()
