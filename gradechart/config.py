"""
Configuration management for gradechart.

Uses Pydantic Settings for type-safe configuration loading from environment variables.
All configuration is validated at startup to fail fast on misconfiguration.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every field can be set with a GRADECHART_ prefixed variable,
    e.g. GRADECHART_COVERAGE_THRESHOLD=90.
    """

    model_config = SettingsConfigDict(
        env_prefix="GRADECHART_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Inference Configuration
    # ==========================================================================
    coverage_threshold: float = Field(
        default=95.0,
        ge=50.0,
        le=100.0,
        description="Minimum percentage of observations a scheme must explain to be selected",
    )

    # ==========================================================================
    # Rendering Configuration
    # ==========================================================================
    figure_width: float = Field(
        default=6.0,
        gt=0.0,
        description="Figure width in inches",
    )

    figure_height: float = Field(
        default=4.0,
        gt=0.0,
        description="Figure height in inches",
    )

    figure_dpi: int = Field(
        default=150,
        ge=50,
        le=600,
        description="Resolution used when saving charts",
    )

    font_size: float = Field(
        default=10.0,
        ge=4.0,
        le=32.0,
        description="Base text size for chart labels",
    )

    # ==========================================================================
    # Output Configuration
    # ==========================================================================
    output_directory: Path = Field(
        default=Path("./output"),
        description="Directory for saved charts when a relative path is given",
    )

    log_level: str = Field(
        default="ERROR",
        description="Logging level used by the command line",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the log level is one the logging module knows."""
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_LOG_LEVELS}, got {v!r}")
        return level


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses LRU cache to ensure settings are only loaded once.
    """
    return Settings()
