"""
Configuration for rastercore.

Nested pydantic settings with defaults, optionally overridden from
environment variables.
"""

import os
from functools import lru_cache
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

from rastercore.core.enums import InterpolationMethod

ENV_PREFIX = "RASTERCORE_"


class LoggingSettings(BaseModel):
    """Logging configuration"""

    level: str = Field(default="WARNING", description="Root log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log record format",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level


class ProcessingSettings(BaseModel):
    """Defaults for processing operations"""

    default_interpolation: InterpolationMethod = Field(
        default=InterpolationMethod.BILINEAR,
        description="Interpolation used by resize() when none is given",
    )


class Settings(BaseModel):
    """Top-level settings"""

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    processing: ProcessingSettings = Field(default_factory=ProcessingSettings)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings, applying RASTERCORE_* environment overrides."""
        logging_values: Dict[str, Any] = {}
        processing_values: Dict[str, Any] = {}

        if f"{ENV_PREFIX}LOG_LEVEL" in os.environ:
            logging_values["level"] = os.environ[f"{ENV_PREFIX}LOG_LEVEL"]
        if f"{ENV_PREFIX}INTERPOLATION" in os.environ:
            processing_values["default_interpolation"] = (
                os.environ[f"{ENV_PREFIX}INTERPOLATION"].lower()
            )

        return cls(
            logging=LoggingSettings(**logging_values),
            processing=ProcessingSettings(**processing_values),
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings.from_env()
