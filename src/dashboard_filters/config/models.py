"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class ValidationConfig(BaseModel):
    """Rules applied to view names and collections."""

    max_name_length: int = Field(default=64, ge=1)
    case_insensitive_duplicates: bool = False


class LoggingConfig(BaseModel):
    """Package logging settings."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


class DashboardFiltersConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    logging_settings: LoggingConfig = Field(
        default_factory=LoggingConfig,
        alias="logging",
    )

    model_config = {"populate_by_name": True}
