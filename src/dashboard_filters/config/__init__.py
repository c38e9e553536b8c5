"""
Configuration Package - Models and Loader.

Configuration Structure:
    - DashboardFiltersConfig: Root configuration object
    - ValidationConfig: Name length and duplicate-detection rules
    - LoggingConfig: Package log level and format
"""

from dashboard_filters.config.loader import load_config, load_validator
from dashboard_filters.config.models import (
    DashboardFiltersConfig,
    LoggingConfig,
    ValidationConfig,
)

__all__ = [
    "DashboardFiltersConfig",
    "LoggingConfig",
    "ValidationConfig",
    "load_config",
    "load_validator",
]
