"""
Configuration Loader - YAML File to Validated Settings.

Reads one YAML file into DashboardFiltersConfig. An empty file gives the
defaults.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import yaml

from dashboard_filters.config.models import DashboardFiltersConfig
from dashboard_filters.validation.filter_validator import FilterValidator

logger = logging.getLogger(__name__)


def load_config(config_path: Union[str, Path]) -> DashboardFiltersConfig:
    """
    Load settings from a YAML file.

    Args:
        config_path: Path to YAML config file

    Returns:
        Validated DashboardFiltersConfig object

    Raises:
        FileNotFoundError: If the file doesn't exist
        pydantic.ValidationError: If a setting is invalid
    """
    with open(config_path, encoding="utf-8") as f:
        config_dict = yaml.safe_load(f) or {}

    config = DashboardFiltersConfig.model_validate(config_dict)
    logger.debug(
        f"Loaded config {config_path}: max_name_length="
        f"{config.validation.max_name_length}, case_insensitive_duplicates="
        f"{config.validation.case_insensitive_duplicates}"
    )
    return config


def load_validator(config_path: Union[str, Path]) -> FilterValidator:
    """Name validator built from the validation section of a config file."""
    return FilterValidator.from_config(load_config(config_path).validation)
