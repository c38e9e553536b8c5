"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from dashboard_filters.adapters.memory_store import InMemoryFiltersStore
from dashboard_filters.config.models import ValidationConfig
from dashboard_filters.domain.filters import Filters
from dashboard_filters.validation.filter_validator import FilterValidator
from tests.fixtures.builders import blacklist, named_blacklist, named_whitelist


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def validator() -> FilterValidator:
    """Create filter validator with default rules."""
    return FilterValidator()


@pytest.fixture
def validation_config() -> ValidationConfig:
    """Create default validation configuration."""
    return ValidationConfig()


@pytest.fixture
def memory_store() -> InMemoryFiltersStore:
    """Create empty in-memory store."""
    return InMemoryFiltersStore()


@pytest.fixture
def sample_pipelines() -> List[str]:
    """Pipelines on a sample dashboard, in display order."""
    return ["build-linux", "build-windows", "deploy-staging", "deploy-prod", "docs"]


@pytest.fixture
def team_filters() -> Filters:
    """A typical collection: wildcard default plus two named views."""
    return Filters(
        [
            blacklist(),
            named_whitelist("Deploys", "deploy-staging", "deploy-prod"),
            named_blacklist("No Docs", "DOCS"),
        ]
    )
