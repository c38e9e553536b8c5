"""
Builders for dashboard views and serialized documents used across tests.
"""

from __future__ import annotations

import json
from typing import Any, Dict

from dashboard_filters.domain.dashboard_filter import (
    DEFAULT_NAME,
    BlacklistFilter,
    WhitelistFilter,
)

TWENTY_CHAR = "0123456789abcdefghij"
NAME_TOO_LONG = TWENTY_CHAR * 4
SHRUG = "¯\\_(ツ)_/¯"


def named_whitelist(name: Any, *pipelines: str) -> WhitelistFilter:
    """Helper to create a whitelist view."""
    return WhitelistFilter(name=name, pipelines=pipelines)


def named_blacklist(name: Any, *pipelines: str) -> BlacklistFilter:
    """Helper to create a blacklist view."""
    return BlacklistFilter(name=name, pipelines=pipelines)


def whitelist(*pipelines: str) -> WhitelistFilter:
    return named_whitelist(DEFAULT_NAME, *pipelines)


def blacklist(*pipelines: str) -> BlacklistFilter:
    return named_blacklist(DEFAULT_NAME, *pipelines)


def filters_document(*views: Dict[str, Any]) -> str:
    """Helper to build a serialized filters document."""
    return json.dumps({"filters": list(views)})
