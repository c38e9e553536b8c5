"""
Domain Layer - Dashboard Views and Their Collection.

Entities:
    - WhitelistFilter / BlacklistFilter: The two kinds of dashboard view
    - DashboardFilter: Tagged union of both, discriminated by "type"
    - Filters: Validated, ordered collection of a user's views

Value Objects:
    - SelectionResult: Visible/hidden pipelines after applying a view

Design Principles:
    - Immutable (frozen pydantic models)
    - Validated construction only; no setters
    - No infrastructure dependencies
"""

from dashboard_filters.domain.dashboard_filter import (
    BLACKLIST,
    DEFAULT_NAME,
    FILTER_VARIANTS,
    WHITELIST,
    WILDCARD_FILTER,
    BlacklistFilter,
    DashboardFilter,
    WhitelistFilter,
    is_default_name,
)
from dashboard_filters.domain.filters import Filters, validate_collection
from dashboard_filters.domain.value_objects import SelectionResult

__all__ = [
    "BLACKLIST",
    "DEFAULT_NAME",
    "FILTER_VARIANTS",
    "WHITELIST",
    "WILDCARD_FILTER",
    "BlacklistFilter",
    "DashboardFilter",
    "Filters",
    "SelectionResult",
    "WhitelistFilter",
    "is_default_name",
    "validate_collection",
]
