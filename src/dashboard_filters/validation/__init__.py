"""
Validation Package - View Name Rules and Error Types.

This package provides:
    - FilterValidator: Check view names (presence, spacing, format, length)
    - FilterValidationException: Policy violation with a fixed message
    - FilterParseError: Structurally invalid serialized document

Design Principles:
    - Fail fast on invalid input
    - Fixed, literal error messages
    - Configurable name length
"""

from dashboard_filters.validation.errors import (
    DashboardFilterError,
    FilterParseError,
    FilterValidationException,
)
from dashboard_filters.validation.filter_validator import (
    MSG_MAX_LENGTH,
    MSG_MISSING_NAME,
    MSG_NAME_FORMAT,
    MSG_NO_DEFAULT_FILTER,
    MSG_NO_LEADING_TRAILING_SPACES,
    FilterValidator,
    duplicate_name_message,
)

__all__ = [
    "DashboardFilterError",
    "FilterParseError",
    "FilterValidationException",
    "FilterValidator",
    "MSG_MAX_LENGTH",
    "MSG_MISSING_NAME",
    "MSG_NAME_FORMAT",
    "MSG_NO_DEFAULT_FILTER",
    "MSG_NO_LEADING_TRAILING_SPACES",
    "duplicate_name_message",
]
