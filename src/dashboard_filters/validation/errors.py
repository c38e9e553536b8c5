"""
Error Types for Dashboard Filters.

Two disjoint families:
    - FilterValidationException: well-formed input that breaks a policy rule
      (bad name, duplicate name, no default view)
    - FilterParseError: a serialized document of the wrong shape

Design Notes:
    - Validation messages are fixed literals; callers show them as-is
"""

from __future__ import annotations


class DashboardFilterError(Exception):
    """Base class for all dashboard filter errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FilterValidationException(DashboardFilterError):
    """Raised when filters violate a naming or collection rule."""


class FilterParseError(DashboardFilterError):
    """Raised when a serialized filters document cannot be parsed."""
