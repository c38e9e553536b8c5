"""
Filter Validator - Name Rules for Dashboard Views.

Checks a proposed view name, in this order:
    1. Present (not None, empty or whitespace-only)
    2. No leading or trailing whitespace
    3. Only allowed ASCII characters
    4. Not longer than the configured maximum

Only the first violated rule is reported.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Optional

from dashboard_filters.validation.errors import FilterValidationException

if TYPE_CHECKING:
    from dashboard_filters.config.models import ValidationConfig

logger = logging.getLogger(__name__)

DEFAULT_MAX_NAME_LENGTH = 64

MSG_MISSING_NAME = "Missing name"
MSG_NO_LEADING_TRAILING_SPACES = "Name must not have leading or trailing whitespace"
MSG_NAME_FORMAT = (
    "Name may only contain letters, digits, spaces and the punctuation "
    ". , : ; _ - + # ' & ! ? ( ) [ ] /"
)
MSG_MAX_LENGTH = f"Name must not exceed {DEFAULT_MAX_NAME_LENGTH} characters"
MSG_NO_DEFAULT_FILTER = "Filters must include one named 'Default'"
MSG_DUPLICATE_NAME = "Duplicate filter name: {name}"

NAME_FORMAT = re.compile(r"[A-Za-z0-9 .,:;_\-+#'&!?()\[\]/]+")


def duplicate_name_message(name: str) -> str:
    """Message for a name that appears twice in one collection."""
    return MSG_DUPLICATE_NAME.format(name=name)


class FilterValidator:
    """
    Validates dashboard view names.

    Validation never raises for bad input: validate_name() returns the
    message of the first failing rule, or None when the name is valid.
    """

    def __init__(self, max_name_length: int = DEFAULT_MAX_NAME_LENGTH) -> None:
        """
        Initialize filter validator.

        Args:
            max_name_length: Longest accepted name, in characters
        """
        if max_name_length < 1:
            raise ValueError("max_name_length must be >= 1")
        self.max_name_length = max_name_length

    @classmethod
    def from_config(cls, config: "ValidationConfig") -> "FilterValidator":
        """Build a validator from the validation settings."""
        return cls(max_name_length=config.max_name_length)

    @property
    def max_length_message(self) -> str:
        if self.max_name_length == DEFAULT_MAX_NAME_LENGTH:
            return MSG_MAX_LENGTH
        return f"Name must not exceed {self.max_name_length} characters"

    def validate_name(self, name: Optional[str]) -> Optional[str]:
        """
        Validate a single view name.

        Args:
            name: Candidate name, possibly None

        Returns:
            The violation message, or None if the name is valid
        """
        if name is None or not name.strip():
            return MSG_MISSING_NAME

        if name != name.strip():
            return MSG_NO_LEADING_TRAILING_SPACES

        if not NAME_FORMAT.fullmatch(name):
            return MSG_NAME_FORMAT

        if len(name) > self.max_name_length:
            return self.max_length_message

        return None

    def check_name(self, name: Optional[str]) -> None:
        """
        Validate a name and raise on failure.

        Raises:
            FilterValidationException: If the name breaks any rule
        """
        error = self.validate_name(name)
        if error:
            logger.debug(f"Rejected filter name {name!r}: {error}")
            raise FilterValidationException(error)

    def is_valid_name(self, name: Optional[str]) -> bool:
        return self.validate_name(name) is None
