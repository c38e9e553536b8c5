"""
Filters - A User's Collection of Dashboard Views.

Filters is an immutable, ordered collection of DashboardFilter values. Every
construction path (constructor, single(), from_json(), from_dict()) runs the
same validation, so an invalid Filters value is never observable:

    1. Every view name passes FilterValidator
    2. The default view's name is normalized to "Default"
    3. No two views share a name
    4. A view named "Default" exists

Serialized form:
    {"filters": [{"name": "...", "pipelines": [...], "type": "whitelist"}]}
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Optional, Sequence, Set, Tuple

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from dashboard_filters.domain.dashboard_filter import (
    DEFAULT_NAME,
    FILTER_VARIANTS,
    WILDCARD_FILTER,
    DashboardFilter,
    is_default_name,
)
from dashboard_filters.validation.errors import (
    FilterParseError,
    FilterValidationException,
)
from dashboard_filters.validation.filter_validator import (
    MSG_NO_DEFAULT_FILTER,
    FilterValidator,
    duplicate_name_message,
)

logger = logging.getLogger(__name__)

_DEFAULT_VALIDATOR = FilterValidator()


class FiltersDocument(BaseModel):
    """Wire shape of a filters document. Carries no policy checks."""

    filters: List[DashboardFilter]


def validate_collection(
    filters: Sequence[DashboardFilter],
    validator: Optional[FilterValidator] = None,
    case_insensitive_duplicates: bool = False,
) -> Tuple[DashboardFilter, ...]:
    """
    Validate a candidate list of views.

    Args:
        filters: Views in display order
        validator: Name validator (defaults to the standard rules)
        case_insensitive_duplicates: Treat "One" and "one" as duplicates

    Returns:
        The views with the default view's name normalized

    Raises:
        TypeError: If an element is not a WhitelistFilter or BlacklistFilter
        FilterValidationException: On the first violated rule
    """
    validator = validator or _DEFAULT_VALIDATOR

    for f in filters:
        if not isinstance(f, FILTER_VARIANTS):
            raise TypeError(
                f"Expected WhitelistFilter or BlacklistFilter, got {type(f).__name__}"
            )

    for f in filters:
        validator.check_name(f.name)

    normalized = tuple(
        f.with_name(DEFAULT_NAME)
        if is_default_name(f.name) and f.name != DEFAULT_NAME
        else f
        for f in filters
    )

    seen: Set[str] = set()
    for f in normalized:
        key = f.name.lower() if case_insensitive_duplicates else f.name
        if key in seen:
            logger.debug(f"Duplicate filter name: {f.name}")
            raise FilterValidationException(duplicate_name_message(f.name))
        seen.add(key)

    if not any(f.name == DEFAULT_NAME for f in normalized):
        logger.debug("No default filter present")
        raise FilterValidationException(MSG_NO_DEFAULT_FILTER)

    return normalized


def _describe(error: PydanticValidationError) -> str:
    """One-line summary of a pydantic error for FilterParseError."""
    parts = []
    for item in error.errors():
        location = ".".join(str(p) for p in item["loc"]) or "document"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


class Filters:
    """
    Ordered, validated collection of dashboard views.

    Construct with Filters([...]) or one of the factory methods; each
    raises FilterValidationException if the views break a collection rule.
    """

    __slots__ = ("_filters",)

    def __init__(
        self,
        filters: Sequence[DashboardFilter],
        *,
        validator: Optional[FilterValidator] = None,
        case_insensitive_duplicates: bool = False,
    ) -> None:
        """
        Validate and wrap a list of views.

        Args:
            filters: Views in display order
            validator: Name validator (defaults to the standard rules)
            case_insensitive_duplicates: Treat "One" and "one" as duplicates

        Raises:
            FilterValidationException: If the views break a rule
            AttributeError: If called again on an existing instance
        """
        if hasattr(self, "_filters"):
            raise AttributeError("Filters is immutable")
        normalized = validate_collection(
            filters,
            validator=validator,
            case_insensitive_duplicates=case_insensitive_duplicates,
        )
        object.__setattr__(self, "_filters", normalized)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Filters is immutable")

    @property
    def filters(self) -> Tuple[DashboardFilter, ...]:
        return self._filters

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def single(cls, dashboard_filter: DashboardFilter) -> "Filters":
        """Collection holding one view, which must be the default view."""
        return cls([dashboard_filter])

    @classmethod
    def defaults(cls) -> "Filters":
        """Collection holding only the wildcard view."""
        return cls.single(WILDCARD_FILTER)

    @classmethod
    def from_json(
        cls,
        text: str,
        validator: Optional[FilterValidator] = None,
        case_insensitive_duplicates: bool = False,
    ) -> "Filters":
        """
        Parse and validate a serialized filters document.

        Args:
            text: JSON document
            validator: Name validator (defaults to the standard rules)
            case_insensitive_duplicates: Treat "One" and "one" as duplicates

        Returns:
            Validated Filters

        Raises:
            FilterParseError: If the document has the wrong shape
            FilterValidationException: If the views break a rule
        """
        try:
            document = FiltersDocument.model_validate_json(text)
        except PydanticValidationError as e:
            logger.debug(f"Unparseable filters document: {_describe(e)}")
            raise FilterParseError(f"Invalid filters document: {_describe(e)}") from e

        return cls(
            document.filters,
            validator=validator,
            case_insensitive_duplicates=case_insensitive_duplicates,
        )

    @classmethod
    def from_dict(
        cls,
        data: Any,
        validator: Optional[FilterValidator] = None,
        case_insensitive_duplicates: bool = False,
    ) -> "Filters":
        """Same as from_json() for an already decoded document."""
        try:
            document = FiltersDocument.model_validate(data)
        except PydanticValidationError as e:
            logger.debug(f"Unparseable filters document: {_describe(e)}")
            raise FilterParseError(f"Invalid filters document: {_describe(e)}") from e

        return cls(
            document.filters,
            validator=validator,
            case_insensitive_duplicates=case_insensitive_duplicates,
        )

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def _document(self) -> FiltersDocument:
        return FiltersDocument.model_construct(filters=list(self._filters))

    def to_json(self) -> str:
        """Canonical compact JSON: fields name, pipelines, type."""
        return self._document().model_dump_json()

    def to_dict(self) -> Dict[str, Any]:
        return self._document().model_dump(mode="json")

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def named(self, name: Optional[str]) -> Optional[DashboardFilter]:
        """Find a view by name, ignoring letter case."""
        if name is None:
            return None
        wanted = name.lower()
        for f in self._filters:
            if f.name.lower() == wanted:
                return f
        return None

    def default_filter(self) -> DashboardFilter:
        """The mandatory default view."""
        return next(f for f in self._filters if f.name == DEFAULT_NAME)

    def names(self) -> List[str]:
        return [f.name for f in self._filters]

    def __len__(self) -> int:
        return len(self._filters)

    def __iter__(self) -> Iterator[DashboardFilter]:
        return iter(self._filters)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Filters):
            return NotImplemented
        return self._filters == other._filters

    def __hash__(self) -> int:
        return hash(self._filters)

    def __repr__(self) -> str:
        return f"Filters({list(self._filters)!r})"
