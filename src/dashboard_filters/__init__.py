"""
Dashboard Filters - Pipeline Visibility Views for CD Dashboards.

Lets a user define named views over their pipelines. Each view is either a
whitelist (only the listed pipelines are shown) or a blacklist (everything
but the listed pipelines is shown). Every user's collection must contain a
view named "Default".

Main Components:
    - domain: WhitelistFilter, BlacklistFilter, Filters collection
    - validation: FilterValidator and error types
    - selection: PipelineSelector (apply a view to pipelines)
    - interfaces / adapters: FiltersStore protocol and in-memory store
    - service: DashboardViewsService (load/replace stored views)
    - config: Configuration models and YAML loader

Example:
    >>> from dashboard_filters import Filters
    >>> filters = Filters.from_json(
    ...     '{"filters":[{"name":"Default","type":"whitelist","pipelines":["p1"]}]}'
    ... )
    >>> filters.default_filter().is_pipeline_included("p1")
    True
"""

import logging
from typing import Union

from dashboard_filters.domain import (
    DEFAULT_NAME,
    WILDCARD_FILTER,
    BlacklistFilter,
    DashboardFilter,
    Filters,
    SelectionResult,
    WhitelistFilter,
)
from dashboard_filters.validation import (
    DashboardFilterError,
    FilterParseError,
    FilterValidationException,
    FilterValidator,
)

__version__ = "0.1.0"


def configure_logging(
    level: Union[int, str] = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Dashboard Filters.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level or its name (default: INFO)
        format: Log message format

    Example:
        >>> import dashboard_filters
        >>> dashboard_filters.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("dashboard_filters").setLevel(level)


__all__ = [
    "DEFAULT_NAME",
    "WILDCARD_FILTER",
    "BlacklistFilter",
    "DashboardFilter",
    "DashboardFilterError",
    "FilterParseError",
    "FilterValidationException",
    "FilterValidator",
    "Filters",
    "SelectionResult",
    "WhitelistFilter",
    "configure_logging",
]
