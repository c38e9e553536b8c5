"""
Dashboard Views Service - Load and Replace a User's Views.

Connects the Filters model to a FiltersStore:
    - views_for(): stored views, or the wildcard defaults
    - replace_views(): validate a raw document, store its canonical form

A rejected document leaves the stored views untouched.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from dashboard_filters.config.loader import load_config
from dashboard_filters.config.models import ValidationConfig
from dashboard_filters.domain.filters import Filters
from dashboard_filters.interfaces.filters_store import FiltersStore
from dashboard_filters.validation.errors import DashboardFilterError
from dashboard_filters.validation.filter_validator import FilterValidator

logger = logging.getLogger(__name__)


class DashboardViewsService:
    """Reads and replaces users' dashboard views through a store."""

    def __init__(
        self,
        store: FiltersStore,
        config: Optional[ValidationConfig] = None,
    ) -> None:
        """
        Initialize views service.

        Args:
            store: Where filters documents are kept
            config: Name and duplicate rules (defaults if None)
        """
        self.store = store
        self.config = config or ValidationConfig()
        self.validator = FilterValidator.from_config(self.config)

    @classmethod
    def from_config_file(
        cls,
        store: FiltersStore,
        config_path: Union[str, Path],
    ) -> "DashboardViewsService":
        """
        Build a service whose rules come from a YAML config file.

        Args:
            store: Where filters documents are kept
            config_path: Path to the YAML config file

        Raises:
            FileNotFoundError: If the file doesn't exist
            pydantic.ValidationError: If a setting is invalid
        """
        return cls(store, load_config(config_path).validation)

    def parse(self, document: str) -> Filters:
        """Parse a document with this service's rules."""
        return Filters.from_json(
            document,
            validator=self.validator,
            case_insensitive_duplicates=self.config.case_insensitive_duplicates,
        )

    def views_for(self, user: str) -> Filters:
        """
        Get a user's views.

        Args:
            user: User identifier

        Returns:
            Stored Filters, or Filters.defaults() if nothing is stored

        Raises:
            FilterParseError: If the stored document is corrupt
        """
        document = self.store.load(user)
        if document is None:
            return Filters.defaults()
        return self.parse(document)

    def replace_views(self, user: str, document: str) -> Filters:
        """
        Validate a raw document and store it as the user's views.

        Args:
            user: User identifier
            document: Raw filters JSON from the caller

        Returns:
            The validated Filters that were stored

        Raises:
            FilterParseError: If the document has the wrong shape
            FilterValidationException: If the views break a rule
        """
        try:
            filters = self.parse(document)
        except DashboardFilterError as e:
            logger.debug(f"Rejected views for {user}: {e.message}")
            raise

        self.store.save(user, filters.to_json())
        return filters
