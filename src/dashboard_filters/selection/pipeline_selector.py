"""
Pipeline Selector - Apply a Dashboard View to Pipelines.

Given a user's Filters and the names of all pipelines on the dashboard,
splits them into visible and hidden according to one named view. An
unknown view name falls back to the default view.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from dashboard_filters.domain.dashboard_filter import DashboardFilter
from dashboard_filters.domain.filters import Filters
from dashboard_filters.domain.value_objects import SelectionResult

logger = logging.getLogger(__name__)


class PipelineSelector:
    """Selects visible pipelines for a named view."""

    def __init__(self, filters: Filters) -> None:
        """
        Initialize with a user's views.

        Args:
            filters: Validated collection of views
        """
        self.filters = filters

    def resolve(self, view_name: Optional[str] = None) -> DashboardFilter:
        """
        Find the view to apply.

        Args:
            view_name: Requested view, or None for the default view

        Returns:
            The named view, or the default view if it doesn't exist
        """
        if view_name is None or not view_name.strip():
            return self.filters.default_filter()

        found = self.filters.named(view_name)
        if found is None:
            logger.warning(f"Unknown view {view_name!r}, using default view")
            return self.filters.default_filter()
        return found

    def select(
        self,
        pipeline_names: Iterable[str],
        view_name: Optional[str] = None,
    ) -> SelectionResult:
        """
        Apply a view to pipelines.

        Args:
            pipeline_names: Pipelines on the dashboard, in display order
            view_name: Requested view, or None for the default view

        Returns:
            SelectionResult with visible and hidden pipelines in input order
        """
        view = self.resolve(view_name)

        visible: List[str] = []
        hidden: List[str] = []
        for pipeline in pipeline_names:
            if view.is_pipeline_included(pipeline):
                visible.append(pipeline)
            else:
                hidden.append(pipeline)

        logger.debug(
            f"View {view.name!r} ({view.type}): "
            f"{len(visible)} visible, {len(hidden)} hidden"
        )

        fell_back = bool(view_name and view_name.strip()) and (
            view.name.lower() != view_name.lower()
        )
        return SelectionResult(
            view_name=view.name,
            visible_pipelines=visible,
            hidden_pipelines=hidden,
            fell_back_to_default=fell_back,
        )
