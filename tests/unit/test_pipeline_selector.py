"""
Unit Tests for PipelineSelector.

Test Aspects Covered:
    ✅ Business Logic: Visible/hidden split per view
    ✅ Edge Cases: Unknown or empty view names fall back to the default view
"""

from __future__ import annotations

from typing import List

import pytest

from dashboard_filters.domain.filters import Filters
from dashboard_filters.selection.pipeline_selector import PipelineSelector


@pytest.fixture
def selector(team_filters: Filters) -> PipelineSelector:
    """Create selector over the team views."""
    return PipelineSelector(team_filters)


class TestSelect:
    """Test cases for select()."""

    def test_default_wildcard_shows_everything(
        self,
        selector: PipelineSelector,
        sample_pipelines: List[str],
    ) -> None:
        """
        SCENARIO: No view requested; default view is the wildcard
        EXPECTED: All pipelines visible, none hidden
        """
        result = selector.select(sample_pipelines)

        assert result.view_name == "Default"
        assert result.visible_pipelines == sample_pipelines
        assert result.hidden_count == 0
        assert not result.fell_back_to_default

    def test_whitelist_view(
        self,
        selector: PipelineSelector,
        sample_pipelines: List[str],
    ) -> None:
        """
        SCENARIO: "deploys" requested (stored as "Deploys")
        EXPECTED: Only the listed pipelines visible, rest hidden in order
        """
        result = selector.select(sample_pipelines, view_name="deploys")

        assert result.view_name == "Deploys"
        assert result.visible_pipelines == ["deploy-staging", "deploy-prod"]
        assert result.hidden_pipelines == ["build-linux", "build-windows", "docs"]

    def test_blacklist_view_ignores_case(
        self,
        selector: PipelineSelector,
        sample_pipelines: List[str],
    ) -> None:
        result = selector.select(sample_pipelines, view_name="No Docs")

        assert result.hidden_pipelines == ["docs"]
        assert result.visible_count == 4

    def test_unknown_view_falls_back(
        self,
        selector: PipelineSelector,
        sample_pipelines: List[str],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """
        SCENARIO: View name that doesn't exist
        EXPECTED: Default view applied, fallback flagged and logged
        """
        result = selector.select(sample_pipelines, view_name="Nope")

        assert result.view_name == "Default"
        assert result.fell_back_to_default
        assert result.visible_pipelines == sample_pipelines
        assert "Nope" in caplog.text

    @pytest.mark.parametrize("view_name", [None, "", "   "])
    def test_blank_view_uses_default_without_fallback_flag(
        self,
        selector: PipelineSelector,
        view_name,
    ) -> None:
        result = selector.select(["p1"], view_name=view_name)

        assert result.view_name == "Default"
        assert not result.fell_back_to_default

    def test_empty_pipeline_list(self, selector: PipelineSelector) -> None:
        result = selector.select([], view_name="Deploys")

        assert result.visible_pipelines == []
        assert result.hidden_pipelines == []


class TestResolve:
    """Test cases for resolve()."""

    def test_resolves_named_view(self, selector: PipelineSelector) -> None:
        assert selector.resolve("DEPLOYS").name == "Deploys"

    def test_resolves_default(self, selector: PipelineSelector) -> None:
        assert selector.resolve().name == "Default"
