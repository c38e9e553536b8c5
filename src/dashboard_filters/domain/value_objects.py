"""
Value Objects for Domain Layer.

Value objects are immutable results that describe the outcome of applying
a view; they have no identity of their own.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class SelectionResult(BaseModel):
    """Result of applying one dashboard view to a list of pipelines."""

    view_name: str = Field(..., description="Name of the view that was applied")
    visible_pipelines: List[str] = Field(
        default_factory=list, description="Pipelines the view shows"
    )
    hidden_pipelines: List[str] = Field(
        default_factory=list, description="Pipelines the view hides"
    )
    fell_back_to_default: bool = Field(
        default=False, description="Requested view was unknown"
    )

    model_config = {"frozen": True}

    @property
    def visible_count(self) -> int:
        return len(self.visible_pipelines)

    @property
    def hidden_count(self) -> int:
        return len(self.hidden_pipelines)
