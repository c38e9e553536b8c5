"""
Dashboard Filter Variants.

A dashboard view selects which pipelines a user sees. There are exactly two
kinds, sharing one data shape (name, pipelines) and differing only in the
inclusion rule:

    - WhitelistFilter: only the listed pipelines are visible
    - BlacklistFilter: every pipeline except the listed ones is visible

DashboardFilter is the closed, tagged union of both, discriminated by the
"type" field. Pipeline names compare case-insensitively.
"""

from __future__ import annotations

from typing import Annotated, FrozenSet, Iterable, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator

DEFAULT_NAME = "Default"

WHITELIST = "whitelist"
BLACKLIST = "blacklist"


def pipeline_key(pipeline_name: str) -> str:
    """Comparison key for a pipeline name."""
    return pipeline_name.lower()


class _FilterShape(BaseModel):
    """Fields shared by both filter variants."""

    name: Optional[str] = Field(default=None, description="Display name of the view")
    pipelines: Tuple[str, ...] = Field(
        default=(), description="Pipeline names, in insertion order"
    )

    model_config = {"frozen": True}

    @field_validator("pipelines", mode="before")
    @classmethod
    def _absent_pipelines_are_empty(cls, value: object) -> object:
        return () if value is None else value

    @property
    def pipeline_keys(self) -> FrozenSet[str]:
        """Pipelines as a case-insensitive set."""
        return frozenset(pipeline_key(p) for p in self.pipelines)

    def contains(self, pipeline_name: str) -> bool:
        return pipeline_key(pipeline_name) in self.pipeline_keys

    def is_pipeline_included(self, pipeline_name: str) -> bool:
        raise NotImplementedError

    def allowed_pipelines(self, pipeline_names: Iterable[str]) -> List[str]:
        """Pipelines from pipeline_names this view shows, in input order."""
        return [p for p in pipeline_names if self.is_pipeline_included(p)]

    def with_name(self, name: str) -> "DashboardFilter":
        return self.model_copy(update={"name": name})

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _FilterShape):
            return NotImplemented
        return (
            self.type == other.type
            and self.name == other.name
            and self.pipeline_keys == other.pipeline_keys
        )

    def __hash__(self) -> int:
        return hash((self.type, self.name, self.pipeline_keys))


class WhitelistFilter(_FilterShape):
    """Shows only the listed pipelines."""

    type: Literal["whitelist"] = WHITELIST

    def is_pipeline_included(self, pipeline_name: str) -> bool:
        return self.contains(pipeline_name)


class BlacklistFilter(_FilterShape):
    """Shows every pipeline except the listed ones."""

    type: Literal["blacklist"] = BLACKLIST

    def is_pipeline_included(self, pipeline_name: str) -> bool:
        return not self.contains(pipeline_name)


DashboardFilter = Annotated[
    Union[WhitelistFilter, BlacklistFilter],
    Field(discriminator="type"),
]

FILTER_VARIANTS = (WhitelistFilter, BlacklistFilter)

# Blacklist with nothing excluded: shows every pipeline
WILDCARD_FILTER = BlacklistFilter(name=DEFAULT_NAME)


def is_default_name(name: Optional[str]) -> bool:
    """Check whether name denotes the default view (any letter case)."""
    return name is not None and name.lower() == DEFAULT_NAME.lower()
