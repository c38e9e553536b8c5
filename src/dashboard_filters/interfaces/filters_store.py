"""
Filters Store Protocol.

Defines the abstract interface for persisting a user's views. The store
only moves text: it hands raw documents to the engine and keeps the
canonical JSON the engine produces after successful validation.

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - Storage format is the canonical filters JSON
    - Concurrency discipline belongs to the implementation
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class FiltersStore(Protocol):
    """Abstract interface for view persistence."""

    def load(self, user: str) -> Optional[str]:
        """
        Load a user's stored filters document.

        Args:
            user: User identifier

        Returns:
            Canonical JSON, or None if the user has no stored views
        """
        ...

    def save(self, user: str, document: str) -> None:
        """
        Replace a user's stored filters document.

        Args:
            user: User identifier
            document: Canonical JSON of a validated Filters value
        """
        ...
