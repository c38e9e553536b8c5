"""
Adapters Layer - Infrastructure Implementations.

Adapters:
    - InMemoryFiltersStore: Dict-backed FiltersStore for tests and single processes
"""

from dashboard_filters.adapters.memory_store import InMemoryFiltersStore, document_etag

__all__ = ["InMemoryFiltersStore", "document_etag"]
