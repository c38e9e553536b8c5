"""
Interfaces Layer - Abstract Protocols for Collaborators.

Protocols:
    - FiltersStore: Persistence of a user's filters document

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - No implementation details leak into interfaces
"""

from dashboard_filters.interfaces.filters_store import FiltersStore

__all__ = ["FiltersStore"]
