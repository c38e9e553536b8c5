"""
Service Layer - Use Cases Over Stored Views.

    - DashboardViewsService: Load and replace a user's views
"""

from dashboard_filters.service.views_service import DashboardViewsService

__all__ = ["DashboardViewsService"]
