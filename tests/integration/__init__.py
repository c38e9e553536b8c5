"""
Integration Tests - Components Working Together.

Test Files:
    - test_dashboard_views.py: Store, service, selector and JSON end to end
"""
