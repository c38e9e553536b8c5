"""
Unit Tests - Testing Individual Components in Isolation.

Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_filter_validator.py: View name rules
    - test_dashboard_filter.py: Whitelist/blacklist inclusion and equality
    - test_filters.py: Collection invariants on construction
    - test_filters_json.py: Serialized form and parse errors
    - test_pipeline_selector.py: Applying views to pipelines
    - test_memory_store.py: In-memory store
    - test_views_service.py: Loading and replacing views
    - test_config_loader.py: Configuration loading/validation
"""
