"""
Selection Package - Applying Views to Dashboard Pipelines.

    - PipelineSelector: Split pipeline names into visible and hidden
"""

from dashboard_filters.selection.pipeline_selector import PipelineSelector

__all__ = ["PipelineSelector"]
