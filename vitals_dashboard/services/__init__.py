"""
Services package for the patient vitals dashboard.

This package contains the pipeline steps and the orchestration layer.
"""
from vitals_dashboard.services.patient_selector import select_by_name
from vitals_dashboard.services.history_analyzer import (
    MONTHS,
    YearlyMean,
    YearlyAggregate,
    most_recent,
    aggregate_by_year,
)
from vitals_dashboard.services.view_renderer import PLACEHOLDER, ViewRenderer, display_value
from vitals_dashboard.services.graph import ChartRenderer, PlotlyBuilder
from vitals_dashboard.services.dashboard_service import DashboardService, LoadState

__all__ = [
    "select_by_name",
    "MONTHS",
    "YearlyMean",
    "YearlyAggregate",
    "most_recent",
    "aggregate_by_year",
    "PLACEHOLDER",
    "ViewRenderer",
    "display_value",
    "ChartRenderer",
    "PlotlyBuilder",
    "DashboardService",
    "LoadState",
]
