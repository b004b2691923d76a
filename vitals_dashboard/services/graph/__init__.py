"""
Graph package for the blood pressure chart.

This package contains:
- ChartRenderer: Public orchestration layer for drawing the chart
- PlotlyBuilder: Plotly-specific figure construction

Usage:
    from vitals_dashboard.services.graph import ChartRenderer

    ChartRenderer().render(surface, patient.diagnosis_history)
"""

from vitals_dashboard.services.graph.chart_renderer import ChartRenderer
from vitals_dashboard.services.graph.plotly_builder import PlotlyBuilder

__all__ = [
    "ChartRenderer",
    "PlotlyBuilder",
]
