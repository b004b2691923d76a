"""
Plotly figure builder for the yearly blood pressure chart.

Responsibilities:
- Creating the systolic and diastolic traces
- Applying layout configuration (bottom legend, shared hover, axis titles)

This module encapsulates all Plotly-specific figure construction logic,
allowing ChartRenderer to focus on orchestration.
"""

import logging
from typing import List

import plotly.graph_objects as go

from vitals_dashboard.services.history_analyzer import YearlyAggregate

logger = logging.getLogger(__name__)

SYSTOLIC_COLOR = "#E66FD2"
DIASTOLIC_COLOR = "#8C6FE6"
GRID_COLOR = "rgba(255,255,255,0.06)"

# Spline smoothing roughly matching a 0.35 curve tension
LINE_SMOOTHING = 0.35


class PlotlyBuilder:
    """
    Builder for the two-series blood pressure line chart.

    Usage:
        builder = PlotlyBuilder()
        fig = builder.create_figure()
        builder.add_blood_pressure_traces(fig, aggregate)
        builder.apply_layout(fig)
    """

    def create_figure(self) -> go.Figure:
        """Create a new empty Plotly figure."""
        return go.Figure()

    def add_blood_pressure_traces(self, fig: go.Figure, aggregate: YearlyAggregate) -> None:
        """
        Add one systolic and one diastolic trace, one point per year.

        Year labels are strings so the x axis is categorical, one tick per year.
        """
        years: List[str] = [str(year) for year in aggregate]
        systolic = [mean.mean_systolic for mean in aggregate.values()]
        diastolic = [mean.mean_diastolic for mean in aggregate.values()]

        fig.add_trace(self._series("Systolic", years, systolic, SYSTOLIC_COLOR))
        fig.add_trace(self._series("Diastolic", years, diastolic, DIASTOLIC_COLOR))

    def _series(self, name: str, years: List[str], values: List[int], color: str) -> go.Scatter:
        return go.Scatter(
            x=years,
            y=values,
            name=name,
            mode="lines+markers",
            line=dict(width=2, color=color, shape="spline", smoothing=LINE_SMOOTHING),
            marker=dict(size=6, color=color),
            hovertemplate=f"{name}: %{{y}} mmHg<extra></extra>",
        )

    def apply_layout(self, fig: go.Figure) -> None:
        """Bottom legend, shared-index hover and Year / mmHg axis titles."""
        fig.update_layout(
            xaxis=dict(
                type="category",
                title=dict(text="Year"),
                showgrid=True,
                gridcolor=GRID_COLOR,
            ),
            yaxis=dict(
                title=dict(text="mmHg"),
                showgrid=True,
                gridcolor=GRID_COLOR,
            ),
            hovermode="x unified",
            legend=dict(
                orientation="h",
                x=0.5, xanchor="center",
                y=-0.2, yanchor="top",
                itemsizing="constant",
            ),
            margin=dict(l=50, r=20, t=20, b=80),
            template="plotly_dark",
            paper_bgcolor="rgba(0,0,0,0)",
            plot_bgcolor="rgba(0,0,0,0)",
        )
