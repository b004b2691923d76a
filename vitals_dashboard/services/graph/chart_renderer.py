"""
Service layer for the yearly blood pressure chart.

This module orchestrates data preparation and Plotly figure construction.
Per-year aggregation is delegated to history_analyzer.aggregate_by_year.
Figure construction is delegated to PlotlyBuilder.
"""

import logging
from typing import Optional, Sequence

import plotly.graph_objects as go

from vitals_dashboard.schemas import HistoryEntry
from vitals_dashboard.services.graph.plotly_builder import PlotlyBuilder
from vitals_dashboard.services.history_analyzer import YearlyAggregate, aggregate_by_year
from vitals_dashboard.surface.base import DisplaySurface

logger = logging.getLogger(__name__)


class ChartRenderer:
    """Draws the yearly systolic/diastolic chart onto a DisplaySurface."""

    def __init__(self, plotly_builder: Optional[PlotlyBuilder] = None):
        self._builder = plotly_builder or PlotlyBuilder()

    def build_figure(self, aggregate: YearlyAggregate) -> go.Figure:
        """Build the two-series line chart for an already computed aggregate."""
        fig = self._builder.create_figure()
        self._builder.add_blood_pressure_traces(fig, aggregate)
        self._builder.apply_layout(fig)
        return fig

    def render(
        self,
        surface: DisplaySurface,
        history: Optional[Sequence[HistoryEntry]],
        aggregate: Optional[YearlyAggregate] = None,
    ) -> bool:
        """
        Draw the chart for history.

        Does nothing for an empty or missing history. Returns True when a
        chart was drawn.
        """
        if not history:
            logger.debug("No diagnosis history; chart skipped")
            return False

        if aggregate is None:
            aggregate = aggregate_by_year(history)

        surface.draw_chart(self.build_figure(aggregate))
        logger.debug("Chart drawn", extra={"years": list(aggregate)})
        return True
