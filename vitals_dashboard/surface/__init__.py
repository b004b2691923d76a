"""
Presentation surfaces the dashboard renders into.
"""
from vitals_dashboard.surface.base import DisplaySurface, ListItem
from vitals_dashboard.surface.html_surface import HtmlSurface, render_failure_page
from vitals_dashboard.surface.notifier import (
    FAILURE_MESSAGE,
    Notifier,
    ConsoleNotifier,
    CollectingNotifier,
)

__all__ = [
    "DisplaySurface",
    "ListItem",
    "HtmlSurface",
    "render_failure_page",
    "FAILURE_MESSAGE",
    "Notifier",
    "ConsoleNotifier",
    "CollectingNotifier",
]
