"""Terminal presentation helpers."""

from .render import render_current, render_forecast, render_notice, render_report, render_suggestions

__all__ = [
    "render_current",
    "render_forecast",
    "render_notice",
    "render_report",
    "render_suggestions",
]
