"""Rich renderables for the weather dashboard, forecast cards and suggestions."""

from __future__ import annotations

from datetime import datetime

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..state import WidgetState
from ..theme import Gradient, theme_for
from ..timefmt import format_event_time, format_forecast_day, format_now_at
from ..weather.models import CurrentConditions, ForecastEntry

USE_CURRENT_LOCATION_LABEL = "Use My Current Location"


def _foreground_for(hex_color: str) -> str:
    """Pick black or white text for legibility on a hex background."""
    value = hex_color.lstrip("#")
    red, green, blue = (int(value[i : i + 2], 16) for i in (0, 2, 4))
    luminance = 0.299 * red + 0.587 * green + 0.114 * blue
    return "black" if luminance > 150 else "white"


def _fmt(value: float | int | None, suffix: str = "") -> str:
    if value is None:
        return "-"
    return f"{value:g}{suffix}"


def _panel_style(gradient: Gradient) -> str:
    return f"{_foreground_for(gradient.top)} on {gradient.top}"


def render_current(current: CurrentConditions, now: datetime | None = None) -> Panel:
    """Main conditions panel, tinted by the condition theme."""
    gradient = theme_for(current.condition)
    heading = current.city_name
    if current.country_code:
        heading = f"{heading}, {current.country_code}"

    details = Table.grid(padding=(0, 2))
    details.add_column(justify="right", style="bold")
    details.add_column()
    details.add_row("Local Time", format_now_at(current.utc_offset_seconds, now=now))
    details.add_row("Condition", current.condition or "-")
    if current.icon_url:
        details.add_row("Icon", current.icon_url)
    details.add_row("Temperature", _fmt(current.temperature, " °C"))
    details.add_row("Temp Range", current.temp_range_label)
    details.add_row("Feels Like", _fmt(current.feels_like, " °C"))
    details.add_row("Humidity", _fmt(current.humidity, "%"))
    details.add_row("Pressure", _fmt(current.pressure, " hPa"))
    details.add_row("Wind", _fmt(current.wind_speed, " m/s"))
    if current.sunrise is not None:
        details.add_row("Sunrise", format_event_time(current.sunrise, current.utc_offset_seconds))
    if current.sunset is not None:
        details.add_row("Sunset", format_event_time(current.sunset, current.utc_offset_seconds))

    return Panel(
        details,
        title=Text(heading, style="bold"),
        subtitle=gradient.css(),
        style=_panel_style(gradient),
        border_style=gradient.bottom,
    )


def render_forecast(entries: tuple[ForecastEntry, ...] | list[ForecastEntry]) -> Table:
    table = Table(title="5-Day Forecast")
    table.add_column("Day", no_wrap=True)
    table.add_column("Temp", no_wrap=True)
    table.add_column("Condition", no_wrap=True)
    table.add_column("Icon", overflow="fold")
    for entry in entries:
        table.add_row(
            format_forecast_day(entry.timestamp),
            _fmt(entry.temperature, "°C"),
            entry.condition or "-",
            entry.icon_url or "-",
        )
    return table


def render_report(state: WidgetState, now: datetime | None = None) -> RenderableType:
    """Dashboard for the current state; empty text when nothing is loaded."""
    if state.current is None:
        return Text("")
    parts: list[RenderableType] = [render_current(state.current, now=now)]
    if state.forecast:
        parts.append(render_forecast(state.forecast))
    return Group(*parts)


def render_suggestions(state: WidgetState) -> RenderableType:
    """Numbered suggestion list led by the current-location option."""
    if not state.show_suggestions or not state.suggestions:
        return Text("")
    table = Table(title="Suggestions", show_header=False)
    table.add_column("#", justify="right")
    table.add_column("Place", overflow="fold")
    table.add_row("0", USE_CURRENT_LOCATION_LABEL)
    for index, candidate in enumerate(state.suggestions, start=1):
        table.add_row(str(index), candidate.label)
    return table


def render_notice(notice: str | None) -> RenderableType:
    if not notice:
        return Text("")
    return Panel(Text(notice, style="bold"), border_style="red")
