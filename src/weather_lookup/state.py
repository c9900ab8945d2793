"""Widget display state and its event-driven transitions."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .weather.models import CurrentConditions, ForecastEntry, PlaceCandidate, WeatherReport


@dataclass(frozen=True, slots=True)
class WidgetState:
    """Everything the presentation layer needs to draw one frame."""

    city_input: str = ""
    current: CurrentConditions | None = None
    forecast: tuple[ForecastEntry, ...] = ()
    suggestions: tuple[PlaceCandidate, ...] = ()
    show_suggestions: bool = False
    notice: str | None = None
    generation: int = 0
    suggestion_generation: int = 0


@dataclass(frozen=True, slots=True)
class CityInputChanged:
    text: str


@dataclass(frozen=True, slots=True)
class QueryDispatched:
    generation: int


@dataclass(frozen=True, slots=True)
class QuerySucceeded:
    report: WeatherReport
    generation: int
    update_input: bool = False


@dataclass(frozen=True, slots=True)
class QueryFailed:
    notice: str
    generation: int


@dataclass(frozen=True, slots=True)
class SuggestionsDispatched:
    generation: int


@dataclass(frozen=True, slots=True)
class SuggestionsUpdated:
    candidates: tuple[PlaceCandidate, ...] = field(default_factory=tuple)
    generation: int = 0


@dataclass(frozen=True, slots=True)
class SuggestionsCleared:
    pass


@dataclass(frozen=True, slots=True)
class LocationFailed:
    reason: str


WidgetEvent = (
    CityInputChanged
    | QueryDispatched
    | QuerySucceeded
    | QueryFailed
    | SuggestionsDispatched
    | SuggestionsUpdated
    | SuggestionsCleared
    | LocationFailed
)


def reduce(state: WidgetState, event: WidgetEvent) -> WidgetState:
    """Return the state after applying one event.

    Results tagged with a generation older than the latest dispatched one
    of the same kind are ignored.
    """
    if isinstance(event, CityInputChanged):
        return replace(state, city_input=event.text)

    if isinstance(event, QueryDispatched):
        return replace(state, generation=max(state.generation, event.generation))

    if isinstance(event, QuerySucceeded):
        if event.generation < state.generation:
            return state
        report = event.report
        return replace(
            state,
            current=report.current,
            forecast=tuple(report.forecast),
            city_input=report.resolved_name if event.update_input else state.city_input,
            show_suggestions=False,
            notice=None,
        )

    if isinstance(event, QueryFailed):
        if event.generation < state.generation:
            return state
        return replace(state, current=None, forecast=(), notice=event.notice)

    if isinstance(event, SuggestionsDispatched):
        return replace(
            state,
            suggestion_generation=max(state.suggestion_generation, event.generation),
        )

    if isinstance(event, SuggestionsUpdated):
        if event.generation < state.suggestion_generation:
            return state
        return replace(
            state,
            suggestions=tuple(event.candidates),
            show_suggestions=True,
        )

    if isinstance(event, SuggestionsCleared):
        return replace(state, suggestions=(), show_suggestions=False)

    if isinstance(event, LocationFailed):
        # Location errors are log-only.
        return state

    raise TypeError(f"Unsupported widget event {type(event).__name__}")
