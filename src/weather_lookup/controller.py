"""Controller that owns widget state and drives the query service."""

from __future__ import annotations

import itertools
import logging

from .service import WeatherQueryService
from .state import (
    CityInputChanged,
    LocationFailed,
    QueryDispatched,
    QueryFailed,
    QuerySucceeded,
    SuggestionsCleared,
    SuggestionsDispatched,
    SuggestionsUpdated,
    WidgetEvent,
    WidgetState,
    reduce,
)
from .weather.models import PlaceCandidate, QueryOutcome


class WidgetController:
    """Translate user actions into service calls and state transitions."""

    def __init__(self, service: WeatherQueryService, logger: logging.Logger) -> None:
        self.service = service
        self.logger = logger
        self.state = WidgetState()
        self._query_ids = itertools.count(1)
        self._suggestion_ids = itertools.count(1)

    def dispatch(self, event: WidgetEvent) -> WidgetState:
        self.state = reduce(self.state, event)
        return self.state

    def type_text(self, text: str) -> WidgetState:
        """Update the search input and refresh suggestions for it."""
        self.dispatch(CityInputChanged(text))
        if not text.strip():
            return self.dispatch(SuggestionsCleared())

        generation = next(self._suggestion_ids)
        self.dispatch(SuggestionsDispatched(generation))
        candidates = self.service.suggest(text)
        return self.dispatch(SuggestionsUpdated(tuple(candidates), generation))

    def submit(self) -> WidgetState:
        """Search by the current input; blank input leaves state untouched."""
        if not self.state.city_input.strip():
            return self.state
        generation = next(self._query_ids)
        self.dispatch(QueryDispatched(generation))
        outcome = self.service.query_by_name(self.state.city_input)
        return self._apply_outcome(outcome, generation, update_input=False)

    def select(self, candidate: PlaceCandidate) -> WidgetState:
        """Look up a chosen suggestion by its coordinates."""
        return self.use_location(candidate.latitude, candidate.longitude)

    def use_location(self, lat: float, lon: float) -> WidgetState:
        generation = next(self._query_ids)
        self.dispatch(QueryDispatched(generation))
        outcome = self.service.query_by_coords(lat, lon)
        return self._apply_outcome(outcome, generation, update_input=True)

    def location_failed(self, reason: str) -> WidgetState:
        self.logger.error("Location access failed: %s", reason)
        return self.dispatch(LocationFailed(reason))

    def _apply_outcome(
        self,
        outcome: QueryOutcome,
        generation: int,
        *,
        update_input: bool,
    ) -> WidgetState:
        if outcome.status == "skipped":
            return self.state
        if outcome.ok and outcome.report is not None:
            return self.dispatch(QuerySucceeded(outcome.report, generation, update_input))
        return self.dispatch(QueryFailed(outcome.notice or "Weather lookup failed.", generation))
