"""Tests for widget state transitions and the controller that drives them."""

from __future__ import annotations

import logging

import pytest
from test_query_service import FakeProvider

from weather_lookup.controller import WidgetController
from weather_lookup.exceptions import WeatherProviderError
from weather_lookup.service import CITY_NOT_FOUND_NOTICE, WeatherQueryService
from weather_lookup.state import (
    CityInputChanged,
    LocationFailed,
    QueryDispatched,
    QueryFailed,
    QuerySucceeded,
    SuggestionsCleared,
    SuggestionsDispatched,
    SuggestionsUpdated,
    WidgetState,
    reduce,
)
from weather_lookup.weather.models import (
    CurrentConditions,
    ForecastEntry,
    PlaceCandidate,
    WeatherReport,
)


def _report(name: str = "Lisbon") -> WeatherReport:
    return WeatherReport(
        current=CurrentConditions(city_name=name, temperature=18.0, condition="Clear"),
        forecast=[ForecastEntry(timestamp="2024-05-01 12:00:00", temperature=19.0)],
        resolved_name=name,
    )


def _candidate(name: str = "Porto") -> PlaceCandidate:
    return PlaceCandidate(name=name, country="PT", latitude=41.15, longitude=-8.61)


def _controller(provider: FakeProvider) -> WidgetController:
    logger = logging.getLogger("test_widget_state")
    return WidgetController(WeatherQueryService(provider, logger), logger)


def test_success_replaces_current_and_forecast_together() -> None:
    state = reduce(WidgetState(show_suggestions=True), QuerySucceeded(_report(), generation=0))
    assert state.current is not None
    assert state.current.city_name == "Lisbon"
    assert len(state.forecast) == 1
    assert state.show_suggestions is False


def test_failure_clears_displayed_data() -> None:
    loaded = reduce(WidgetState(), QuerySucceeded(_report(), generation=0))
    failed = reduce(loaded, QueryFailed(CITY_NOT_FOUND_NOTICE, generation=0))
    assert failed.current is None
    assert failed.forecast == ()
    assert failed.notice == CITY_NOT_FOUND_NOTICE


def test_coordinate_success_updates_input_only_when_asked() -> None:
    base = WidgetState(city_input="41.1,-8.6")
    kept = reduce(base, QuerySucceeded(_report("Porto"), generation=0))
    updated = reduce(base, QuerySucceeded(_report("Porto"), generation=0, update_input=True))
    assert kept.city_input == "41.1,-8.6"
    assert updated.city_input == "Porto"


def test_stale_query_result_is_discarded() -> None:
    state = reduce(WidgetState(), QueryDispatched(1))
    state = reduce(state, QueryDispatched(2))
    state = reduce(state, QuerySucceeded(_report("Newer"), generation=2))
    state = reduce(state, QueryFailed("late failure", generation=1))
    assert state.current is not None
    assert state.current.city_name == "Newer"
    assert state.notice is None


def test_stale_suggestions_are_discarded() -> None:
    state = reduce(WidgetState(), SuggestionsDispatched(1))
    state = reduce(state, SuggestionsDispatched(2))
    state = reduce(state, SuggestionsUpdated((_candidate("Newest"),), generation=2))
    state = reduce(state, SuggestionsUpdated((_candidate("Old"),), generation=1))
    assert [c.name for c in state.suggestions] == ["Newest"]


def test_suggestions_cleared_hides_list() -> None:
    state = reduce(WidgetState(), SuggestionsUpdated((_candidate(),), generation=0))
    assert state.show_suggestions is True
    state = reduce(state, SuggestionsCleared())
    assert state.suggestions == ()
    assert state.show_suggestions is False


def test_location_failure_keeps_prior_display() -> None:
    loaded = reduce(WidgetState(), QuerySucceeded(_report(), generation=0))
    state = reduce(loaded, LocationFailed("permission denied"))
    assert state is loaded
    assert state.notice is None


def test_city_input_changed_only_touches_input() -> None:
    state = reduce(WidgetState(), CityInputChanged("Lis"))
    assert state == WidgetState(city_input="Lis")


def test_controller_typing_fetches_suggestions() -> None:
    provider = FakeProvider(candidates=[_candidate("Lisbon")])
    controller = _controller(provider)
    state = controller.type_text("Lis")
    assert state.city_input == "Lis"
    assert state.show_suggestions is True
    assert [c.name for c in state.suggestions] == ["Lisbon"]


def test_controller_clearing_input_skips_lookup() -> None:
    provider = FakeProvider(candidates=[_candidate("Lisbon")])
    controller = _controller(provider)
    controller.type_text("Lis")
    state = controller.type_text("  ")
    assert state.show_suggestions is False
    assert provider.calls == [("geocode", ("Lis", 5))]


def test_controller_blank_submit_is_noop() -> None:
    provider = FakeProvider()
    controller = _controller(provider)
    before = controller.state
    assert controller.submit() is before
    assert provider.calls == []


def test_controller_suggestion_failure_keeps_forecast() -> None:
    provider = FakeProvider(geocode_error=WeatherProviderError("offline"))
    controller = _controller(provider)
    controller.dispatch(CityInputChanged("Lisbon"))
    loaded = controller.submit()
    after = controller.type_text("Lisb")
    assert after.current == loaded.current
    assert after.forecast == loaded.forecast
    assert after.suggestions == ()


def test_controller_select_queries_by_coordinates_and_sets_input() -> None:
    provider = FakeProvider()
    controller = _controller(provider)
    state = controller.select(_candidate("Porto"))
    assert ("current", {"lat": 41.15, "lon": -8.61}) in provider.calls
    assert state.city_input == "Lisbon"
    assert state.current is not None


def test_controller_failed_query_sets_notice() -> None:
    provider = FakeProvider(current_error=WeatherProviderError("nope"))
    controller = _controller(provider)
    controller.dispatch(CityInputChanged("Nowhere"))
    state = controller.submit()
    assert state.current is None
    assert state.notice == CITY_NOT_FOUND_NOTICE


def test_controller_location_failed_is_log_only(caplog: pytest.LogCaptureFixture) -> None:
    provider = FakeProvider()
    controller = _controller(provider)
    before = controller.state
    with caplog.at_level(logging.ERROR, logger="test_widget_state"):
        state = controller.location_failed("denied")
    assert provider.calls == []
    assert state is before
    assert state.notice is None
    assert "Location access failed: denied" in caplog.text
