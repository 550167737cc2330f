"""Tests for the ViewerState reducer.

Covers text edits, parse lifecycle, error preservation of the last good
model, last-write-wins ordering by completion time, direction changes,
clearing, and purity (input state never mutated).
"""

from __future__ import annotations

import pytest

from json_graph_layout.algorithm.config import LayoutDirection
from json_graph_layout.errors import ParseError
from json_graph_layout.parser import JsonParseService
from json_graph_layout.result import ParseResult
from json_graph_layout.state import (
    DEFAULT_TEXT,
    Cleared,
    DirectionChanged,
    ParseFailed,
    ParseStarted,
    ParseSucceeded,
    TextChanged,
    ViewerState,
    event_from_result,
    reduce,
)
from json_graph_layout.tree.builder import GraphModelBuilder


@pytest.fixture
def loaded() -> ViewerState:
    model = GraphModelBuilder().build({"name": "Example", "children": []})
    return reduce(ViewerState(), ParseSucceeded(model=model, completed_at=100.0))


class TestInitialState:
    def test_defaults(self) -> None:
        state = ViewerState()
        assert state.text == DEFAULT_TEXT
        assert state.model.is_empty
        assert state.error is None
        assert state.direction == LayoutDirection.TB
        assert state.revision == 0


class TestParseLifecycle:
    def test_text_changed(self) -> None:
        assert reduce(ViewerState(), TextChanged("[]")).text == "[]"

    def test_started_sets_parsing_and_clears_error(self) -> None:
        state = ViewerState(error=ParseError("boom"))
        state = reduce(state, ParseStarted())
        assert state.parsing
        assert state.error is None

    def test_success_replaces_model(self, loaded: ViewerState) -> None:
        assert len(loaded.model) == 3
        assert loaded.last_parsed_at == 100.0
        assert loaded.revision == 1
        assert not loaded.parsing

    def test_failure_keeps_previous_model(self, loaded: ViewerState) -> None:
        error = ParseError("Expecting property name enclosed in double quotes", 1, 2, 1)
        state = reduce(loaded, ParseFailed(error=error, completed_at=101.0))
        assert state.error is error
        assert state.model is loaded.model
        assert state.revision == loaded.revision

    def test_success_after_failure_clears_error(self, loaded: ViewerState) -> None:
        state = reduce(loaded, ParseFailed(error=ParseError("x"), completed_at=101.0))
        model = GraphModelBuilder().build([1])
        state = reduce(state, ParseSucceeded(model=model, completed_at=102.0))
        assert state.error is None
        assert state.model is model


class TestLastWriteWins:
    def test_older_success_is_discarded(self, loaded: ViewerState) -> None:
        stale = GraphModelBuilder().build("old")
        state = reduce(loaded, ParseSucceeded(model=stale, completed_at=50.0))
        assert state.model is loaded.model
        assert state.last_parsed_at == 100.0

    def test_older_failure_is_discarded(self, loaded: ViewerState) -> None:
        state = reduce(loaded, ParseFailed(error=ParseError("late"), completed_at=99.0))
        assert state.error is None

    def test_newer_success_wins(self, loaded: ViewerState) -> None:
        fresh = GraphModelBuilder().build("new")
        state = reduce(loaded, ParseSucceeded(model=fresh, completed_at=150.0))
        assert state.model is fresh

    def test_success_older_than_newer_failure_is_discarded(self) -> None:
        first = GraphModelBuilder().build({"v": 1})
        late = GraphModelBuilder().build({"v": 0})
        error = ParseError("Expecting value")
        state = reduce(ViewerState(), ParseSucceeded(model=first, completed_at=1.0))
        state = reduce(state, ParseFailed(error=error, completed_at=5.0))
        state = reduce(state, ParseSucceeded(model=late, completed_at=3.0))
        assert state.error is error
        assert state.model is first
        assert state.last_outcome_at == 5.0
        assert state.revision == 1

    def test_failure_advances_outcome_time_only(self, loaded: ViewerState) -> None:
        state = reduce(loaded, ParseFailed(error=ParseError("x"), completed_at=120.0))
        assert state.last_parsed_at == 100.0
        assert state.last_outcome_at == 120.0


class TestOtherEvents:
    def test_direction_changed(self) -> None:
        state = reduce(ViewerState(), DirectionChanged(LayoutDirection.LR))
        assert state.direction == LayoutDirection.LR

    def test_cleared(self, loaded: ViewerState) -> None:
        state = reduce(loaded, Cleared())
        assert state.text == ""
        assert state.model.is_empty
        assert state.error is None

    def test_unknown_event_raises(self) -> None:
        with pytest.raises(TypeError):
            reduce(ViewerState(), object())  # type: ignore[arg-type]

    def test_input_state_untouched(self, loaded: ViewerState) -> None:
        before = loaded
        reduce(loaded, TextChanged("changed"))
        assert loaded.text == before.text == DEFAULT_TEXT


class TestEventFromResult:
    def test_success(self) -> None:
        event = event_from_result(JsonParseService().parse("[1]"))
        assert isinstance(event, ParseSucceeded)

    def test_failure(self) -> None:
        event = event_from_result(JsonParseService().parse("{"))
        assert isinstance(event, ParseFailed)
        assert isinstance(event.error, ParseError)

    def test_result_without_model_or_error_rejected(self) -> None:
        empty = ParseResult(model=None, error=None, parsed_at=0.0, elapsed_ms=0.0)
        with pytest.raises(ValueError, match="neither a model nor an error"):
            event_from_result(empty)
