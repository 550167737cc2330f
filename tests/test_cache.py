"""Unit tests for LayoutCache.

Tests cover:
- Cache hits (unchanged structure bypasses the engine on the second call)
- Direction and engine config are part of the key
- Structure-preserving edits (value changes) are cache hits
- LRU eviction at max_size
- Instance isolation
- Returned lists are independent copies
"""

from __future__ import annotations

from typing import Any

from json_graph_layout.algorithm.config import LayoutConfig
from json_graph_layout.algorithm.layout import LayoutEngine
from json_graph_layout.cache import LayoutCache
from json_graph_layout.tree.builder import GraphModelBuilder

# ---------------------------------------------------------------------------
# Spy helper
# ---------------------------------------------------------------------------


def _make_spy_engine() -> tuple[LayoutEngine, list[Any]]:
    """Wrap ``LayoutEngine.layout`` with a spy that records each call."""
    engine = LayoutEngine()
    call_log: list[Any] = []
    original_layout = engine.layout

    def spy_layout(model: Any, direction: Any = "TB", initial_positions: Any = None) -> Any:
        call_log.append((len(model), str(direction)))
        return original_layout(model, direction, initial_positions)

    engine.layout = spy_layout  # type: ignore[method-assign]
    return engine, call_log


def _model(doc: Any) -> Any:
    return GraphModelBuilder().build(doc)


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestHits:
    def test_second_call_served_from_cache(self) -> None:
        engine, call_log = _make_spy_engine()
        cache = LayoutCache(engine)
        model = _model({"a": [1, 2]})

        first = cache.layout(model, "TB")
        second = cache.layout(model, "TB")

        assert first == second
        assert len(call_log) == 1
        assert (cache.hits, cache.misses) == (1, 1)

    def test_direction_is_part_of_key(self) -> None:
        engine, call_log = _make_spy_engine()
        cache = LayoutCache(engine)
        model = _model({"a": 1})

        cache.layout(model, "TB")
        cache.layout(model, "LR")
        cache.layout(model, "TB")

        assert call_log == [(2, "TB"), (2, "LR")]

    def test_engine_config_is_part_of_key(self) -> None:
        engine, call_log = _make_spy_engine()
        cache = LayoutCache(engine)
        model = _model([1])

        default = cache.layout(model, "TB")
        engine._config = LayoutConfig(rank_gap=20.0)
        tight = cache.layout(model, "TB")

        assert len(call_log) == 2
        assert default[1].y == 200.0
        assert tight[1].y == 70.0

    def test_value_edit_keeps_structure_and_hits(self) -> None:
        engine, call_log = _make_spy_engine()
        cache = LayoutCache(engine)

        cache.layout(_model({"name": "Ada"}))
        cache.layout(_model({"name": "Grace"}))

        assert len(call_log) == 1

    def test_structural_edit_misses(self) -> None:
        engine, call_log = _make_spy_engine()
        cache = LayoutCache(engine)

        cache.layout(_model({"name": "Ada"}))
        cache.layout(_model({"name": "Ada", "age": 36}))

        assert len(call_log) == 2


class TestEviction:
    def test_lru_eviction(self) -> None:
        engine, call_log = _make_spy_engine()
        cache = LayoutCache(engine, max_size=2)
        a, b, c = _model({"a": 1}), _model({"b": 1}), _model({"c": 1})

        cache.layout(a)
        cache.layout(b)
        cache.layout(c)  # evicts a
        assert cache.curr_size == 2

        cache.layout(a)
        assert len(call_log) == 4

    def test_properties(self) -> None:
        cache = LayoutCache(max_size=7)
        assert cache.max_size == 7
        assert cache.curr_size == 0

    def test_clear(self) -> None:
        cache = LayoutCache()
        cache.layout(_model([1]))
        cache.clear()
        assert cache.curr_size == 0


class TestIsolation:
    def test_instances_do_not_share_state(self) -> None:
        first = LayoutCache()
        second = LayoutCache()
        first.layout(_model([1, 2]))
        assert second.curr_size == 0

    def test_returned_list_is_a_copy(self) -> None:
        cache = LayoutCache()
        model = _model([1, 2])
        positions = cache.layout(model)
        positions.clear()
        assert len(cache.layout(model)) == 3
