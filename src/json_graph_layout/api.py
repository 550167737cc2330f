"""Public API functions for json-graph-layout.

This module provides the user-facing functions: build_graph, parse, layout and
render.  Each call creates fresh builder/engine instances to guarantee zero
global state mutation between calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from json_graph_layout.algorithm.config import BuildConfig, LayoutConfig, LayoutDirection
from json_graph_layout.algorithm.layout import LayoutEngine
from json_graph_layout.errors import ParseError
from json_graph_layout.parser import JsonParseService
from json_graph_layout.tree.builder import GraphModelBuilder
from json_graph_layout.view import ViewModel, to_view_model

if TYPE_CHECKING:
    from json_graph_layout.result import LayoutPosition, ParseResult
    from json_graph_layout.tree.nodes import GraphModel

__all__ = ["build_graph", "layout", "parse", "render"]


def build_graph(value: Any, config: BuildConfig | None = None) -> GraphModel:
    """Convert an already-parsed JSON value into a GraphModel.

    Args:
        value:  Any JSON value (dict, list, str, int, float, bool, None).
        config: Preview/depth settings.  Defaults to ``BuildConfig()``.

    Returns:
        The GraphModel, nodes in pre-order.

    Raises:
        DepthLimitError: If nesting exceeds ``config.max_depth``.
    """
    builder = GraphModelBuilder(config=config if config is not None else BuildConfig())
    return builder.build(value)


def parse(text: str, config: BuildConfig | None = None) -> ParseResult:
    """Parse raw JSON text into a GraphModel without raising.

    Args:
        text:   Raw JSON text.
        config: Preview/depth settings.  Defaults to ``BuildConfig()``.

    Returns:
        A ``ParseResult`` with either ``model`` or ``error`` populated.
    """
    return JsonParseService(config).parse(text)


def layout(
    model: GraphModel,
    direction: LayoutDirection | str = LayoutDirection.TB,
    config: LayoutConfig | None = None,
) -> list[LayoutPosition]:
    """Compute top-left anchored positions for every node of ``model``.

    Args:
        model:     The graph to lay out.
        direction: ``"TB"`` (ranks run downwards) or ``"LR"`` (rightwards).
        config:    Box size and spacing.  Defaults to ``LayoutConfig()``.

    Returns:
        One LayoutPosition per node, in ``model.nodes`` order.
    """
    return LayoutEngine(config).layout(model, direction)


def render(
    text: str,
    direction: LayoutDirection | str = LayoutDirection.TB,
    layout_config: LayoutConfig | None = None,
    build_config: BuildConfig | None = None,
    is_dark: bool = False,
) -> ViewModel:
    """Run the whole pipeline on ``text`` and return a renderer-ready ViewModel.

    Raises:
        ParseError: If ``text`` is not valid JSON.
        DepthLimitError: If the document is nested too deeply.
    """
    result = parse(text, config=build_config)
    if result.error is not None:
        raise result.error
    if result.model is None:  # pragma: no cover - ParseResult invariant
        msg = "parse produced neither a model nor an error"
        raise ParseError(msg)
    positions = layout(result.model, direction=direction, config=layout_config)
    return to_view_model(
        result.model, positions, direction=direction, config=layout_config, is_dark=is_dark
    )
