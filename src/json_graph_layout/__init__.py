"""json-graph-layout - JSON documents as deterministic, layered node/edge diagrams."""

from __future__ import annotations

from json_graph_layout.algorithm.config import (
    BuildConfig,
    LayoutAlign,
    LayoutConfig,
    LayoutDirection,
)
from json_graph_layout.algorithm.layout import LayoutEngine
from json_graph_layout.api import build_graph, layout, parse, render
from json_graph_layout.cache import LayoutCache
from json_graph_layout.errors import (
    DepthLimitError,
    JsonGraphError,
    LayoutDegenerationWarning,
    ParseError,
)
from json_graph_layout.parser import JsonParseService, format_json, validate_json
from json_graph_layout.pipeline import DiagramPipeline
from json_graph_layout.result import LayoutPosition, ParseResult
from json_graph_layout.tree.builder import GraphModelBuilder
from json_graph_layout.tree.nodes import GraphEdge, GraphModel, GraphNode, NodeType
from json_graph_layout.tree.path_id import PathIdCodec
from json_graph_layout.view import NodeColors, ViewModel, color_of, to_view_model

__version__: str = "0.1.0"
__all__: list[str] = [
    "BuildConfig",
    "DepthLimitError",
    "DiagramPipeline",
    "GraphEdge",
    "GraphModel",
    "GraphModelBuilder",
    "GraphNode",
    "JsonGraphError",
    "JsonParseService",
    "LayoutAlign",
    "LayoutCache",
    "LayoutConfig",
    "LayoutDegenerationWarning",
    "LayoutDirection",
    "LayoutEngine",
    "LayoutPosition",
    "NodeColors",
    "NodeType",
    "ParseError",
    "ParseResult",
    "PathIdCodec",
    "ViewModel",
    "build_graph",
    "color_of",
    "format_json",
    "layout",
    "parse",
    "render",
    "to_view_model",
    "validate_json",
]
