"""algorithm subpackage: public API for layered layout.

Provides the layout engine, its configuration, and the direction/alignment
enums.  Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from json_graph_layout.algorithm import LayoutConfig, LayoutDirection, LayoutEngine
    from json_graph_layout.tree import GraphModelBuilder

    model = GraphModelBuilder().build({"user": {"name": "Alice"}})
    positions = LayoutEngine(LayoutConfig(rank_gap=100)).layout(model, LayoutDirection.LR)
"""

from __future__ import annotations

from json_graph_layout.algorithm.config import (
    BuildConfig,
    LayoutAlign,
    LayoutConfig,
    LayoutDirection,
)
from json_graph_layout.algorithm.layout import LayoutEngine

__all__ = ["BuildConfig", "LayoutAlign", "LayoutConfig", "LayoutDirection", "LayoutEngine"]
