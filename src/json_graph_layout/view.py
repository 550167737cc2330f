"""ViewModelAdapter: GraphModel + layout positions -> renderer-ready payload.

The renderer looks up everything it needs per node id: label, preview, type,
box geometry, connector sides and colours.  Colours come from ``color_of``, a
pure palette lookup shared with minimap/legend colour functions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from json_graph_layout.algorithm.config import LayoutConfig, LayoutDirection
from json_graph_layout.tree.nodes import NodeType

if TYPE_CHECKING:
    from collections.abc import Sequence

    from json_graph_layout.result import LayoutPosition
    from json_graph_layout.tree.nodes import GraphModel

__all__ = ["NodeColors", "RenderEdge", "RenderNode", "ViewModel", "color_of", "to_view_model"]


@dataclass(frozen=True, slots=True)
class NodeColors:
    background: str
    border: str
    text: str


# (light, dark) per colour family
_PALETTE: dict[str, tuple[NodeColors, NodeColors]] = {
    "object": (
        NodeColors("#ede9fe", "#7c3aed", "#1f2937"),
        NodeColors("#2a2250", "#8b5cf6", "#f8fafc"),
    ),
    "array": (
        NodeColors("#ecfdf5", "#059669", "#064e3b"),
        NodeColors("#07221a", "#34d399", "#ecfeff"),
    ),
    "primitive": (
        NodeColors("#fff7ed", "#f97316", "#7c2d12"),
        NodeColors("#2b1608", "#fb923c", "#fff7ed"),
    ),
    "nullish": (
        NodeColors("#f3f4f6", "#9ca3af", "#374151"),
        NodeColors("#111827", "#374151", "#cbd5e1"),
    ),
    "unknown": (
        NodeColors("#f8fafc", "#94a3b8", "#0f172a"),
        NodeColors("#0b1220", "#475569", "#e6eef8"),
    ),
}

_FAMILY: dict[NodeType, str] = {
    NodeType.OBJECT: "object",
    NodeType.ARRAY: "array",
    NodeType.NULL: "nullish",
    NodeType.UNKNOWN: "unknown",
}


def color_of(node_type: NodeType | str, is_dark: bool = False) -> NodeColors:
    """Return the colour triple for a node type.

    Strings, numbers and booleans share the "primitive" family.
    """
    family = _FAMILY.get(NodeType(node_type), "primitive")
    light, dark = _PALETTE[family]
    return dark if is_dark else light


@dataclass(frozen=True, slots=True)
class RenderNode:
    id: str
    label: str
    type: NodeType
    value_preview: str | None
    x: float
    y: float
    width: float
    height: float
    source_side: str
    target_side: str
    colors: NodeColors

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "type": str(self.type),
            "valuePreview": self.value_preview,
            "position": {"x": self.x, "y": self.y},
            "width": self.width,
            "height": self.height,
            "sourcePosition": self.source_side,
            "targetPosition": self.target_side,
            "style": {
                "background": self.colors.background,
                "border": self.colors.border,
                "color": self.colors.text,
            },
        }


@dataclass(frozen=True, slots=True)
class RenderEdge:
    id: str
    source: str
    target: str
    label: str | None

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "source": self.source, "target": self.target, "label": self.label}


@dataclass(frozen=True, slots=True)
class ViewModel:
    """Positioned nodes and edges ready for a renderer."""

    nodes: tuple[RenderNode, ...]
    edges: tuple[RenderEdge, ...]
    direction: LayoutDirection

    def to_dict(self) -> dict[str, Any]:
        return {
            "direction": str(self.direction),
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
        }


def _sides(direction: LayoutDirection) -> tuple[str, str]:
    """Connector sides ``(source, target)`` so edges follow the rank axis."""
    if direction == LayoutDirection.LR:
        return "right", "left"
    return "bottom", "top"


def to_view_model(
    model: GraphModel,
    positions: Sequence[LayoutPosition],
    direction: LayoutDirection | str = LayoutDirection.TB,
    config: LayoutConfig | None = None,
    is_dark: bool = False,
) -> ViewModel:
    """Combine a model and its layout into a ViewModel.

    Nodes without a position are drawn at the origin; edges whose endpoints
    are missing from the model are dropped.

    Args:
        model: The converted document.
        positions: Output of a layout run over ``model``.
        direction: The direction the positions were computed for.
        config: Box size shared with the layout engine.
        is_dark: Select the dark palette.
    """
    direction = LayoutDirection(direction)
    cfg = config if config is not None else LayoutConfig()
    source_side, target_side = _sides(direction)
    by_id = {pos.node_id: pos for pos in positions}

    nodes = []
    for node in model.nodes:
        pos = by_id.get(node.id)
        nodes.append(
            RenderNode(
                id=node.id,
                label=node.label,
                type=node.type,
                value_preview=node.value_preview,
                x=pos.x if pos is not None else 0.0,
                y=pos.y if pos is not None else 0.0,
                width=cfg.node_width,
                height=cfg.node_height,
                source_side=source_side,
                target_side=target_side,
                colors=color_of(node.type, is_dark),
            )
        )

    edges = tuple(
        RenderEdge(id=edge.id, source=edge.source, target=edge.target, label=edge.label)
        for edge in model.edges
        if model.node_by_id(edge.source) is not None and model.node_by_id(edge.target) is not None
    )
    return ViewModel(nodes=tuple(nodes), edges=edges, direction=direction)
