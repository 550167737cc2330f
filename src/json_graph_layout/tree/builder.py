"""GraphModelBuilder: converts any valid JSON value into a GraphModel.

Walks the value in pre-order depth-first order and emits one GraphNode per
visited value plus one GraphEdge per object entry / array element.  The walk
uses an explicit work stack rather than Python recursion so that nesting depth
is bounded by ``BuildConfig.max_depth`` instead of the interpreter's recursion
limit.

Canonical paths are built during traversal:
- Root is "root"
- Object members append ".{key}"
- Array elements append "[{index}]"
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any

from json_graph_layout.algorithm.config import BuildConfig
from json_graph_layout.errors import DepthLimitError
from json_graph_layout.tree.nodes import GraphEdge, GraphModel, GraphNode, NodeType
from json_graph_layout.tree.path_id import ROOT_ID, PathIdCodec

logger = logging.getLogger(__name__)

# Module-level codec (stateless, safe to share across all builders)
_codec = PathIdCodec()

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None

# JS-compatible cut-off above which integral floats keep exponent notation
_EXPONENT_THRESHOLD = 1e21

# Significant digits kept when an int is too long to print in full
_SCIENTIFIC_DIGITS = 7


def classify(value: Any) -> NodeType:
    """Return the NodeType for a Python value.

    bool MUST be checked before number because bool subclasses int.
    """
    if value is None:
        return NodeType.NULL
    if isinstance(value, dict):
        return NodeType.OBJECT
    if isinstance(value, (list, tuple)):
        return NodeType.ARRAY
    if isinstance(value, bool):
        return NodeType.BOOLEAN
    if isinstance(value, str):
        return NodeType.STRING
    if isinstance(value, (int, float)):
        return NodeType.NUMBER
    return NodeType.UNKNOWN


def format_number(value: int | float) -> str:
    """Render a number the way JSON tooling displays it.

    Integral floats drop the trailing ".0" (``1.0`` -> ``"1"``) so previews do
    not depend on whether the parser produced an int or a float.
    """
    if isinstance(value, float) and value.is_integer() and abs(value) < _EXPONENT_THRESHOLD:
        return str(int(value))
    if isinstance(value, float):
        return repr(value)
    try:
        return str(value)
    except ValueError:
        # Beyond the interpreter's int-to-str digit limit
        return _scientific(value)


def _scientific(value: int) -> str:
    """Render an int as ``d.dddddde+N`` using integer arithmetic only."""
    magnitude = abs(value)
    exponent = int(magnitude.bit_length() * math.log10(2))
    if 10**exponent > magnitude:
        exponent -= 1
    elif 10 ** (exponent + 1) <= magnitude:
        exponent += 1
    shift = exponent - _SCIENTIFIC_DIGITS + 1
    mantissa = magnitude // 10**shift if shift > 0 else magnitude * 10 ** (-shift)
    digits = str(mantissa)
    sign = "-" if value < 0 else ""
    return f"{sign}{digits[0]}.{digits[1:]}e+{exponent}"


@dataclass(slots=True)
class _Frame:
    value: Any
    path: str
    label: str
    depth: int
    parent_id: str | None = None
    edge_label: str | None = None


@dataclass
class GraphModelBuilder:
    """Converts any JSON value into a GraphModel.

    Node order is the pre-order depth-first visitation order of the document;
    object entries follow key insertion order and array elements increasing
    index.  Each non-root node is preceded in ``edges`` by exactly the edge
    that created it, so edge order matches node order minus the root.

    Ids come from PathIdCodec.  Two distinct paths can encode to the same id
    (e.g. keys "a b" and "ab"); the builder logs a warning when it sees one
    and keeps both nodes.

    Example::
        builder = GraphModelBuilder()
        model = builder.build({"name": "Example", "children": []})
        [n.id for n in model.nodes]   # ["root", "root.name", "root.children"]
    """

    config: BuildConfig = field(default_factory=BuildConfig)

    def build(self, value: JsonValue) -> GraphModel:
        """Convert a JSON value to a GraphModel.

        Args:
            value: Any valid JSON value (dict, list, str, int, float, bool, None).
                Other Python values become ``unknown`` nodes.

        Returns:
            A GraphModel whose first node is the root.

        Raises:
            DepthLimitError: If nesting exceeds ``config.max_depth``.
        """
        nodes: list[GraphNode] = []
        edges: list[GraphEdge] = []
        seen_ids: set[str] = set()

        stack: list[_Frame] = [_Frame(value=value, path=ROOT_ID, label=ROOT_ID, depth=0)]
        while stack:
            frame = stack.pop()
            if frame.depth > self.config.max_depth:
                raise DepthLimitError(frame.depth, self.config.max_depth)

            node_id = _codec.encode(frame.path)
            if node_id in seen_ids:
                logger.warning(
                    "Path %r encodes to id %r which is already in use", frame.path, node_id
                )
            seen_ids.add(node_id)

            node_type = classify(frame.value)
            nodes.append(
                GraphNode(
                    id=node_id,
                    path=frame.path,
                    label=frame.label,
                    type=node_type,
                    value_preview=self._preview(frame.value, node_type),
                )
            )
            if frame.parent_id is not None:
                edges.append(GraphEdge.between(frame.parent_id, node_id, frame.edge_label))

            # Children are pushed in reverse so they pop in source order.
            if node_type == NodeType.OBJECT:
                stack.extend(reversed(self._object_frames(frame, node_id)))
            elif node_type == NodeType.ARRAY:
                stack.extend(reversed(self._array_frames(frame, node_id)))

        root_id = nodes[0].id if nodes else None
        return GraphModel(nodes=tuple(nodes), edges=tuple(edges), root_id=root_id)

    def _object_frames(self, frame: _Frame, node_id: str) -> list[_Frame]:
        return [
            _Frame(
                value=child,
                path=f"{frame.path}.{key}",
                label=str(key),
                depth=frame.depth + 1,
                parent_id=node_id,
                edge_label=str(key),
            )
            for key, child in frame.value.items()
        ]

    def _array_frames(self, frame: _Frame, node_id: str) -> list[_Frame]:
        return [
            _Frame(
                value=child,
                path=f"{frame.path}[{idx}]",
                label=str(idx),
                depth=frame.depth + 1,
                parent_id=node_id,
                edge_label=str(idx),
            )
            for idx, child in enumerate(frame.value)
        ]

    def _preview(self, value: Any, node_type: NodeType) -> str:
        if node_type == NodeType.OBJECT:
            return "Object"
        if node_type == NodeType.ARRAY:
            return f"Array({len(value)})"
        if node_type == NodeType.NULL:
            return "null"
        if node_type == NodeType.BOOLEAN:
            return "true" if value else "false"
        if node_type == NodeType.NUMBER:
            return format_number(value)
        return self._truncate(str(value))

    def _truncate(self, text: str) -> str:
        limit = self.config.preview_max_length
        if len(text) > limit:
            return text[:limit] + self.config.ellipsis
        return text
