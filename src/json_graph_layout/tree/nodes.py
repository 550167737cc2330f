"""GraphNode, GraphEdge and GraphModel dataclasses plus the NodeType StrEnum.

These are the data types produced by GraphModelBuilder and consumed by the
layout engine and the view-model adapter.  A GraphModel is rebuilt in full on
every successful parse and is never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any


class NodeType(StrEnum):
    """Enumeration of JSON value kinds a graph node can represent.

    StrEnum values are the lowercased member names:
    - OBJECT   -> "object"  : JSON object {}
    - ARRAY    -> "array"   : JSON array []
    - STRING   -> "string"
    - NUMBER   -> "number"
    - BOOLEAN  -> "boolean"
    - NULL     -> "null"    : distinct from OBJECT and UNKNOWN
    - UNKNOWN  -> "unknown" : any non-JSON Python value handed to the builder
    """

    OBJECT = auto()
    ARRAY = auto()
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()
    UNKNOWN = auto()

    @property
    def is_container(self) -> bool:
        return self in (NodeType.OBJECT, NodeType.ARRAY)


@dataclass(frozen=True, slots=True)
class GraphNode:
    """A single JSON value placed in the graph.

    Attributes:
        id:            Identifier derived solely from ``path`` by PathIdCodec.
        path:          Canonical access path, e.g. ``root.users[0].name``.
        label:         Last path segment (object key or array index), or
                       ``root`` for the document root.
        type:          The value's NodeType.
        value_preview: Short textual preview used by renderers.
        collapsed:     Renderer hint; the builder never sets it.
    """

    id: str
    path: str
    label: str
    type: NodeType
    value_preview: str | None = None
    collapsed: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "path": self.path,
            "label": self.label,
            "type": str(self.type),
        }
        if self.value_preview is not None:
            data["valuePreview"] = self.value_preview
        if self.collapsed is not None:
            data["collapsed"] = self.collapsed
        return data


@dataclass(frozen=True, slots=True)
class GraphEdge:
    """Parent-to-child connector.  ``id`` is ``"<source>-><target>"``."""

    id: str
    source: str
    target: str
    label: str | None = None

    @classmethod
    def between(cls, source: str, target: str, label: str | None = None) -> GraphEdge:
        return cls(id=f"{source}->{target}", source=source, target=target, label=label)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "source": self.source,
            "target": self.target,
        }
        if self.label is not None:
            data["label"] = self.label
        return data


@dataclass(frozen=True, slots=True)
class GraphModel:
    """Nodes, edges and root id of a converted JSON document.

    Attributes:
        nodes:   Nodes in pre-order depth-first visitation order of the source
                 document.  Layout tie-breaks depend on this ordering.
        edges:   One edge per object entry / array element, in the order the
                 builder emitted them.
        root_id: Id of the first node, or None for an empty model.
    """

    nodes: tuple[GraphNode, ...] = ()
    edges: tuple[GraphEdge, ...] = ()
    root_id: str | None = None
    _index: dict[str, int] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        # First occurrence wins when two paths encode to the same id.
        index = self._index
        for pos, node in enumerate(self.nodes):
            index.setdefault(node.id, pos)

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    def node_by_id(self, node_id: str) -> GraphNode | None:
        pos = self._index.get(node_id)
        return None if pos is None else self.nodes[pos]

    def position_of(self, node_id: str) -> int | None:
        """Index of ``node_id`` in pre-order, or None if absent."""
        return self._index.get(node_id)

    def children_of(self, node_id: str) -> list[GraphNode]:
        children: list[GraphNode] = []
        for edge in self.edges:
            if edge.source == node_id:
                child = self.node_by_id(edge.target)
                if child is not None:
                    children.append(child)
        return children

    def fingerprint(self) -> tuple[tuple[str, ...], tuple[tuple[str, str], ...]]:
        """Hashable summary of everything layout depends on."""
        return (
            tuple(node.id for node in self.nodes),
            tuple((edge.source, edge.target) for edge in self.edges),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
        }
        if self.root_id is not None:
            data["rootId"] = self.root_id
        return data
