"""Tree subpackage for JSON-to-graph conversion primitives.

Re-exports the public API for the tree module:
- GraphNode, GraphEdge, GraphModel: the converted document
- NodeType: StrEnum of the seven value kinds
- PathIdCodec: maps canonical paths to node ids
- GraphModelBuilder: converts any JSON value into a GraphModel
"""

from json_graph_layout.tree.builder import GraphModelBuilder, classify
from json_graph_layout.tree.nodes import GraphEdge, GraphModel, GraphNode, NodeType
from json_graph_layout.tree.path_id import PathIdCodec, encode_path

__all__ = [
    "GraphEdge",
    "GraphModel",
    "GraphModelBuilder",
    "GraphNode",
    "NodeType",
    "PathIdCodec",
    "classify",
    "encode_path",
]
