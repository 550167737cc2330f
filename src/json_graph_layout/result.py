"""Result types returned by the parse service and the layout engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from json_graph_layout.errors import JsonGraphError
    from json_graph_layout.tree.nodes import GraphModel

__all__ = ["LayoutPosition", "ParseResult"]


@dataclass(frozen=True, slots=True)
class LayoutPosition:
    """Top-left anchored position of one node, produced fresh per layout run."""

    node_id: str
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of ``JsonParseService.parse``.

    Exactly one of ``model`` and ``error`` is set.

    Attributes:
        model:      The freshly built GraphModel on success.
        error:      ``ParseError`` for malformed text, ``DepthLimitError`` for
                    documents nested beyond the configured ceiling.
        parsed_at:  Wall-clock completion time (``time.time()``), used by the
                    state reducer to order results by completion.
        elapsed_ms: Duration of parse + build in milliseconds.
    """

    model: GraphModel | None
    error: JsonGraphError | None
    parsed_at: float
    elapsed_ms: float

    @property
    def ok(self) -> bool:
        return self.error is None
