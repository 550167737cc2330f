"""Error taxonomy for json-graph-layout.

All fallibility is concentrated at the boundary with raw text:

- ParseError:      malformed JSON text.  Non-fatal; callers keep showing the
                   last valid model.
- DepthLimitError: nesting deeper than the configured ceiling.  Raised instead
                   of letting the interpreter exhaust its stack.
- LayoutDegenerationWarning: emitted through ``warnings`` when a node cannot be
                   ranked and falls back to its input position.  Never an error.
"""

from __future__ import annotations

__all__ = [
    "DepthLimitError",
    "JsonGraphError",
    "LayoutDegenerationWarning",
    "ParseError",
]


class JsonGraphError(Exception):
    """Base class for every error this package raises."""


class ParseError(JsonGraphError):
    """Malformed JSON text.

    ``message`` is the underlying parser's message verbatim.  Position fields
    are only populated when the parser reported them; they are never guessed.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        colno: int | None = None,
        pos: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.lineno = lineno
        self.colno = colno
        self.pos = pos

    def __repr__(self) -> str:
        return (
            f"ParseError({self.message!r}, lineno={self.lineno}, "
            f"colno={self.colno}, pos={self.pos})"
        )


class DepthLimitError(JsonGraphError):
    """Document nested more deeply than the configured limit."""

    def __init__(self, depth: int | None, limit: int | None) -> None:
        self.depth = depth
        self.limit = limit
        if limit is None:
            message = "document too deeply nested"
        else:
            message = f"document too deeply nested (limit {limit} levels)"
        super().__init__(message)
        self.message = message


class LayoutDegenerationWarning(UserWarning):
    """A node could not be placed and kept its fallback position."""
