"""JsonParseService: raw text -> GraphModel, with structured errors.

Wraps the standard library ``json`` parser.  All fallibility of the pipeline
lives here, at the boundary with raw text:

- malformed text produces a ``ParseError`` carrying the parser's message
  verbatim and its line/column only when the parser reports them;
- text nested beyond the parser's or the builder's ceiling produces a
  ``DepthLimitError``.

Errors are returned inside a ``ParseResult`` rather than raised so the caller
can keep displaying its last good model.  ``format_json`` is the exception:
it backs the editor's "Format" action and raises ``ParseError`` directly.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any

from json_graph_layout.algorithm.config import BuildConfig
from json_graph_layout.errors import DepthLimitError, JsonGraphError, ParseError
from json_graph_layout.result import ParseResult
from json_graph_layout.tree.builder import GraphModelBuilder

logger = logging.getLogger(__name__)

__all__ = ["JsonParseService", "format_json", "load_json", "validate_json"]

# Below the smallest digit limit the interpreter accepts
_INT_CHUNK_DIGITS = 512


def _reject_constant(name: str) -> Any:
    # Python's json accepts NaN/Infinity; standard JSON grammar does not.
    msg = f"Unexpected token {name!r}: non-standard JSON constant"
    raise ValueError(msg)


def _parse_int(literal: str) -> int:
    try:
        return int(literal)
    except ValueError:
        pass
    # Longer than the interpreter's int-from-str digit limit: convert in chunks
    digits = literal.lstrip("-")
    value = 0
    for start in range(0, len(digits), _INT_CHUNK_DIGITS):
        chunk = digits[start : start + _INT_CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return -value if literal.startswith("-") else value


def load_json(text: str) -> Any:
    """Parse JSON text with the standard grammar.

    Raises:
        ParseError: For malformed text.
        DepthLimitError: When the parser runs out of recursion depth.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant, parse_int=_parse_int)
    except json.JSONDecodeError as exc:
        raise ParseError(exc.msg, lineno=exc.lineno, colno=exc.colno, pos=exc.pos) from exc
    except RecursionError as exc:
        raise DepthLimitError(None, None) from exc
    except ValueError as exc:
        raise ParseError(str(exc)) from exc


def validate_json(text: str) -> ParseError | None:
    """Return the ParseError for ``text``, or None when it is valid JSON."""
    try:
        load_json(text)
    except ParseError as exc:
        return exc
    except DepthLimitError as exc:
        return ParseError(exc.message)
    return None


def format_json(text: str, indent: int = 2) -> str:
    """Pretty-print JSON text, preserving key order and non-ASCII characters.

    Raises:
        ParseError: If ``text`` is not valid JSON, or is nested too deeply or
            holds an integer too long to re-serialise.
    """
    try:
        value = load_json(text)
        return json.dumps(value, indent=indent, ensure_ascii=False)
    except DepthLimitError as exc:
        raise ParseError(exc.message) from exc
    except RecursionError as exc:
        raise ParseError("document too deeply nested") from exc
    except ValueError as exc:
        # json.dumps cannot print ints past the interpreter's digit limit
        raise ParseError(str(exc)) from exc


class JsonParseService:
    """Parses raw text and converts it into a GraphModel.

    Stateless apart from its immutable builder; one instance can serve every
    keystroke of a session.

    Example::

        service = JsonParseService()
        result = service.parse('{"name": "Example", "children": []}')
        result.ok                           # True
        [n.id for n in result.model.nodes]  # ['root', 'root.name', 'root.children']

        bad = service.parse("{")
        bad.error.message                   # "Expecting property name enclosed in double quotes"
    """

    def __init__(self, config: BuildConfig | None = None) -> None:
        self._builder = GraphModelBuilder(config=config if config is not None else BuildConfig())

    @property
    def builder(self) -> GraphModelBuilder:
        return self._builder

    def parse(self, text: str) -> ParseResult:
        """Parse ``text`` and build its GraphModel.

        Never raises for any string input.

        Args:
            text: Raw editor contents.

        Returns:
            ``ParseResult`` with either ``model`` or ``error`` set.
        """
        t0 = time.perf_counter()
        error: JsonGraphError | None = None
        model = None
        try:
            model = self._builder.build(load_json(text))
        except ParseError as exc:
            logger.debug("JSON parse failed at line %s col %s: %s", exc.lineno, exc.colno, exc.message)
            error = exc
        except DepthLimitError as exc:
            logger.debug("JSON document rejected: %s", exc.message)
            error = exc

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        return ParseResult(model=model, error=error, parsed_at=time.time(), elapsed_ms=elapsed_ms)
