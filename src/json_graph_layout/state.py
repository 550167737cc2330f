"""Explicit viewer state container with a pure reducer.

The caller-side triple "current text / current model / current error" plus
the layout direction is kept in an immutable ``ViewerState``.  Every change is
an event; ``reduce(state, event)`` returns the next state and never mutates
its input.  The core (parser, builder, layout) stays stateless and is simply
invoked by whoever dispatches the events.

Model replacement is last-write-wins by *completion* time: a parse result that
finished before the latest applied outcome (success or failure) is discarded,
so out-of-order debounced parses never make the diagram flicker back to
older content.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from json_graph_layout.algorithm.config import LayoutDirection
from json_graph_layout.tree.nodes import GraphModel

if TYPE_CHECKING:
    from json_graph_layout.errors import JsonGraphError
    from json_graph_layout.result import ParseResult

__all__ = [
    "DEFAULT_TEXT",
    "Cleared",
    "DirectionChanged",
    "ParseFailed",
    "ParseStarted",
    "ParseSucceeded",
    "TextChanged",
    "ViewerEvent",
    "ViewerState",
    "event_from_result",
    "reduce",
]

DEFAULT_TEXT = '{\n  "name": "Example",\n  "children": []\n}'


@dataclass(frozen=True, slots=True)
class ViewerState:
    """Snapshot of everything the viewer displays.

    Attributes:
        text:           Current editor contents.
        model:          Last successfully built model (stale-but-valid while
                        the text is invalid).
        error:          Error of the most recent failed parse, if any.
        direction:      Layout direction.
        parsing:        True between ParseStarted and the matching outcome.
        last_parsed_at: Completion time of the displayed model.
        last_outcome_at: Completion time of the latest applied outcome,
                        success or failure.  Older outcomes are discarded.
        revision:       Incremented every time ``model`` is replaced.
    """

    text: str = DEFAULT_TEXT
    model: GraphModel = GraphModel()
    error: JsonGraphError | None = None
    direction: LayoutDirection = LayoutDirection.TB
    parsing: bool = False
    last_parsed_at: float | None = None
    last_outcome_at: float | None = None
    revision: int = 0


@dataclass(frozen=True, slots=True)
class TextChanged:
    text: str


@dataclass(frozen=True, slots=True)
class ParseStarted:
    pass


@dataclass(frozen=True, slots=True)
class ParseSucceeded:
    model: GraphModel
    completed_at: float


@dataclass(frozen=True, slots=True)
class ParseFailed:
    error: JsonGraphError
    completed_at: float


@dataclass(frozen=True, slots=True)
class DirectionChanged:
    direction: LayoutDirection


@dataclass(frozen=True, slots=True)
class Cleared:
    pass


ViewerEvent = (
    TextChanged | ParseStarted | ParseSucceeded | ParseFailed | DirectionChanged | Cleared
)


def event_from_result(result: ParseResult) -> ParseSucceeded | ParseFailed:
    """Translate a ParseResult into the event that records it."""
    if result.error is not None:
        return ParseFailed(error=result.error, completed_at=result.parsed_at)
    if result.model is None:
        msg = "ParseResult carries neither a model nor an error"
        raise ValueError(msg)
    return ParseSucceeded(model=result.model, completed_at=result.parsed_at)


def _is_stale(state: ViewerState, completed_at: float) -> bool:
    return state.last_outcome_at is not None and completed_at < state.last_outcome_at


def reduce(state: ViewerState, event: ViewerEvent) -> ViewerState:
    """Return the state that results from applying ``event`` to ``state``.

    Args:
        state: Current state (not modified).
        event: One of the ViewerEvent types.

    Returns:
        The next state.  Unknown events raise ``TypeError``.
    """
    if isinstance(event, TextChanged):
        return replace(state, text=event.text)

    if isinstance(event, ParseStarted):
        return replace(state, parsing=True, error=None)

    if isinstance(event, ParseSucceeded):
        if _is_stale(state, event.completed_at):
            return replace(state, parsing=False)
        return replace(
            state,
            model=event.model,
            error=None,
            parsing=False,
            last_parsed_at=event.completed_at,
            last_outcome_at=event.completed_at,
            revision=state.revision + 1,
        )

    if isinstance(event, ParseFailed):
        if _is_stale(state, event.completed_at):
            return replace(state, parsing=False)
        # The previous model stays on screen.
        return replace(
            state, error=event.error, parsing=False, last_outcome_at=event.completed_at
        )

    if isinstance(event, DirectionChanged):
        return replace(state, direction=LayoutDirection(event.direction))

    if isinstance(event, Cleared):
        return replace(
            state,
            text="",
            model=GraphModel(),
            error=None,
            revision=state.revision + 1,
        )

    msg = f"Unsupported viewer event: {type(event)!r}"
    raise TypeError(msg)
