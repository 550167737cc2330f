"""DiagramPipeline: orchestrator wiring parser, reducer, debouncer and layout.

This is the wiring layer between the pure core and an interactive host (an
editor plus a canvas).  It owns the ``ViewerState`` and applies every change
through ``state.reduce``; the parser, builder and layout engine stay
stateless.

Architecture:
- ``edit(text)`` records the text and (re)starts the debounce window.
- ``tick()`` is called by the host loop; once the window elapses it runs the
  pipeline exactly once with the latest text.
- ``run()`` parses immediately.  On failure the previous model is kept and
  only the error is published.
- ``positions()`` / ``view()`` lay out the current model for the current
  direction through an LRU ``LayoutCache``; a direction toggle never
  re-parses.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from json_graph_layout.algorithm.config import BuildConfig, LayoutConfig, LayoutDirection
from json_graph_layout.cache import LayoutCache
from json_graph_layout.parser import JsonParseService
from json_graph_layout.result import LayoutPosition, ParseResult
from json_graph_layout.scheduling import DEFAULT_WINDOW, Debouncer
from json_graph_layout.state import (
    Cleared,
    DirectionChanged,
    ParseStarted,
    TextChanged,
    ViewerEvent,
    ViewerState,
    event_from_result,
    reduce,
)
from json_graph_layout.view import ViewModel, to_view_model

logger = logging.getLogger(__name__)

__all__ = ["DiagramPipeline"]


class DiagramPipeline:
    """Reactive text -> model -> positioned view pipeline.

    Example::

        pipeline = DiagramPipeline()
        pipeline.run('{"name": "Example", "children": []}')
        pipeline.set_direction("LR")
        payload = pipeline.view(is_dark=True).to_dict()

        pipeline.run("{")                 # invalid
        pipeline.state.error.message      # parser message
        len(pipeline.state.model)         # still 3 (last good model)
    """

    def __init__(
        self,
        build_config: BuildConfig | None = None,
        layout_config: LayoutConfig | None = None,
        debounce_window: float = DEFAULT_WINDOW,
        clock: Callable[[], float] | None = None,
        max_cache_size: int = 32,
        initial_state: ViewerState | None = None,
    ) -> None:
        """Initialise the pipeline.

        Args:
            build_config: Preview truncation and depth ceiling.
            layout_config: Box size, gaps, margin and alignment.
            debounce_window: Seconds of silence before ``tick()`` parses.
            clock: Monotonic clock for the debouncer.  Defaults to
                ``time.monotonic``.
            max_cache_size: Number of layouts kept by the LRU cache.
            initial_state: Starting state.  Defaults to ``ViewerState()``.
        """
        self._layout_config = layout_config if layout_config is not None else LayoutConfig()
        self._parser = JsonParseService(build_config)
        self._layouts = LayoutCache(config=self._layout_config, max_size=max_cache_size)
        if clock is None:
            self._debouncer = Debouncer(window=debounce_window)
        else:
            self._debouncer = Debouncer(window=debounce_window, clock=clock)
        self._state = initial_state if initial_state is not None else ViewerState()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> ViewerState:
        return self._state

    @property
    def layouts(self) -> LayoutCache:
        return self._layouts

    def dispatch(self, event: ViewerEvent) -> ViewerState:
        self._state = reduce(self._state, event)
        return self._state

    # ------------------------------------------------------------------
    # Editor-facing operations
    # ------------------------------------------------------------------

    def edit(self, text: str) -> None:
        """Record new editor text and schedule a debounced parse."""
        self.dispatch(TextChanged(text))
        self._debouncer.submit(text)

    def tick(self) -> ParseResult | None:
        """Run the pipeline if the debounce window has elapsed.

        Returns:
            The ParseResult of the run, or None when nothing was due.
        """
        text = self._debouncer.poll()
        if text is None:
            return None
        return self.run(text)

    def run(self, text: str | None = None) -> ParseResult:
        """Parse ``text`` (default: the current text) and apply the outcome."""
        if text is None:
            text = self._state.text
        else:
            self.dispatch(TextChanged(text))
        self._debouncer.cancel()

        self.dispatch(ParseStarted())
        result = self._parser.parse(text)
        self.dispatch(event_from_result(result))
        if result.ok:
            logger.debug(
                "Parsed %d nodes in %.2f ms (revision %d)",
                len(self._state.model),
                result.elapsed_ms,
                self._state.revision,
            )
        return result

    def set_direction(self, direction: LayoutDirection | str) -> None:
        self.dispatch(DirectionChanged(LayoutDirection(direction)))

    def clear(self) -> None:
        self._debouncer.cancel()
        self.dispatch(Cleared())

    # ------------------------------------------------------------------
    # Renderer-facing operations
    # ------------------------------------------------------------------

    def positions(self) -> list[LayoutPosition]:
        """Lay out the current model in the current direction."""
        return self._layouts.layout(self._state.model, self._state.direction)

    def view(self, is_dark: bool = False) -> ViewModel:
        """Renderer-ready nodes and edges for the current state."""
        return to_view_model(
            self._state.model,
            self.positions(),
            direction=self._state.direction,
            config=self._layout_config,
            is_dark=is_dark,
        )
