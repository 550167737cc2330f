"""Debouncer: coalesces rapid text edits into a single pipeline run.

The debounce window is an explicit scheduling policy owned by the caller, not
engine state.  The debouncer holds no timer thread: the host event loop calls
``poll()`` whenever convenient (e.g. once per frame) and receives the latest
submitted text once the window has elapsed since the last submission.  The
clock is injectable so tests never sleep.
"""

from __future__ import annotations

import time
from collections.abc import Callable

__all__ = ["DEFAULT_WINDOW", "Debouncer"]

# Seconds of input silence before a parse is triggered
DEFAULT_WINDOW = 0.3


class Debouncer:
    """Trailing-edge debouncer with an injectable monotonic clock.

    Example::

        debouncer = Debouncer(window=0.3)
        debouncer.submit('{"a"')
        debouncer.submit('{"a": 1}')
        debouncer.poll()    # None until 0.3 s of silence
        ...
        debouncer.poll()    # '{"a": 1}'  (fires once, with the latest text)
        debouncer.poll()    # None
    """

    def __init__(
        self,
        window: float = DEFAULT_WINDOW,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if window < 0.0:
            msg = f"window must be >= 0.0, got {window}"
            raise ValueError(msg)
        self._window = window
        self._clock = clock
        self._pending: str | None = None
        self._deadline: float | None = None

    @property
    def window(self) -> float:
        return self._window

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def submit(self, text: str) -> None:
        """Record ``text`` as the latest input and restart the window."""
        self._pending = text
        self._deadline = self._clock() + self._window

    def poll(self) -> str | None:
        """Return the pending text if its window has elapsed, else None."""
        if self._pending is None or self._deadline is None:
            return None
        if self._clock() < self._deadline:
            return None
        return self.flush()

    def flush(self) -> str | None:
        """Return the pending text immediately, regardless of the window."""
        text = self._pending
        self.cancel()
        return text

    def cancel(self) -> None:
        self._pending = None
        self._deadline = None
