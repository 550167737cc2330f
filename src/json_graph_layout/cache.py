"""LayoutCache: LRU-backed memoisation of LayoutEngine results.

Wraps a ``LayoutEngine`` and caches the positions it produces per
``(model fingerprint, direction, engine config)``.  Toggling the direction
back and forth, or re-parsing text whose structure did not change (e.g. a
value edit inside a string), is served from memory.  LRU eviction occurs
silently when ``max_size`` is exceeded.

The fingerprint covers node ids in order and the edge list, which is exactly
what layout depends on, so a cache hit is indistinguishable from a fresh run.

Each ``LayoutCache`` instance maintains its own ``LRUCache``; two instances
never share state.

Example::

    from json_graph_layout.cache import LayoutCache

    cache = LayoutCache(max_size=64)
    first = cache.layout(model, "TB")    # computed
    again = cache.layout(model, "TB")    # served from memory
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from cachetools import LRUCache

from json_graph_layout.algorithm.config import LayoutConfig, LayoutDirection
from json_graph_layout.algorithm.layout import LayoutEngine

if TYPE_CHECKING:
    from json_graph_layout.result import LayoutPosition
    from json_graph_layout.tree.nodes import GraphModel

logger = logging.getLogger(__name__)

__all__ = ["LayoutCache"]


class LayoutCache:
    """LRU-backed caching proxy around a LayoutEngine.

    Args:
        engine: The engine to delegate misses to.  Defaults to
            ``LayoutEngine(config)``.
        config: Used only when ``engine`` is None.
        max_size: Maximum number of layouts held in memory.  Defaults to 32.
    """

    def __init__(
        self,
        engine: LayoutEngine | None = None,
        config: LayoutConfig | None = None,
        max_size: int = 32,
    ) -> None:
        self._engine = engine if engine is not None else LayoutEngine(config)
        self._cache: LRUCache[Any, tuple[LayoutPosition, ...]] = LRUCache(maxsize=max_size)
        self._hits = 0
        self._misses = 0

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def engine(self) -> LayoutEngine:
        return self._engine

    @property
    def max_size(self) -> int:
        """The maximum number of layouts this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of layouts stored in the cache."""
        return int(self._cache.currsize)

    @property
    def hits(self) -> int:
        return self._hits

    @property
    def misses(self) -> int:
        return self._misses

    # ------------------------------------------------------------------
    # LayoutEngine surface
    # ------------------------------------------------------------------

    def layout(
        self,
        model: GraphModel,
        direction: LayoutDirection | str = LayoutDirection.TB,
    ) -> list[LayoutPosition]:
        """Return positions for ``model``; only unseen structures hit the engine.

        Args:
            model: The graph to lay out.
            direction: ``"TB"`` or ``"LR"``.

        Returns:
            A new list of LayoutPosition in ``model.nodes`` order.
        """
        direction = LayoutDirection(direction)
        key = (model.fingerprint(), direction, self._engine.config)
        cached = self._cache.get(key)
        if cached is not None:
            self._hits += 1
            return list(cached)

        self._misses += 1
        logger.debug("Layout cache miss: %d nodes, direction %s", len(model), direction)
        positions = self._engine.layout(model, direction)
        self._cache[key] = tuple(positions)
        return positions

    def clear(self) -> None:
        self._cache.clear()
