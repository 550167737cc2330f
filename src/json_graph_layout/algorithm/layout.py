"""LayoutEngine: deterministic layered placement of a GraphModel.

Implements a Sugiyama-style layered layout specialised for tree-shaped JSON
graphs:

1. Rank assignment:   depth from the root (see ``ranking.assign_ranks``).
2. Ordering:          within a rank, nodes keep pre-order model order.
3. Coordinates:       rank -> primary axis, order -> cross axis.
                      TB: primary = Y, cross = X.  LR: primary = X, cross = Y.
                      primary = rank * (box_primary + rank_gap)
                      cross   = order * (box_cross + node_gap)
4. Anchoring:         box centres are computed first and translated by half
                      the box so returned positions are top-left anchored.

Layout never raises for a well-formed model.  A node that cannot be ranked
(only reachable through a synthetic cycle) keeps its caller-supplied initial
position and a ``LayoutDegenerationWarning`` is emitted.

Re-running layout on an unchanged model and config yields identical
positions: every step is a pure function of node order and edge list.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Mapping
from typing import TYPE_CHECKING

import numpy as np

from json_graph_layout.algorithm.config import LayoutAlign, LayoutConfig, LayoutDirection
from json_graph_layout.algorithm.ranking import assign_ranks, order_within_ranks
from json_graph_layout.errors import LayoutDegenerationWarning
from json_graph_layout.result import LayoutPosition

if TYPE_CHECKING:
    from json_graph_layout.tree.nodes import GraphModel

logger = logging.getLogger(__name__)

__all__ = ["LayoutEngine"]

_ORIGIN: tuple[float, float] = (0.0, 0.0)


class LayoutEngine:
    """Layered layout engine for GraphModels.

    Holds only an immutable ``LayoutConfig``; instances are safe to share and
    to call repeatedly.

    Example::

        from json_graph_layout.algorithm.layout import LayoutEngine
        from json_graph_layout.tree.builder import GraphModelBuilder

        model = GraphModelBuilder().build({"a": 1, "b": [True]})
        positions = LayoutEngine().layout(model, "LR")
        # [LayoutPosition(node_id='root', x=0.0, y=0.0), ...]
    """

    def __init__(self, config: LayoutConfig | None = None) -> None:
        """Initialise the engine.

        Args:
            config: Box sizes, gaps, margin and alignment.  Defaults to
                ``LayoutConfig()`` (180 x 50 boxes, node gap 40, rank gap 150).
        """
        self._config = config if config is not None else LayoutConfig()

    @property
    def config(self) -> LayoutConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def layout(
        self,
        model: GraphModel,
        direction: LayoutDirection | str = LayoutDirection.TB,
        initial_positions: Mapping[str, tuple[float, float]] | None = None,
    ) -> list[LayoutPosition]:
        """Place every node of ``model``.

        Args:
            model: The graph to lay out.
            direction: ``"TB"`` or ``"LR"``.
            initial_positions: Fallback ``(x, y)`` per node id for nodes the
                engine cannot rank.  Missing entries fall back to ``(0, 0)``.

        Returns:
            One LayoutPosition per node, in ``model.nodes`` order.
        """
        if model.is_empty:
            return []

        direction = LayoutDirection(direction)
        centres = self._compute_centres(model, direction)

        half_x, half_y = self._config.node_width / 2.0, self._config.node_height / 2.0
        fallback = initial_positions or {}
        positions: list[LayoutPosition] = []
        unplaced: list[str] = []

        for node in model.nodes:
            centre = centres.get(node.id)
            if centre is None:
                unplaced.append(node.id)
                x, y = fallback.get(node.id, _ORIGIN)
                positions.append(LayoutPosition(node_id=node.id, x=float(x), y=float(y)))
                continue
            positions.append(
                LayoutPosition(node_id=node.id, x=centre[0] - half_x, y=centre[1] - half_y)
            )

        if unplaced:
            logger.warning(
                "Layout could not rank %d node(s); using fallback positions: %s",
                len(unplaced),
                ", ".join(unplaced[:5]),
            )
            warnings.warn(
                f"{len(unplaced)} node(s) kept their fallback position",
                LayoutDegenerationWarning,
                stacklevel=2,
            )

        return positions

    # ------------------------------------------------------------------
    # Coordinate assignment
    # ------------------------------------------------------------------

    def _compute_centres(
        self, model: GraphModel, direction: LayoutDirection
    ) -> dict[str, tuple[float, float]]:
        """Return centre ``(x, y)`` for every rankable node id."""
        layers = order_within_ranks(model, assign_ranks(model))
        if not layers:
            return {}

        cfg = self._config
        box_primary, box_cross = cfg.box(direction)
        primary_step = box_primary + cfg.rank_gap
        cross_step = box_cross + cfg.node_gap

        ids = [node_id for layer in layers for node_id in layer]
        counts = np.array([len(layer) for layer in layers], dtype=np.int64)
        ranks = np.repeat(np.arange(len(layers), dtype=np.int64), counts)
        # Position of each id inside its own layer
        starts = np.concatenate(([0], np.cumsum(counts)[:-1]))
        order = np.arange(len(ids), dtype=np.int64) - np.repeat(starts, counts)

        primary = cfg.margin + ranks * primary_step + box_primary / 2.0
        cross = cfg.margin + order * cross_step + box_cross / 2.0

        if cfg.align == LayoutAlign.CENTER:
            extents = np.where(counts > 0, counts * cross_step - cfg.node_gap, 0.0)
            shift = (extents.max() - extents) / 2.0
            cross = cross + shift[ranks]

        if direction == LayoutDirection.LR:
            xs, ys = primary, cross
        else:
            xs, ys = cross, primary

        return {
            node_id: (float(x), float(y))
            for node_id, x, y in zip(ids, xs.tolist(), ys.tolist(), strict=True)
        }
