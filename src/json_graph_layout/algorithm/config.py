"""Configuration for graph building and layered layout.

BuildConfig and LayoutConfig are frozen (immutable) dataclasses holding the
tunable constants.  LayoutDirection selects which axis ranks run along and
LayoutAlign how each rank is placed on the cross axis.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class LayoutDirection(StrEnum):
    """Axis along which ranks (tree depth) advance.

    - TB: top to bottom.  Rank maps to Y, within-rank order to X.
    - LR: left to right.  Rank maps to X, within-rank order to Y.
    """

    TB = "TB"
    LR = "LR"


class LayoutAlign(StrEnum):
    """Cross-axis placement of each rank.

    - START:  every rank begins at the margin; offsets accumulate from there.
    - CENTER: every rank is centred on the extent of the widest rank.
    """

    START = "start"
    CENTER = "center"


@dataclass(frozen=True, slots=True)
class BuildConfig:
    """Immutable configuration for GraphModelBuilder.

    Attributes:
        preview_max_length: String previews longer than this are cut to this
            many characters and suffixed with ``ellipsis``.
        ellipsis: Marker appended to truncated previews.
        max_depth: Deepest nesting level the builder accepts (root is depth 0).
            Deeper documents raise ``DepthLimitError``.
    """

    preview_max_length: int = 80
    ellipsis: str = "…"
    max_depth: int = 2048

    def __post_init__(self) -> None:
        if self.preview_max_length < 0:
            msg = f"preview_max_length must be >= 0, got {self.preview_max_length}"
            raise ValueError(msg)
        if self.max_depth < 0:
            msg = f"max_depth must be >= 0, got {self.max_depth}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class LayoutConfig:
    """Immutable configuration for the layout engine.

    All nodes share one box size.  Defaults match the reference renderer.

    Attributes:
        node_width:  Box width in layout units (> 0).
        node_height: Box height in layout units (> 0).
        node_gap:    Space between neighbouring boxes in the same rank (>= 0).
        rank_gap:    Space between consecutive ranks (>= 0).
        margin:      Offset added to every coordinate (>= 0).
        align:       Cross-axis placement of ranks.
    """

    node_width: float = 180.0
    node_height: float = 50.0
    node_gap: float = 40.0
    rank_gap: float = 150.0
    margin: float = 0.0
    align: LayoutAlign = LayoutAlign.START

    def __post_init__(self) -> None:
        if self.node_width <= 0.0:
            msg = f"node_width must be > 0, got {self.node_width}"
            raise ValueError(msg)
        if self.node_height <= 0.0:
            msg = f"node_height must be > 0, got {self.node_height}"
            raise ValueError(msg)
        if self.node_gap < 0.0:
            msg = f"node_gap must be >= 0.0, got {self.node_gap}"
            raise ValueError(msg)
        if self.rank_gap < 0.0:
            msg = f"rank_gap must be >= 0.0, got {self.rank_gap}"
            raise ValueError(msg)
        if self.margin < 0.0:
            msg = f"margin must be >= 0.0, got {self.margin}"
            raise ValueError(msg)

    def box(self, direction: LayoutDirection) -> tuple[float, float]:
        """Return ``(primary, cross)`` box extents for ``direction``."""
        if direction == LayoutDirection.LR:
            return self.node_width, self.node_height
        return self.node_height, self.node_width
