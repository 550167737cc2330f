"""Rank assignment and within-rank ordering for layered layout.

Ranks are depths along the edges that created each node.  Because a JSON
graph is a tree, breadth-first search from the root gives every node a unique,
well-defined rank with no longest-path relaxation.  The search keeps a visited
set so that synthetic cycles or shared children introduced upstream terminate:
the first discovery of a node fixes its rank.

Within a rank, nodes keep their order in ``GraphModel.nodes`` (pre-order DFS),
which keeps siblings grouped under their parent and makes tie-breaks
reproducible.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from json_graph_layout.tree.nodes import GraphModel

logger = logging.getLogger(__name__)

__all__ = ["assign_ranks", "order_within_ranks"]


def assign_ranks(model: GraphModel) -> dict[str, int]:
    """Return the rank of every reachable node id.

    The search starts at ``model.root_id`` (rank 0) even when a cycle feeds
    back into it, then at every other node without an inbound edge, in model
    order.  Nodes only reachable through a cycle that avoids all of these
    starting points are left out of the result.

    Args:
        model: The graph to rank.

    Returns:
        Mapping from node id to rank.  Ids absent from the mapping could not
        be ranked.
    """
    known = {node.id for node in model.nodes}
    children: dict[str, list[str]] = {node_id: [] for node_id in known}
    has_inbound: set[str] = set()

    for edge in model.edges:
        if edge.source not in known or edge.target not in known:
            logger.warning("Ignoring edge %r with an endpoint outside the model", edge.id)
            continue
        children[edge.source].append(edge.target)
        has_inbound.add(edge.target)

    sources = [node.id for node in model.nodes if node.id not in has_inbound]
    if model.root_id in known:
        sources.insert(0, model.root_id)

    ranks: dict[str, int] = {}
    for source in sources:
        if source in ranks:
            continue
        ranks[source] = 0
        queue: deque[str] = deque([source])
        while queue:
            current = queue.popleft()
            next_rank = ranks[current] + 1
            for child in children[current]:
                if child not in ranks:
                    ranks[child] = next_rank
                    queue.append(child)

    return ranks


def order_within_ranks(model: GraphModel, ranks: dict[str, int]) -> list[list[str]]:
    """Group ranked node ids into layers, preserving model order in each layer.

    Args:
        model: The graph whose node order drives tie-breaks.
        ranks: Output of ``assign_ranks``.

    Returns:
        ``layers[r]`` is the ordered list of ids with rank ``r``.  Each id
        appears once even if several nodes share it.
    """
    if not ranks:
        return []
    layers: list[list[str]] = [[] for _ in range(max(ranks.values()) + 1)]
    placed: set[str] = set()
    for node in model.nodes:
        rank = ranks.get(node.id)
        if rank is None or node.id in placed:
            continue
        placed.add(node.id)
        layers[rank].append(node.id)
    return layers
