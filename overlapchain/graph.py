"""Overlap graph over fixed-length codes.

`OverlapGraph` extends `networkx.DiGraph`. Each distinct code is a node and a
directed edge ``u -> v`` exists exactly when ``u != v`` and the trailing
overlap of ``u`` equals the leading overlap of ``v``. The graph is derived once
by `OverlapGraph.build` and frozen afterward.
"""

from __future__ import annotations

from typing import Iterable, List, Set

import networkx as nx

from overlapchain.codes import Code, prefix2, suffix2
from overlapchain.logging import get_logger

logger = get_logger(__name__)


class OverlapGraph(nx.DiGraph):
    """Directed overlap graph with lenient neighbor lookups.

    This class differs from `networkx.DiGraph` in that:
      - ``neighbors`` returns an empty list for unknown nodes instead of raising.
      - Instances returned by ``build`` are frozen; mutating methods raise
        ``networkx.NetworkXError``.

    Inherits from:
        networkx.DiGraph
    """

    @classmethod
    def build(cls, codes: Iterable[Code]) -> OverlapGraph:
        """Build the overlap graph for ``codes``.

        Every ordered pair of input entries is compared, so the cost is
        quadratic in the input size. Repeated values collapse into one node.

        Args:
            codes: Validated codes, possibly empty and possibly repeated.

        Returns:
            A frozen OverlapGraph.
        """
        items: List[Code] = list(codes)
        graph = cls()
        graph.add_nodes_from(items)

        for u in items:
            key = suffix2(u)
            for v in items:
                if u != v and key == prefix2(v):
                    graph.add_edge(u, v)

        logger.debug(
            f"Built overlap graph: {graph.number_of_nodes()} vertices, "
            f"{graph.number_of_edges()} edges from {len(items)} codes"
        )
        return nx.freeze(graph)

    def neighbors(self, n: Code) -> List[Code]:  # type: ignore[override]
        """Return outgoing neighbors of ``n`` in insertion order.

        Args:
            n: Vertex to query.

        Returns:
            List of successors; empty if ``n`` is not in the graph.
        """
        if n not in self:
            return []
        return list(self.successors(n))

    def vertices(self) -> Set[Code]:
        """Return the set of distinct codes, including isolated ones."""
        return set(self.nodes)

    @property
    def edge_count(self) -> int:
        """Number of overlap edges."""
        return self.number_of_edges()
