"""Exhaustive longest-simple-path search over an overlap graph.

`PathSearchEngine` runs an independent depth-first exploration from every
vertex and records every simple path of the global maximum length in a
`ResultSet`. Nothing is pruned or memoized, so all tied paths survive; the
running time is exponential in the number of vertices.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence, Set, Tuple

from overlapchain.codes import Code
from overlapchain.config import SEARCH_CONFIG, SearchConfig
from overlapchain.graph import OverlapGraph
from overlapchain.logging import get_logger

logger = get_logger(__name__)

PathTuple = Tuple[Code, ...]


class ResultSet:
    """Longest paths found by a search.

    The maximum length starts at 0 and every recorded path is an independent
    tuple. Only the owning engine records paths; once the search completes the
    result is sealed and callers read it through ``max_length`` and
    ``all_longest_paths``.
    """

    def __init__(self) -> None:
        self._max_length = 0
        self._paths: List[PathTuple] = []
        self._sealed = False

    def max_length(self) -> int:
        return self._max_length

    def all_longest_paths(self) -> List[PathTuple]:
        """Return a copy of the recorded paths (order unspecified)."""
        return list(self._paths)

    def path_count(self) -> int:
        return len(self._paths)

    @property
    def sealed(self) -> bool:
        return self._sealed

    def offer(self, buffer: Sequence[Code]) -> None:
        """Record ``buffer`` if it is at least as long as the current maximum.

        A longer buffer replaces all recorded paths; an equal one is a tie and
        is appended. The buffer is copied, never stored.

        Raises:
            RuntimeError: If the result has been sealed.
        """
        if self._sealed:
            raise RuntimeError("ResultSet is sealed; the search has completed")
        size = len(buffer)
        if size > self._max_length:
            self._max_length = size
            self._paths = [tuple(buffer)]
        elif size == self._max_length:
            self._paths.append(tuple(buffer))

    def seal(self) -> None:
        """Reject further ``offer`` calls."""
        self._sealed = True

    def __repr__(self) -> str:
        return (
            f"ResultSet(max_length={self._max_length}, "
            f"paths={len(self._paths)}, sealed={self._sealed})"
        )


@contextmanager
def _recursion_headroom(depth: int) -> Iterator[None]:
    """Temporarily raise the interpreter recursion limit to at least ``depth``."""
    previous = sys.getrecursionlimit()
    if depth > previous:
        sys.setrecursionlimit(depth)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


class PathSearchEngine:
    """Enumerate all maximum-length simple paths of an `OverlapGraph`.

    The engine owns the scratch state of one exploration (``visited`` and the
    path buffer) and the shared `ResultSet`. It is single-threaded; the same
    instance may be reused, each ``run`` starting from an empty result.
    """

    def __init__(self, config: Optional[SearchConfig] = None) -> None:
        self.config = config or SEARCH_CONFIG
        self.result = ResultSet()
        self._visited: Set[Code] = set()
        self._path: List[Code] = []

    def run(self, graph: OverlapGraph) -> ResultSet:
        """Search ``graph`` and return the longest paths.

        Each start vertex gets a fresh ``visited`` set and path buffer, so
        explorations from different starts are independent.

        Args:
            graph: Graph to search. An empty graph yields ``max_length() == 0``.

        Returns:
            The sealed ResultSet (also kept as ``self.result``).
        """
        self.result = ResultSet()
        vertices = graph.vertices()
        logger.info(f"Starting longest-path search over {len(vertices)} vertices")

        # DFS depth is bounded by the vertex count; each level costs one frame
        depth = len(vertices) + self.config.recursion_margin
        with _recursion_headroom(depth):
            for vertex in vertices:
                self._visited = set()
                self._path = []
                self._explore(vertex, graph)
                logger.debug(
                    f"Explored from {vertex}: best length "
                    f"{self.result.max_length()}, {self.result.path_count()} path(s)"
                )

        self.result.seal()
        logger.info(
            f"Search completed: longest length {self.result.max_length()}, "
            f"{self.result.path_count()} sequence(s)"
        )
        return self.result

    def _explore(self, current: Code, graph: OverlapGraph) -> None:
        self._visited.add(current)
        self._path.append(current)

        # Every prefix is a candidate, not only dead ends
        self.result.offer(self._path)

        for neighbor in graph.neighbors(current):
            if neighbor not in self._visited:
                self._explore(neighbor, graph)

        self._visited.discard(current)
        self._path.pop()


def find_longest_paths(
    graph: OverlapGraph, config: Optional[SearchConfig] = None
) -> ResultSet:
    """Convenience wrapper: run a fresh `PathSearchEngine` on ``graph``."""
    return PathSearchEngine(config).run(graph)
