"""Vertex allocator and canonical edge-weight accumulator.

Vertices are dense 1-based integers handed out in allocation order.
Edges are stored once, keyed by their endpoint pair with the smaller ID first.
"""
from __future__ import annotations

from typing import Dict, Iterable, Sequence, Tuple

Edge = Tuple[int, int]
Triangle = Tuple[int, int, int]

DEFAULT_WEIGHT = 1


def canonical_pair(u: int, v: int) -> Edge:
    """Canonical ordering of an undirected edge; self pairs are rejected."""
    if u == v:
        raise ValueError(f"self-loop ({u}, {v}) is not a valid edge")
    return (u, v) if u < v else (v, u)


class GraphBuilder:
    """Grow-only graph under construction, owned by a single generator call."""

    def __init__(self, vertex_count: int = 0):
        if vertex_count < 0:
            raise ValueError("vertex_count must be non-negative")
        self.vertex_count = vertex_count
        self.edges: Dict[Edge, int] = {}

    def allocate_vertex(self) -> int:
        self.vertex_count += 1
        return self.vertex_count

    def allocate_block(self, n: int) -> int:
        """Reserve n consecutive fresh IDs and return the first one."""
        if n < 0:
            raise ValueError("block size must be non-negative")
        first = self.vertex_count + 1
        self.vertex_count += n
        return first

    def add_edge(self, u: int, v: int, weight: int = DEFAULT_WEIGHT) -> Edge:
        for x in (u, v):
            if not 1 <= x <= self.vertex_count:
                raise ValueError(f"vertex {x} has not been allocated (vertex_count={self.vertex_count})")
        e = canonical_pair(u, v)
        old = self.edges.get(e)
        if old is not None and old != weight:
            raise ValueError(f"edge {e} already has weight {old}, refusing to overwrite with {weight}")
        self.edges[e] = weight
        return e

    def add_triangle(self, t: Triangle) -> None:
        x, y, z = t
        self.add_edge(x, y)
        self.add_edge(x, z)
        self.add_edge(y, z)

    def add_clique(self, members: Sequence[int]) -> None:
        for i in range(len(members)):
            for j in range(i + 1, len(members)):
                self.add_edge(members[i], members[j])

    def add_edges_from(self, edges: Iterable[Edge]) -> None:
        for u, v in edges:
            self.add_edge(u, v)

    def vertices(self) -> range:
        return range(1, self.vertex_count + 1)

    def number_of_edges(self) -> int:
        return len(self.edges)

    def __repr__(self) -> str:
        return f"GraphBuilder(vertex_count={self.vertex_count}, edges={len(self.edges)})"
