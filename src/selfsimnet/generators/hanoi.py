"""Extended Hanoi graphs.

A vertex of the Hanoi graph H_n is addressed by n trits d_1 ... d_n and gets
the ID encode_trits(d) + 1, so the three copies of H_{n-1} inside H_n occupy
consecutive ID blocks led by d_1 = 0, 1, 2.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

import networkx as nx

from selfsimnet.core.builder import Edge, GraphBuilder
from selfsimnet.core.expand import expand
from selfsimnet.core.params import require_generation
from selfsimnet.core.ternary import address_to_vertex
from selfsimnet.invariants.closed_forms import hanoi_ext_size
from selfsimnet.utils.naming import graph_name

from .base import admit, finish

SUCCESSOR = {0: 1, 1: 2, 2: 0}


def _copy_shifted(builder: GraphBuilder, edges: Sequence[Edge], n_copies: int) -> None:
    """Allocate n_copies blocks the size of the current graph and copy *edges* into each."""
    inc = builder.vertex_count
    builder.allocate_block(n_copies * inc)
    for u, v in edges:
        for k in range(1, n_copies + 1):
            builder.add_edge(u + k * inc, v + k * inc)


def _bridges(n: int) -> List[Edge]:
    """Edges joining the three H_{n-1} blocks of H_n: x y...y -- y x...x."""
    out: List[Edge] = []
    for x in range(3):
        y = SUCCESSOR[x]
        u = address_to_vertex([x] + [y] * (n - 1))
        v = address_to_vertex([y] + [x] * (n - 1))
        out.append((u, v))
    return out


def _hanoi_round(builder: GraphBuilder, edges: Sequence[Edge], i: int) -> List[Edge]:
    """H_{i-1} -> H_i: two shifted copies plus three bridges."""
    _copy_shifted(builder, edges, 2)
    builder.add_edges_from(_bridges(i))
    return list(builder.edges)


def _extend(builder: GraphBuilder, edges: Sequence[Edge], g: int) -> None:
    """H_{g-1} -> H~_g: H_g plus a fourth copy of H_{g-1} hung on its extreme vertices."""
    _copy_shifted(builder, edges, 3)
    builder.add_edges_from(_bridges(g))
    for x in range(3):
        extreme = address_to_vertex([x] * g)
        # address 1 0 x...x has g + 1 trits and lands in the fourth block
        apex = address_to_vertex([1, 0] + [x] * (g - 1))
        builder.add_edge(extreme, apex)


def load_hanoi_ext(
    g: int,
    *,
    max_vertices: Optional[int] = None,
    max_edges: Optional[int] = None,
) -> nx.Graph:
    """Extended Hanoi graph H~_g.

    H~_g is the Hanoi graph H_g together with a fourth copy of H_{g-1}
    whose three extreme vertices are joined to the three extreme vertices
    of H_g. g = 0 gives the base triangle H_1.

    |V| = 4 * 3^(g-1) and |E| = 2 * 3^g for g >= 1.
    """
    require_generation(g)
    name = graph_name("HanoiExt", g)
    size = hanoi_ext_size(g)
    admit(name, size, max_vertices, max_edges)

    builder = GraphBuilder(1)
    rounds = 1 if g == 0 else g - 1
    edges = list(expand(builder, [], _hanoi_round, rounds))
    if g >= 1:
        _extend(builder, edges, g)
    return finish(name, builder, size)
