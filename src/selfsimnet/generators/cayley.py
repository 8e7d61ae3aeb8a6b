"""Cayley trees."""
from __future__ import annotations

from typing import List, Optional, Sequence

import networkx as nx

from selfsimnet.core.builder import GraphBuilder
from selfsimnet.core.expand import expand
from selfsimnet.core.params import require_generation, require_int
from selfsimnet.invariants.closed_forms import cayley_tree_size
from selfsimnet.utils.naming import graph_name

from .base import admit, finish

ROOT = 1


def _grow_leaves(b: int):
    """The root gets b children in round 1; afterwards every leaf gets b - 1."""

    def rule(builder: GraphBuilder, leaves: Sequence[int], round_index: int) -> List[int]:
        per_leaf = b if round_index == 1 else b - 1
        new_leaves: List[int] = []
        for leaf in leaves:
            for _ in range(per_leaf):
                child = builder.allocate_vertex()
                builder.add_edge(leaf, child)
                new_leaves.append(child)
        return new_leaves

    return rule


def load_cayley_tree(
    b: int,
    g: int,
    *,
    max_vertices: Optional[int] = None,
    max_edges: Optional[int] = None,
) -> nx.Graph:
    """Cayley tree C_{b,g}.

    C_{b,0} is a single root. C_{b,1} is the root with b children, and each
    later generation gives every leaf b - 1 children, so every internal
    vertex has degree b. Vertices are numbered level by level.

    |V| = 1 + b((b-1)^g - 1)/(b-2) (1 + 2g when b = 2) and |E| = |V| - 1.
    """
    require_int("b", b, 2)
    require_generation(g)
    name = graph_name("CayleyTree", b, g)
    size = cayley_tree_size(b, g)
    admit(name, size, max_vertices, max_edges)

    builder = GraphBuilder(1)
    expand(builder, [ROOT], _grow_leaves(b), g)
    return finish(name, builder, size)


def load_3_cayley_tree(
    g: int,
    *,
    max_vertices: Optional[int] = None,
    max_edges: Optional[int] = None,
) -> nx.Graph:
    """3-Cayley tree C_{3,g}.

    |V| = 3 * 2^g - 2 and |E| = 3 * 2^g - 3.
    Kemeny constant (g >= 1):
    (3g * 4^(g+1) - 13 * 2^(2g+1) + 35 * 2^g - 9) / (2 (2^g - 1)).
    """
    return load_cayley_tree(3, g, max_vertices=max_vertices, max_edges=max_edges)
