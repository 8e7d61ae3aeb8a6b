"""Shared prologue/epilogue of every generator entry point."""
from __future__ import annotations

import logging
from typing import Optional

import networkx as nx

from selfsimnet.core.builder import GraphBuilder
from selfsimnet.core.container import from_builder
from selfsimnet.core.params import check_budget
from selfsimnet.invariants.closed_forms import GraphSize

logger = logging.getLogger(__name__)


def admit(
    name: str,
    size: GraphSize,
    max_vertices: Optional[int],
    max_edges: Optional[int],
) -> None:
    """Budget check before any allocation."""
    check_budget(name, size, max_vertices=max_vertices, max_edges=max_edges)
    logger.debug(f"Generating {name}: expecting |V|={size.vertices}, |E|={size.edges}")


def finish(name: str, builder: GraphBuilder, size: GraphSize) -> nx.Graph:
    """Verify the construction against its closed form and hand it to networkx."""
    if builder.vertex_count != size.vertices or builder.number_of_edges() != size.edges:
        raise RuntimeError(
            f"{name}: built |V|={builder.vertex_count}, |E|={builder.number_of_edges()} "
            f"but the closed form gives |V|={size.vertices}, |E|={size.edges}"
        )
    G = from_builder(name, builder)
    logger.debug(f"Built {name} with {G.number_of_nodes()} vertices and {G.number_of_edges()} edges")
    return G
