"""Generic driver for round-based recursive constructions."""
from __future__ import annotations

import logging
from typing import Callable, Sequence, TypeVar

from selfsimnet.core.builder import GraphBuilder

logger = logging.getLogger(__name__)

Unit = TypeVar("Unit")

# rule(builder, frontier, round_index) -> next frontier; round_index is 1-based
Rule = Callable[[GraphBuilder, Sequence[Unit], int], Sequence[Unit]]


def expand(
    builder: GraphBuilder,
    frontier: Sequence[Unit],
    rule: Rule,
    rounds: int,
    *,
    first_round: int = 1,
) -> Sequence[Unit]:
    """Apply *rule* for *rounds* consecutive rounds and return the last frontier.

    The builder is mutated in place; the frontier of each round is replaced
    by whatever the rule returns.
    """
    for i in range(first_round, first_round + rounds):
        frontier = rule(builder, frontier, i)
        logger.debug(
            f"round {i}: |V|={builder.vertex_count}, |E|={builder.number_of_edges()}, "
            f"frontier={len(frontier)}"
        )
    return frontier
