"""Parameter validation and size budgeting shared by all generators."""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from selfsimnet import config
from selfsimnet.errors import GraphTooLargeError, InvalidParameterError

if TYPE_CHECKING:
    from selfsimnet.invariants.closed_forms import GraphSize


def require_int(name: str, value: object, minimum: int) -> int:
    """Return *value* if it is an integer >= minimum, else raise InvalidParameterError."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise InvalidParameterError(f"{name} must be >= {minimum}, got {value}")
    return value


def require_generation(g: object) -> int:
    return require_int("g", g, 0)


def check_budget(
    family: str,
    size: GraphSize,
    *,
    max_vertices: Optional[int] = None,
    max_edges: Optional[int] = None,
) -> None:
    """Refuse to build graphs whose closed-form size exceeds the limits."""
    if max_vertices is None:
        max_vertices = config.MAX_VERTICES
    if max_edges is None:
        max_edges = config.MAX_EDGES
    if size.vertices > max_vertices or size.edges > max_edges:
        raise GraphTooLargeError(family, size.vertices, size.edges, max_vertices, max_edges)
