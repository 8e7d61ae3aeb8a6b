"""Exception types raised by selfsimnet."""
from __future__ import annotations


class SelfSimNetError(Exception):
    """Base class for all selfsimnet errors."""


class InvalidParameterError(SelfSimNetError, ValueError):
    """A generator parameter lies outside its documented domain.

    Raised before any vertex is allocated, so no partial graph exists.
    """


class GraphTooLargeError(SelfSimNetError, OverflowError):
    """The projected vertex or edge count exceeds the configured budget."""

    def __init__(self, family: str, vertices: int, edges: int, max_vertices: int, max_edges: int):
        self.family = family
        self.vertices = vertices
        self.edges = edges
        self.max_vertices = max_vertices
        self.max_edges = max_edges
        super().__init__(
            f"{family}: projected |V|={vertices}, |E|={edges} exceeds the limit "
            f"(max_vertices={max_vertices}, max_edges={max_edges}). "
            "Lower the generation index or raise SELFSIMNET_MAX_VERTICES/SELFSIMNET_MAX_EDGES."
        )


class FetchError(SelfSimNetError, RuntimeError):
    """A real-world dataset could not be downloaded or unpacked."""
