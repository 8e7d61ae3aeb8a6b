from .naming import graph_name, parse_graph_name
from .structure import StructureReport, structure_report, is_prefix_subgraph

__all__ = [
    "graph_name",
    "parse_graph_name",
    "StructureReport",
    "structure_report",
    "is_prefix_subgraph",
]
