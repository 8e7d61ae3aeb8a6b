from __future__ import annotations


def graph_name(tag: str, *params: int) -> str:
    """Deterministic graph name, e.g. graph_name("PseudoExt", 2, 3) -> "PseudoExt_2_3"."""
    return "_".join([tag, *(str(p) for p in params)])


def parse_graph_name(name: str) -> tuple[str, tuple[int, ...]]:
    """Inverse of graph_name: "CayleyTree_3_4" -> ("CayleyTree", (3, 4))."""
    tag, *rest = name.split("_")
    try:
        return tag, tuple(int(p) for p in rest)
    except ValueError:
        raise ValueError(f"not a generated graph name: {name!r}") from None
