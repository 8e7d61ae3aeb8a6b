"""Whitespace/tab separated edge-list parsing."""
from __future__ import annotations

from typing import Iterable, Iterator, Tuple, Union

COMMENT_PREFIXES = ("%", "#")


def read_edge_pairs(lines: Iterable[Union[str, bytes]]) -> Iterator[Tuple[int, int]]:
    """
    Yield (u, v) integer pairs from edge-list lines.

    Blank lines and lines starting with '%' (KONECT) or '#' (SNAP) are
    skipped. Columns after the second (weights, timestamps) are ignored.
    """
    for line_num, raw in enumerate(lines, 1):
        line = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        line = line.strip()
        if not line or line.startswith(COMMENT_PREFIXES):
            continue
        parts = line.split()
        if len(parts) < 2:
            raise ValueError(f"Line {line_num} does not contain two vertices: {line!r}")
        try:
            yield int(parts[0]), int(parts[1])
        except ValueError:
            raise ValueError(f"Line {line_num} has non-integer vertex IDs: {line!r}") from None
