from .edgelist import read_edge_pairs
from .fetch import download_bytes, find_konect_edge_file, load_undi_konect, load_undi_snap

__all__ = [
    "read_edge_pairs",
    "download_bytes",
    "find_konect_edge_file",
    "load_undi_konect",
    "load_undi_snap",
]
