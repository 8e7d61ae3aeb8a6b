from .builder import DEFAULT_WEIGHT, Edge, Triangle, GraphBuilder, canonical_pair
from .container import construct, from_builder, from_edge_stream
from .expand import expand
from .ternary import encode_trits, decode_trits, address_to_vertex, vertex_to_address

__all__ = [
    "DEFAULT_WEIGHT",
    "Edge",
    "Triangle",
    "GraphBuilder",
    "canonical_pair",
    "construct",
    "from_builder",
    "from_edge_stream",
    "expand",
    "encode_trits",
    "decode_trits",
    "address_to_vertex",
    "vertex_to_address",
]
