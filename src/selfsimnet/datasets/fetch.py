"""Download loaders for undirected KONECT and SNAP datasets."""
from __future__ import annotations

import gzip
import io
import logging
import os
import shutil
import tarfile
import tempfile
import urllib.error
import urllib.request
from typing import Optional

import networkx as nx

from selfsimnet import config
from selfsimnet.core.container import from_edge_stream
from selfsimnet.errors import FetchError

from .edgelist import read_edge_pairs

logger = logging.getLogger(__name__)


def download_bytes(url: str, timeout: Optional[int] = None) -> bytes:
    """Fetch *url* into memory. Network failures raise FetchError."""
    if timeout is None:
        timeout = config.DOWNLOAD_TIMEOUT
    logger.info(f"Downloading {url}")
    try:
        with urllib.request.urlopen(url, timeout=timeout) as resp:
            data = resp.read()
    except (urllib.error.URLError, OSError) as e:
        raise FetchError(f"failed to download {url}: {e}") from e
    logger.info(f"Downloaded {len(data)} bytes from {url}")
    return data


def find_konect_edge_file(directory: str) -> str:
    """Path of the out.* edge file inside an extracted KONECT archive."""
    found = None
    for file_name in sorted(os.listdir(directory)):
        if file_name.startswith("out."):
            found = os.path.join(directory, file_name)
    if found is None:
        raise FetchError(f"cannot find graph file in {directory}.")
    return found


def load_undi_konect(internal_name: str, name: Optional[str] = None) -> nx.Graph:
    """Undirected unweighted KONECT network, e.g. load_undi_konect("dolphins").

    The .tar.bz2 archive is extracted into a temporary directory that is
    removed again whether or not parsing succeeds.
    """
    if name is None:
        name = internal_name
    url = config.KONECT_URL.format(name=internal_name)
    payload = download_bytes(url)

    dir_path = tempfile.mkdtemp(prefix="selfsimnet-")
    try:
        try:
            with tarfile.open(fileobj=io.BytesIO(payload), mode="r:bz2") as tar:
                tar.extractall(dir_path, filter="data")
        except (tarfile.TarError, EOFError, OSError) as e:
            raise FetchError(f"cannot extract KONECT archive for {internal_name}: {e}") from e

        file_dir = os.path.join(dir_path, internal_name)
        if not os.path.isdir(file_dir):
            raise FetchError(f"archive for {internal_name} has no {internal_name}/ directory")
        file_path = find_konect_edge_file(file_dir)
        logger.info(f"Reading {file_path}")
        with open(file_path, "r", encoding="utf-8") as f:
            G = from_edge_stream(name, read_edge_pairs(f))
    finally:
        shutil.rmtree(dir_path, ignore_errors=True)

    logger.info(f"Loaded {name}: {G.number_of_nodes()} vertices, {G.number_of_edges()} edges")
    return G


def load_undi_snap(url: str, name: str = "UndiSNAP") -> nx.Graph:
    """Undirected SNAP edge list from a gzip-compressed text file."""
    payload = download_bytes(url)
    try:
        text = gzip.decompress(payload)
    except (OSError, EOFError) as e:
        raise FetchError(f"cannot decompress {url}: {e}") from e
    G = from_edge_stream(name, read_edge_pairs(io.BytesIO(text)))
    logger.info(f"Loaded {name}: {G.number_of_nodes()} vertices, {G.number_of_edges()} edges")
    return G
