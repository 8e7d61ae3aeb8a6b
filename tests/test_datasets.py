"""Tests for KONECT/SNAP loaders, with downloads replaced by local archives."""
import gzip
import io
import tarfile
import urllib.error
import urllib.request

import pytest

from selfsimnet.datasets import fetch
from selfsimnet.datasets.edgelist import read_edge_pairs
from selfsimnet.errors import FetchError


def _konect_archive(files):
    buf = io.BytesIO()
    with tarfile.open(fileobj=buf, mode="w:bz2") as tar:
        for path, text in files.items():
            data = text.encode("utf-8")
            info = tarfile.TarInfo(path)
            info.size = len(data)
            tar.addfile(info, io.BytesIO(data))
    return buf.getvalue()


# --- edge-list parsing ---

def test_read_edge_pairs_skips_comments_and_extra_columns():
    lines = ["% sym unweighted", "", "1 2", "2\t3 1 1234567", "# snap header", "3 1"]
    assert list(read_edge_pairs(lines)) == [(1, 2), (2, 3), (3, 1)]


def test_read_edge_pairs_accepts_bytes():
    assert list(read_edge_pairs([b"4 5\n"])) == [(4, 5)]


def test_read_edge_pairs_rejects_short_line():
    with pytest.raises(ValueError):
        list(read_edge_pairs(["1 2", "7"]))


# --- KONECT ---

def test_load_undi_konect(monkeypatch):
    archive = _konect_archive({
        "dolphins/README.dolphins": "readme",
        "dolphins/out.dolphins": "% sym unweighted\n1 2\n2 3\n3 3\n1 2\n",
    })
    urls = []

    def fake_download(url, timeout=None):
        urls.append(url)
        return archive

    monkeypatch.setattr(fetch, "download_bytes", fake_download)
    G = fetch.load_undi_konect("dolphins")
    assert urls == ["http://konect.cc/files/download.tsv.dolphins.tar.bz2"]
    assert G.graph["name"] == "dolphins"
    assert G.number_of_nodes() == 3
    assert G.number_of_edges() == 2
    assert all(w == 1 for _, _, w in G.edges(data="weight"))


def test_load_undi_konect_custom_name(monkeypatch):
    archive = _konect_archive({"karate/out.karate": "1 2\n"})
    monkeypatch.setattr(fetch, "download_bytes", lambda url, timeout=None: archive)
    assert fetch.load_undi_konect("karate", "Zachary").graph["name"] == "Zachary"


def test_load_undi_konect_missing_edge_file(monkeypatch):
    archive = _konect_archive({"dolphins/README.dolphins": "readme"})
    monkeypatch.setattr(fetch, "download_bytes", lambda url, timeout=None: archive)
    with pytest.raises(FetchError):
        fetch.load_undi_konect("dolphins")


def test_load_undi_konect_corrupt_archive(monkeypatch):
    monkeypatch.setattr(fetch, "download_bytes", lambda url, timeout=None: b"not an archive")
    with pytest.raises(FetchError):
        fetch.load_undi_konect("dolphins")


def test_find_konect_edge_file(tmp_path):
    (tmp_path / "README.x").write_text("r")
    (tmp_path / "out.x").write_text("1 2\n")
    assert fetch.find_konect_edge_file(str(tmp_path)).endswith("out.x")


# --- SNAP ---

def test_load_undi_snap(monkeypatch):
    payload = gzip.compress(b"# Undirected graph\n# Nodes: 3 Edges: 2\n0\t1\n1\t2\n")
    monkeypatch.setattr(fetch, "download_bytes", lambda url, timeout=None: payload)
    G = fetch.load_undi_snap("https://snap.stanford.edu/data/x.txt.gz")
    assert G.graph["name"] == "UndiSNAP"
    assert sorted(G.edges()) == [(0, 1), (1, 2)]


def test_load_undi_snap_not_gzip(monkeypatch):
    monkeypatch.setattr(fetch, "download_bytes", lambda url, timeout=None: b"plain text")
    with pytest.raises(FetchError):
        fetch.load_undi_snap("https://example.invalid/x.gz", "X")


# --- download ---

def test_download_bytes_wraps_network_errors(monkeypatch):
    def refuse(url, timeout=None):
        raise urllib.error.URLError("connection refused")

    monkeypatch.setattr(urllib.request, "urlopen", refuse)
    with pytest.raises(FetchError):
        fetch.download_bytes("http://example.invalid/x")
