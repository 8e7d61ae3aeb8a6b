"""Runtime limits and endpoints, overridable through environment variables."""
from __future__ import annotations

import os


def _env_int(key: str, default: int) -> int:
    raw = os.environ.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.replace("_", ""))
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None


MAX_VERTICES = _env_int("SELFSIMNET_MAX_VERTICES", 10_000_000)
MAX_EDGES = _env_int("SELFSIMNET_MAX_EDGES", 10_000_000)

KONECT_URL = os.environ.get(
    "SELFSIMNET_KONECT_URL",
    "http://konect.cc/files/download.tsv.{name}.tar.bz2",
)
DOWNLOAD_TIMEOUT = _env_int("SELFSIMNET_DOWNLOAD_TIMEOUT", 300)
