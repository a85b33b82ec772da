"""
metadata
~~~~~~~~
Top-level package that bundles:

* core        – dataclasses, errors + repositories
* local_db    – the sqlite connection the repositories share
* api_clients – TMDb client
"""

# ── core objects ──────────────────────────────────────────────────────────
from movieFeed.metadata.core import (
    Movie,
    PageResult,
    PrefsRepo,
    FavoritesStore,
    FetchError,
)
from movieFeed.metadata.local_db import LocalDB

# ── API clients ───────────────────────────────────────────────────────────
from movieFeed.metadata.api_clients import TMDBClient

__all__ = [
    "Movie",
    "PageResult",
    "PrefsRepo",
    "FavoritesStore",
    "FetchError",
    "LocalDB",
    "TMDBClient",
]
