"""
movieFeed
~~~~~~~~~

Top-level package for the Movie Feed application: an infinite-scroll browser
for TMDb's top-rated catalog with search and favorites.

Exports:
  - CatalogController – paging view-model
  - Movie, PageResult – decoded TMDb data
  - TMDBClient, LocalDB, PrefsRepo, FavoritesStore – collaborators
  - log_debug

The Qt layer lives in ``movieFeed.gui`` and is not imported here.
"""

# utils
from movieFeed.utils import log_debug

# data + collaborators
from movieFeed.metadata import (
    Movie,
    PageResult,
    TMDBClient,
    LocalDB,
    PrefsRepo,
    FavoritesStore,
)

# core logic
from movieFeed.catalog import CatalogController

__all__ = [
    # utils
    "log_debug",
    # data
    "Movie",
    "PageResult",
    "TMDBClient",
    "LocalDB",
    "PrefsRepo",
    "FavoritesStore",
    # core
    "CatalogController",
]
