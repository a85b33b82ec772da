"""
metadata.core
~~~~~~~~~~~~~
Domain layer – pure dataclasses, error taxonomy & repositories.
"""

from .errors import (
    FetchError,
    InvalidRequest,
    TransportFailure,
    BadStatus,
    DecodeFailure,
)
from .models import Movie, PageResult
from .repo   import PrefsRepo, FavoritesStore

__all__ = [
    "FetchError", "InvalidRequest", "TransportFailure", "BadStatus", "DecodeFailure",
    "Movie", "PageResult",
    "PrefsRepo", "FavoritesStore",
]
