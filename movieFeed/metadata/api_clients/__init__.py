"""
metadata.api_clients
~~~~~~~~~~~~~~~~~~~~
Thin wrappers around external REST APIs.
Build a client in the composition root and hand it to whoever needs it.
"""

from movieFeed.metadata.api_clients.tmdb_client import TMDBClient

__all__ = ["TMDBClient"]
