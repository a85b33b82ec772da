from __future__ import annotations

import asyncio
from typing import Any

import requests

from movieFeed.utils import log_debug
from movieFeed.settings import (
    TMDB_API_KEY,
    TMDB_BASE_URL,
    TMDB_BEARER_TOKEN,
    REQUEST_TIMEOUT,
)
from movieFeed.metadata.core.errors import (
    BadStatus,
    DecodeFailure,
    InvalidRequest,
    TransportFailure,
)
from movieFeed.metadata.core.models import Movie, PageResult


class TMDBClient:
    """Thin wrapper around The Movie Database (TMDb) list endpoints.

    Blocking methods (`top_rated`, `search_movies`) do the HTTP work; the
    async pair (`fetch_page`, `search`) pushes them onto worker threads so a
    batch of pages can be fetched in parallel from the event loop.
    """
    BASE_URL = TMDB_BASE_URL

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def __init__(
        self,
        bearer_token: str | None = None,
        api_key: str | None = None,
        session: requests.Session | None = None,
        timeout: float = REQUEST_TIMEOUT,
    ):
        self.bearer_token = bearer_token or TMDB_BEARER_TOKEN
        self.api_key = api_key or TMDB_API_KEY
        if not self.bearer_token and not self.api_key:
            raise RuntimeError("No TMDB bearer token or api key configured")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers["Accept"] = "application/json"
        if self.bearer_token:
            # v4 auth; no api_key in query params
            self.session.headers["Authorization"] = f"Bearer {self.bearer_token}"

    def _get(self, path: str, **params) -> dict[str, Any]:
        """GET *path* and return the decoded JSON object.

        Every failure is mapped onto the `FetchError` taxonomy.
        """
        if not self.bearer_token:
            params["api_key"] = self.api_key
        try:
            resp = self.session.get(
                f"{self.BASE_URL}{path}", params=params, timeout=self.timeout
            )
        except (
            requests.exceptions.InvalidURL,
            requests.exceptions.MissingSchema,
            requests.exceptions.InvalidSchema,
        ) as e:
            raise InvalidRequest(str(e)) from e
        except requests.RequestException as e:
            raise TransportFailure(e) from e

        if not 200 <= resp.status_code < 300:
            if resp.status_code == 429:
                log_debug("TMDb rate limit reached.")
            raise BadStatus(resp.status_code, resp.text)

        try:
            return resp.json()
        except ValueError as e:
            raise DecodeFailure(f"response from {path} is not JSON: {e}") from e

    # ------------------------------------------------------------------
    # Public – blocking
    # ------------------------------------------------------------------
    def top_rated(self, page: int = 1) -> PageResult:
        """One page of ``/movie/top_rated`` (TMDb pages are 1-based)."""
        if page < 1:
            raise InvalidRequest(f"page must be >= 1, got {page}")
        return PageResult.from_api(self._get("/movie/top_rated", page=page))

    def search_movies(self, query: str) -> list[Movie]:
        """First page of ``/search/movie`` for *query*."""
        query = query.strip()
        if not query:
            raise InvalidRequest("search query is empty")
        return PageResult.from_api(self._get("/search/movie", query=query)).results

    # ------------------------------------------------------------------
    # Public – async (catalog source protocol)
    # ------------------------------------------------------------------
    async def fetch_page(self, page: int) -> PageResult:
        return await asyncio.to_thread(self.top_rated, page)

    async def search(self, query: str) -> list[Movie]:
        return await asyncio.to_thread(self.search_movies, query)
