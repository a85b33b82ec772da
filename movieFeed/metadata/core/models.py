# Movie / PageResult dataclasses decoded from TMDb payloads
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any

from movieFeed.settings import TMDB_IMAGE_BASE
from movieFeed.metadata.core.errors import DecodeFailure


@dataclass(frozen=True, slots=True)
class Movie:
    id: int
    title: str
    overview: str = ""
    poster_path: str | None = None
    vote_average: float = 0.0
    release_date: str = ""
    # local-only; attached by the catalog controller, never decoded
    is_favorite: bool = field(default=False, compare=False)

    @classmethod
    def from_api(cls, data: Any) -> Movie:
        """Build a Movie from one TMDb ``results[]`` object.

        Only ``id`` and ``title`` are required; everything else falls back to
        an empty value because TMDb sends ``null`` for unknown fields.
        """
        if not isinstance(data, dict):
            raise DecodeFailure(f"movie entry is {type(data).__name__}, expected object")
        movie_id = data.get("id")
        title    = data.get("title") or data.get("original_title")
        if not isinstance(movie_id, int) or isinstance(movie_id, bool):
            raise DecodeFailure(f"movie entry has invalid id: {movie_id!r}")
        if not isinstance(title, str):
            raise DecodeFailure(f"movie {movie_id} has no title")

        vote = data.get("vote_average") or 0.0
        if not isinstance(vote, (int, float)):
            raise DecodeFailure(f"movie {movie_id} has invalid vote_average: {vote!r}")

        return cls(
            id=movie_id,
            title=title,
            overview=data.get("overview") or "",
            poster_path=data.get("poster_path") or None,
            vote_average=float(vote),
            release_date=data.get("release_date") or "",
        )

    def poster_url(self, size: str = "w500") -> str | None:
        if not self.poster_path:
            return None
        return f"{TMDB_IMAGE_BASE}/{size}{self.poster_path}"

    @property
    def year(self) -> str:
        return self.release_date[:4]


@dataclass(frozen=True, slots=True)
class PageResult:
    page: int
    results: list[Movie]
    total_pages: int | None = None
    total_results: int | None = None

    @classmethod
    def from_api(cls, payload: Any) -> PageResult:
        """Decode a TMDb list response (``/movie/top_rated``, ``/search/movie``)."""
        if not isinstance(payload, dict):
            raise DecodeFailure("response body is not a JSON object")
        page    = payload.get("page")
        results = payload.get("results")
        if not isinstance(page, int) or page < 1:
            raise DecodeFailure(f"invalid page number: {page!r}")
        if not isinstance(results, list):
            raise DecodeFailure("response has no results list")

        total_pages = payload.get("total_pages")
        if total_pages is not None and not isinstance(total_pages, int):
            raise DecodeFailure(f"invalid total_pages: {total_pages!r}")

        return cls(
            page=page,
            results=[Movie.from_api(r) for r in results],
            total_pages=total_pages,
            total_results=payload.get("total_results"),
        )
