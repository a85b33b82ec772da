"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from movieFeed import utils
from movieFeed.metadata.core.errors import TransportFailure
from movieFeed.metadata.core.models import Movie, PageResult
from movieFeed.metadata.local_db import LocalDB


@pytest.fixture(autouse=True)
def temp_log_path(tmp_path: Path, monkeypatch) -> Path:
    log_path = tmp_path / "debug.log"
    monkeypatch.setattr(utils, "LOG_PATH", log_path)
    return log_path


@pytest.fixture
def local_db(tmp_path: Path):
    db = LocalDB(tmp_path / "test.sqlite")
    yield db
    db.close()


def make_movie(movie_id: int, vote: float = 7.0) -> Movie:
    return Movie(
        id=movie_id,
        title=f"Movie {movie_id}",
        overview="",
        poster_path=f"/{movie_id}.jpg",
        vote_average=vote,
        release_date="2001-01-01",
    )


def page_of(page: int, per_page: int = 3, total_pages: int | None = 10) -> PageResult:
    """Page *page* holds ids page*100 .. page*100+per_page-1."""
    return PageResult(
        page=page,
        results=[make_movie(page * 100 + i) for i in range(per_page)],
        total_pages=total_pages,
    )


class FakeCatalog:
    """
    Catalog source whose pages only complete when the test releases them.

    ``release(page)`` lets a single page finish; ``release_all()`` opens
    every gate, including pages requested later.
    """

    def __init__(self, total_pages: int | None = 10, per_page: int = 3):
        self.total_pages = total_pages
        self.per_page = per_page
        self.calls: list[int] = []
        self.search_calls: list[str] = []
        self.failing: set[int] = set()
        self.search_results: dict[str, list[Movie]] = {}
        self._gates: dict[int, asyncio.Event] = {}
        self._open_all = False

    def _gate(self, page: int) -> asyncio.Event:
        gate = self._gates.setdefault(page, asyncio.Event())
        if self._open_all:
            gate.set()
        return gate

    def release(self, page: int) -> None:
        self._gate(page).set()

    def release_all(self) -> None:
        self._open_all = True
        for gate in self._gates.values():
            gate.set()

    async def fetch_page(self, page: int) -> PageResult:
        self.calls.append(page)
        await self._gate(page).wait()
        if page in self.failing:
            raise TransportFailure(ConnectionError(f"page {page} unreachable"))
        return page_of(page, self.per_page, self.total_pages)

    async def search(self, query: str) -> list[Movie]:
        self.search_calls.append(query)
        return self.search_results.get(query, [])


class MemoryFavorites:
    def __init__(self, ids: set[int] | None = None):
        self.ids = set(ids or ())
        self.saves: list[set[int]] = []

    def load(self) -> set[int]:
        return set(self.ids)

    def save(self, ids: set[int]) -> None:
        self.ids = set(ids)
        self.saves.append(set(ids))


async def settle() -> None:
    """Let every ready task run until nothing is left to do."""
    for _ in range(10):
        await asyncio.sleep(0)
