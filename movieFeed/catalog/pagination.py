"""catalog.pagination
Paginated, concurrent fetch-and-merge controller for the top-rated catalog.

A *batch* is a handful of consecutive pages requested together. Pages of one
batch are fetched in parallel, each one leaves the in-flight set the moment
it returns, and the batch is merged exactly once, in ascending page order,
after every page has come back. Only one batch may be outstanding at a time.

Reset and search start a new *generation*; whatever an older generation
still has on the wire is dropped when it lands.
"""

from __future__ import annotations

import asyncio
import dataclasses
import threading
from typing import Callable, Protocol

from movieFeed.utils import log_debug, mean
from movieFeed.settings import BATCH_SIZE, LOOKAHEAD_THRESHOLD
from movieFeed.metadata.core.errors import FetchError
from movieFeed.metadata.core.models import Movie, PageResult


class CatalogSource(Protocol):
    async def fetch_page(self, page: int) -> PageResult: ...

    async def search(self, query: str) -> list[Movie]: ...


class FavoritesBackend(Protocol):
    def load(self) -> set[int]: ...

    def save(self, ids: set[int]) -> None: ...


class CatalogController:
    """View-model behind the movie list pages.

    Parameters
    ----------
    source
        Anything with async ``fetch_page(page)`` / ``search(query)``.
    favorites
        Store with ``load()`` / ``save(ids)``; read once here, written on
        every toggle.
    batch_size
        Pages per batch.
    lookahead
        How close to the end of the list (in items) scrolling must get
        before the next batch is scheduled.
    loop
        Event loop tasks are created on. Defaults to the running loop at
        the time of each call.
    """

    def __init__(
        self,
        source: CatalogSource,
        favorites: FavoritesBackend,
        batch_size: int = BATCH_SIZE,
        lookahead: int = LOOKAHEAD_THRESHOLD,
        on_update: Callable[[], None] | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
    ):
        if batch_size < 1:
            raise ValueError(f"batch_size must be >= 1, got {batch_size}")
        self._source = source
        self._favorites_store = favorites
        self.batch_size = batch_size
        self.lookahead = lookahead
        self.on_update = on_update
        self._loop = loop

        # pagination state
        self._current_page = 1
        self._total_pages: int | None = None
        self._in_flight: set[int] = set()
        self._is_batch_loading = False
        self._stalled = False
        self._items: list[Movie] = []
        self._seen_ids: set[int] = set()
        self._generation = 0
        self._query: str | None = None
        self._lock = threading.Lock()

        self._favorite_ids: set[int] = set(favorites.load())

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------
    @property
    def items(self) -> list[Movie]:
        """Snapshot of the list with favorite flags attached."""
        favs = self._favorite_ids
        return [dataclasses.replace(m, is_favorite=m.id in favs) for m in self._items]

    @property
    def count(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def movie(self, index: int) -> Movie:
        m = self._items[index]
        return dataclasses.replace(m, is_favorite=m.id in self._favorite_ids)

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def total_pages(self) -> int | None:
        return self._total_pages

    @property
    def in_flight(self) -> frozenset[int]:
        with self._lock:
            return frozenset(self._in_flight)

    @property
    def is_batch_loading(self) -> bool:
        return self._is_batch_loading

    @property
    def is_stalled(self) -> bool:
        """True after a batch that added nothing; prefetch waits for a reset."""
        return self._stalled

    @property
    def is_searching(self) -> bool:
        return self._query is not None

    @property
    def generation(self) -> int:
        return self._generation

    # ------------------------------------------------------------------
    # Favorites overlay
    # ------------------------------------------------------------------
    def is_favorite(self, movie_id: int) -> bool:
        return movie_id in self._favorite_ids

    def favorites(self) -> list[Movie]:
        """Favorite movies among the loaded items, in list order."""
        return [m for m in self.items if m.is_favorite]

    def toggle_favorite(self, movie_id: int) -> None:
        updated = set(self._favorite_ids)
        if movie_id in updated:
            updated.remove(movie_id)
        else:
            updated.add(movie_id)
        self._favorites_store.save(set(updated))
        self._favorite_ids = updated
        self._publish()

    def average_rating(self) -> float:
        return mean([m.vote_average for m in self._items])

    # ------------------------------------------------------------------
    # Pagination
    # ------------------------------------------------------------------
    def fetch_initial(self) -> asyncio.Task | None:
        """Start (or continue) browsing the catalog; leaves search mode."""
        if self._query is not None:
            return self.refresh()
        return self.schedule_next_batch()

    def reset(self) -> None:
        """Drop everything loaded so far; the next batch starts at page 1."""
        self._clear_session()
        self._query = None
        log_debug(f"[Catalog] reset → generation {self._generation}")
        self._publish()

    def refresh(self) -> asyncio.Task | None:
        """Reset and immediately fetch from page 1 again (pull-to-refresh)."""
        self.reset()
        return self.schedule_next_batch()

    def next_batch_pages(self, batch_size: int | None = None) -> list[int]:
        """Pages the next batch would request, given the current state."""
        size = self.batch_size if batch_size is None else batch_size
        pages: list[int] = []
        with self._lock:
            for offset in range(size):
                p = self._current_page + offset
                if self._total_pages is not None and p > self._total_pages:
                    break
                if p in self._in_flight:
                    continue
                pages.append(p)
        return pages

    def schedule_next_batch(self, batch_size: int | None = None) -> asyncio.Task | None:
        """Kick off the next batch unless one is already loading.

        Returns the task resolving the batch, or None when there was
        nothing to do (batch outstanding, end reached, pages in flight).
        """
        if self._is_batch_loading:
            return None
        pages = self.next_batch_pages(batch_size)
        if not pages:
            return None

        self._is_batch_loading = True
        with self._lock:
            self._in_flight.update(pages)
        log_debug(f"[Catalog] scheduling pages {pages}")
        return self._spawn(self._run_batch(self._generation, pages))

    def load_more_if_needed(self, visible_index: int) -> asyncio.Task | None:
        """Prefetch once *visible_index* is within `lookahead` of the end.

        Does nothing while searching or after a batch that added nothing
        (network down, rate limited); `refresh()` starts over.
        """
        if self._query is not None or self._stalled:
            return None
        threshold = max(0, len(self._items) - self.lookahead)
        if visible_index >= threshold:
            return self.schedule_next_batch()
        return None

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def search(self, query: str) -> asyncio.Task | None:
        """Replace the list with search results.

        Searching resets pagination; browsing resumes from page 1 after
        `clear_search`. A blank query is the same as `clear_search`.
        """
        query = query.strip()
        if not query:
            return self.clear_search()
        self._clear_session()
        self._query = query
        self._publish()
        return self._spawn(self._run_search(self._generation, query))

    def clear_search(self) -> asyncio.Task | None:
        return self.refresh()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _spawn(self, coro) -> asyncio.Task:
        loop = self._loop or asyncio.get_running_loop()
        task = loop.create_task(coro)
        task.add_done_callback(self._log_task_error)
        return task

    @staticmethod
    def _log_task_error(task: asyncio.Task) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            log_debug(f"[Catalog] task failed: {exc!r}")

    def _clear_session(self) -> None:
        with self._lock:
            self._generation += 1
            self._in_flight.clear()
        self._current_page = 1
        self._total_pages = None
        self._is_batch_loading = False
        self._stalled = False
        self._items = []
        self._seen_ids = set()

    def _publish(self) -> None:
        if self.on_update is not None:
            self.on_update()

    async def _fetch_one(
        self,
        generation: int,
        page: int,
        collected: list[tuple[int, PageResult]],
    ) -> None:
        result: PageResult | None = None
        try:
            result = await self._source.fetch_page(page)
        except FetchError as e:
            log_debug(f"[TopRated] page {page} error: {e!r}")
        finally:
            with self._lock:
                if generation == self._generation:
                    self._in_flight.discard(page)
        if result is not None:
            with self._lock:
                collected.append((page, result))

    async def _run_batch(self, generation: int, pages: list[int]) -> None:
        collected: list[tuple[int, PageResult]] = []
        outcomes = await asyncio.gather(
            *(self._fetch_one(generation, p, collected) for p in pages),
            return_exceptions=True,
        )
        errors = [e for e in outcomes if isinstance(e, BaseException)]
        for page, outcome in zip(pages, outcomes):
            if isinstance(outcome, BaseException):
                log_debug(f"[TopRated] page {page} unexpected error: {outcome!r}")
        # the pages that did come back are still merged
        self._merge(generation, pages, collected)
        if errors:
            raise errors[0]

    def _merge(
        self,
        generation: int,
        pages: list[int],
        collected: list[tuple[int, PageResult]],
    ) -> None:
        if generation != self._generation:
            log_debug(f"[Catalog] dropping stale batch {pages} (generation {generation})")
            return

        if self._total_pages is None:
            self._total_pages = next(
                (r.total_pages for _, r in collected if r.total_pages is not None),
                None,
            )

        collected.sort(key=lambda entry: entry[0])
        fresh = self._current_page == 1 and (not self._items or self._query is not None)
        if fresh:
            self._items = []
            self._seen_ids = set()
        self._query = None

        added = 0
        for _, result in collected:
            for movie in result.results:
                if movie.id in self._seen_ids:
                    continue
                self._seen_ids.add(movie.id)
                self._items.append(movie)
                added += 1

        # failed pages still consume their slot
        self._current_page += len(pages)
        self._is_batch_loading = False
        self._stalled = added == 0
        log_debug(
            f"[Catalog] merged pages {[p for p, _ in collected]} of {pages}: "
            f"+{added} items, next page {self._current_page}, total {self._total_pages}"
        )
        self._publish()

    async def _run_search(self, generation: int, query: str) -> None:
        try:
            results = await self._source.search(query)
        except FetchError as e:
            log_debug(f"[Search] {query!r} error: {e!r}")
            return
        if generation != self._generation:
            log_debug(f"[Search] dropping stale results for {query!r}")
            return
        self._items = list(results)
        self._seen_ids = {m.id for m in self._items}
        log_debug(f"[Search] {query!r} → {len(self._items)} results")
        self._publish()
