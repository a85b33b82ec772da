"""Tests for MovieListPage filtering and prefetch wiring (offscreen Qt)."""

import os
from unittest.mock import MagicMock

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402

from movieFeed.gui.movie_list_page import MovieListPage, only_favorites, show_all  # noqa: E402
from movieFeed.metadata.core.models import Movie  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    return QApplication.instance() or QApplication([])


def _controller(searching=False):
    ctl = MagicMock()
    ctl.items = [
        Movie(id=1, title="Heat"),
        Movie(id=2, title="Alien", is_favorite=True),
        Movie(id=3, title="Up"),
    ]
    ctl.is_searching = searching
    return ctl


def test_favorites_page_filters_items(qapp):
    page = MovieListPage(_controller(), only_favorites, prefetch=False)

    page.refresh()

    assert [m.id for m in page.current_movies()] == [2]
    assert page.list.count() == 1
    assert page.empty_label.isHidden()


def test_empty_page_shows_placeholder(qapp):
    ctl = _controller()
    ctl.items = []
    page = MovieListPage(ctl, show_all)

    page.refresh()

    assert page.list.count() == 0
    assert not page.empty_label.isHidden()


def test_prefetch_page_asks_controller_for_more(qapp):
    ctl = _controller()
    page = MovieListPage(ctl, show_all, prefetch=True)
    page.refresh()

    page._check_prefetch()

    ctl.load_more_if_needed.assert_called()


def test_no_prefetch_while_searching_or_filtered(qapp):
    searching = _controller(searching=True)
    MovieListPage(searching, show_all, prefetch=True)._check_prefetch()
    searching.load_more_if_needed.assert_not_called()

    favorites = _controller()
    MovieListPage(favorites, only_favorites, prefetch=False)._check_prefetch()
    favorites.load_more_if_needed.assert_not_called()
