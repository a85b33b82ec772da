"""Tests for the local sqlite repositories."""

import pytest

from movieFeed.catalog import CatalogController
from movieFeed.metadata.core.repo import FavoritesStore, PrefsRepo
from movieFeed.metadata.local_db import LocalDB

from conftest import FakeCatalog


def test_favorites_start_empty(local_db):
    assert FavoritesStore(local_db).load() == set()


def test_favorites_save_replaces_set(local_db):
    store = FavoritesStore(local_db)

    store.save({1, 2, 3})
    store.save({2, 4})

    assert store.load() == {2, 4}


def test_favorites_survive_reopen(tmp_path):
    path = tmp_path / "fav.sqlite"
    db = LocalDB(path)
    FavoritesStore(db).save({42})
    db.close()

    db = LocalDB(path)
    try:
        assert FavoritesStore(db).load() == {42}
    finally:
        db.close()


def test_kv_round_trip(local_db):
    prefs = PrefsRepo(local_db)

    assert prefs.get_kv("selected_theme") is None
    prefs.set_kv("selected_theme", "1")
    assert prefs.get_kv("selected_theme") == "1"
    prefs.set_kv("selected_theme", "0")
    assert prefs.get_kv("selected_theme") == "0"
    prefs.delete_kv("selected_theme")
    assert prefs.get_kv("selected_theme") is None


def test_controller_persists_toggles_through_store(local_db):
    store = FavoritesStore(local_db)
    store.save({7})
    ctl = CatalogController(FakeCatalog(), store)

    ctl.toggle_favorite(8)
    assert store.load() == {7, 8}

    ctl.toggle_favorite(8)
    ctl.toggle_favorite(7)
    assert store.load() == set()


def test_save_failure_rolls_back(local_db):
    store = FavoritesStore(local_db)
    store.save({1})

    def broken(sql, seq):
        raise RuntimeError("disk full")

    local_db.executemany = broken
    with pytest.raises(RuntimeError):
        store.save({2})

    del local_db.executemany
    assert store.load() == {1}
