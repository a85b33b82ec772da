"""metadata.core.repo
Repositories for the local state that outlives a session.

All SQL lives here; other layers get a repository instance from the
composition root instead of touching `sqlite3` directly.
"""

from __future__ import annotations
from typing import Iterable, Set

from movieFeed.metadata.local_db import LocalDB


class PrefsRepo:
    """Key/value preferences (theme, last query …)."""

    def __init__(self, db: LocalDB) -> None:
        self.db = db

    # ───────────────────────── kv ─────────────────────────────────────
    def get_kv(self, key: str) -> str | None:
        row = self.db.execute("SELECT value FROM kv_store WHERE key=?", (key,)).fetchone()
        return row["value"] if row else None

    def set_kv(self, key: str, value: str) -> None:
        self.db.execute(
            "INSERT OR REPLACE INTO kv_store(key, value) VALUES(?,?)",
            (key, value),
        )
        self.db.commit()

    def delete_kv(self, key: str) -> None:
        self.db.execute("DELETE FROM kv_store WHERE key=?", (key,))
        self.db.commit()


class FavoritesStore:
    """Persisted set of favorite TMDb movie ids."""

    def __init__(self, db: LocalDB) -> None:
        self.db = db

    def load(self) -> Set[int]:
        rows = self.db.execute("SELECT movie_id FROM favorite_movies").fetchall()
        return {r["movie_id"] for r in rows}

    def save(self, ids: Iterable[int]) -> None:
        """Replace the stored set with *ids* in one transaction.

        Raises
        ------
        sqlite3.Error
            Re-raised after rollback; the previous set stays intact.
        """
        try:
            self.db.execute("DELETE FROM favorite_movies")
            self.db.executemany(
                "INSERT INTO favorite_movies (movie_id) VALUES (?)",
                [(int(mid),) for mid in sorted(set(ids))],
            )
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
