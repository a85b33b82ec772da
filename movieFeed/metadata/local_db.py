# local_db.py
from __future__ import annotations
import sqlite3, threading
from pathlib import Path

_SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_store (
    key   TEXT PRIMARY KEY,
    value TEXT
);
CREATE TABLE IF NOT EXISTS favorite_movies (
    movie_id INTEGER PRIMARY KEY
);
"""


class LocalDB:
    """
    One sqlite3 connection per process for the tiny local state
    (favorites + key/value preferences).

    Built by the composition root and passed to the repositories; nothing
    here is global.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        if str(path) != ":memory:":
            self.path.parent.mkdir(parents=True, exist_ok=True)
        self._write_lock = threading.RLock()
        self.conn = sqlite3.connect(str(path), isolation_level="DEFERRED")
        self.conn.row_factory = sqlite3.Row
        self.conn.executescript(_SCHEMA)
        self.conn.commit()

    # ─── public helpers ──────────────────────────────────────────────────
    def execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        with self._write_lock:
            return self.conn.execute(sql, params)

    def executemany(self, sql: str, seq: list[tuple]) -> sqlite3.Cursor:
        with self._write_lock:
            return self.conn.executemany(sql, seq)

    def commit(self) -> None:
        with self._write_lock:
            self.conn.commit()

    def rollback(self) -> None:
        with self._write_lock:
            self.conn.rollback()

    def close(self) -> None:
        self.conn.close()
