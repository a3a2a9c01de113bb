"""SQLite-backed key-value storage with a localStorage-style API."""
from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import List, Optional


class LocalStorage:
    """Persists string values under string keys in a single SQLite table."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._memory_conn: sqlite3.Connection | None = None
        if str(path) == ":memory:":
            self._memory_conn = sqlite3.connect(":memory:", check_same_thread=False)
        else:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _connect(self) -> sqlite3.Connection:
        if self._memory_conn is not None:
            return self._memory_conn
        return sqlite3.connect(self.path)

    def _init_db(self) -> None:
        conn = self._connect()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS storage (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
                """
            )
            conn.commit()
        finally:
            self._release(conn)

    def get_item(self, key: str) -> Optional[str]:
        conn = self._connect()
        try:
            row = conn.execute("SELECT value FROM storage WHERE key = ?", (key,)).fetchone()
        finally:
            self._release(conn)
        return row[0] if row else None

    def set_item(self, key: str, value: str) -> None:
        conn = self._connect()
        try:
            conn.execute("INSERT OR REPLACE INTO storage (key, value) VALUES (?, ?)", (key, value))
            conn.commit()
        finally:
            self._release(conn)

    def remove_item(self, key: str) -> None:
        conn = self._connect()
        try:
            conn.execute("DELETE FROM storage WHERE key = ?", (key,))
            conn.commit()
        finally:
            self._release(conn)

    def keys(self) -> List[str]:
        conn = self._connect()
        try:
            rows = conn.execute("SELECT key FROM storage ORDER BY key").fetchall()
        finally:
            self._release(conn)
        return [row[0] for row in rows]

    def _release(self, conn: sqlite3.Connection) -> None:
        if conn is not self._memory_conn:
            conn.close()


__all__ = ["LocalStorage"]
