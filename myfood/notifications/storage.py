# -*- coding: utf-8 -*-
"""Notifications — key-value storage backends.

The queue only needs get/set/remove on a single key. `SqliteStorage` keeps the
values across process restarts and scopes them to an origin (the API base URL),
the same way a browser scopes local storage.
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, Optional, Protocol


class KeyValueStorage(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStorage:
    """Dict-backed storage; lives as long as the object."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove(self, key: str) -> None:
        self._items.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._items


def connect(db_path: Path) -> sqlite3.Connection:
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    return conn


def init_storage_db(db_path: Path) -> None:
    conn = connect(db_path)
    try:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS local_storage (
                origin TEXT NOT NULL,
                key TEXT NOT NULL,
                value TEXT NOT NULL,
                PRIMARY KEY (origin, key)
            );
            """
        )
        conn.commit()
    finally:
        conn.close()


@contextmanager
def db_conn(db_path: Path) -> Iterator[sqlite3.Connection]:
    conn = connect(db_path)
    try:
        yield conn
        conn.commit()
    finally:
        conn.close()


class SqliteStorage:
    """Durable origin-scoped storage in a SQLite file."""

    def __init__(self, db_path: Path, origin: str) -> None:
        self.db_path = db_path
        self.origin = origin
        init_storage_db(db_path)

    def get(self, key: str) -> Optional[str]:
        with db_conn(self.db_path) as conn:
            row = conn.execute(
                "SELECT value FROM local_storage WHERE origin = ? AND key = ?",
                (self.origin, key),
            ).fetchone()
            return row["value"] if row else None

    def set(self, key: str, value: str) -> None:
        with db_conn(self.db_path) as conn:
            conn.execute(
                """
                INSERT INTO local_storage (origin, key, value) VALUES (?, ?, ?)
                ON CONFLICT(origin, key) DO UPDATE SET value = excluded.value
                """,
                (self.origin, key, value),
            )

    def remove(self, key: str) -> None:
        with db_conn(self.db_path) as conn:
            conn.execute(
                "DELETE FROM local_storage WHERE origin = ? AND key = ?",
                (self.origin, key),
            )
