# src/todo_store/tasks/sqlite_backend.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from pathlib import Path

from .task_models import Task

logger = logging.getLogger(__name__)

# SQLite INTEGER is signed 64-bit; u64 ids are shifted into that range (order-preserving).
_U64_OFFSET = 2**63

_NEXT_ID_KEY = "next_id"

# Descriptions are stored as UTF-8 BLOBs; surrogatepass keeps lone surrogates
# (e.g. surrogateescape'd console input) round-tripping.
_TEXT_ERRORS = "surrogatepass"


def _to_db(value: int) -> int:
    return int(value) - _U64_OFFSET


def _from_db(value: int) -> int:
    return int(value) + _U64_OFFSET


def _encode_text(text: str) -> bytes:
    return text.encode("utf-8", _TEXT_ERRORS)


def _decode_text(raw: bytes | str | None) -> str:
    if raw is None:
        return ""
    if isinstance(raw, str):
        return raw
    return bytes(raw).decode("utf-8", _TEXT_ERRORS)


class _SqliteFile:
    """
    Shared plumbing for the SQLite-backed ports.

    Both tables live in one file:
    - tasks(id, description, completed)
    - store_meta(key, value)  -- holds next_id

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()

    @property
    def db_path(self) -> Path:
        return self._db_path

    def close(self) -> None:
        """Compatibility hook for shutdown (no persistent connections to close)."""
        return

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            # WAL is persistent in the file; set once here, not per connection.
            self._configure_conn(conn)
            cur = conn.cursor()
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    id INTEGER PRIMARY KEY,
                    description BLOB NOT NULL DEFAULT X'',
                    completed INTEGER NOT NULL DEFAULT 0
                )
                """
            )
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS store_meta (
                    key TEXT PRIMARY KEY,
                    value INTEGER NOT NULL
                )
                """
            )
            conn.commit()
        finally:
            conn.close()


class SqliteTaskMapping(_SqliteFile):
    """Durable TaskMapping: one row per live task."""

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=_from_db(row["id"]),
            description=_decode_text(row["description"]),
            completed=bool(row["completed"]),
        )

    def get(self, task_id: int) -> Task | None:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute(
                "SELECT id, description, completed FROM tasks WHERE id = ?",
                (_to_db(task_id),),
            )
            row = cur.fetchone()
            return self._row_to_task(row) if row else None
        finally:
            conn.close()

    def insert(self, task_id: int, task: Task) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO tasks(id, description, completed)
                VALUES (?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    description = excluded.description,
                    completed = excluded.completed
                """,
                (_to_db(task_id), _encode_text(task.description), 1 if task.completed else 0),
            )
            conn.commit()
        finally:
            conn.close()

    def remove(self, task_id: int) -> None:
        conn = self._get_conn()
        try:
            conn.execute("DELETE FROM tasks WHERE id = ?", (_to_db(task_id),))
            conn.commit()
        finally:
            conn.close()

    def contains(self, task_id: int) -> bool:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("SELECT 1 FROM tasks WHERE id = ? LIMIT 1", (_to_db(task_id),))
            return cur.fetchone() is not None
        finally:
            conn.close()

    def scan(self, start: int, stop: int) -> list[Task]:
        """Live tasks with start <= id < stop, ascending by id (one query)."""
        if stop <= start:
            return []
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute(
                """
                SELECT id, description, completed
                FROM tasks
                WHERE id >= ? AND id < ?
                ORDER BY id ASC
                """,
                (_to_db(start), _to_db(stop)),
            )
            return [self._row_to_task(r) for r in cur.fetchall()]
        finally:
            conn.close()

    def count_tasks(self) -> int:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("SELECT COUNT(*) FROM tasks")
            (n,) = cur.fetchone()
            return int(n)
        finally:
            conn.close()


class SqliteCounter(_SqliteFile):
    """Durable CounterCell stored in store_meta."""

    def load(self) -> int:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("SELECT value FROM store_meta WHERE key = ?", (_NEXT_ID_KEY,))
            row = cur.fetchone()
            return _from_db(row["value"]) if row else 0
        finally:
            conn.close()

    def store(self, value: int) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO store_meta(key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
                """,
                (_NEXT_ID_KEY, _to_db(value)),
            )
            conn.commit()
        finally:
            conn.close()
