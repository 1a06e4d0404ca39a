# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_store.core.state import AppState
from todo_store.tasks.backends import DictTaskMapping, MemoryCounter
from todo_store.tasks.sqlite_backend import SqliteCounter, SqliteTaskMapping
from todo_store.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        console_enabled=True,
        storage="sqlite",
        id_exhaustion="saturate",
        data_dir=tmp_path,
        tasks_db_path=tmp_path / "tasks.sqlite3",
    )


@pytest.fixture(params=["memory", "sqlite"])
def store(request, tmp_path: Path) -> TaskStore:
    """Fresh TaskStore per test, run against both backends."""
    if request.param == "memory":
        return TaskStore(DictTaskMapping(), MemoryCounter())
    db = tmp_path / "tasks.sqlite3"
    return TaskStore(SqliteTaskMapping(db), SqliteCounter(db))


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState wired with a real SQLite-backed store in tmp_path."""
    db = settings.tasks_db_path
    return AppState(
        settings=settings,
        task_store=TaskStore(SqliteTaskMapping(db), SqliteCounter(db)),
    )
