# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from todo_store.cli.bootstrap import create_initial_state
from todo_store.config import Settings
from todo_store.tasks.backends import DictTaskMapping
from todo_store.tasks.task_models import IdExhaustionPolicy


def test_settings_defaults(monkeypatch) -> None:
    for name in (
        "TODO_APP_NAME",
        "TODO_STORAGE",
        "TODO_ID_EXHAUSTION",
        "TODO_DATA_DIR",
        "TODO_TASKS_DB_PATH",
        "TODO_CONSOLE_ENABLED",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()
    assert s.app_name == "todo"
    assert s.storage == "sqlite"
    assert s.id_exhaustion == "saturate"
    assert s.console_enabled is True
    assert s.tasks_db_path == Path(".local/todo") / "tasks.sqlite3"


def test_settings_from_env(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_STORAGE", "Memory")
    monkeypatch.setenv("TODO_ID_EXHAUSTION", "fail")
    monkeypatch.setenv("TODO_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("TODO_TASKS_DB_PATH", raising=False)
    monkeypatch.setenv("TODO_CONSOLE_ENABLED", "no")

    s = Settings.from_env()
    assert s.storage == "memory"
    assert s.id_exhaustion == "fail"
    assert s.tasks_db_path == tmp_path / "tasks.sqlite3"
    assert s.console_enabled is False


def test_invalid_choices_fall_back(monkeypatch) -> None:
    monkeypatch.setenv("TODO_STORAGE", "postgres")
    monkeypatch.setenv("TODO_ID_EXHAUSTION", "wrap")

    s = Settings.from_env()
    assert s.storage == "sqlite"
    assert s.id_exhaustion == "saturate"


def test_bootstrap_wires_configured_store(settings) -> None:
    settings.storage = "memory"
    settings.id_exhaustion = "fail"

    state = create_initial_state(settings=settings)
    assert isinstance(state.task_store._tasks, DictTaskMapping)
    assert state.task_store.exhaustion_policy is IdExhaustionPolicy.FAIL


def test_bootstrap_sqlite_store_persists(settings) -> None:
    first = create_initial_state(settings=settings)
    first.task_store.add_task("kept")

    second = create_initial_state(settings=settings)
    assert [t.description for t in second.task_store.get_all_tasks()] == ["kept"]
    assert settings.tasks_db_path.exists()
