# tests/test_console_connector.py

from __future__ import annotations

from collections.abc import Iterable

from todo_store.connectors.console_connector import handle_line, run_console_loop


def _scripted(lines: Iterable[str]):
    it = iter(lines)

    def read_line(_prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read_line


def test_console_runs_commands_until_exit(state, capsys) -> None:
    run_console_loop(state, _scripted(["/add first", "", "/add second", "/exit", "/add never"]))

    out = capsys.readouterr().out
    assert "Added task #0." in out
    assert "Added task #1." in out
    assert [t.description for t in state.task_store.get_all_tasks()] == ["first", "second"]


def test_console_stops_on_eof(state, capsys) -> None:
    run_console_loop(state, _scripted(["/list"]))
    assert "No tasks." in capsys.readouterr().out


def test_handle_line_plain_text_and_crash(state, monkeypatch) -> None:
    assert handle_line(state, "   ") is None
    assert "Commands start with" in (handle_line(state, "hello") or "")

    def boom(description: str) -> int:
        raise RuntimeError("storage down")

    monkeypatch.setattr(state.task_store, "add_task", boom)
    assert handle_line(state, "/add x") == "Internal error while handling a command."
