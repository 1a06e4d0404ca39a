# src/todo_store/cli/commands.py

from __future__ import annotations

import json
import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_models import IdSpaceExhausted, check_task_id, format_task, task_to_dict

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(raw: str) -> int | None:
    try:
        return check_task_id(int(raw))
    except ValueError:
        return None


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    store = state.task_store
    live = len(store.get_all_tasks())
    storage = getattr(state.settings, "storage", "sqlite")
    policy = getattr(state.settings, "id_exhaustion", "saturate")
    return (
        "Status:\n"
        f"  Storage: {storage}\n"
        f"  Live tasks: {live}\n"
        f"  Next id: {getattr(store, 'next_id', '?')}\n"
        f"  Id exhaustion: {policy}"
    )


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <text> -> create a task
    """
    if not args:
        return "Usage: /add <description>"
    description = " ".join(args)
    try:
        task_id = state.task_store.add_task(description)
    except IdSpaceExhausted:
        logger.warning("add_task refused: id space exhausted")
        return "Cannot add task: no task ids left."
    return f"Added task #{task_id}."


def cmd_get(state: AppState, args: list[str]) -> str:
    if len(args) != 1 or (task_id := _parse_id(args[0])) is None:
        return "Usage: /get <id>"
    task = state.task_store.get_task(task_id)
    if task is None:
        return f"No task #{task_id}."
    return format_task(task)


def cmd_list(state: AppState, args: list[str]) -> str:
    tasks = state.task_store.get_all_tasks()
    if not tasks:
        return "No tasks."
    return "\n".join(format_task(t) for t in tasks)


def cmd_export(state: AppState, args: list[str]) -> str:
    """
    /export -> all live tasks as a JSON array (ascending id)
    """
    tasks = state.task_store.get_all_tasks()
    return json.dumps([task_to_dict(t) for t in tasks], ensure_ascii=False)


def cmd_done(state: AppState, args: list[str]) -> str:
    if len(args) != 1 or (task_id := _parse_id(args[0])) is None:
        return "Usage: /done <id>"
    if state.task_store.complete_task(task_id):
        return f"Task #{task_id} completed."
    return f"No task #{task_id}."


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit <id> <text> -> replace the description (completion flag kept)
    """
    if len(args) < 2 or (task_id := _parse_id(args[0])) is None:
        return "Usage: /edit <id> <new description>"
    if state.task_store.update_task(task_id, " ".join(args[1:])):
        return f"Task #{task_id} updated."
    return f"No task #{task_id}."


def cmd_del(state: AppState, args: list[str]) -> str:
    if len(args) != 1 or (task_id := _parse_id(args[0])) is None:
        return "Usage: /del <id>"
    if state.task_store.delete_task(task_id):
        return f"Task #{task_id} deleted."
    return f"No task #{task_id}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show storage and counter state.")
registry.register("add", cmd_add, help_text="Create a task: /add <description>.")
registry.register("get", cmd_get, help_text="Show one task: /get <id>.")
registry.register("list", cmd_list, help_text="List all tasks by id.", aliases=["ls"])
registry.register("export", cmd_export, help_text="Dump all tasks as JSON.")
registry.register("done", cmd_done, help_text="Mark a task completed: /done <id>.")
registry.register("edit", cmd_edit, help_text="Change a description: /edit <id> <text>.")
registry.register("del", cmd_del, help_text="Delete a task: /del <id>.", aliases=["rm"])
