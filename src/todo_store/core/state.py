# src/todo_store/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRepo


@dataclass
class AppState:
    """Everything a request handler needs; owned by the host, passed explicitly."""

    settings: object
    task_store: TaskRepo
