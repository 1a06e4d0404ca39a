# src/todo_store/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

MIN_TASK_ID = 0
MAX_TASK_ID = 2**64 - 1  # ids are unsigned 64-bit


class IdExhaustionPolicy(StrEnum):
    """
    What add_task does once next_id reaches MAX_TASK_ID.

    - SATURATE: keep handing out MAX_TASK_ID (the slot gets overwritten)
    - FAIL: raise IdSpaceExhausted and leave the store untouched
    """

    SATURATE = "saturate"
    FAIL = "fail"

    @classmethod
    def from_config(cls, raw: str | None) -> IdExhaustionPolicy:
        if not raw:
            return cls.SATURATE
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.SATURATE


class IdSpaceExhausted(RuntimeError):
    """Raised by add_task under IdExhaustionPolicy.FAIL when no fresh id is left."""


def check_task_id(task_id: int) -> int:
    if isinstance(task_id, bool) or not isinstance(task_id, int):
        raise ValueError(f"task id must be an int, got {type(task_id).__name__}")
    if task_id < MIN_TASK_ID or task_id > MAX_TASK_ID:
        raise ValueError(f"task id out of u64 range: {task_id}")
    return task_id


@dataclass(slots=True)
class Task:
    id: int
    description: str
    completed: bool = False


def task_to_dict(task: Task) -> dict[str, Any]:
    return {"id": task.id, "description": task.description, "completed": task.completed}


def format_task(task: Task) -> str:
    mark = "x" if task.completed else " "
    return f"#{task.id} [{mark}] {task.description}"
