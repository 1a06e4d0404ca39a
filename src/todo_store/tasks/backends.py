# src/todo_store/tasks/backends.py

from __future__ import annotations

from dataclasses import replace

from .task_models import Task


class DictTaskMapping:
    """
    In-process TaskMapping backed by a plain dict.

    Tasks are copied on the way in and out, so callers never mutate stored state
    by holding on to a returned Task (same contract as the SQLite backend).
    """

    def __init__(self) -> None:
        self._items: dict[int, Task] = {}

    def get(self, task_id: int) -> Task | None:
        task = self._items.get(task_id)
        return replace(task) if task is not None else None

    def insert(self, task_id: int, task: Task) -> None:
        self._items[task_id] = replace(task)

    def remove(self, task_id: int) -> None:
        self._items.pop(task_id, None)

    def contains(self, task_id: int) -> bool:
        return task_id in self._items

    def __len__(self) -> int:
        return len(self._items)


class MemoryCounter:
    """In-process CounterCell."""

    def __init__(self, initial: int = 0) -> None:
        self._value = int(initial)

    def load(self) -> int:
        return self._value

    def store(self, value: int) -> None:
        self._value = int(value)
