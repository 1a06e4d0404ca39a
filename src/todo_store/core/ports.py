# src/todo_store/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

TaskStore depends on Protocols instead of concrete storage engines.
Any key-value substrate (dict, SQLite file, ...) can back it, and tests stay simple.
"""

from typing import Protocol

from ..tasks.task_models import Task


class TaskMapping(Protocol):
    """
    Key-value substrate: u64 id -> Task.

    insert() is an upsert. remove() of a missing key is a no-op.
    """

    def get(self, task_id: int) -> Task | None: ...
    def insert(self, task_id: int, task: Task) -> None: ...
    def remove(self, task_id: int) -> None: ...
    def contains(self, task_id: int) -> bool: ...


class RangeScan(Protocol):
    """
    Optional TaskMapping extension: live tasks with start <= id < stop, ascending.

    TaskStore.get_all_tasks uses it when the mapping provides it.
    """

    def scan(self, start: int, stop: int) -> list[Task]: ...


class CounterCell(Protocol):
    """Single persisted integer (the next id to issue)."""

    def load(self) -> int: ...
    def store(self, value: int) -> None: ...


class TaskRepo(Protocol):
    # Creation
    def add_task(self, description: str) -> int: ...

    # Reads
    def get_task(self, task_id: int) -> Task | None: ...
    def get_all_tasks(self) -> list[Task]: ...

    # Mutations (False means "no such task")
    def complete_task(self, task_id: int) -> bool: ...
    def update_task(self, task_id: int, new_description: str) -> bool: ...
    def delete_task(self, task_id: int) -> bool: ...
