# src/todo_store/tasks/task_store.py

from __future__ import annotations

import logging
from dataclasses import replace

from ..core.ports import CounterCell, TaskMapping
from .backends import DictTaskMapping, MemoryCounter
from .task_models import (
    MAX_TASK_ID,
    IdExhaustionPolicy,
    IdSpaceExhausted,
    Task,
    check_task_id,
)

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Task store: id issuance + CRUD over a key-value mapping.

    State:
    - tasks: id -> Task (a missing key means "never created" or "deleted")
    - next_id: the id handed to the next add_task; never goes down

    Ids are issued densely from 0 but the mapping may have holes: delete_task
    removes the entry and the id is never handed out again.

    Not thread-safe: the caller must serialize operations (one at a time).
    """

    def __init__(
        self,
        tasks: TaskMapping | None = None,
        counter: CounterCell | None = None,
        *,
        exhaustion_policy: IdExhaustionPolicy = IdExhaustionPolicy.SATURATE,
    ) -> None:
        self._tasks: TaskMapping = tasks if tasks is not None else DictTaskMapping()
        self._counter: CounterCell = counter if counter is not None else MemoryCounter()
        self._policy = exhaustion_policy
        logger.info(
            "TaskStore ready next_id=%s policy=%s backend=%s",
            self.next_id,
            self._policy.value,
            type(self._tasks).__name__,
        )

    def close(self) -> None:
        """Release backend resources (backends without close() are skipped)."""
        for part in (self._tasks, self._counter):
            close = getattr(part, "close", None)
            if close is not None:
                close()

    @classmethod
    def create(cls) -> TaskStore:
        """Fresh in-memory store: empty mapping, next_id = 0."""
        return cls()

    @property
    def next_id(self) -> int:
        return self._counter.load()

    @property
    def exhaustion_policy(self) -> IdExhaustionPolicy:
        return self._policy

    # ---- public API ----

    def add_task(self, description: str) -> int:
        next_id = self.next_id

        if next_id >= MAX_TASK_ID:
            if self._policy is IdExhaustionPolicy.FAIL:
                raise IdSpaceExhausted(f"no fresh task ids left (next_id={next_id})")
            if self._tasks.contains(next_id):
                logger.warning(
                    "Task id counter saturated; overwriting task id=%s", next_id
                )

        task_id = next_id
        # Counter first: a failed insert leaves a hole, never a reissued id.
        # Saturating increment: stays at MAX_TASK_ID instead of wrapping.
        self._counter.store(min(next_id + 1, MAX_TASK_ID))
        self._tasks.insert(task_id, Task(id=task_id, description=description, completed=False))

        logger.debug("Task added id=%s", task_id)
        return task_id

    def get_task(self, task_id: int) -> Task | None:
        return self._tasks.get(check_task_id(task_id))

    def get_all_tasks(self) -> list[Task]:
        """
        Every live task, ascending by id.

        Covers the whole issued range [0, next_id). Backends with a range scan
        (SQLite) answer it in one query; otherwise every issued id is probed, so
        the cost follows the number of ids ever issued, not the live count.
        """
        next_id = self.next_id
        scan = getattr(self._tasks, "scan", None)
        if scan is not None:
            return scan(0, next_id)

        out: list[Task] = []
        for task_id in range(next_id):
            task = self._tasks.get(task_id)
            if task is not None:
                out.append(task)
        return out

    def complete_task(self, task_id: int) -> bool:
        task = self._tasks.get(check_task_id(task_id))
        if task is None:
            return False
        self._tasks.insert(task_id, replace(task, completed=True))
        logger.debug("Task completed id=%s", task_id)
        return True

    def update_task(self, task_id: int, new_description: str) -> bool:
        task = self._tasks.get(check_task_id(task_id))
        if task is None:
            return False
        self._tasks.insert(task_id, replace(task, description=new_description))
        logger.debug("Task updated id=%s", task_id)
        return True

    def delete_task(self, task_id: int) -> bool:
        if not self._tasks.contains(check_task_id(task_id)):
            return False
        self._tasks.remove(task_id)
        logger.debug("Task deleted id=%s", task_id)
        return True
