# src/todo_store/tasks/task_api.py

from __future__ import annotations

import logging

from .backends import DictTaskMapping, MemoryCounter
from .sqlite_backend import SqliteCounter, SqliteTaskMapping
from .task_models import IdExhaustionPolicy
from .task_store import TaskStore

logger = logging.getLogger(__name__)

STORAGE_SQLITE = "sqlite"
STORAGE_MEMORY = "memory"


def open_task_store(settings) -> TaskStore:
    """
    Build a TaskStore from settings.

    Uses:
    - settings.storage: "sqlite" (default) or "memory"
    - settings.tasks_db_path: SQLite file (sqlite only)
    - settings.id_exhaustion: "saturate" (default) or "fail"
    """
    storage = str(getattr(settings, "storage", STORAGE_SQLITE) or STORAGE_SQLITE).lower()
    policy = IdExhaustionPolicy.from_config(getattr(settings, "id_exhaustion", None))

    if storage == STORAGE_MEMORY:
        return TaskStore(DictTaskMapping(), MemoryCounter(), exhaustion_policy=policy)

    if storage != STORAGE_SQLITE:
        logger.warning("Unknown storage backend %r; falling back to sqlite.", storage)

    db_path = settings.tasks_db_path
    mapping = SqliteTaskMapping(db_path)
    logger.info("SQLite task file db=%s live=%s", db_path, mapping.count_tasks())
    return TaskStore(mapping, SqliteCounter(db_path), exhaustion_policy=policy)
