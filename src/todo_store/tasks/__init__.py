"""
Task subsystem.

Components:
- task_models.py: data structures (Task, IdExhaustionPolicy) + display/dict helpers
- backends.py: in-process TaskMapping / CounterCell
- sqlite_backend.py: SQLite-backed TaskMapping / CounterCell
- task_store.py: TaskStore (id issuance + CRUD)
- task_api.py: open_task_store() factory used by the CLI
"""
