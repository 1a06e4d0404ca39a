# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
See src/todo_store/config.py.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Connectors
    "TODO_CONSOLE_ENABLED": "Run the console REPL (true/false, default: true).",
    # Storage
    "TODO_STORAGE": "Backend: sqlite (durable, default) or memory (lost on exit).",
    "TODO_ID_EXHAUSTION": (
        "What add_task does once the id counter reaches 2**64-1: "
        "saturate (default, keeps reusing the last id) or fail (refuses)."
    ),
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory for logs and the database (default: .local/todo).",
    "TODO_TASKS_DB_PATH": "TaskStore SQLite path (default: <data_dir>/tasks.sqlite3).",
}
