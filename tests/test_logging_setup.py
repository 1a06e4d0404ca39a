# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

from todo_store.logging_setup import setup_logging


def test_setup_logging_writes_file_and_filters_console(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        log_file = setup_logging(log_dir=tmp_path / "logs")
        assert len(root.handlers) == 2

        logging.getLogger("todo_store.tests").debug("debug line")
        for h in root.handlers:
            h.flush()
        assert "debug line" in log_file.read_text("utf-8")

        console = next(h for h in root.handlers if not isinstance(h, logging.FileHandler))
        noisy = logging.LogRecord("urllib3", logging.WARNING, __file__, 1, "x", None, None)
        ours = logging.LogRecord("todo_store.x", logging.INFO, __file__, 1, "x", None, None)
        assert not console.filter(noisy)
        warned = logging.LogRecord("py.warnings", logging.WARNING, __file__, 1, "x", None, None)
        assert not console.filter(warned)
        assert console.filter(ours)
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)
