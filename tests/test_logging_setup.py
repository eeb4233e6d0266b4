"""Tests for logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

from quick_sort_studio import logging_setup


def test_default_log_dir_uses_local_appdata(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path))
    log_dir = logging_setup._default_log_dir()
    assert log_dir == tmp_path / "QuickSortStudio" / "logs"


def test_default_log_dir_falls_back_to_home(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.delenv("LOCALAPPDATA", raising=False)
    monkeypatch.setattr(logging_setup.Path, "home", lambda: tmp_path)
    log_dir = logging_setup._default_log_dir()
    assert log_dir == tmp_path / ".quick_sort_studio" / "logs"


def test_init_logging_creates_handlers(monkeypatch, tmp_path: Path) -> None:
    log_dir = tmp_path / "logs"
    monkeypatch.delenv(logging_setup.LOG_LEVEL_ENV, raising=False)
    monkeypatch.setattr(logging_setup, "_default_log_dir", lambda: log_dir)
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    root.handlers.clear()
    try:
        log_path = logging_setup.init_logging()
        assert log_path == log_dir / "app.log"
        kinds = {type(handler).__name__ for handler in root.handlers}
        assert {"RotatingFileHandler", "StreamHandler"} <= kinds
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = original_handlers
        root.setLevel(original_level)
    contents = (log_dir / "app.log").read_text(encoding="utf-8")
    assert "quick_sort_studio.logging_setup: Logging initialized" in contents


def test_init_logging_invalid_level_defaults(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv(logging_setup.LOG_LEVEL_ENV, "notalevel")
    monkeypatch.setattr(logging_setup, "_default_log_dir", lambda: tmp_path / "logs")
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    root.handlers.clear()
    try:
        logging_setup.init_logging()
        assert root.level == logging.INFO
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = original_handlers
        root.setLevel(original_level)


def test_set_console_level_adjusts_stream_only(tmp_path: Path) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    root.handlers.clear()
    try:
        stream_handler = logging.StreamHandler()
        file_handler = logging.FileHandler(tmp_path / "app.log")
        stream_handler.setLevel(logging.INFO)
        file_handler.setLevel(logging.INFO)
        root.addHandler(stream_handler)
        root.addHandler(file_handler)
        logging_setup.set_console_level(logging.ERROR)
        assert stream_handler.level == logging.ERROR
        assert file_handler.level == logging.INFO
    finally:
        file_handler.close()
        root.handlers = original_handlers
