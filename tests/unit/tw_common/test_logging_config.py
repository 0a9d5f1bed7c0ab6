"""Tests for configure_logging."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tw_common.logging import configure_logging


pytestmark = pytest.mark.unit_common


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_replaces_root_handlers_and_sets_level(restore_root_logger) -> None:
    configure_logging(level="debug")
    root = restore_root_logger
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1


def test_env_overrides_apply(
    restore_root_logger, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    log_file = tmp_path / "tw.log"
    monkeypatch.setenv("TW_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("TW_LOG_FILE", str(log_file))
    monkeypatch.setenv("TW_LOG_JSON", "1")

    configure_logging()

    root = restore_root_logger
    assert root.level == logging.ERROR
    assert any(isinstance(handler, logging.FileHandler) for handler in root.handlers)

    logging.getLogger("tw.test").error("hello")
    for handler in root.handlers:
        handler.flush()
    assert '"event": "hello"' in log_file.read_text(encoding="utf-8")


def test_debug_flag_wins_over_level(restore_root_logger) -> None:
    configure_logging(level="ERROR", debug=True)
    assert restore_root_logger.level == logging.DEBUG
