"""Tests for logging setup."""

import logging
import sys

import pytest

from core.logging import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def test_console_handler_writes_to_stderr(monkeypatch, restore_root_logger):
    monkeypatch.setenv("FAL_MCP_LOG_LEVEL", "debug")
    monkeypatch.delenv("FAL_MCP_LOG_DIR", raising=False)

    setup_logging(force=True)

    root = restore_root_logger
    assert root.level == logging.DEBUG
    streams = [getattr(handler, "stream", None) for handler in root.handlers]
    assert sys.stderr in streams
    assert sys.stdout not in streams
    assert logging.getLogger("httpx").level == logging.WARNING


def test_log_dir_adds_file_handler(tmp_path, monkeypatch, restore_root_logger):
    log_dir = tmp_path / "logs"
    monkeypatch.setenv("FAL_MCP_LOG_DIR", str(log_dir))

    setup_logging(force=True)
    logging.getLogger("features.image.tools").warning("hello from the tool")

    log_file = log_dir / "fal-image-mcp.log"
    assert log_file.exists()
    assert "hello from the tool" in log_file.read_text(encoding="utf-8")


def test_unknown_level_falls_back_to_info(monkeypatch, restore_root_logger):
    monkeypatch.setenv("FAL_MCP_LOG_LEVEL", "chatty")
    monkeypatch.delenv("FAL_MCP_LOG_DIR", raising=False)

    setup_logging(force=True)

    assert restore_root_logger.level == logging.INFO
