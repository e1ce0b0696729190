"""Centralised logging configuration for the image MCP server.

stdout carries the MCP stdio protocol, so every handler writes to stderr or to
a file.
"""
from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Dict

from core.utils.env import get_env

_LOGGING_CONFIGURED = False


class _NoProgressNoiseFilter(logging.Filter):
    """Drop blank provider progress lines."""

    def filter(self, record: logging.LogRecord) -> bool:  # pragma: no cover - behaviourally trivial
        return bool(record.getMessage().strip())


def _resolve_level(value: str | None, default: str) -> str:
    value = (value or "").strip().upper()
    if value and getattr(logging, value, None) is not None:
        return value
    return default


def setup_logging(force: bool = False) -> None:
    """Configure root/application loggers for stderr and optional file output."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED and not force:
        return

    log_level = _resolve_level(get_env("FAL_MCP_LOG_LEVEL", default="INFO"), "INFO")

    handlers: Dict[str, object] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": log_level,
            "formatter": "standard",
            "stream": "ext://sys.stderr",
        },
    }
    root_handlers = ["console"]

    log_dir_value = (get_env("FAL_MCP_LOG_DIR") or "").strip()
    if log_dir_value:
        log_dir = Path(log_dir_value).expanduser()
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / (get_env("FAL_MCP_LOG_FILE", default="fal-image-mcp.log") or "fal-image-mcp.log")
        handlers["file"] = {
            "class": "logging.handlers.TimedRotatingFileHandler",
            "level": log_level,
            "formatter": "standard",
            "filename": str(log_file),
            "when": "midnight",
            "backupCount": int(get_env("FAL_MCP_LOG_RETENTION", default="7") or "7"),
            "encoding": "utf-8",
        }
        root_handlers.append("file")

    config: Dict[str, object] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s %(levelname)s [%(name)s] - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": handlers,
        "root": {
            "level": log_level,
            "handlers": root_handlers,
        },
    }

    logging.config.dictConfig(config)
    logging.captureWarnings(True)

    # Suppress debug logs from third-party libraries
    for name in (
        "httpcore",
        "httpcore.http11",
        "httpcore.connection",
        "httpx",
        "mcp",
        "mcp.server",
        "mcp.server.lowlevel.server",
        "anyio",
    ):
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("fal.progress").addFilter(_NoProgressNoiseFilter())

    _LOGGING_CONFIGURED = True


__all__ = ["setup_logging"]
