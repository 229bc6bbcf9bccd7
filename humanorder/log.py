"""Logging utilities for humanorder."""

from __future__ import annotations

import datetime
import json
import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

LOG_DIR_ENV = "HUMANORDER_LOG_DIR"
_TEXT_LOG_NAME = "humanorder.log"
_JSON_LOG_NAME = "humanorder.jsonl"
_ROTATION_BACKUPS = 5
_TEXT_LOG_MAX_BYTES = 5 * 1024 * 1024
_JSON_LOG_MAX_BYTES = 5 * 1024 * 1024

logger = logging.getLogger("humanorder")

_log_dir: Path | None = None


def _utc_now_iso() -> str:
    return datetime.datetime.now(datetime.UTC).isoformat(timespec="seconds")


class ConsoleFormatter(logging.Formatter):
    """Console formatter that surfaces structured payloads when available."""

    def __init__(self) -> None:
        """Set up the formatter with the standard console template."""
        super().__init__("%(levelname)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        """Render *record* optionally appending the structured payload."""
        base = super().format(record)
        payload = _extract_console_payload(record)
        if payload is None:
            return base
        return f"{base} {json.dumps(payload, ensure_ascii=False, default=str)}"


def _extract_console_payload(record: logging.LogRecord) -> Any | None:
    """Return payload that should be appended to console output."""
    extra_json = getattr(record, "json", None)
    if not isinstance(extra_json, dict):
        return None
    event_name = extra_json.get("event")
    raw_message = record.msg
    if not (isinstance(raw_message, str) and isinstance(event_name, str)):
        return None
    if raw_message.strip() != event_name.strip():
        return None
    return extra_json.get("payload")


def _rotate_if_already_full(
    handler: RotatingFileHandler, existing_size: int
) -> None:
    """Rotate *handler* if the pre-existing log already reaches the limit."""
    max_bytes = getattr(handler, "maxBytes", 0) or 0
    if max_bytes <= 0 or existing_size < max_bytes:
        return
    handler.doRollover()


class JsonFormatter(logging.Formatter):
    """Convert log records into JSON strings."""

    def format(self, record: logging.LogRecord) -> str:
        """Serialise *record* merging the ``json`` extra dict when present."""
        data: dict[str, Any] = dict(getattr(record, "json", None) or {})
        data.setdefault("message", record.getMessage())
        data.setdefault("level", record.levelname)
        data.setdefault("logger", record.name)
        if "timestamp" not in data:
            data["timestamp"] = _utc_now_iso()
        if record.exc_info and "exc_info" not in data:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data, ensure_ascii=False, default=str)


class JsonlHandler(RotatingFileHandler):
    """Write log records as JSON lines with built-in rotation."""

    def __init__(
        self,
        filename: Path | str,
        *,
        max_bytes: int | None = None,
        backup_count: int = _ROTATION_BACKUPS,
        encoding: str = "utf-8",
        delay: bool = False,
    ) -> None:
        """Initialise handler ensuring the log directory exists."""
        path = Path(filename)
        path.parent.mkdir(parents=True, exist_ok=True)
        if max_bytes is None:
            max_bytes = _JSON_LOG_MAX_BYTES
        super().__init__(
            path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding=encoding,
            delay=delay,
        )
        self.setFormatter(JsonFormatter())


def _resolve_log_dir(log_dir: str | Path | None) -> Path | None:
    """Return the directory for log files, or ``None`` for console only."""
    if log_dir is not None:
        path = Path(log_dir).expanduser()
    else:
        env_dir = os.environ.get(LOG_DIR_ENV)
        if not env_dir:
            return None
        path = Path(env_dir).expanduser()
    path.mkdir(parents=True, exist_ok=True)
    return path.resolve()


def configure_logging(
    level: int = logging.WARNING, *, log_dir: str | Path | None = None
) -> None:
    """Configure the package logger once.

    A console handler at *level* is always attached. File logging (plain text
    and JSON lines, both rotating) is enabled only when *log_dir* is given or
    :data:`LOG_DIR_ENV` is set. Later calls leave existing handlers untouched.
    """
    global _log_dir

    if logger.handlers:
        return

    # Resolved first so a bad directory leaves the logger unconfigured.
    resolved_dir = _resolve_log_dir(log_dir)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(ConsoleFormatter())
    logger.addHandler(stream_handler)

    _log_dir = resolved_dir
    if resolved_dir is None:
        logger.setLevel(level)
        return

    text_path = resolved_dir / _TEXT_LOG_NAME
    text_size = text_path.stat().st_size if text_path.exists() else 0
    file_handler = RotatingFileHandler(
        text_path,
        encoding="utf-8",
        maxBytes=_TEXT_LOG_MAX_BYTES,
        backupCount=_ROTATION_BACKUPS,
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    _rotate_if_already_full(file_handler, text_size)
    logger.addHandler(file_handler)

    json_path = resolved_dir / _JSON_LOG_NAME
    json_size = json_path.stat().st_size if json_path.exists() else 0
    json_handler = JsonlHandler(json_path, backup_count=_ROTATION_BACKUPS)
    json_handler.setLevel(logging.DEBUG)
    _rotate_if_already_full(json_handler, json_size)
    logger.addHandler(json_handler)

    logger.setLevel(logging.DEBUG)


def get_log_file_paths() -> tuple[Path, Path] | None:
    """Return paths to text and JSONL log files, ``None`` without file logging."""
    if _log_dir is None:
        return None
    return _log_dir / _TEXT_LOG_NAME, _log_dir / _JSON_LOG_NAME


__all__ = [
    "ConsoleFormatter",
    "JsonFormatter",
    "JsonlHandler",
    "LOG_DIR_ENV",
    "configure_logging",
    "get_log_file_paths",
    "logger",
]
