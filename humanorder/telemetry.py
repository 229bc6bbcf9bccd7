"""Structured event logging for the command-line tool."""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Mapping
from typing import Any

from .log import logger


def log_event(
    event: str,
    payload: Mapping[str, Any] | None = None,
    *,
    start_time: float | None = None,
    level: int = logging.INFO,
) -> None:
    """Log an event to the package logger.

    Parameters
    ----------
    event:
        The event type, e.g. ``"SORT_DONE"``.
    payload:
        Structured data associated with the event; must be JSON serialisable.
    start_time:
        Optional monotonic start time; if provided the elapsed time in
        milliseconds is included in the log entry.
    level:
        Logging level used for the emitted record. Defaults to ``logging.INFO``.
    """
    data: dict[str, Any] = {"event": event, "payload": dict(payload or {})}
    data["size_bytes"] = len(
        json.dumps(data["payload"], ensure_ascii=False, default=str).encode("utf-8")
    )
    if start_time is not None:
        data["duration_ms"] = int((time.monotonic() - start_time) * 1000)
    logger.log(level, event, extra={"json": data})


__all__ = ["log_event"]
