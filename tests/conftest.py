"""Pytest configuration for the humanorder test suite."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

import pytest

import humanorder.log as log_module
from humanorder.log import logger


@pytest.fixture(autouse=True)
def reset_logger() -> Iterator[None]:
    """Detach handlers added by the code under test.

    ``configure_logging`` only runs once per process, so without this the
    first CLI test would pin its console stream for every later test.
    """
    prev_handlers = list(logger.handlers)
    prev_level = logger.level
    prev_log_dir = log_module._log_dir
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    log_module._log_dir = None
    try:
        yield
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.handlers.extend(prev_handlers)
        logger.setLevel(prev_level)
        log_module._log_dir = prev_log_dir


@pytest.fixture
def run_cli(monkeypatch: pytest.MonkeyPatch) -> Callable[[list[str]], int]:
    """Return a helper invoking the CLI entry point without file logging."""
    monkeypatch.delenv(log_module.LOG_DIR_ENV, raising=False)

    def _run(argv: list[str]) -> int:
        from humanorder.cli import main

        return main(argv)

    return _run
