"""Command implementations for the CLI interface."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from humanorder.core.compare import Ordering, compare
from humanorder.core.segments import segment
from humanorder.core.sorting import natural_sort_key, natural_sorted
from humanorder.telemetry import log_event

logger = logging.getLogger(__name__)

STDIN_NAME = "-"

EXIT_OK = 0
EXIT_ERROR = 1

# ``compare --exit-status`` codes, in the spirit of ``cmp``/``diff``.
_ORDERING_EXIT = {
    Ordering.EQUAL: 0,
    Ordering.LESS: 1,
    Ordering.GREATER: 2,
}


@dataclass
class Command:
    """Describe a CLI command and its argument handler."""

    func: Callable[[argparse.Namespace], int]
    help: str
    add_arguments: Callable[[argparse.ArgumentParser], None]


def report_error(message: str) -> None:
    """Write *message* to stderr and the log."""
    logger.error("%s", message)
    sys.stderr.write(f"humanorder: error: {message}\n")


def _read_lines(sources: Iterable[str]) -> list[str]:
    lines: list[str] = []
    for source in sources:
        if source == STDIN_NAME:
            text = sys.stdin.read()
        else:
            text = Path(source).read_text(encoding="utf-8")
        # Only "\n" ends a line; form feeds and Unicode separators stay inside.
        parts = text.split("\n")
        if parts[-1] == "":
            parts.pop()
        lines.extend(parts)
    return lines


def _drop_naturally_equal(lines: list[str]) -> list[str]:
    """Keep the first line of each run of naturally equal lines."""
    kept: list[str] = []
    previous_key: object = None
    for line in lines:
        key = natural_sort_key(line)
        if kept and key == previous_key:
            continue
        kept.append(line)
        previous_key = key
    return kept


def _pick(flag: bool | None, default: bool) -> bool:
    return default if flag is None else flag


def cmd_sort(args: argparse.Namespace) -> int:
    """Print input lines in natural order."""
    defaults = args.app_settings.sort
    reverse = _pick(args.reverse, defaults.reverse)
    unique = _pick(args.unique, defaults.unique)
    ignore_blank = _pick(args.ignore_blank, defaults.ignore_blank)
    sources = list(args.files) or [STDIN_NAME]

    started = time.monotonic()
    try:
        lines = _read_lines(sources)
    except (OSError, UnicodeDecodeError) as exc:
        report_error(f"cannot read input: {exc}")
        return EXIT_ERROR
    if ignore_blank:
        lines = [line for line in lines if line.strip()]

    ordered = natural_sorted(lines, reverse=reverse)
    if unique:
        ordered = _drop_naturally_equal(ordered)

    text = "".join(f"{line}\n" for line in ordered)
    if args.output:
        out_path = Path(args.output)
        try:
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(text, encoding="utf-8")
        except OSError as exc:
            report_error(f"cannot write output: {exc}")
            return EXIT_ERROR
    else:
        sys.stdout.write(text)

    log_event(
        "SORT_DONE",
        {
            "sources": sources,
            "lines_in": len(lines),
            "lines_out": len(ordered),
            "reverse": reverse,
            "unique": unique,
        },
        start_time=started,
    )
    return EXIT_OK


def add_sort_arguments(p: argparse.ArgumentParser) -> None:
    """Configure parser for the ``sort`` command."""
    p.add_argument(
        "files",
        nargs="*",
        help="input files, '-' for stdin (default: stdin)",
    )
    p.add_argument(
        "-r",
        "--reverse",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="sort in descending natural order",
    )
    p.add_argument(
        "-u",
        "--unique",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="output only the first of naturally equal lines",
    )
    p.add_argument(
        "--ignore-blank",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="drop empty and whitespace-only lines",
    )
    p.add_argument("-o", "--output", help="write result to file")


def cmd_compare(args: argparse.Namespace) -> int:
    """Print how two strings compare in natural order."""
    result = compare(args.left, args.right)
    sys.stdout.write(f"{result.name.lower()}\n")
    logger.debug("compare %r %r -> %s", args.left, args.right, result.name)
    if args.exit_status:
        return _ORDERING_EXIT[result]
    return EXIT_OK


def add_compare_arguments(p: argparse.ArgumentParser) -> None:
    """Configure parser for the ``compare`` command."""
    p.add_argument(
        "left", help="first string (put '--' before operands starting with '-')"
    )
    p.add_argument("right", help="second string")
    p.add_argument(
        "--exit-status",
        action="store_true",
        help="exit with 0 for equal, 1 for less, 2 for greater",
    )


def cmd_segments(args: argparse.Namespace) -> int:
    """Print the segments of a string as JSON."""
    payload = [
        {"kind": item.kind.value, "text": item.text} for item in segment(args.text)
    ]
    sys.stdout.write(json.dumps(payload, ensure_ascii=False) + "\n")
    return EXIT_OK


def add_segments_arguments(p: argparse.ArgumentParser) -> None:
    """Configure parser for the ``segments`` command."""
    p.add_argument("text", help="string to split")


COMMANDS: dict[str, Command] = {
    "sort": Command(cmd_sort, "sort lines in natural order", add_sort_arguments),
    "compare": Command(cmd_compare, "compare two strings", add_compare_arguments),
    "segments": Command(
        cmd_segments, "show how a string is split", add_segments_arguments
    ),
}
