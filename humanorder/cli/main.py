"""Entry point for the command-line interface."""

from __future__ import annotations

import argparse
import logging

from humanorder.log import configure_logging
from humanorder.settings import AppSettings, load_app_settings

from .commands import COMMANDS, EXIT_ERROR, report_error

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    """Construct argument parser for CLI commands."""
    parser = argparse.ArgumentParser(
        prog="humanorder",
        description="Natural (human) ordering of strings",
    )
    parser.add_argument(
        "--settings",
        help="path to JSON/TOML settings",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        help="console log level (overrides settings)",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    for name, cmd in COMMANDS.items():
        p = sub.add_parser(name, help=cmd.help)
        cmd.add_arguments(p)
        p.set_defaults(func=cmd.func)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = AppSettings()
    if args.settings:
        try:
            settings = load_app_settings(args.settings)
        except (OSError, ValueError) as exc:
            report_error(f"invalid settings: {exc}")
            return EXIT_ERROR
    level_name = args.log_level or settings.log.level
    try:
        configure_logging(
            logging.getLevelName(level_name), log_dir=settings.log.directory
        )
    except OSError as exc:
        report_error(f"cannot set up log directory: {exc}")
        return EXIT_ERROR
    args.app_settings = settings
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
