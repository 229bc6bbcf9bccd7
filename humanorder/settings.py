"""Typed command-line settings with Pydantic validation."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

import tomllib
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class SortSettings(BaseModel):
    """Defaults for the ``sort`` command."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    reverse: bool = False
    unique: bool = False
    ignore_blank: bool = False


class LogSettings(BaseModel):
    """Logging preferences."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    level: LogLevel = "WARNING"
    directory: Path | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _normalise_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("directory", mode="before")
    @classmethod
    def _normalise_directory(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class AppSettings(BaseModel):
    """Aggregate settings for the command-line tool."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    sort: SortSettings = Field(default_factory=SortSettings)
    log: LogSettings = Field(default_factory=LogSettings)

    def to_dict(self) -> dict:
        """Return settings as a plain dictionary."""
        return self.model_dump()


def load_app_settings(path: str | Path) -> AppSettings:
    """Load :class:`AppSettings` from *path* with validation.

    Format is detected by file extension: ``.toml`` uses :mod:`tomllib`,
    everything else is treated as JSON. Parse and validation errors are
    wrapped into :class:`ValueError` with a human-friendly message.
    """
    p = Path(path)
    with p.open("rb") as fh:
        try:
            data = tomllib.load(fh) if p.suffix.lower() == ".toml" else json.load(fh)
        except (tomllib.TOMLDecodeError, json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ValueError(f"cannot parse settings file {p}: {exc}") from exc
    try:
        return AppSettings.model_validate(data)
    except ValidationError as exc:
        raise ValueError(str(exc)) from exc


__all__ = ["AppSettings", "LogSettings", "SortSettings", "load_app_settings"]
