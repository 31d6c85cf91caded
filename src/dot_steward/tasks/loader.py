"""Read a TOML task file into the task list model."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from dot_steward.errors import DotStewardError
from dot_steward.tasks.models import Task, TaskConfig

_REQUIRED_FIELDS = ("name", "command")


class ConfigLoadError(DotStewardError):
    """Config file could not be read or does not have the expected shape."""

    def __init__(self, message: str, *, path: Path | None) -> None:
        super().__init__(message)
        self.path = path


class _ShapeError(ValueError):
    pass


def load_config(path: Path) -> TaskConfig:
    """Read and parse the task file at ``path``."""

    try:
        raw = path.read_text("utf-8")
    except (OSError, UnicodeDecodeError) as error:
        raise ConfigLoadError(f"failed to read config at {path}: {error}", path=path) from error
    return parse_config(raw, source_path=path)


def parse_config(text: str, source_path: Path | None = None) -> TaskConfig:
    """Parse TOML text into a ``TaskConfig`` without checking task invariants."""

    location = source_path if source_path is not None else "<string>"
    try:
        document = tomllib.loads(text)
        tasks = _parse_tasks(document)
    except (tomllib.TOMLDecodeError, _ShapeError) as error:
        raise ConfigLoadError(
            f"failed to parse config at {location}: {error}",
            path=source_path,
        ) from error
    return TaskConfig(tasks=tasks, source_path=source_path)


def _parse_tasks(document: dict[str, Any]) -> tuple[Task, ...]:
    if "tasks" not in document:
        raise _ShapeError("missing field 'tasks'")
    entries = document["tasks"]
    if not isinstance(entries, list) or not all(isinstance(entry, dict) for entry in entries):
        raise _ShapeError("'tasks' must be an array of tables")
    return tuple(_parse_task(entry, position) for position, entry in enumerate(entries, start=1))


def _parse_task(entry: dict[str, Any], position: int) -> Task:
    for field_name in _REQUIRED_FIELDS:
        if field_name not in entry:
            raise _ShapeError(f"task at position {position} is missing field '{field_name}'")
    for field_name in (*_REQUIRED_FIELDS, "description"):
        value = entry.get(field_name)
        if value is not None and not isinstance(value, str):
            raise _ShapeError(f"task at position {position} field '{field_name}' must be a string")
    return Task(
        name=entry["name"],
        command=entry["command"],
        description=entry.get("description"),
    )
