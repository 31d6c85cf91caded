"""Domain models for the declared task list."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True, frozen=True)
class Task:
    """One named shell command declared in the config file."""

    name: str
    command: str
    description: str | None = None


@dataclass(slots=True, frozen=True)
class TaskConfig:
    """Ordered task list; declaration order is execution order."""

    tasks: tuple[Task, ...]
    source_path: Path | None = None
