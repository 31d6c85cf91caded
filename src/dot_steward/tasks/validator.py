"""Structural validation of a loaded task list."""

from __future__ import annotations

from dot_steward.errors import DotStewardError
from dot_steward.tasks.models import TaskConfig

EMPTY_CONFIG_ISSUE = "config must contain at least one task entry."


class ConfigValidationError(DotStewardError):
    """Every invariant violation found in one pass, reported together."""

    def __init__(self, issues: list[str]) -> None:
        self.issues = tuple(issues)
        super().__init__("\n".join(["invalid configuration:", *(f"- {issue}" for issue in issues)]))


def collect_issues(config: TaskConfig) -> list[str]:
    """Return all issues in discovery order; empty list means the config is valid.

    An empty task list is reported alone. Otherwise every task is checked, so a
    duplicate name and an empty command on the same task both show up.
    """

    if not config.tasks:
        return [EMPTY_CONFIG_ISSUE]

    seen_names: set[str] = set()
    issues: list[str] = []
    for position, task in enumerate(config.tasks, start=1):
        if not task.name.strip():
            issues.append(f"task at position {position} has an empty name.")
        elif task.name in seen_names:
            issues.append(f"duplicate task name '{task.name}'.")
        else:
            seen_names.add(task.name)

        if not task.command.strip():
            issues.append(f"task '{task.name}' has an empty command.")
    return issues


def validate_config(config: TaskConfig) -> None:
    """Raise ``ConfigValidationError`` if the task list breaks any invariant."""

    issues = collect_issues(config)
    if issues:
        raise ConfigValidationError(issues)
