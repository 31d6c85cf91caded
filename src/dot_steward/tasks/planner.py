"""Plain-text rendering of the execution order."""

from __future__ import annotations

from dot_steward.tasks.models import TaskConfig


def render_plan(config: TaskConfig) -> str:
    """Render tasks in declaration order, one numbered line each.

    Works on unvalidated input too: an empty list yields only the header.
    """

    lines = [f"Plan ({len(config.tasks)} tasks):"]
    for index, task in enumerate(config.tasks, start=1):
        lines.append(f"{index}. {task.name} -> {task.command}")
        if task.description is not None:
            lines.append(f"   description: {task.description}")
    return "".join(f"{line}\n" for line in lines)
