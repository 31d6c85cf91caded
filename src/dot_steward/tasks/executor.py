"""Sequential shell execution of the task list."""

from __future__ import annotations

import logging
import subprocess
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from dot_steward.errors import DotStewardError
from dot_steward.tasks.models import Task, TaskConfig

logger = logging.getLogger(__name__)

ProcessRunner = Callable[..., subprocess.CompletedProcess]


class FailureReason(str, Enum):
    """Why a task stopped the run."""

    SPAWN_FAILED = "spawn_failed"
    EXIT_STATUS = "exit_status"


class TaskExecutionError(DotStewardError):
    """A task could not be started or exited unsuccessfully."""

    def __init__(
        self,
        message: str,
        *,
        task_name: str,
        reason: FailureReason,
        exit_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.task_name = task_name
        self.reason = reason
        self.exit_code = exit_code


@dataclass(slots=True, frozen=True)
class TaskOutcome:
    """Completed task with its wall-clock duration."""

    name: str
    exit_code: int
    duration_seconds: float


@dataclass(slots=True, frozen=True)
class ApplyResult:
    """Outcome of a fully successful apply run."""

    completed: tuple[TaskOutcome, ...]


def run_apply(
    config: TaskConfig,
    *,
    shell: str = "sh",
    runner: ProcessRunner = subprocess.run,
) -> ApplyResult:
    """Run every task in declaration order, stopping at the first failure.

    Tasks after a failed one are never started. Nothing already applied is
    undone.
    """

    completed: list[TaskOutcome] = []
    total = len(config.tasks)
    for index, task in enumerate(config.tasks, start=1):
        logger.info("Task %d/%d started: %s", index, total, task.name)
        outcome = _run_task(task, shell=shell, runner=runner)
        logger.info(
            "Task %d/%d succeeded: %s (%.2fs)",
            index,
            total,
            task.name,
            outcome.duration_seconds,
        )
        completed.append(outcome)
    return ApplyResult(completed=tuple(completed))


def _run_task(task: Task, *, shell: str, runner: ProcessRunner) -> TaskOutcome:
    started = time.monotonic()
    try:
        process = runner([shell, "-c", task.command], check=False)  # noqa: S603
    except (OSError, ValueError) as error:
        logger.debug("Task %s could not be started: %s", task.name, error)
        raise TaskExecutionError(
            f"failed to spawn command for task {task.name}: {error}",
            task_name=task.name,
            reason=FailureReason.SPAWN_FAILED,
        ) from error
    duration = time.monotonic() - started

    if process.returncode != 0:
        logger.debug("Task %s failed with return code %d", task.name, process.returncode)
        raise TaskExecutionError(
            _describe_exit(task.name, process.returncode),
            task_name=task.name,
            reason=FailureReason.EXIT_STATUS,
            exit_code=process.returncode,
        )
    return TaskOutcome(name=task.name, exit_code=0, duration_seconds=duration)


def _describe_exit(task_name: str, returncode: int) -> str:
    if returncode < 0:
        return f"task '{task_name}' was terminated by signal {-returncode}"
    return f"task '{task_name}' failed with exit status {returncode}"
