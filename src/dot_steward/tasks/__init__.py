"""Task list loading, validation, planning, and execution."""

from dot_steward.tasks.executor import (
    ApplyResult,
    FailureReason,
    TaskExecutionError,
    TaskOutcome,
    run_apply,
)
from dot_steward.tasks.loader import ConfigLoadError, load_config, parse_config
from dot_steward.tasks.models import Task, TaskConfig
from dot_steward.tasks.planner import render_plan
from dot_steward.tasks.validator import ConfigValidationError, collect_issues, validate_config

__all__ = [
    "ApplyResult",
    "ConfigLoadError",
    "ConfigValidationError",
    "FailureReason",
    "Task",
    "TaskConfig",
    "TaskExecutionError",
    "TaskOutcome",
    "collect_issues",
    "load_config",
    "parse_config",
    "render_plan",
    "run_apply",
    "validate_config",
]
