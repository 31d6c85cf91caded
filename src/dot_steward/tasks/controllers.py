"""Controllers for task CLI commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from dot_steward.config import Settings
from dot_steward.logging_setup import setup_logging
from dot_steward.tasks.executor import run_apply
from dot_steward.tasks.loader import load_config
from dot_steward.tasks.models import TaskConfig
from dot_steward.tasks.planner import render_plan
from dot_steward.tasks.validator import validate_config


@dataclass(slots=True)
class PlanCommand:
    """CLI inputs for plan command."""

    config_path: Path | None
    log_level: str | None = None


@dataclass(slots=True)
class ApplyCommand:
    """CLI inputs for apply command."""

    config_path: Path | None
    log_level: str | None = None


@dataclass(slots=True)
class ValidateCommand:
    """CLI inputs for validate command."""

    config_path: Path | None
    log_level: str | None = None


class TaskCliController:
    """Coordinates load, validation, planning, and apply for CLI commands."""

    def plan(self, command: PlanCommand) -> list[str]:
        settings = _settings(command.config_path, command.log_level)
        config = _load_valid_config(settings)
        return render_plan(config).splitlines()

    def apply(self, command: ApplyCommand) -> list[str]:
        settings = _settings(command.config_path, command.log_level)
        config = _load_valid_config(settings)
        run_apply(config, shell=settings.shell)
        return ["Apply complete."]

    def validate(self, command: ValidateCommand) -> list[str]:
        settings = _settings(command.config_path, command.log_level)
        config = _load_valid_config(settings)
        return [f"Configuration is valid: {len(config.tasks)} tasks."]


def _settings(config_path: Path | None, log_level: str | None) -> Settings:
    settings = Settings.from_env(config_path=config_path, log_level=log_level)
    setup_logging(settings.log_level)
    return settings


def _load_valid_config(settings: Settings) -> TaskConfig:
    config = load_config(settings.config_path)
    validate_config(config)
    return config
