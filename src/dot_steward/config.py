"""Runtime configuration for the task runner CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CONFIG_PATH = Path("dot-steward.toml")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(slots=True)
class Settings:
    """Process-wide settings; the task list itself lives in the TOML file."""

    config_path: Path = DEFAULT_CONFIG_PATH
    shell: str = "sh"
    log_level: str = "WARNING"

    @classmethod
    def from_env(
        cls,
        config_path: Path | None = None,
        log_level: str | None = None,
    ) -> Settings:
        """Load settings from environment; explicit arguments win over env values."""

        env_path = os.getenv("DOT_STEWARD_CONFIG", "").strip()
        settings = cls(
            config_path=config_path or (Path(env_path) if env_path else DEFAULT_CONFIG_PATH),
            shell=os.getenv("DOT_STEWARD_SHELL", "sh").strip(),
            log_level=(log_level or os.getenv("DOT_STEWARD_LOG_LEVEL", "WARNING")).strip().upper(),
        )
        settings.validate()
        return settings

    def validate(self) -> None:
        """Raise configuration error if a setting is unusable."""

        if not self.shell.strip():
            raise ValueError("DOT_STEWARD_SHELL must not be empty.")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"DOT_STEWARD_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}: "
                f"{self.log_level!r}",
            )
