"""Declarative shell task runner driven by a TOML task list."""

__version__ = "0.1.0"
