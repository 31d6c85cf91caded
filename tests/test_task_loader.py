from __future__ import annotations

from pathlib import Path

import allure
import pytest

from dot_steward.tasks.loader import ConfigLoadError, load_config, parse_config
from dot_steward.tasks.models import Task

pytestmark = [
    allure.epic("Task Runner"),
    allure.feature("Config Loading"),
]


def test_load_config_parses_tasks_in_declaration_order(write_config) -> None:
    path = write_config(
        """
        [[tasks]]
        name = "brew"
        command = "brew bundle"

        [[tasks]]
        name = "dotfiles"
        command = "stow -t ~ dotfiles"
        description = "link dotfiles into home"
        """,
    )

    config = load_config(path)

    assert config.source_path == path
    assert config.tasks == (
        Task(name="brew", command="brew bundle"),
        Task(
            name="dotfiles",
            command="stow -t ~ dotfiles",
            description="link dotfiles into home",
        ),
    )


def test_load_config_reports_missing_file_with_path(tmp_path: Path) -> None:
    path = tmp_path / "absent.toml"

    with pytest.raises(ConfigLoadError, match="failed to read config at") as excinfo:
        load_config(path)

    assert str(path) in str(excinfo.value)
    assert excinfo.value.path == path
    assert isinstance(excinfo.value.__cause__, OSError)


def test_load_config_reports_invalid_toml_with_path(write_config) -> None:
    path = write_config("[[tasks]\nname = ")

    with pytest.raises(ConfigLoadError, match="failed to parse config at") as excinfo:
        load_config(path)

    assert str(path) in str(excinfo.value)


def test_parse_config_accepts_empty_task_array() -> None:
    config = parse_config("tasks = []")

    assert config.tasks == ()
    assert config.source_path is None


def test_parse_config_requires_tasks_key() -> None:
    with pytest.raises(ConfigLoadError, match="missing field 'tasks'"):
        parse_config('title = "no tasks here"')


def test_parse_config_rejects_tasks_that_are_not_tables() -> None:
    with pytest.raises(ConfigLoadError, match="'tasks' must be an array of tables"):
        parse_config('tasks = ["echo hi"]')


@pytest.mark.parametrize("missing", ["name", "command"])
def test_parse_config_requires_name_and_command(missing: str) -> None:
    fields = {"name": '"build"', "command": '"make"'}
    fields.pop(missing)
    body = "\n".join(f"{key} = {value}" for key, value in fields.items())

    with pytest.raises(
        ConfigLoadError,
        match=f"task at position 1 is missing field '{missing}'",
    ):
        parse_config(f"[[tasks]]\n{body}\n")


def test_parse_config_rejects_non_string_fields() -> None:
    text = """
    [[tasks]]
    name = "ok"
    command = "true"

    [[tasks]]
    name = "bad"
    command = 42
    """

    with pytest.raises(ConfigLoadError, match="task at position 2 field 'command' must be a string"):
        parse_config(text)


def test_parse_config_ignores_unknown_keys() -> None:
    config = parse_config(
        """
        version = 3

        [[tasks]]
        name = "lint"
        command = "ruff check ."
        owner = "ci"
        """,
    )

    assert config.tasks == (Task(name="lint", command="ruff check ."),)


def test_parse_config_keeps_empty_strings_for_validation() -> None:
    config = parse_config('[[tasks]]\nname = " "\ncommand = ""\n')

    assert config.tasks == (Task(name=" ", command=""),)
