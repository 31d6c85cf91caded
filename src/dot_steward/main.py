"""CLI entrypoint for dot-steward."""

from collections.abc import Callable
from pathlib import Path

import rich_click as click

from dot_steward import __version__
from dot_steward.config import LOG_LEVELS
from dot_steward.errors import DotStewardError
from dot_steward.tasks.controllers import (
    ApplyCommand,
    PlanCommand,
    TaskCliController,
    ValidateCommand,
)

click.rich_click.USE_MARKDOWN = True
TASK_CONTROLLER = TaskCliController()

_config_option = click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Path to TOML config file. Defaults to DOT_STEWARD_CONFIG or `dot-steward.toml`.",
)


@click.group()
@click.version_option(version=__version__, prog_name="dot-steward")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Log verbosity on stderr. Defaults to DOT_STEWARD_LOG_LEVEL or WARNING.",
)
@click.pass_context
def dot_steward(ctx: click.Context, log_level: str | None) -> None:
    """Run shell tasks declared in a TOML file, in declaration order."""

    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level


@dot_steward.command("plan")
@_config_option
@click.pass_context
def plan(ctx: click.Context, config_path: Path | None) -> None:
    """Print the deterministic execution order without running anything."""

    _run(
        lambda: TASK_CONTROLLER.plan(
            PlanCommand(config_path=config_path, log_level=ctx.obj["log_level"]),
        ),
    )


@dot_steward.command("apply")
@_config_option
@click.pass_context
def apply(ctx: click.Context, config_path: Path | None) -> None:
    """Run every task in declaration order, stopping at the first failure."""

    _run(
        lambda: TASK_CONTROLLER.apply(
            ApplyCommand(config_path=config_path, log_level=ctx.obj["log_level"]),
        ),
    )


@dot_steward.command("validate")
@_config_option
@click.pass_context
def validate(ctx: click.Context, config_path: Path | None) -> None:
    """Check the config file and report every problem found."""

    _run(
        lambda: TASK_CONTROLLER.validate(
            ValidateCommand(config_path=config_path, log_level=ctx.obj["log_level"]),
        ),
    )


def _run(action: Callable[[], list[str]]) -> None:
    try:
        lines = action()
    except (DotStewardError, ValueError) as error:
        raise click.ClickException(str(error)) from error
    _emit_lines(lines)


def _emit_lines(lines: list[str]) -> None:
    for line in lines:
        click.echo(line)


if __name__ == "__main__":  # pragma: no cover
    dot_steward()
