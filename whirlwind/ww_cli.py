"""Whirlwind command-line entry point.

Loads the workspace registry from whirlwind.toml, applies the
requested change or runs a stored command interactively, and
saves the registry back after every mutation. Orchestrators
return IOResult; only the Click layer turns failures into exit
codes.
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

import click
from returns.io import IOFailure, IOResult, IOSuccess
from returns.unsafe import unsafe_perform_io

from whirlwind.ww_modules import io_ops, render
from whirlwind.ww_modules.commands.builder import build_command_schema
from whirlwind.ww_modules.commands.invoker import invoke_command_schema
from whirlwind.ww_modules.config import load_registry, save_registry
from whirlwind.ww_modules.errors import WhirlwindError
from whirlwind.ww_modules.workspace import initialize_workspace

if TYPE_CHECKING:
    from collections.abc import Callable

    from whirlwind.ww_modules.commands.registry import Registry
    from whirlwind.ww_modules.commands.types import (
        InsertOutcome,
        RemoveOutcome,
    )
    from whirlwind.ww_modules.types import (
        CommandSchema,
        InitResult,
        Invocation,
    )

_T = TypeVar("_T")

RUN_SELECT_PROMPT = "Select command to run"


# --- Orchestrators ---


def resolve_workspace(
    workspace: str | None,
) -> IOResult[Path, WhirlwindError]:
    """Return the workspace directory as an absolute path.

    An explicit workspace is resolved against the working directory,
    which is also the default.
    """
    if workspace:
        return IOSuccess(Path(workspace).resolve())
    return io_ops.current_directory()


def select_command(
    registry: Registry,
    name: str | None,
) -> IOResult[CommandSchema, WhirlwindError]:
    """Pick the command to run by name, or from a menu when name is None."""
    if name is None:
        names = registry.names()
        if not names:
            return IOFailure(
                WhirlwindError(
                    operation="select_command",
                    error_type="NoCommandsDefined",
                    message=(
                        "No commands defined in this workspace."
                        " Add one with 'whirlwind add command'."
                    ),
                    context={"directory": str(registry.directory)},
                ),
            )
        choice_result = io_ops.ask_choice(RUN_SELECT_PROMPT, names)
        if isinstance(choice_result, IOFailure):
            return choice_result
        name = names[unsafe_perform_io(choice_result.unwrap())]

    schema = registry.get(name)
    if schema is None:
        return IOFailure(
            WhirlwindError(
                operation="select_command",
                error_type="CommandNotFound",
                message=f"Command '{name}' is not defined",
                context={"name": name, "available": registry.names()},
            ),
        )
    return IOSuccess(schema)


def run_command(
    directory: Path,
    name: str | None = None,
) -> IOResult[Invocation, WhirlwindError]:
    """Load the registry, select a command and elicit its values."""
    return (
        load_registry(directory)
        .bind(lambda registry: select_command(registry, name))
        .bind(invoke_command_schema)
    )


def _mutate_and_save(
    directory: Path,
    mutate: Callable[[Registry], IOResult[_T, WhirlwindError]],
) -> IOResult[_T, WhirlwindError]:
    """Load the registry, apply mutate, then save it.

    Nothing is written when mutate fails.
    """
    load_result = load_registry(directory)
    if isinstance(load_result, IOFailure):
        return load_result
    registry = unsafe_perform_io(load_result.unwrap())

    mutate_result = mutate(registry)
    if isinstance(mutate_result, IOFailure):
        return mutate_result
    outcome = unsafe_perform_io(mutate_result.unwrap())

    return save_registry(registry).map(lambda _: outcome)


def add_command(directory: Path) -> IOResult[InsertOutcome, WhirlwindError]:
    """Build a schema interactively and store it."""
    return _mutate_and_save(
        directory,
        lambda registry: build_command_schema().map(registry.insert),
    )


def add_env(
    directory: Path,
    name: str,
    value: str,
) -> IOResult[InsertOutcome, WhirlwindError]:
    """Bind an environment variable in the workspace."""
    return _mutate_and_save(
        directory,
        lambda registry: IOSuccess(registry.insert_env(name, value)),
    )


def remove_command(
    directory: Path,
    name: str,
) -> IOResult[RemoveOutcome, WhirlwindError]:
    """Delete a stored command."""
    return _mutate_and_save(
        directory,
        lambda registry: IOSuccess(registry.remove(name)),
    )


def remove_env(
    directory: Path,
    name: str,
) -> IOResult[RemoveOutcome, WhirlwindError]:
    """Delete an environment variable binding."""
    return _mutate_and_save(
        directory,
        lambda registry: IOSuccess(registry.remove_env(name)),
    )


# --- CLI Entry Point ---


def _unwrap_or_exit(
    ctx: click.Context,
    result: IOResult[_T, WhirlwindError],
) -> _T:
    """Return the success value, or report the error and exit 1."""
    if isinstance(result, IOFailure):
        err = unsafe_perform_io(result.failure())
        verbose = bool(ctx.obj and ctx.obj.get("verbose"))
        io_ops.write_stderr(render.error_message(err, verbose=verbose))
        sys.exit(1)
    return unsafe_perform_io(result.unwrap())


def _workspace(ctx: click.Context) -> Path:
    workspace: str | None = ctx.obj.get("workspace") if ctx.obj else None
    return _unwrap_or_exit(ctx, resolve_workspace(workspace))


@click.group()
@click.version_option(package_name="whirlwind")
@click.option(
    "--workspace",
    envvar="WHIRLWIND_WORKSPACE",
    type=click.Path(file_okay=False),
    default=None,
    help="Workspace directory (default: current directory)",
)
@click.option(
    "--verbose",
    is_flag=True,
    default=False,
    help="Report failures with operation, type and context",
)
@click.pass_context
def main(ctx: click.Context, workspace: str | None, verbose: bool) -> None:
    """A workspace manager for named, typed shell commands."""
    ctx.ensure_object(dict)
    ctx.obj["workspace"] = workspace
    ctx.obj["verbose"] = verbose


@main.command()
@click.pass_context
def init(ctx: click.Context) -> None:
    """Initialize the workspace."""
    directory = _workspace(ctx)
    io_ops.print_output(
        click.style("Initializing workspace", fg="blue"),
    )
    result: InitResult = _unwrap_or_exit(
        ctx,
        initialize_workspace(directory),
    )
    io_ops.print_output(render.init_notice(result))


@main.command()
@click.argument("name", required=False)
@click.pass_context
def run(ctx: click.Context, name: str | None) -> None:
    """Run a defined command."""
    directory = _workspace(ctx)
    invocation = _unwrap_or_exit(ctx, run_command(directory, name))
    io_ops.print_output(render.invocation_line(invocation))


@main.group()
def add() -> None:
    """Add an item to the workspace config."""


@add.command("command")
@click.pass_context
def add_command_cmd(ctx: click.Context) -> None:
    """Add a command."""
    directory = _workspace(ctx)
    outcome = _unwrap_or_exit(ctx, add_command(directory))
    io_ops.print_output(render.command_insert_notice(outcome))


@add.command("env")
@click.argument("name")
@click.argument("value")
@click.pass_context
def add_env_cmd(ctx: click.Context, name: str, value: str) -> None:
    """Add an environment variable."""
    directory = _workspace(ctx)
    outcome = _unwrap_or_exit(ctx, add_env(directory, name, value))
    io_ops.print_output(render.env_insert_notice(outcome, value))


@main.group()
def remove() -> None:
    """Remove an item from the workspace config."""


@remove.command("command")
@click.argument("name")
@click.pass_context
def remove_command_cmd(ctx: click.Context, name: str) -> None:
    """Remove a command."""
    directory = _workspace(ctx)
    outcome = _unwrap_or_exit(ctx, remove_command(directory, name))
    io_ops.print_output(render.command_remove_notice(outcome))


@remove.command("env")
@click.argument("name")
@click.pass_context
def remove_env_cmd(ctx: click.Context, name: str) -> None:
    """Remove an environment variable."""
    directory = _workspace(ctx)
    outcome = _unwrap_or_exit(ctx, remove_env(directory, name))
    io_ops.print_output(render.env_remove_notice(outcome))


@main.command("list")
@click.argument(
    "what",
    type=click.Choice(["all", "command", "env"]),
    default="all",
)
@click.pass_context
def list_cmd(ctx: click.Context, what: str) -> None:
    """List commands, environment variables, or both."""
    directory = _workspace(ctx)
    registry = _unwrap_or_exit(ctx, load_registry(directory))
    lines: list[str] = []
    if what in ("all", "command"):
        lines.extend(render.command_listing(registry))
    if what == "all":
        lines.append("")
    if what in ("all", "env"):
        lines.extend(render.env_listing(registry))
    for line in lines:
        io_ops.print_output(line)


if __name__ == "__main__":
    main()
