"""Presentation of registry outcomes, listings and invocations.

Pure string builders; callers hand the result to io_ops for output.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import click

from whirlwind.ww_modules.commands.types import Removed, Replaced

if TYPE_CHECKING:
    from collections.abc import Iterable

    from whirlwind.ww_modules.commands.registry import Registry
    from whirlwind.ww_modules.commands.types import InsertOutcome, RemoveOutcome
    from whirlwind.ww_modules.errors import WhirlwindError
    from whirlwind.ww_modules.types import CommandSchema, InitResult, Invocation


def heading(text: str) -> str:
    return click.style(text, fg="blue", bold=True, underline=True)


def _entry(name: str, value: str) -> str:
    return f"{click.style(name, fg='green')}: {click.style(value, fg='magenta')}"


def command_insert_notice(outcome: InsertOutcome) -> str:
    if isinstance(outcome, Replaced):
        return f"Updated command {click.style(outcome.name, fg='green')}"
    return f"Added command {click.style(outcome.name, fg='green')}"


def env_insert_notice(outcome: InsertOutcome, value: str) -> str:
    """Notice for an environment binding; value is the new value."""
    if isinstance(outcome, Replaced):
        return (
            f"Updated env variable {click.style(outcome.name, fg='green')}"
            f" from {outcome.old} to {value}"
        )
    return f"Added env variable {click.style(outcome.name, fg='green')}"


def _remove_notice(outcome: RemoveOutcome, kind: str) -> str:
    if isinstance(outcome, Removed):
        return f"Removed {kind} {click.style(outcome.name, fg='red')}"
    return (
        f"{click.style(f'Could not find {kind}', fg='red')}"
        f" {click.style(outcome.name, fg='blue')}"
    )


def command_remove_notice(outcome: RemoveOutcome) -> str:
    return _remove_notice(outcome, "command")


def env_remove_notice(outcome: RemoveOutcome) -> str:
    return _remove_notice(outcome, "environment variable")


def command_listing(registry: Registry) -> list[str]:
    """Heading followed by one ``name: exec`` line per command."""
    entries: Iterable[tuple[str, CommandSchema]] = registry.list_commands()
    return [
        heading("Commands:"),
        *(_entry(name, schema.exec) for name, schema in entries),
    ]


def env_listing(registry: Registry) -> list[str]:
    """Heading followed by one ``name: value`` line per variable."""
    return [
        heading("Environment Variables:"),
        *(_entry(name, value) for name, value in registry.list_env()),
    ]


def init_notice(result: InitResult) -> str:
    if result.created:
        return click.style("Workspace config generated.", fg="green")
    return click.style("Config already exists. Skipping", fg="red")


def invocation_line(invocation: Invocation) -> str:
    return invocation.to_command_line()


def error_message(error: WhirlwindError, *, verbose: bool = False) -> str:
    """Unstyled, since it goes straight to stderr."""
    if verbose:
        return f"Error: {error}"
    return f"Error: {error.message}"
