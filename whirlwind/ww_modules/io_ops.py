"""I/O boundary module -- ALL external I/O goes through here.

This is the single mock point for the entire test suite.
Builder, invoker, config and CLI code never touch the terminal
or filesystem directly; they call io_ops functions.
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from returns.io import IOFailure, IOResult, IOSuccess

from whirlwind.ww_modules.errors import INTERACTION_FAILED, WhirlwindError

if TYPE_CHECKING:
    from collections.abc import Sequence


def _interaction_failure(
    operation: str,
    prompt: str,
    exc: BaseException,
) -> IOFailure[WhirlwindError]:
    """Build the IOFailure returned when a prompt cannot complete."""
    reason = str(exc) or type(exc).__name__
    return IOFailure(
        WhirlwindError(
            operation=operation,
            error_type=INTERACTION_FAILED,
            message=f"Prompt '{prompt}' aborted: {reason}",
            context={"prompt": prompt, "exception": type(exc).__name__},
        ),
    )


# --- Interactive session ---


def ask_text(prompt: str) -> IOResult[str, WhirlwindError]:
    """Prompt for a line of free text. Empty input is accepted."""
    try:
        value: str = click.prompt(
            prompt,
            default="",
            show_default=False,
            type=str,
        )
    except (click.Abort, EOFError, OSError) as exc:
        return _interaction_failure("io_ops.ask_text", prompt, exc)
    return IOSuccess(value)


def ask_confirm(prompt: str) -> IOResult[bool, WhirlwindError]:
    """Ask a yes/no question. Defaults to no."""
    try:
        answer = click.confirm(prompt, default=False)
    except (click.Abort, EOFError, OSError) as exc:
        return _interaction_failure("io_ops.ask_confirm", prompt, exc)
    return IOSuccess(bool(answer))


def ask_choice(
    prompt: str,
    labels: Sequence[str],
) -> IOResult[int, WhirlwindError]:
    """Present numbered labels and return the 0-based selected index.

    The first label is the default selection.
    """
    if not labels:
        return IOFailure(
            WhirlwindError(
                operation="io_ops.ask_choice",
                error_type="ValueError",
                message=f"No choices to present for '{prompt}'",
                context={"prompt": prompt},
            ),
        )
    try:
        for number, label in enumerate(labels, start=1):
            click.echo(f"  {number}) {label}")
        selected: int = click.prompt(
            prompt,
            type=click.IntRange(1, len(labels)),
            default=1,
        )
    except (click.Abort, EOFError, OSError) as exc:
        return _interaction_failure("io_ops.ask_choice", prompt, exc)
    return IOSuccess(selected - 1)


# --- Filesystem ---


def current_directory() -> IOResult[Path, WhirlwindError]:
    """Return the process working directory."""
    try:
        return IOSuccess(Path.cwd())
    except OSError as exc:
        return IOFailure(
            WhirlwindError(
                operation="io_ops.current_directory",
                error_type="WorkspaceError",
                message=f"Cannot determine working directory: {exc}",
                context={},
            ),
        )


def list_directory(path: Path) -> IOResult[list[str], WhirlwindError]:
    """Return the entry names of a directory, sorted."""
    try:
        names = sorted(entry.name for entry in path.iterdir())
    except OSError as exc:
        return IOFailure(
            WhirlwindError(
                operation="io_ops.list_directory",
                error_type="WorkspaceError",
                message=f"Cannot scan directory {path}: {exc}",
                context={"path": str(path)},
            ),
        )
    return IOSuccess(names)


def read_file(path: Path) -> IOResult[str, WhirlwindError]:
    """Read file contents. Returns IOResult, never raises."""
    try:
        return IOSuccess(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return IOFailure(
            WhirlwindError(
                operation="io_ops.read_file",
                error_type="ConfigNotFound",
                message=f"File not found: {path}",
                context={"path": str(path)},
            ),
        )
    except PermissionError:
        return IOFailure(
            WhirlwindError(
                operation="io_ops.read_file",
                error_type="ConfigReadError",
                message=f"Permission denied: {path}",
                context={"path": str(path)},
            ),
        )
    except OSError as exc:
        return IOFailure(
            WhirlwindError(
                operation="io_ops.read_file",
                error_type="ConfigReadError",
                message=f"OS error reading {path}: {exc}",
                context={"path": str(path)},
            ),
        )


def write_file(
    path: Path,
    content: str,
) -> IOResult[Path, WhirlwindError]:
    """Write content to path, replacing any previous contents."""
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        return IOFailure(
            WhirlwindError(
                operation="io_ops.write_file",
                error_type="ConfigWriteError",
                message=f"Failed to write {path}: {exc}",
                context={"path": str(path)},
            ),
        )
    return IOSuccess(path)


# --- Terminal output ---


def print_output(message: str) -> None:
    """Print a message to stdout. Mockable seam."""
    click.echo(message)


def write_stderr(
    message: str,
) -> IOResult[None, WhirlwindError]:
    """Write message to stderr (fail-open).

    Returns IOSuccess(None) or IOFailure on error.
    """
    try:
        sys.stderr.write(message + "\n")
    except OSError as exc:
        return IOFailure(
            WhirlwindError(
                operation="io_ops.write_stderr",
                error_type="StderrWriteError",
                message=f"Failed to write to stderr: {exc}",
                context={"original_message": message},
            ),
        )
    return IOSuccess(None)
