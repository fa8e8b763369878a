"""Tests for presentation helpers."""
from __future__ import annotations

from pathlib import Path

import click

from whirlwind.ww_modules import render
from whirlwind.ww_modules.commands.registry import Registry
from whirlwind.ww_modules.commands.types import (
    Inserted,
    NotFound,
    Removed,
    Replaced,
)
from whirlwind.ww_modules.errors import WhirlwindError
from whirlwind.ww_modules.types import CommandSchema, InitResult, Invocation


def _plain(text: str) -> str:
    return click.unstyle(text)


def test_command_insert_notices(pd_schema: CommandSchema) -> None:
    """Replacement says Updated; a fresh insert says Added."""
    assert _plain(
        render.command_insert_notice(Replaced(name="pd", old=pd_schema)),
    ) == "Updated command pd"
    assert _plain(
        render.command_insert_notice(Inserted(name="pd")),
    ) == "Added command pd"


def test_env_insert_notice_reports_old_and_new() -> None:
    """Replacing a variable names both values."""
    notice = render.env_insert_notice(
        Replaced(name="MODE", old="fast"),
        "slow",
    )
    assert _plain(notice) == "Updated env variable MODE from fast to slow"


def test_remove_notices() -> None:
    """Removal and not-found notices for both kinds."""
    assert _plain(
        render.command_remove_notice(Removed(name="pd", old="x")),
    ) == "Removed command pd"
    assert _plain(
        render.command_remove_notice(NotFound(name="pd")),
    ) == "Could not find command pd"
    assert _plain(
        render.env_remove_notice(Removed(name="A", old="1")),
    ) == "Removed environment variable A"
    assert _plain(
        render.env_remove_notice(NotFound(name="A")),
    ) == "Could not find environment variable A"


def test_command_listing(sample_registry: Registry) -> None:
    """Heading then one name: exec line per command."""
    lines = [_plain(line) for line in render.command_listing(sample_registry)]
    assert lines == ["Commands:", "pd: pipeline-driver"]


def test_env_listing(sample_registry: Registry) -> None:
    """Heading then one name: value line per variable."""
    lines = [_plain(line) for line in render.env_listing(sample_registry)]
    assert lines == ["Environment Variables:", "RUST_LOG: debug"]


def test_listings_of_empty_registry() -> None:
    """Empty registries print just the headings."""
    registry = Registry(directory=Path("/w"))
    assert len(render.command_listing(registry)) == 1
    assert len(render.env_listing(registry)) == 1


def test_init_notice() -> None:
    """Created and skipped initializations read differently."""
    created = InitResult(
        directory=Path("/w"),
        config_path=Path("/w/whirlwind.toml"),
        created=True,
    )
    skipped = InitResult(
        directory=Path("/w"),
        config_path=Path("/w/whirlwind.toml"),
        created=False,
    )
    assert _plain(render.init_notice(created)) == "Workspace config generated."
    assert _plain(render.init_notice(skipped)) == (
        "Config already exists. Skipping"
    )


def test_invocation_line() -> None:
    """The invocation line is program followed by args."""
    invocation = Invocation(
        program="pipeline-driver",
        args=("run.mro", "--output=/tmp/out"),
    )
    assert render.invocation_line(invocation) == (
        "pipeline-driver run.mro --output=/tmp/out"
    )


def test_error_message() -> None:
    """Errors are shown by message."""
    error = WhirlwindError(
        operation="select_command",
        error_type="CommandNotFound",
        message="Command 'x' is not defined",
    )
    assert _plain(render.error_message(error)) == (
        "Error: Command 'x' is not defined"
    )


def test_error_message_verbose() -> None:
    """Verbose errors add operation, type and context."""
    error = WhirlwindError(
        operation="select_command",
        error_type="CommandNotFound",
        message="Command 'x' is not defined",
        context={"name": "x"},
    )
    assert render.error_message(error, verbose=True) == (
        "Error: [select_command] CommandNotFound:"
        " Command 'x' is not defined | context={'name': 'x'}"
    )


def test_insert_notices_style_name_alike(pd_schema: CommandSchema) -> None:
    """Added and Updated notices color the name the same way."""
    styled = click.style("pd", fg="green")
    assert styled in render.command_insert_notice(Inserted(name="pd"))
    assert styled in render.command_insert_notice(
        Replaced(name="pd", old=pd_schema),
    )
    styled_env = click.style("MODE", fg="green")
    assert styled_env in render.env_insert_notice(Inserted(name="MODE"), "1")
    assert styled_env in render.env_insert_notice(
        Replaced(name="MODE", old="0"),
        "1",
    )
