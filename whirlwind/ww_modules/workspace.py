"""Workspace initialization."""
from __future__ import annotations

from typing import TYPE_CHECKING

from returns.io import IOFailure, IOResult, IOSuccess
from returns.unsafe import unsafe_perform_io

from whirlwind.ww_modules import io_ops
from whirlwind.ww_modules.commands.registry import Registry
from whirlwind.ww_modules.config import (
    CONFIG_FILE_NAME,
    config_path,
    save_registry,
)
from whirlwind.ww_modules.types import InitResult

if TYPE_CHECKING:
    from pathlib import Path

    from whirlwind.ww_modules.errors import WhirlwindError


def initialize_workspace(
    directory: Path,
) -> IOResult[InitResult, WhirlwindError]:
    """Create an empty whirlwind.toml in directory.

    An existing config file is left untouched and reported with
    created=False.
    """
    entries_result = io_ops.list_directory(directory)
    if isinstance(entries_result, IOFailure):
        return entries_result

    path = config_path(directory)
    if CONFIG_FILE_NAME in unsafe_perform_io(entries_result.unwrap()):
        return IOSuccess(
            InitResult(directory=directory, config_path=path, created=False),
        )

    return save_registry(Registry(directory=directory)).map(
        lambda written: InitResult(
            directory=directory,
            config_path=written,
            created=True,
        ),
    )
