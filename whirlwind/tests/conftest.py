"""Shared test fixtures for whirlwind test suite."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import pytest
from returns.io import IOFailure, IOSuccess

from whirlwind.ww_modules.commands.registry import Registry
from whirlwind.ww_modules.types import (
    ArgType,
    CommandSchema,
    OptionParameter,
    Parameter,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from pathlib import Path
    from unittest.mock import MagicMock


@pytest.fixture
def pd_schema() -> CommandSchema:
    """Return the pipeline-driver schema with one arg and one option."""
    return CommandSchema(
        name="pd",
        exec="pipeline-driver",
        positional=(Parameter(name="file", type=ArgType.FILE),),
        options=(OptionParameter(name="output", type=ArgType.PATH),),
    )


@pytest.fixture
def sample_registry(tmp_path: Path, pd_schema: CommandSchema) -> Registry:
    """Return a Registry bound to tmp_path holding pd and one env var."""
    return Registry(
        directory=tmp_path,
        commands={"pd": pd_schema},
        environment={"RUST_LOG": "debug"},
    )


@pytest.fixture
def patch_prompts(mocker: MagicMock) -> Callable[..., PromptMocks]:
    """Return a helper that scripts answers for the io_ops prompts.

    Each keyword takes the answers, in order, for one prompt kind.
    Answers are wrapped in IOSuccess; pass an IOFailure to fail a prompt.
    """

    def _wrap(values: Sequence[object]) -> list[object]:
        return [
            value if isinstance(value, IOFailure) else IOSuccess(value)
            for value in values
        ]

    def _patch(
        *,
        text: Sequence[object] = (),
        confirm: Sequence[object] = (),
        choice: Sequence[object] = (),
    ) -> PromptMocks:
        return PromptMocks(
            text=mocker.patch(
                "whirlwind.ww_modules.io_ops.ask_text",
                side_effect=_wrap(text),
            ),
            confirm=mocker.patch(
                "whirlwind.ww_modules.io_ops.ask_confirm",
                side_effect=_wrap(confirm),
            ),
            choice=mocker.patch(
                "whirlwind.ww_modules.io_ops.ask_choice",
                side_effect=_wrap(choice),
            ),
        )

    return _patch


@dataclass(frozen=True)
class PromptMocks:
    """Mocks installed by patch_prompts."""

    text: MagicMock
    confirm: MagicMock
    choice: MagicMock
