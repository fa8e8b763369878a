"""Shared type definitions for whirlwind command schemas."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ArgType(Enum):
    """Kind of value a parameter holds.

    A tag only: entered values are always carried as text. The enum
    value is the tag written to whirlwind.toml.
    """

    OTHER = "Other"
    STRING = "StringArg"
    INT = "IntArg"
    FLOAT = "FloatArg"
    FILE = "FileArg"
    PATH = "PathArg"


# Ordered (label, ArgType) table shown when picking a parameter type.
ARG_TYPE_CHOICES: tuple[tuple[str, ArgType], ...] = (
    ("string", ArgType.STRING),
    ("int", ArgType.INT),
    ("float", ArgType.FLOAT),
    ("file", ArgType.FILE),
    ("path", ArgType.PATH),
    ("other", ArgType.OTHER),
)


def arg_type_labels() -> list[str]:
    """Return the choice labels in display order."""
    return [label for label, _ in ARG_TYPE_CHOICES]


def arg_type_for_choice(index: int) -> ArgType:
    """Map a selected choice index to its ArgType.

    Indices outside the table fall back to ArgType.OTHER.
    """
    if 0 <= index < len(ARG_TYPE_CHOICES):
        return ARG_TYPE_CHOICES[index][1]
    return ArgType.OTHER


@dataclass(frozen=True)
class Parameter:
    """A required positional parameter."""

    name: str
    type: ArgType = ArgType.OTHER


@dataclass(frozen=True)
class OptionParameter:
    """An optional named parameter, rendered as ``--name=value``."""

    name: str
    type: ArgType = ArgType.OTHER
    short: str | None = None
    long: str | None = None


@dataclass(frozen=True)
class CommandSchema:
    """Typed description of one named command.

    ``exec`` is the program handed to the launcher. Order of
    ``positional`` is the order values are elicited and emitted.
    """

    name: str
    exec: str
    positional: tuple[Parameter, ...] = ()
    options: tuple[OptionParameter, ...] = ()


@dataclass(frozen=True)
class Invocation:
    """Concrete program name plus ordered argument vector."""

    program: str
    args: tuple[str, ...] = ()

    def to_command_line(self) -> str:
        """Join program and args with single spaces, unquoted."""
        return " ".join([self.program, *self.args])


@dataclass(frozen=True)
class InitResult:
    """Result of initializing a workspace."""

    directory: Path
    config_path: Path
    created: bool
