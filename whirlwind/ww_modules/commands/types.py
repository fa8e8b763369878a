"""Outcome types for registry mutations."""
from __future__ import annotations

from dataclasses import dataclass

from whirlwind.ww_modules.types import CommandSchema

RegistryValue = CommandSchema | str


@dataclass(frozen=True)
class Inserted:
    """A new entry was added under name."""

    name: str


@dataclass(frozen=True)
class Replaced:
    """An existing entry under name was overwritten; old is what it held."""

    name: str
    old: RegistryValue


@dataclass(frozen=True)
class Removed:
    """The entry under name was deleted; old is what it held."""

    name: str
    old: RegistryValue


@dataclass(frozen=True)
class NotFound:
    """No entry exists under name. Reported, never raised."""

    name: str


InsertOutcome = Inserted | Replaced
RemoveOutcome = Removed | NotFound
