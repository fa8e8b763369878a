"""Workspace command registry and environment bindings."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from whirlwind.ww_modules.commands.types import (
    Inserted,
    InsertOutcome,
    NotFound,
    Removed,
    RemoveOutcome,
    Replaced,
)

if TYPE_CHECKING:
    from collections.abc import ItemsView
    from pathlib import Path

    from whirlwind.ww_modules.types import CommandSchema


@dataclass
class Registry:
    """Name-keyed CommandSchemas plus environment variable bindings.

    Owned by a single CLI session. Mutations report what happened
    as outcome values and never raise for absent names; rendering
    notices is left to the caller.
    """

    directory: Path
    commands: dict[str, CommandSchema] = field(default_factory=dict)
    environment: dict[str, str] = field(default_factory=dict)

    def insert(self, schema: CommandSchema) -> InsertOutcome:
        """Store schema under its name, replacing any previous one."""
        old = self.commands.get(schema.name)
        self.commands[schema.name] = schema
        if old is None:
            return Inserted(name=schema.name)
        return Replaced(name=schema.name, old=old)

    def remove(self, name: str) -> RemoveOutcome:
        """Delete the schema stored under name, if any."""
        old = self.commands.pop(name, None)
        if old is None:
            return NotFound(name=name)
        return Removed(name=name, old=old)

    def insert_env(self, name: str, value: str) -> InsertOutcome:
        """Bind an environment variable, replacing any previous value."""
        old = self.environment.get(name)
        self.environment[name] = value
        if old is None:
            return Inserted(name=name)
        return Replaced(name=name, old=old)

    def remove_env(self, name: str) -> RemoveOutcome:
        """Drop an environment variable binding, if any."""
        old = self.environment.pop(name, None)
        if old is None:
            return NotFound(name=name)
        return Removed(name=name, old=old)

    def get(self, name: str) -> CommandSchema | None:
        """Look up a command by name. Returns None if not found."""
        return self.commands.get(name)

    def names(self) -> list[str]:
        """Return command names, sorted for stable menus."""
        return sorted(self.commands)

    def list_commands(self) -> ItemsView[str, CommandSchema]:
        """Return a live (name, schema) view. Order is not meaningful."""
        return self.commands.items()

    def list_env(self) -> ItemsView[str, str]:
        """Return a live (name, value) view. Order is not meaningful."""
        return self.environment.items()
