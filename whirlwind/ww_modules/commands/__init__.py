"""Commands package -- typed command schemas and their registry.

Public API: building a CommandSchema interactively, invoking one to
produce an Invocation, and the workspace Registry with its mutation
outcomes.
"""
from __future__ import annotations

from whirlwind.ww_modules.commands.builder import build_command_schema
from whirlwind.ww_modules.commands.invoker import (
    format_option,
    invoke_command_schema,
)
from whirlwind.ww_modules.commands.registry import Registry
from whirlwind.ww_modules.commands.types import (
    Inserted,
    InsertOutcome,
    NotFound,
    Removed,
    RemoveOutcome,
    Replaced,
)

__all__ = [
    "InsertOutcome",
    "Inserted",
    "NotFound",
    "RemoveOutcome",
    "Registry",
    "Removed",
    "Replaced",
    "build_command_schema",
    "format_option",
    "invoke_command_schema",
]
