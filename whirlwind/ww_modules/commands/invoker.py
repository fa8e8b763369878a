"""Turn a CommandSchema into a concrete Invocation.

Values are elicited one prompt per parameter and passed through as
text. Nothing is launched here.
"""
from __future__ import annotations

from returns.io import IOFailure, IOResult, IOSuccess
from returns.unsafe import unsafe_perform_io

from whirlwind.ww_modules import io_ops
from whirlwind.ww_modules.errors import WhirlwindError
from whirlwind.ww_modules.types import CommandSchema, Invocation


def format_option(name: str, value: str) -> str:
    """Render a named option as a single ``--name=value`` token."""
    return f"--{name}={value}"


def invoke_command_schema(
    schema: CommandSchema,
) -> IOResult[Invocation, WhirlwindError]:
    """Elicit values for every parameter of schema.

    Positional values are appended verbatim in declared order.
    Options follow in declared order; an empty value drops the
    option. Returns the schema's exec as the program.
    """
    args: list[str] = []

    for param in schema.positional:
        value_result = io_ops.ask_text(param.name)
        if isinstance(value_result, IOFailure):
            return value_result
        args.append(unsafe_perform_io(value_result.unwrap()))

    for option in schema.options:
        value_result = io_ops.ask_text(option.name)
        if isinstance(value_result, IOFailure):
            return value_result
        value = unsafe_perform_io(value_result.unwrap())
        if value:
            args.append(format_option(option.name, value))

    return IOSuccess(Invocation(program=schema.exec, args=tuple(args)))
