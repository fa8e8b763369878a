"""Interactive construction of a CommandSchema.

Walks the user through name, exec, positional parameters and named
options. Every prompt goes through io_ops; the first failed prompt
aborts the build and nothing partial is returned.
"""
from __future__ import annotations

from returns.io import IOFailure, IOResult, IOSuccess
from returns.unsafe import unsafe_perform_io

from whirlwind.ww_modules import io_ops
from whirlwind.ww_modules.errors import WhirlwindError
from whirlwind.ww_modules.types import (
    ArgType,
    CommandSchema,
    OptionParameter,
    Parameter,
    arg_type_for_choice,
    arg_type_labels,
)

ARG_NAME_PROMPT = "Argument name"
ARG_TYPE_PROMPT = "Argument type"
ADD_ARGS_PROMPT = "Add arguments?"
ADD_OPTIONS_PROMPT = "Add options?"
ADD_ANOTHER_PROMPT = "Add another argument?"


def ask_parameter() -> IOResult[tuple[str, ArgType], WhirlwindError]:
    """Prompt for one parameter name and its type."""
    name_result = io_ops.ask_text(ARG_NAME_PROMPT)
    if isinstance(name_result, IOFailure):
        return name_result
    name = unsafe_perform_io(name_result.unwrap())

    return io_ops.ask_choice(ARG_TYPE_PROMPT, arg_type_labels()).map(
        lambda index: (name, arg_type_for_choice(index)),
    )


def _collect_parameters(
    gate_prompt: str,
) -> IOResult[list[tuple[str, ArgType]], WhirlwindError]:
    """Repeat ask_parameter() while the user confirms.

    The first gate uses gate_prompt; later gates ask whether to
    add another. Order of entry is preserved.
    """
    collected: list[tuple[str, ArgType]] = []
    prompt = gate_prompt
    while True:
        gate_result = io_ops.ask_confirm(prompt)
        if isinstance(gate_result, IOFailure):
            return gate_result
        if not unsafe_perform_io(gate_result.unwrap()):
            return IOSuccess(collected)

        param_result = ask_parameter()
        if isinstance(param_result, IOFailure):
            return param_result
        collected.append(unsafe_perform_io(param_result.unwrap()))
        prompt = ADD_ANOTHER_PROMPT


def ask_positional_parameters() -> IOResult[
    tuple[Parameter, ...], WhirlwindError
]:
    """Elicit the ordered positional parameters."""
    return _collect_parameters(ADD_ARGS_PROMPT).map(
        lambda pairs: tuple(
            Parameter(name=name, type=arg_type) for name, arg_type in pairs
        ),
    )


def ask_option_parameters() -> IOResult[
    tuple[OptionParameter, ...], WhirlwindError
]:
    """Elicit the ordered named options.

    Short and long aliases are never prompted for and stay unset.
    """
    return _collect_parameters(ADD_OPTIONS_PROMPT).map(
        lambda pairs: tuple(
            OptionParameter(name=name, type=arg_type, short=None, long=None)
            for name, arg_type in pairs
        ),
    )


def build_command_schema() -> IOResult[CommandSchema, WhirlwindError]:
    """Build a CommandSchema from interactive prompts.

    Prompts for name, exec, positional parameters and options in
    that order. Does not persist anything: the caller inserts the
    schema into a Registry and saves it.
    """
    name_result = io_ops.ask_text("name")
    if isinstance(name_result, IOFailure):
        return name_result
    name = unsafe_perform_io(name_result.unwrap())

    exec_result = io_ops.ask_text("exec")
    if isinstance(exec_result, IOFailure):
        return exec_result
    exec_target = unsafe_perform_io(exec_result.unwrap())

    positional_result = ask_positional_parameters()
    if isinstance(positional_result, IOFailure):
        return positional_result
    positional = unsafe_perform_io(positional_result.unwrap())

    return ask_option_parameters().map(
        lambda options: CommandSchema(
            name=name,
            exec=exec_target,
            positional=positional,
            options=options,
        ),
    )
