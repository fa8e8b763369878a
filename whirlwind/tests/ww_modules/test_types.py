"""Tests for shared command schema types."""
from __future__ import annotations

import pytest

from whirlwind.ww_modules.types import (
    ARG_TYPE_CHOICES,
    ArgType,
    CommandSchema,
    Invocation,
    OptionParameter,
    Parameter,
    arg_type_for_choice,
    arg_type_labels,
)


def test_arg_type_labels_in_display_order() -> None:
    """Labels are presented string, int, float, file, path, other."""
    assert arg_type_labels() == [
        "string",
        "int",
        "float",
        "file",
        "path",
        "other",
    ]


def test_arg_type_choices_cover_every_variant_once() -> None:
    """The choice table maps each ArgType exactly once."""
    kinds = [kind for _, kind in ARG_TYPE_CHOICES]
    assert sorted(kinds, key=lambda k: k.value) == sorted(
        ArgType, key=lambda k: k.value,
    )


@pytest.mark.parametrize(
    ("index", "expected"),
    [
        (0, ArgType.STRING),
        (1, ArgType.INT),
        (2, ArgType.FLOAT),
        (3, ArgType.FILE),
        (4, ArgType.PATH),
        (5, ArgType.OTHER),
    ],
)
def test_arg_type_for_choice_maps_index(
    index: int,
    expected: ArgType,
) -> None:
    """Each menu index maps to its table entry."""
    assert arg_type_for_choice(index) is expected


@pytest.mark.parametrize("index", [-1, 6, 99])
def test_arg_type_for_choice_unknown_index_is_other(index: int) -> None:
    """Indices outside the table default to OTHER."""
    assert arg_type_for_choice(index) is ArgType.OTHER


def test_arg_type_values_are_persisted_tags() -> None:
    """Enum values are the tags stored in whirlwind.toml."""
    assert ArgType("StringArg") is ArgType.STRING
    assert ArgType("PathArg") is ArgType.PATH
    assert ArgType("Other") is ArgType.OTHER


def test_option_parameter_aliases_default_to_none() -> None:
    """Short and long aliases are unset unless given."""
    opt = OptionParameter(name="output", type=ArgType.PATH)
    assert opt.short is None
    assert opt.long is None


def test_command_schema_immutable() -> None:
    """CommandSchema is frozen -- attribute assignment raises."""
    schema = CommandSchema(
        name="pd",
        exec="pipeline-driver",
        positional=(Parameter(name="file", type=ArgType.FILE),),
    )
    with pytest.raises(AttributeError):
        schema.exec = "other"  # type: ignore[misc]


def test_invocation_command_line_joins_unquoted() -> None:
    """Program and args are joined with spaces, no quoting."""
    invocation = Invocation(
        program="pipeline-driver",
        args=("run.mro", "--output=/tmp/my out"),
    )
    assert invocation.to_command_line() == (
        "pipeline-driver run.mro --output=/tmp/my out"
    )


def test_invocation_without_args() -> None:
    """An invocation with no args renders as the program alone."""
    assert Invocation(program="make").to_command_line() == "make"
