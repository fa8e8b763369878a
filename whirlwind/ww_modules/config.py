"""Load and save the workspace registry as whirlwind.toml.

The TOML document is validated through pydantic records at the
boundary, then converted to the frozen domain dataclasses. Reads
and writes go through io_ops.
"""
from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any

import tomlkit
from pydantic import BaseModel, ConfigDict, ValidationError, model_validator
from returns.io import IOFailure, IOResult, IOSuccess
from returns.unsafe import unsafe_perform_io
from tomlkit.exceptions import TOMLKitError

from whirlwind.ww_modules import io_ops
from whirlwind.ww_modules.commands.registry import Registry
from whirlwind.ww_modules.errors import WhirlwindError
from whirlwind.ww_modules.types import (
    ArgType,
    CommandSchema,
    OptionParameter,
    Parameter,
)

CONFIG_FILE_NAME = "whirlwind.toml"


class ArgRecord(BaseModel):
    """Persisted positional parameter."""

    model_config = ConfigDict(frozen=True)

    name: str
    ty: ArgType = ArgType.OTHER


class OptionRecord(BaseModel):
    """Persisted named option."""

    model_config = ConfigDict(frozen=True)

    name: str
    short: str | None = None
    long: str | None = None
    ty: ArgType = ArgType.OTHER


class CommandRecord(BaseModel):
    """Persisted command schema."""

    model_config = ConfigDict(frozen=True)

    name: str
    exec: str
    args: list[ArgRecord] = []
    options: list[OptionRecord] = []


class EnvRecord(BaseModel):
    """Persisted environment variable binding."""

    model_config = ConfigDict(frozen=True)

    value: str


class WorkspaceRecord(BaseModel):
    """Persisted workspace location."""

    model_config = ConfigDict(frozen=True)

    directory: str


class ConfigDocument(BaseModel):
    """Whole whirlwind.toml document."""

    model_config = ConfigDict(frozen=True)

    workspace: WorkspaceRecord
    environment: dict[str, EnvRecord] = {}
    commands: dict[str, CommandRecord] = {}

    @model_validator(mode="after")
    def _command_keys_match_names(self) -> ConfigDocument:
        for key, record in self.commands.items():
            if key != record.name:
                msg = (
                    f"command table '{key}' holds a command named"
                    f" '{record.name}'"
                )
                raise ValueError(msg)
        return self


def config_path(directory: Path) -> Path:
    """Return the config file location for a workspace directory."""
    return directory / CONFIG_FILE_NAME


# --- Record <-> domain conversion ---


def schema_from_record(record: CommandRecord) -> CommandSchema:
    """Convert a persisted command record to a CommandSchema."""
    return CommandSchema(
        name=record.name,
        exec=record.exec,
        positional=tuple(
            Parameter(name=arg.name, type=arg.ty) for arg in record.args
        ),
        options=tuple(
            OptionParameter(
                name=opt.name,
                type=opt.ty,
                short=opt.short,
                long=opt.long,
            )
            for opt in record.options
        ),
    )


def schema_to_record(schema: CommandSchema) -> CommandRecord:
    """Convert a CommandSchema to its persisted record."""
    return CommandRecord(
        name=schema.name,
        exec=schema.exec,
        args=[
            ArgRecord(name=param.name, ty=param.type)
            for param in schema.positional
        ],
        options=[
            OptionRecord(
                name=opt.name,
                short=opt.short,
                long=opt.long,
                ty=opt.type,
            )
            for opt in schema.options
        ],
    )


def registry_from_document(document: ConfigDocument) -> Registry:
    """Build a Registry from a validated document."""
    return Registry(
        directory=Path(document.workspace.directory),
        commands={
            key: schema_from_record(record)
            for key, record in document.commands.items()
        },
        environment={
            key: record.value for key, record in document.environment.items()
        },
    )


def registry_to_document(registry: Registry) -> ConfigDocument:
    """Build a persistable document from a Registry."""
    return ConfigDocument(
        workspace=WorkspaceRecord(directory=str(registry.directory)),
        environment={
            key: EnvRecord(value=value)
            for key, value in registry.environment.items()
        },
        commands={
            key: schema_to_record(schema)
            for key, schema in registry.commands.items()
        },
    )


# --- TOML text ---


def parse_config(
    text: str,
    *,
    source: Path | None = None,
) -> IOResult[Registry, WhirlwindError]:
    """Parse whirlwind.toml text into a Registry."""
    where = str(source) if source is not None else "<string>"
    try:
        raw: dict[str, Any] = tomlkit.parse(text).unwrap()
    except TOMLKitError as exc:
        return IOFailure(
            WhirlwindError(
                operation="config.parse_config",
                error_type="ConfigParseError",
                message=f"Invalid TOML in {where}: {exc}",
                context={"path": where},
            ),
        )
    try:
        document = ConfigDocument.model_validate(raw)
    except ValidationError as exc:
        return IOFailure(
            WhirlwindError(
                operation="config.parse_config",
                error_type="ConfigValidationError",
                message=f"Invalid whirlwind config in {where}",
                context={
                    "path": where,
                    "errors": [err["msg"] for err in exc.errors()],
                },
            ),
        )
    return IOSuccess(registry_from_document(document))


def dump_config(registry: Registry) -> str:
    """Render a Registry as whirlwind.toml text.

    Unset option aliases are left out of the output.
    """
    document = registry_to_document(registry)
    data = document.model_dump(mode="json", exclude_none=True)
    # Non-empty parameter lists render as [[...]] tables and must
    # follow every plain key of their command table.
    for command in data["commands"].values():
        for key in ("args", "options"):
            if command[key]:
                command[key] = command.pop(key)
    return tomlkit.dumps(data)


# --- Files ---


def load_registry(directory: Path) -> IOResult[Registry, WhirlwindError]:
    """Read and parse the config file in directory.

    The registry is bound to directory, whatever workspace path the file
    recorded, so a later save rewrites the file that was read.
    """
    path = config_path(directory)
    read_result = io_ops.read_file(path)
    if isinstance(read_result, IOFailure):
        return read_result
    return parse_config(
        unsafe_perform_io(read_result.unwrap()),
        source=path,
    ).map(lambda registry: replace(registry, directory=directory))


def save_registry(registry: Registry) -> IOResult[Path, WhirlwindError]:
    """Write registry to the config file in its workspace directory."""
    return io_ops.write_file(
        config_path(registry.directory),
        dump_config(registry),
    )
