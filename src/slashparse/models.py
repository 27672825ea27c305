"""Shared Pydantic models for parsed commands and option templates."""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field

OptionValue = str | int | float | bool


class OptionType(IntEnum):
    """Declared type of an option definition."""

    sub_command = 1
    string = 2
    integer = 3
    boolean = 4
    number = 5
    attachment = 6


class OptionChoice(BaseModel):
    """Allowed literal value for an option."""

    model_config = ConfigDict(extra="forbid")

    name: str
    value: str | int | float


class OptionDefinition(BaseModel):
    """Declarative schema node for a named option.

    Nested `options` are validated alongside their parent. The numeric and
    length bounds are carried for callers but are not checked when coercing.
    """

    model_config = ConfigDict(extra="forbid")

    name: str
    type: OptionType
    description: str | None = None
    options: list[OptionDefinition] | None = None
    required: bool = False
    min_value: float | None = None
    max_value: float | None = None
    min_length: int | None = None
    max_length: int | None = None
    choices: list[OptionChoice] | None = None


class ParsedCommand(BaseModel):
    """Command token and the text that follows it."""

    model_config = ConfigDict(extra="forbid")

    command: str
    text: str


class SubCommandSplit(BaseModel):
    """Leading sub-command tokens and the text left after them."""

    model_config = ConfigDict(extra="forbid")

    sub_commands: list[str] = Field(default_factory=list)
    remaining: str = ""


class Interaction(BaseModel):
    """Fully parsed slash command."""

    model_config = ConfigDict(extra="forbid")

    command: str
    text: str
    sub_commands: list[str] = Field(default_factory=list)
    options: dict[str, OptionValue] = Field(default_factory=dict)
