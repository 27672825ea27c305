"""Parse chat-style slash commands into commands, sub-commands and typed options."""

from __future__ import annotations

from slashparse.command_parser import is_command, parse, parse_command, parse_sub_commands
from slashparse.errors import (
    CommandParseError,
    EmptyBodyError,
    EmptyContentError,
    InvalidArgumentsError,
    InvalidChoiceError,
    InvalidCommandError,
    InvalidOptionValueError,
    MissingPrefixError,
    MissingRequiredOptionError,
    OptionError,
)
from slashparse.models import (
    Interaction,
    OptionChoice,
    OptionDefinition,
    OptionType,
    OptionValue,
    ParsedCommand,
    SubCommandSplit,
)
from slashparse.options import apply_template, coerce_option_value, flatten_option_definitions, parse_options

__all__ = [
    "CommandParseError",
    "EmptyBodyError",
    "EmptyContentError",
    "Interaction",
    "InvalidArgumentsError",
    "InvalidChoiceError",
    "InvalidCommandError",
    "InvalidOptionValueError",
    "MissingPrefixError",
    "MissingRequiredOptionError",
    "OptionChoice",
    "OptionDefinition",
    "OptionError",
    "OptionType",
    "OptionValue",
    "ParsedCommand",
    "SubCommandSplit",
    "apply_template",
    "coerce_option_value",
    "flatten_option_definitions",
    "is_command",
    "parse",
    "parse_command",
    "parse_options",
    "parse_sub_commands",
]
