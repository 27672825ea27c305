"""Errors raised while parsing slash commands."""

from __future__ import annotations

from typing import Any


class CommandParseError(ValueError):
    """Base error for every parsing failure."""


class EmptyContentError(CommandParseError):
    """Raised when the input text is empty."""

    def __init__(self) -> None:
        super().__init__("no content")


class MissingPrefixError(CommandParseError):
    """Raised when the input does not start with the command prefix."""

    def __init__(self) -> None:
        super().__init__("no prefix (not a command)")


class EmptyBodyError(CommandParseError):
    """Raised when nothing follows the command prefix."""

    def __init__(self) -> None:
        super().__init__("no body after prefix")


class InvalidCommandError(CommandParseError):
    """Raised when no command token follows the prefix."""

    def __init__(self) -> None:
        super().__init__("invalid command")


class InvalidArgumentsError(CommandParseError):
    """Raised when option text appears before any `name:` marker."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid arguments: {token}")
        self.token = token


class OptionError(CommandParseError):
    """Base error for failures tied to a single named option."""

    def __init__(self, message: str, option_name: str) -> None:
        super().__init__(message)
        self.option_name = option_name


class MissingRequiredOptionError(OptionError):
    """Raised when a required option has no supplied value."""

    def __init__(self, option_name: str) -> None:
        super().__init__(f"missing required option: {option_name}", option_name)


class InvalidOptionValueError(OptionError):
    """Raised when a value cannot be coerced to its declared type."""

    def __init__(self, option_name: str, value: str) -> None:
        super().__init__(f"Invalid option {option_name}: {value}", option_name)
        self.value = value


class InvalidChoiceError(OptionError):
    """Raised when a coerced value is not one of the declared choices."""

    def __init__(self, option_name: str, value: Any, allowed: list[Any]) -> None:
        choices = ", ".join(str(item) for item in allowed)
        super().__init__(
            f"Option value {option_name}: {value} is not one of the choices [{choices}]",
            option_name,
        )
        self.value = value
        self.allowed = allowed
