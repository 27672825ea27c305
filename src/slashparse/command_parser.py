"""Slash command parsing for chat messages."""

from __future__ import annotations

import logging
import re

from slashparse.config import get_settings
from slashparse.errors import (
    CommandParseError,
    EmptyBodyError,
    EmptyContentError,
    InvalidCommandError,
    MissingPrefixError,
)
from slashparse.models import Interaction, ParsedCommand, SubCommandSplit
from slashparse.options import TemplateInput, parse_options

logger = logging.getLogger(__name__)

_COMMAND_PATTERN = re.compile(r"^\S+")
_OPTION_MARKER = ":"


def is_command(content: str) -> bool:
    """Check whether text is a slash command."""
    try:
        parse_command(content)
    except CommandParseError as exc:
        logger.debug("Not a command: %s", exc)
        return False
    return True


def parse_command(content: str, prefix: str | None = None) -> ParsedCommand:
    """Split a slash command into its command token and trailing text.

    The prefix match ignores case. Raises a CommandParseError subclass if the
    text is empty, lacks the prefix, or has nothing after it.
    """
    if not content:
        raise EmptyContentError()

    prefix = prefix if prefix is not None else get_settings().command_prefix
    if not content.casefold().startswith(prefix.casefold()):
        raise MissingPrefixError()

    body = content[len(prefix) :].strip()
    if not body:
        raise EmptyBodyError()

    match = _COMMAND_PATTERN.match(body)
    if match is None:
        raise InvalidCommandError()

    command = match.group(0)
    return ParsedCommand(command=command, text=body[len(command) :].strip())


def parse_sub_commands(content: str, max_sub_commands: int | None = None) -> SubCommandSplit:
    """Peel leading bare tokens off text as sub-commands.

    Stops after `max_sub_commands` tokens or at the first token ending in a
    colon, whichever comes first.
    """
    limit = max_sub_commands if max_sub_commands is not None else get_settings().max_sub_commands
    args = content.split()

    sub_commands: list[str] = []
    while args and len(sub_commands) < limit:
        if args[0].endswith(_OPTION_MARKER):
            break
        sub_commands.append(args.pop(0))

    return SubCommandSplit(sub_commands=sub_commands, remaining=" ".join(args))


def parse(content: str, template: TemplateInput | None = None) -> Interaction:
    """Parse a full slash command into an Interaction.

    `text` keeps everything after the command token, including the
    sub-commands and options that were derived from it.
    """
    parsed = parse_command(content)
    split = parse_sub_commands(parsed.text)
    options = parse_options(split.remaining, template)
    logger.debug(
        "Parsed command: command=%s sub_commands=%s options=%s",
        parsed.command,
        split.sub_commands,
        sorted(options),
    )
    return Interaction(
        command=parsed.command,
        text=parsed.text,
        sub_commands=split.sub_commands,
        options=options,
    )
