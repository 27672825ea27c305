"""Named option tokenizing and template-driven coercion."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from typing import Any

from slashparse.errors import (
    InvalidArgumentsError,
    InvalidChoiceError,
    InvalidOptionValueError,
    MissingRequiredOptionError,
)
from slashparse.models import OptionDefinition, OptionType, OptionValue

logger = logging.getLogger(__name__)

TemplateInput = OptionDefinition | Mapping[str, Any] | Sequence[OptionDefinition | Mapping[str, Any]]

_NAME_MARKER = ":"


def parse_options(content: str, template: TemplateInput | None = None) -> dict[str, OptionValue]:
    """Parse `name: value` pairs from option text.

    Every token ending in a colon opens a new option; the tokens after it up
    to the next marker form its value. When a template is given, values are
    coerced and validated against it.

    Raises InvalidArgumentsError if a value token appears before any marker.
    """
    options: dict[str, OptionValue] = {}
    current_name = ""
    current_value: list[str] = []

    for token in content.split():
        if token.endswith(_NAME_MARKER):
            if current_name:
                options[current_name] = " ".join(current_value)
                current_value = []
            current_name = token[: -len(_NAME_MARKER)]
        elif current_name:
            current_value.append(token)
        else:
            raise InvalidArgumentsError(token)

    if current_name:
        options[current_name] = " ".join(current_value)

    if template is not None:
        return apply_template(options, template)
    return options


def apply_template(options: Mapping[str, OptionValue], template: TemplateInput) -> dict[str, OptionValue]:
    """Coerce raw option values using one or more option definitions.

    Options without a matching definition are passed through untouched and
    absent optional definitions are left absent.
    """
    result = dict(options)
    for definition in flatten_option_definitions(_normalize_template(template)):
        name = definition.name
        if name not in result:
            if definition.required:
                raise MissingRequiredOptionError(name)
            continue

        value = coerce_option_value(str(result[name]), definition.type, option_name=name)
        if definition.choices is not None:
            allowed = [choice.value for choice in definition.choices]
            if not any(_matches_choice(value, candidate) for candidate in allowed):
                raise InvalidChoiceError(name, value, allowed)
        result[name] = value
    return result


def flatten_option_definitions(definitions: Sequence[OptionDefinition]) -> list[OptionDefinition]:
    """Flatten a definition tree, parents before children, without nested options."""
    flat: list[OptionDefinition] = []
    for definition in definitions:
        flat.append(definition.model_copy(update={"options": None}))
        if definition.options:
            flat.extend(flatten_option_definitions(definition.options))
    return flat


def coerce_option_value(value: str, option_type: OptionType, *, option_name: str = "value") -> OptionValue:
    """Convert a raw option string to the declared type.

    Booleans are literal: only "true" is True. Sub-command definitions do not
    describe a value, so supplying one fails.

    Raises InvalidOptionValueError if the value does not fit the type.
    """
    if option_type in (OptionType.string, OptionType.attachment):
        return value
    if option_type == OptionType.boolean:
        return value == "true"
    if option_type == OptionType.integer:
        return _parse_integer(value, option_name)
    if option_type == OptionType.number:
        return _parse_number(value, option_name)
    raise InvalidOptionValueError(option_name, value)


def _normalize_template(template: TemplateInput) -> list[OptionDefinition]:
    """Turn a single definition, a mapping, or a sequence into validated definitions."""
    items = [template] if isinstance(template, (OptionDefinition, Mapping)) else list(template)
    return [item if isinstance(item, OptionDefinition) else OptionDefinition.model_validate(item) for item in items]


def _parse_number(value: str, option_name: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise InvalidOptionValueError(option_name, value) from None
    if not math.isfinite(number):
        raise InvalidOptionValueError(option_name, value)
    return number


def _parse_integer(value: str, option_name: str) -> int:
    try:
        return int(value)
    except ValueError:
        pass
    number = _parse_number(value, option_name)
    if not number.is_integer():
        logger.debug("Rejected non-integral value for %s: %r", option_name, value)
        raise InvalidOptionValueError(option_name, value)
    return int(number)


def _matches_choice(value: OptionValue, candidate: str | int | float) -> bool:
    # bool is an int subclass; keep True from matching 1.
    if isinstance(value, bool) or isinstance(candidate, bool):
        return False
    return value == candidate
