"""Tests for option template models."""

import pytest
from pydantic import ValidationError

from slashparse.models import Interaction, OptionDefinition, OptionType


def test_option_definition_validates_nested_mappings() -> None:
    definition = OptionDefinition.model_validate(
        {
            "name": "add",
            "type": 1,
            "options": [{"name": "item", "type": 2, "required": True}],
        }
    )
    assert definition.type is OptionType.sub_command
    assert definition.options is not None
    assert definition.options[0].type is OptionType.string
    assert definition.options[0].required is True


def test_option_definition_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        OptionDefinition.model_validate({"name": "item", "type": 2, "default": "x"})


def test_option_definition_rejects_unknown_type() -> None:
    with pytest.raises(ValidationError):
        OptionDefinition.model_validate({"name": "item", "type": 9})


def test_interaction_keeps_option_value_types() -> None:
    interaction = Interaction(
        command="todos",
        text="",
        options={"item": "lettuce", "howmany": 2, "price": 1.5, "complete": False},
    )
    assert interaction.sub_commands == []
    assert interaction.options["howmany"] == 2
    assert isinstance(interaction.options["howmany"], int)
    assert interaction.options["complete"] is False
    assert interaction.options["item"] == "lettuce"
