"""Tests for environment-driven parser settings."""

from collections.abc import Iterator

import pytest
from pydantic import ValidationError

from slashparse.command_parser import is_command, parse, parse_command, parse_sub_commands
from slashparse.config import Settings, get_settings


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_default_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SLASHPARSE_COMMAND_PREFIX", raising=False)
    monkeypatch.delenv("SLASHPARSE_MAX_SUB_COMMANDS", raising=False)
    settings = get_settings()
    assert settings.command_prefix == "/"
    assert settings.max_sub_commands == 2


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_prefix_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SLASHPARSE_COMMAND_PREFIX", "!")
    assert is_command("!ping") is True
    assert is_command("/ping") is False
    assert parse_command("!ping now").command == "ping"


def test_explicit_prefix_overrides_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SLASHPARSE_COMMAND_PREFIX", "!")
    assert parse_command("/ping", prefix="/").command == "ping"


def test_max_sub_commands_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SLASHPARSE_MAX_SUB_COMMANDS", "3")
    assert parse_sub_commands("a b c d").sub_commands == ["a", "b", "c"]
    assert parse("/todos add shopping list item: milk").sub_commands == ["add", "shopping", "list"]


def test_prefix_must_be_single_character(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SLASHPARSE_COMMAND_PREFIX", "!!")
    with pytest.raises(ValidationError):
        Settings()


def test_max_sub_commands_must_not_be_negative(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SLASHPARSE_MAX_SUB_COMMANDS", "-1")
    with pytest.raises(ValidationError):
        Settings()
