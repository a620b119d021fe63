import pytest

from fairdice.errors import InvalidSelection, UserCancellation
from fairdice.players import interactive_party
from fairdice.ui import GameUI, parse_choice

from fakes import ScriptedIO


def test_parse_choice_tokens() -> None:
    assert parse_choice(" 2 ", 3) == "2"
    assert parse_choice("?", 3) == "?"
    with pytest.raises(UserCancellation):
        parse_choice("X", 3)
    with pytest.raises(UserCancellation):
        parse_choice("x", 3, allow_help=False)


def test_parse_choice_rejects_out_of_domain() -> None:
    for raw in ("3", "-1", "one", "", "1.0", "²", "¹", "٣"):
        with pytest.raises(InvalidSelection):
            parse_choice(raw, 3)
    with pytest.raises(InvalidSelection):
        parse_choice("?", 3, allow_help=False)


def test_get_user_choice_reprompts_until_valid() -> None:
    io = ScriptedIO(["7", "abc", "1"])
    ui = GameUI(io.read, io.write)
    assert ui.get_user_choice("Pick", ["a", "b"]) == "1"
    assert sum(1 for line in io.lines if line.startswith("Invalid choice")) == 2
    assert io.inputs == []


def test_get_user_choice_reprompts_on_unicode_digits() -> None:
    io = ScriptedIO(["²", "٣", "1"])
    ui = GameUI(io.read, io.write)
    assert ui.get_user_choice("Pick", ["a", "b"]) == "1"
    assert sum(1 for line in io.lines if line.startswith("Invalid choice")) == 2


def test_interactive_party_shows_help_and_returns_to_prompt() -> None:
    io = ScriptedIO(["?", "?", "9", "0"])
    ui = GameUI(io.read, io.write)
    calls = []
    party = interactive_party("User", ui, lambda: calls.append(1))
    assert party.choose("Try to guess", ["0", "1"]) == 0
    assert len(calls) == 2
    assert sum(1 for line in io.lines if "Try to guess" in line) == 4


def test_confirm() -> None:
    io = ScriptedIO(["Y", "no"])
    ui = GameUI(io.read, io.write)
    assert ui.confirm("Again?")
    assert not ui.confirm("Again?")
