import pytest

from fairdice.dice import DiceParser, Die
from fairdice.errors import ValidationError


def test_accepts_three_six_face_dice() -> None:
    dice = DiceParser.parse(["2,2,4,4,9,9", "6,8,1,1,8,6", "7,5,3,7,5,3"])
    assert [d.faces for d in dice] == [
        (2, 2, 4, 4, 9, 9),
        (6, 8, 1, 1, 8, 6),
        (7, 5, 3, 7, 5, 3),
    ]
    assert str(dice[1]) == "6,8,1,1,8,6"


def test_accepts_negative_faces_and_spaces() -> None:
    dice = DiceParser.parse(["-1,0,1,2,3,4", "1, 1, 1, 1, 1, 1", "5,5,5,5,5,-5"])
    assert dice[0].face(0) == -1
    assert dice[2].faces[-1] == -5


def test_rejects_short_die() -> None:
    with pytest.raises(ValidationError) as exc:
        DiceParser.parse(["1,2,3", "1,2,3,4,5,6", "1,2,3,4,5,6"])
    assert exc.value.argument == "1,2,3"
    assert "Offending argument: '1,2,3'" in str(exc.value)
    assert "Example usage" in str(exc.value)


def test_rejects_fewer_than_three_dice() -> None:
    with pytest.raises(ValidationError):
        DiceParser.parse(["1,2,3,4,5,6", "1,2,3,4,5,6"])


def test_rejects_non_integer_face() -> None:
    with pytest.raises(ValidationError):
        DiceParser.parse(["1,2,3,4,5,x", "1,2,3,4,5,6", "1,2,3,4,5,6"])
    with pytest.raises(ValidationError):
        DiceParser.parse(["1,2,3,4,5,6.5", "1,2,3,4,5,6", "1,2,3,4,5,6"])


def test_die_is_immutable_and_indexed_from_zero() -> None:
    die = Die([3, 1, 4, 1, 5, 9])
    assert die.faces == (3, 1, 4, 1, 5, 9)
    assert die.face(5) == 9
    with pytest.raises(IndexError):
        die.face(6)
    with pytest.raises(IndexError):
        die.face(-1)
    with pytest.raises(AttributeError):
        die.faces = (1,)


def test_rejects_faces_that_are_not_plain_decimal_integers() -> None:
    for face in ("1_0", "٣", "²", "0x1", "+", "1e3", ""):
        args = [f"1,2,3,4,5,{face}", "1,2,3,4,5,6", "1,2,3,4,5,6"]
        with pytest.raises(ValidationError) as exc:
            DiceParser.parse(args)
        assert exc.value.argument == args[0]


def test_accepts_explicit_plus_sign() -> None:
    dice = DiceParser.parse(["+1,2,3,4,5,6", "1,2,3,4,5,6", "1,2,3,4,5,6"])
    assert dice[0].face(0) == 1


def test_whole_list_errors_carry_no_argument() -> None:
    with pytest.raises(ValidationError) as exc:
        DiceParser.parse([])
    assert exc.value.argument is None
    assert "Offending argument" not in str(exc.value)
