import re
from dataclasses import dataclass

from .errors import ValidationError

FACES_PER_DIE = 6
MIN_DICE = 3

FACE_PATTERN = re.compile(r"[+-]?[0-9]+")


# ==============================================================================
# Data Structure for a Die
# ==============================================================================

@dataclass(frozen=True)
class Die:
    faces: tuple[int, ...]

    def __post_init__(self):
        if not self.faces:
            raise ValueError("A die must have at least one face.")
        object.__setattr__(self, "faces", tuple(self.faces))

    def face(self, index: int) -> int:
        if not 0 <= index < len(self.faces):
            raise IndexError(f"Face index {index} out of range 0..{len(self.faces) - 1}")
        return self.faces[index]

    def __str__(self) -> str:
        return ",".join(map(str, self.faces))

    def __len__(self) -> int:
        return len(self.faces)


# ==============================================================================
# Command-Line Argument Parser
# ==============================================================================

class DiceParser:
    @staticmethod
    def parse(args: list[str]) -> list[Die]:
        if len(args) < MIN_DICE:
            raise ValidationError(f"Please specify at least {MIN_DICE} dice, got {len(args)}.")
        return [DiceParser.parse_die(arg) for arg in args]

    @staticmethod
    def parse_die(arg: str) -> Die:
        parts = [p.strip() for p in arg.split(',')]
        if len(parts) != FACES_PER_DIE:
            raise ValidationError(
                f"Each dice must have exactly {FACES_PER_DIE} faces, got {len(parts)}.", argument=arg
            )
        bad = [p for p in parts if not FACE_PATTERN.fullmatch(p)]
        if bad:
            raise ValidationError(
                f"All dice faces must be plain decimal integers, got '{bad[0]}'.", argument=arg
            )
        return Die(tuple(int(p) for p in parts))
