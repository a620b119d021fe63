from enum import Enum


class Outcome(Enum):
    WIN_A = "win_a"
    WIN_B = "win_b"
    TIE = "tie"


def evaluate(throw_a: int, throw_b: int) -> Outcome:
    if throw_a > throw_b:
        return Outcome.WIN_A
    if throw_b > throw_a:
        return Outcome.WIN_B
    return Outcome.TIE
