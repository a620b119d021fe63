from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from fractions import Fraction

from tabulate import tabulate

from .dice import Die

PRECISION = Decimal("0.0001")


# ==============================================================================
# Probability Calculation Logic
# ==============================================================================

class ProbabilityCalculator:
    @staticmethod
    def count_wins(die1: Die, die2: Die) -> int:
        return sum(1 for f1 in die1.faces for f2 in die2.faces if f1 > f2)

    @staticmethod
    def win_fraction(die1: Die, die2: Die) -> Fraction:
        return Fraction(ProbabilityCalculator.count_wins(die1, die2), len(die1) * len(die2))


@dataclass(frozen=True)
class ProbabilityCell:
    wins: int
    total: int
    diagonal: bool = False

    @property
    def fraction(self) -> Fraction:
        return Fraction(self.wins, self.total)

    @property
    def probability(self) -> Decimal:
        exact = Decimal(self.wins) / Decimal(self.total)
        return exact.quantize(PRECISION, rounding=ROUND_HALF_UP)

    def __str__(self) -> str:
        if self.diagonal:
            return f"- ({self.probability})"
        return str(self.probability)


class ProbabilityMatrix:
    """
    Win probabilities of every die (rows) against every die (columns).

    ``matrix[i][j]`` is the share of face pairs where die ``i`` shows the
    higher face. The diagonal is computed like any other cell but flagged,
    since a die never plays against itself.
    """

    def __init__(self, dice: list[Die], cells: list[list[ProbabilityCell]]):
        self.dice = list(dice)
        self._cells = cells

    @classmethod
    def compute(cls, dice: list[Die]) -> "ProbabilityMatrix":
        cells = [
            [
                ProbabilityCell(
                    wins=ProbabilityCalculator.count_wins(row_die, col_die),
                    total=len(row_die) * len(col_die),
                    diagonal=i == j,
                )
                for j, col_die in enumerate(dice)
            ]
            for i, row_die in enumerate(dice)
        ]
        return cls(dice, cells)

    @property
    def size(self) -> int:
        return len(self.dice)

    def __getitem__(self, index: int) -> list[ProbabilityCell]:
        return self._cells[index]

    def render(self) -> str:
        headers = ["User dice v"] + [str(d) for d in self.dice]
        rows = [[str(die)] + [str(cell) for cell in self._cells[i]] for i, die in enumerate(self.dice)]
        return tabulate(rows, headers=headers, tablefmt="grid", disable_numparse=True)


# ==============================================================================
# Help Table Generation
# ==============================================================================

class HelpTableGenerator:
    @staticmethod
    def generate_table(all_dice: list[Die]) -> str:
        intro = (
            "\n--- Win Probability Table ---\n"
            "Probability of the User's dice (rows) winning against the other dice (columns).\n"
            "Diagonal cells, marked '- (...)', compare a dice with itself and are not a real contest.\n"
        )
        return intro + ProbabilityMatrix.compute(all_dice).render()
