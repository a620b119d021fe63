from dataclasses import dataclass, field

from tabulate import tabulate

from .outcome import Outcome


@dataclass
class Score:
    wins: int = 0
    losses: int = 0
    ties: int = 0


@dataclass
class ScoreBoard:
    """Per-session tally; nothing is written to disk."""
    _scores: dict[str, Score] = field(default_factory=dict)

    def record(self, name_a: str, name_b: str, outcome: Outcome) -> None:
        score_a = self._scores.setdefault(name_a, Score())
        score_b = self._scores.setdefault(name_b, Score())
        if outcome is Outcome.WIN_A:
            score_a.wins += 1
            score_b.losses += 1
        elif outcome is Outcome.WIN_B:
            score_b.wins += 1
            score_a.losses += 1
        else:
            score_a.ties += 1
            score_b.ties += 1

    def get(self, name: str) -> Score:
        return self._scores.get(name, Score())

    @property
    def rounds(self) -> int:
        return max((s.wins + s.losses + s.ties for s in self._scores.values()), default=0)

    def format_table(self) -> str:
        if not self._scores:
            return "(no rounds played)"
        rows = [[name, s.wins, s.losses, s.ties] for name, s in self._scores.items()]
        return tabulate(rows, headers=["Player", "Wins", "Losses", "Ties"], tablefmt="grid")
