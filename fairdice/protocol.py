import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .crypto import Commitment, CryptoProvider, FairDraw, FairRandomSource, modulo_sum
from .dice import Die
from .outcome import Outcome, evaluate
from .players import Party
from .ui import GameUI

logger = logging.getLogger(__name__)


class Phase(Enum):
    START = "start"
    DETERMINE_FIRST_MOVE = "determine_first_move"
    ASSIGN_DICE = "assign_dice"
    RESOLVE_THROW_A = "resolve_throw_a"
    RESOLVE_THROW_B = "resolve_throw_b"
    EVALUATE = "evaluate"
    DONE = "done"


@dataclass
class RoundState:
    phase: Phase = Phase.START
    first_mover: Optional[Party] = None
    die_a: Optional[int] = None
    die_b: Optional[int] = None
    throw_a: Optional[int] = None
    throw_b: Optional[int] = None
    outcome: Optional[Outcome] = None
    # every commitment disclosed during the round, in disclosure order
    commitments: list[Commitment] = field(default_factory=list)


# ==============================================================================
# Provably Fair Turn Protocol
# ==============================================================================

class TurnProtocol:
    """
    Plays one round between ``party_a`` and ``party_b``.

    Party A commits to the first-move coin; party B guesses it. Every throw
    uses the modulo-sum construction: one side commits to a number in
    0..faces-1 and shows only its HMAC, the other side adds a number of its
    own, and only then the committed number and its key are revealed. The
    committing side is the thrower unless the thrower is interactive and the
    counterpart is automated, since a person at a prompt cannot publish an
    HMAC before choosing.
    """

    def __init__(self, dice: list[Die], party_a: Party, party_b: Party,
                 crypto: CryptoProvider, ui: GameUI):
        if len(dice) < 2:
            raise ValueError("At least two dice are needed to play a round.")
        self.dice = list(dice)
        self.party_a = party_a
        self.party_b = party_b
        self.crypto = crypto
        self.fair = FairRandomSource(crypto)
        self.ui = ui
        self._steps = {
            Phase.START: self._start,
            Phase.DETERMINE_FIRST_MOVE: self._determine_first_move,
            Phase.ASSIGN_DICE: self._assign_dice,
            Phase.RESOLVE_THROW_A: self._resolve_throw_a,
            Phase.RESOLVE_THROW_B: self._resolve_throw_b,
            Phase.EVALUATE: self._evaluate,
        }

    def play_round(self) -> RoundState:
        state = RoundState()
        while state.phase is not Phase.DONE:
            step = self._steps[state.phase]
            state.phase = step(state)
            logger.debug("round advanced to %s", state.phase.name)
        return state

    def _start(self, state: RoundState) -> Phase:
        return Phase.DETERMINE_FIRST_MOVE

    def _determine_first_move(self, state: RoundState) -> Phase:
        self.ui.display_message("\nLet's determine who makes the first move.")
        draw = self.fair.draw_fair(0, 1)
        self.ui.display_message(
            f"{self.party_a.name} selected a random value in the range 0..1 (HMAC={draw.hmac})."
        )
        guess = self.party_b.choose(f"{self.party_b.name}, try to guess the selection.", ["0", "1"])
        self._reveal(state, draw, f"{self.party_a.name}'s selection")

        state.first_mover = self.party_b if guess == draw.value else self.party_a
        self.ui.display_message(f"{state.first_mover.name} makes the first move.")
        return Phase.ASSIGN_DICE

    def _assign_dice(self, state: RoundState) -> Phase:
        first = state.first_mover
        second = self.party_b if first is self.party_a else self.party_a
        remaining = list(range(len(self.dice)))

        first_index = self._choose_die(first, remaining)
        remaining.remove(first_index)
        second_index = self._choose_die(second, remaining)

        if first is self.party_a:
            state.die_a, state.die_b = first_index, second_index
        else:
            state.die_a, state.die_b = second_index, first_index
        return Phase.RESOLVE_THROW_A

    def _choose_die(self, party: Party, available: list[int]) -> int:
        options = [str(self.dice[i]) for i in available]
        index = available[party.choose(f"{party.name}, choose your dice:", options)]
        self.ui.display_message(f"{party.name} chose the [{self.dice[index]}] dice.")
        return index

    def _resolve_throw_a(self, state: RoundState) -> Phase:
        state.throw_a = self._throw(state, self.party_a, self.party_b, self.dice[state.die_a])
        return Phase.RESOLVE_THROW_B

    def _resolve_throw_b(self, state: RoundState) -> Phase:
        state.throw_b = self._throw(state, self.party_b, self.party_a, self.dice[state.die_b])
        return Phase.EVALUATE

    def _throw(self, state: RoundState, thrower: Party, counterpart: Party, die: Die) -> int:
        committer, contributor = thrower, counterpart
        if not thrower.automated and counterpart.automated:
            committer, contributor = counterpart, thrower

        faces = len(die)
        self.ui.display_message(f"\nIt is time for {thrower.name}'s throw.")
        draw = self.fair.draw_fair(0, faces - 1)
        self.ui.display_message(
            f"{committer.name} selected a random value in the range 0..{faces - 1} (HMAC={draw.hmac})."
        )
        contribution = contributor.choose(
            f"{contributor.name}, add your number modulo {faces}.",
            [str(i) for i in range(faces)],
        )
        self._reveal(state, draw, f"{committer.name}'s number")

        index = modulo_sum(draw.value, contribution, faces)
        self.ui.display_message(
            f"The fair number is {draw.value} + {contribution} = {index} (mod {faces})."
        )
        value = die.face(index)
        self.ui.display_message(f"{thrower.name}'s throw is {value}.")
        return value

    def _reveal(self, state: RoundState, draw: FairDraw, label: str) -> None:
        commitment = draw.commitment
        self.ui.display_key_and_move(draw.key, draw.value, name=label)
        commitment.ensure_verified(self.crypto)
        state.commitments.append(commitment)
        logger.debug("commitment %s verified after reveal", commitment.digest)

    def _evaluate(self, state: RoundState) -> Phase:
        state.outcome = evaluate(state.throw_a, state.throw_b)
        if state.outcome is Outcome.WIN_A:
            winner, high, low = self.party_a, state.throw_a, state.throw_b
        elif state.outcome is Outcome.WIN_B:
            winner, high, low = self.party_b, state.throw_b, state.throw_a
        else:
            self.ui.display_message(f"\nIt's a tie! ({state.throw_a} = {state.throw_b})")
            return Phase.DONE
        self.ui.display_message(f"\n{winner.name} wins! ({high} > {low})")
        return Phase.DONE
