import logging
from dataclasses import dataclass
from typing import Callable

from .crypto import CryptoProvider
from .ui import HELP_TOKEN, GameUI

logger = logging.getLogger(__name__)

# (prompt, option labels) -> chosen option index
Decision = Callable[[str, list[str]], int]


@dataclass(frozen=True)
class Party:
    """One side of the game; how it decides is injected, not subclassed."""
    name: str
    decide: Decision
    automated: bool = False

    def choose(self, prompt: str, options: list[str]) -> int:
        index = self.decide(prompt, options)
        logger.debug("%s chose option %d of %d", self.name, index, len(options))
        return index


def random_decision(crypto: CryptoProvider) -> Decision:
    def decide(prompt: str, options: list[str]) -> int:
        return crypto.generate_secure_random(0, len(options) - 1)
    return decide


def prompt_decision(ui: GameUI, show_help: Callable[[], None]) -> Decision:
    def decide(prompt: str, options: list[str]) -> int:
        while True:
            choice = ui.get_user_choice(prompt, options, allow_help=True)
            if choice == HELP_TOKEN:
                show_help()
                continue
            return int(choice)
    return decide


def automated_party(name: str, crypto: CryptoProvider) -> Party:
    return Party(name=name, decide=random_decision(crypto), automated=True)


def interactive_party(name: str, ui: GameUI, show_help: Callable[[], None]) -> Party:
    return Party(name=name, decide=prompt_decision(ui, show_help))
