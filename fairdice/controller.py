import logging

from .crypto import CryptoProvider
from .dice import Die
from .players import automated_party, interactive_party
from .probability import HelpTableGenerator
from .protocol import TurnProtocol
from .scoreboard import ScoreBoard
from .ui import GameUI

logger = logging.getLogger(__name__)


# ==============================================================================
# Main Game Controller
# ==============================================================================

class GameController:
    def __init__(self, dice: list[Die], ui: GameUI, crypto: CryptoProvider):
        self.all_dice = dice
        self.ui = ui
        self.crypto = crypto
        self.scoreboard = ScoreBoard()
        self.computer = automated_party("Computer", crypto)
        self.user = interactive_party("User", ui, self.show_help)
        self.protocol = TurnProtocol(dice, self.computer, self.user, crypto, ui)

    def show_help(self):
        self.ui.display_message(HelpTableGenerator.generate_table(self.all_dice))

    def run(self):
        self.ui.display_message("--- Welcome to the Non-Transitive Dice Game! ---")
        self.ui.display_message("Dice in play:")
        for i, die in enumerate(self.all_dice):
            self.ui.display_message(f" {i} - [{die}]")
        while True:
            state = self.protocol.play_round()
            self.scoreboard.record(self.computer.name, self.user.name, state.outcome)
            logger.info("round %d finished: %s", self.scoreboard.rounds, state.outcome.name)
            if not self.ui.confirm("Play another round?"):
                break
        self.ui.display_message("\n--- Score ---")
        self.ui.display_message(self.scoreboard.format_table())
        self.ui.display_message("Thanks for playing!")
