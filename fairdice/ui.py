from typing import Callable, Optional

from .errors import InvalidSelection, UserCancellation

EXIT_TOKEN = 'x'
HELP_TOKEN = '?'


def parse_choice(raw: str, option_count: int, allow_help: bool = True) -> str:
    """Validates one prompt token: an option index, the help token or the exit token."""
    choice = raw.strip().lower()
    if choice == EXIT_TOKEN:
        raise UserCancellation()
    if choice == HELP_TOKEN and allow_help:
        return HELP_TOKEN
    if choice.isascii() and choice.isdigit():
        choice_int = int(choice)
        if 0 <= choice_int < option_count:
            return str(choice_int)
    valid = f"a number from 0 to {option_count - 1}"
    if allow_help:
        valid += ", '?'"
    raise InvalidSelection(raw, valid + " or 'X'")


# ==============================================================================
# Console User Interface
# ==============================================================================

class GameUI:
    def __init__(self, input_func: Optional[Callable[[str], str]] = None,
                 output_func: Optional[Callable[[str], None]] = None):
        self._input = input_func or input
        self._output = output_func or print

    def display_message(self, text: str):
        self._output(text)

    def display_key_and_move(self, key: str, move: int, name: str = "My choice"):
        self._output(f"{name}: {move} (KEY={key})")

    def get_user_choice(self, prompt: str, options: list[str], allow_help: bool = True) -> str:
        while True:
            self._output(f"\n{prompt}")
            for i, option in enumerate(options):
                self._output(f" {i} - {option}")

            self._output("\n X - Exit")
            if allow_help:
                self._output(" ? - Help")

            try:
                return parse_choice(self._input("Your choice: "), len(options), allow_help)
            except InvalidSelection as e:
                self._output(str(e))

    def confirm(self, prompt: str) -> bool:
        return self._input(f"\n{prompt} (y/n): ").strip().lower() == 'y'
