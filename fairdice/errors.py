import sys
from typing import Optional

EXAMPLE_DICE = "2,2,4,4,9,9 6,8,1,1,8,6 7,5,3,7,5,3"


class ValidationError(Exception):
    """
    Malformed dice on the command line, reported once before any round starts.

    ``argument`` is the offending command-line argument when a single die is
    at fault, and None when the problem is the argument list as a whole.
    """
    invocation_command = "python"

    def __init__(self, message: str, argument: Optional[str] = None):
        self.message = message
        self.argument = argument
        super().__init__(self.message)

    def __str__(self) -> str:
        script_name = sys.argv[0] if sys.argv else 'game.py'
        lines = [f"\nArgument Error: {self.message}"]
        if self.argument is not None:
            lines.append(f"Offending argument: '{self.argument}'")
        lines += [
            "",
            "Example usage:",
            f"{self.invocation_command} {script_name} {EXAMPLE_DICE}",
            "",
        ]
        return "\n".join(lines)


class InvalidSelection(ValueError):
    def __init__(self, token: str, valid: str):
        self.token = token
        super().__init__(f"Invalid choice {token!r}. Please enter {valid}.")


class UserCancellation(Exception):
    """The user asked to leave the game at a prompt."""


class CommitmentMismatch(Exception):
    """A revealed value does not hash to the HMAC disclosed for it."""

    def __init__(self, key: str, value: int, digest: str):
        self.key = key
        self.value = value
        self.digest = digest
        super().__init__(
            f"Commitment mismatch: HMAC {digest} does not match value {value} under key {key}"
        )
