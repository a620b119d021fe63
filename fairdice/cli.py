import logging
import os
import sys
from typing import Optional

from .controller import GameController
from .crypto import CryptoProvider
from .dice import DiceParser
from .errors import CommitmentMismatch, UserCancellation, ValidationError
from .ui import GameUI

LOG_LEVEL_ENV = "FAIRDICE_LOG_LEVEL"

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_VERIFY_FAILED = 2
EXIT_INTEGRITY_ERROR = 3


def configure_logging() -> None:
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def verify(args: list[str]) -> int:
    """``verify KEY VALUE HMAC``: recompute a disclosed HMAC."""
    if len(args) != 3:
        print("Usage: verify KEY VALUE HMAC", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    key, value, digest = args
    try:
        value_int = int(value)
    except ValueError:
        print(f"VALUE must be an integer, got {value!r}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    if CryptoProvider.verify_hmac(key, value_int, digest):
        print(f"OK: HMAC matches value {value_int}.")
        return EXIT_OK
    print(f"MISMATCH: HMAC does not match value {value_int} under the given key.")
    return EXIT_VERIFY_FAILED


def main(argv: Optional[list[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    configure_logging()

    if 'py.exe' in sys.executable.lower():
        ValidationError.invocation_command = 'py'

    if args and args[0] == "verify":
        return verify(args[1:])

    try:
        dice = DiceParser.parse(args)
        controller = GameController(dice, GameUI(), CryptoProvider())
        controller.run()
    except ValidationError as e:
        print(e, file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except UserCancellation:
        print("Exiting game. Goodbye!")
    except (KeyboardInterrupt, EOFError):
        print("\nGame interrupted. Goodbye!")
    except CommitmentMismatch as e:
        logging.getLogger(__name__).error("protocol integrity failure: %s", e)
        print(f"\nProtocol integrity failure: {e}", file=sys.stderr)
        return EXIT_INTEGRITY_ERROR
    return EXIT_OK
