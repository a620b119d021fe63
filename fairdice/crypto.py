import hashlib
import hmac
import logging
import secrets
from dataclasses import dataclass

from .errors import CommitmentMismatch

logger = logging.getLogger(__name__)

KEY_BYTES = 32


# ==============================================================================
# Cryptographic Operations Provider
# ==============================================================================

class CryptoProvider:
    """
    Key generation, HMAC commitments and uniform draws.

    Keys are 256-bit values encoded as uppercase hex. The HMAC is keyed by
    the decoded key bytes and computed over the decimal form of the value,
    so anyone holding the disclosed key and value can recompute it, e.g.
    ``hmac.new(bytes.fromhex(key), b"3", hashlib.sha256).hexdigest()``.
    """

    @staticmethod
    def generate_key() -> str:
        return secrets.token_hex(KEY_BYTES).upper()

    @staticmethod
    def generate_secure_random(min_value: int, max_value: int) -> int:
        if min_value > max_value:
            raise ValueError(f"Empty range {min_value}..{max_value}")
        return min_value + secrets.randbelow(max_value - min_value + 1)

    @staticmethod
    def calculate_hmac(key: str, value: int) -> str:
        message_bytes = str(value).encode('utf-8')
        h = hmac.new(bytes.fromhex(key), message_bytes, hashlib.sha256)
        return h.hexdigest().upper()

    @classmethod
    def verify_hmac(cls, key: str, value: int, digest: str) -> bool:
        try:
            expected = cls.calculate_hmac(key, value)
        except ValueError:
            # key is not valid hex
            return False
        return hmac.compare_digest(expected, digest.strip().upper())


# ==============================================================================
# Commitments and fair draws
# ==============================================================================

@dataclass(frozen=True)
class Commitment:
    digest: str
    value: int
    key: str

    def verify(self, crypto=CryptoProvider) -> bool:
        return crypto.verify_hmac(self.key, self.value, self.digest)

    def ensure_verified(self, crypto=CryptoProvider) -> None:
        if not self.verify(crypto):
            raise CommitmentMismatch(self.key, self.value, self.digest)


@dataclass(frozen=True)
class FairDraw:
    value: int
    key: str
    hmac: str

    @property
    def commitment(self) -> Commitment:
        return Commitment(digest=self.hmac, value=self.value, key=self.key)


class FairRandomSource:
    def __init__(self, crypto: CryptoProvider):
        self.crypto = crypto

    def draw_fair(self, min_value: int, max_value: int) -> FairDraw:
        """
        Draws a value in [min_value, max_value] and commits to it.

        Only ``hmac`` may be shown to the counterpart until they have made
        their own move; ``value`` and ``key`` are disclosed afterwards.
        """
        value = self.crypto.generate_secure_random(min_value, max_value)
        key = self.crypto.generate_key()
        digest = self.crypto.calculate_hmac(key, value)
        logger.debug("committed to a value in %d..%d (HMAC=%s)", min_value, max_value, digest)
        return FairDraw(value=value, key=key, hmac=digest)


def modulo_sum(committed: int, contribution: int, modulus: int) -> int:
    """Jointly fair index: uniform whenever ``committed`` is uniform and fixed first."""
    return (committed + contribution) % modulus
