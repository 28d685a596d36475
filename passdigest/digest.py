"""Salted password digests.

A secret is concatenated with a random salt and hashed once:
``digest = H(secret || salt)``. Salt and digest are kept as lowercase hex so
the caller can store them next to a user record.

No stretching is applied and no complexity rules are checked; callers are
expected to validate secrets before handing them over.
"""

from __future__ import annotations

import binascii
import hmac
import os
import threading
from dataclasses import dataclass, field
from typing import Any

from passdigest.algorithms import DEFAULT_ALGORITHM, DigestContext
from passdigest.errors import DecodeError, IncorrectSecretError, RandomSourceError

DEFAULT_SALT_LENGTH = 16


def _secret_bytes(secret: str | bytes) -> bytes:
    if isinstance(secret, bytes):
        return secret
    return secret.encode("utf-8")


@dataclass
class CredentialDigest:
    digest_hex: str = ""
    salt_hex: str = ""
    salt_length: int = DEFAULT_SALT_LENGTH
    digest_algorithm: DigestContext = field(default_factory=DigestContext)

    def __post_init__(self) -> None:
        self._lock = threading.Lock()

    def __getstate__(self) -> dict[str, Any]:
        state = dict(self.__dict__)
        state.pop("_lock", None)
        return state

    def __setstate__(self, state: dict[str, Any]) -> None:
        self.__dict__.update(state)
        self._lock = threading.Lock()

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> CredentialDigest:
        algorithm = str(record.get("algorithm") or DEFAULT_ALGORITHM)
        return cls(
            digest_hex=str(record["hash"]),
            salt_hex=str(record["salt"]),
            digest_algorithm=DigestContext.named(algorithm),
        )

    def as_record(self) -> dict[str, str]:
        return {"algorithm": self.digest_algorithm.name, "hash": self.digest_hex, "salt": self.salt_hex}

    def _compute(self, secret: bytes, salt: bytes) -> bytes:
        ctx = self.digest_algorithm
        ctx.reset()
        ctx.feed(secret)
        ctx.feed(salt)
        return ctx.finalize()

    def generate(self, secret: str | bytes) -> None:
        """Pick a fresh random salt and store the digest of ``secret || salt``.

        Overwrites ``salt_hex`` and ``digest_hex``. Raises RandomSourceError
        if the platform cannot provide random bytes.
        """
        if isinstance(self.salt_length, bool) or not isinstance(self.salt_length, int) or self.salt_length <= 0:
            raise ValueError(f"salt_length must be a positive integer, got {self.salt_length!r}")
        try:
            salt = os.urandom(self.salt_length)
        except (OSError, NotImplementedError) as exc:
            raise RandomSourceError("random source unavailable") from exc

        with self._lock:
            digest = self._compute(_secret_bytes(secret), salt)
            self.salt_hex = salt.hex()
            self.digest_hex = digest.hex()

    def verify(self, secret: str | bytes) -> None:
        """Check ``secret`` against the stored digest and salt.

        Returns None on a match. Raises IncorrectSecretError on a mismatch and
        DecodeError when the stored salt is not hex.
        """
        with self._lock:
            salt_hex, digest_hex = self.salt_hex, self.digest_hex
            try:
                salt = binascii.unhexlify(salt_hex)
            except (ValueError, TypeError) as exc:
                raise DecodeError(f"stored salt is not valid hex: {exc}") from exc
            computed = self._compute(_secret_bytes(secret), salt).hex()

        # compare_digest only takes ASCII str; anything else cannot be our hex
        if not digest_hex.isascii() or not hmac.compare_digest(computed, digest_hex):
            raise IncorrectSecretError()


def new() -> CredentialDigest:
    """Empty digest with default salt length and SHA-256. Use with generate()."""
    return CredentialDigest()


def new_checker(digest_hex: str, salt_hex: str) -> CredentialDigest:
    """Digest pre-populated with stored values. Use with verify()."""
    return CredentialDigest(digest_hex=digest_hex, salt_hex=salt_hex)
