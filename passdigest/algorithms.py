from __future__ import annotations

from collections.abc import Callable

from cryptography.hazmat.primitives import hashes

DEFAULT_ALGORITHM = "sha256"

ALGORITHMS: dict[str, Callable[[], hashes.HashAlgorithm]] = {
    "sha224": hashes.SHA224,
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
    "sha3-256": hashes.SHA3_256,
    "sha3-512": hashes.SHA3_512,
    "blake2b": lambda: hashes.BLAKE2b(64),
}


class DigestContext:
    """Reusable hash context: reset, feed bytes, finalize.

    A finalized context has to be reset before it accepts more input.
    """

    def __init__(self, algorithm: hashes.HashAlgorithm | None = None) -> None:
        self.algorithm = algorithm if algorithm is not None else hashes.SHA256()
        self._ctx = hashes.Hash(self.algorithm)

    @classmethod
    def named(cls, name: str) -> DigestContext:
        factory = ALGORITHMS.get(name.strip().lower())
        if factory is None:
            raise ValueError(f"unknown digest algorithm: {name!r} (expected one of {', '.join(sorted(ALGORITHMS))})")
        return cls(factory())

    @property
    def name(self) -> str:
        return self.algorithm.name

    @property
    def digest_size(self) -> int:
        return self.algorithm.digest_size

    def reset(self) -> None:
        self._ctx = hashes.Hash(self.algorithm)

    def feed(self, data: bytes) -> None:
        self._ctx.update(data)

    def finalize(self) -> bytes:
        return self._ctx.finalize()

    # copies and unpickled contexts start from a reset state
    def __getstate__(self) -> dict[str, hashes.HashAlgorithm]:
        return {"algorithm": self.algorithm}

    def __setstate__(self, state: dict[str, hashes.HashAlgorithm]) -> None:
        self.algorithm = state["algorithm"]
        self._ctx = hashes.Hash(self.algorithm)

    def __repr__(self) -> str:
        return f"DigestContext({self.name!r})"
