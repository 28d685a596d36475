from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from passdigest.algorithms import ALGORITHMS, DEFAULT_ALGORITHM
from passdigest.digest import DEFAULT_SALT_LENGTH

ENV_SALT_LENGTH = "PASSDIGEST_SALT_LENGTH"
ENV_ALGORITHM = "PASSDIGEST_ALGORITHM"
ENV_DEBUG = "PASSDIGEST_DEBUG"

_TRUTHY = {"1", "true", "yes"}


@dataclass(frozen=True)
class DigestSettings:
    salt_length: int = DEFAULT_SALT_LENGTH
    algorithm: str = DEFAULT_ALGORITHM
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DigestSettings:
        env = os.environ if environ is None else environ

        raw_length = env.get(ENV_SALT_LENGTH, "").strip()
        salt_length = DEFAULT_SALT_LENGTH
        if raw_length:
            try:
                salt_length = int(raw_length)
            except ValueError as exc:
                raise ValueError(f"{ENV_SALT_LENGTH} must be an integer, got {raw_length!r}") from exc
            if salt_length <= 0:
                raise ValueError(f"{ENV_SALT_LENGTH} must be positive, got {salt_length}")

        algorithm = env.get(ENV_ALGORITHM, "").strip().lower() or DEFAULT_ALGORITHM
        if algorithm not in ALGORITHMS:
            raise ValueError(f"{ENV_ALGORITHM} names an unknown digest algorithm: {algorithm!r}")

        debug = env.get(ENV_DEBUG, "0").strip().lower() in _TRUTHY
        return cls(salt_length=salt_length, algorithm=algorithm, debug=debug)
