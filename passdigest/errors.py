from __future__ import annotations


class CredentialDigestError(Exception):
    """Base class for every error raised by passdigest."""


class IncorrectSecretError(CredentialDigestError):
    """Raised when a candidate secret does not match the stored digest."""

    def __init__(self, message: str = "incorrect password") -> None:
        super().__init__(message)


class DecodeError(CredentialDigestError, ValueError):
    """Raised when a stored salt is not valid hexadecimal."""


class RandomSourceError(CredentialDigestError):
    """Raised when the platform random source cannot supply salt bytes."""
