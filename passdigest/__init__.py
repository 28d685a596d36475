from .algorithms import DigestContext
from .digest import DEFAULT_SALT_LENGTH, CredentialDigest, new, new_checker
from .errors import CredentialDigestError, DecodeError, IncorrectSecretError, RandomSourceError

__all__ = [
    "CredentialDigest",
    "DigestContext",
    "DEFAULT_SALT_LENGTH",
    "new",
    "new_checker",
    "CredentialDigestError",
    "IncorrectSecretError",
    "DecodeError",
    "RandomSourceError",
]
