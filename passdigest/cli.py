from __future__ import annotations

import argparse
import getpass
import json
import os
import sys
import traceback

from passdigest.algorithms import ALGORITHMS, DigestContext
from passdigest.config import DigestSettings
from passdigest.digest import CredentialDigest
from passdigest.errors import CredentialDigestError, DecodeError, IncorrectSecretError

EXIT_OK = 0
EXIT_INCORRECT = 1
EXIT_FAILURE = 2


def _emit(payload: dict) -> None:
    print(json.dumps(payload))


def _fail(message: str, debug: bool) -> int:
    if debug:
        print(traceback.format_exc(), file=sys.stderr)
    print(f"passdigest: {message}", file=sys.stderr)
    return EXIT_FAILURE


def _read_secret(args: argparse.Namespace, prompt: str) -> str | bytes:
    if args.secret is not None:
        # argv keeps undecodable bytes as surrogates; hash the original bytes
        return os.fsencode(args.secret)
    return getpass.getpass(prompt)


def cmd_generate(args: argparse.Namespace, settings: DigestSettings) -> int:
    h = CredentialDigest(
        salt_length=args.salt_length if args.salt_length is not None else settings.salt_length,
        digest_algorithm=DigestContext.named(args.algorithm or settings.algorithm),
    )
    secret = _read_secret(args, "Password: ")
    try:
        h.generate(secret)
    except CredentialDigestError as exc:
        return _fail(str(exc), settings.debug)
    _emit(h.as_record())
    return EXIT_OK


def cmd_verify(args: argparse.Namespace, settings: DigestSettings) -> int:
    h = CredentialDigest(
        digest_hex=args.hash,
        salt_hex=args.salt,
        digest_algorithm=DigestContext.named(args.algorithm or settings.algorithm),
    )
    secret = _read_secret(args, "Password: ")
    try:
        h.verify(secret)
    except IncorrectSecretError:
        _emit({"status": "error", "error": "incorrect_password"})
        return EXIT_INCORRECT
    except DecodeError:
        if settings.debug:
            print(traceback.format_exc(), file=sys.stderr)
        _emit({"status": "error", "error": "invalid_salt"})
        return EXIT_FAILURE
    _emit({"status": "ok"})
    return EXIT_OK


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if n <= 0:
        raise argparse.ArgumentTypeError("must be positive")
    return n


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="passdigest", description="Salted password digests.")
    sub = p.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Hash a password with a fresh random salt")
    gen.add_argument("--secret", default=None, help="Password to hash (prompted for when omitted)")
    gen.add_argument("--salt-length", type=_positive_int, default=None)
    gen.add_argument("--algorithm", type=str.lower, choices=sorted(ALGORITHMS), default=None)
    gen.set_defaults(func=cmd_generate)

    ver = sub.add_parser("verify", help="Check a password against a stored hash and salt")
    ver.add_argument("--hash", required=True)
    ver.add_argument("--salt", required=True)
    ver.add_argument("--secret", default=None, help="Password to check (prompted for when omitted)")
    ver.add_argument("--algorithm", type=str.lower, choices=sorted(ALGORITHMS), default=None)
    ver.set_defaults(func=cmd_verify)
    return p


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = DigestSettings.from_env()
    except ValueError as exc:
        raise SystemExit(_fail(str(exc), False))
    raise SystemExit(args.func(args, settings))
