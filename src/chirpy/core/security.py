"""Password hashing built on bcrypt.

bcrypt embeds its cost factor and salt in the 60 character output, so the
stored value is all that is needed to verify a later login attempt.
"""
from __future__ import annotations

import logging

import bcrypt

from chirpy.core.errors import CredentialError, CredentialMismatchError, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 12
# bcrypt only looks at the first 72 bytes of its input.
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Return a salted bcrypt hash of ``password``.

    Args:
        password: Plaintext password supplied by the caller.
        rounds: bcrypt cost factor (log2 of the iteration count).

    Raises:
        ValidationError: If the password is longer than bcrypt accepts.
    """
    encoded = password.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    hashed = bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=rounds))
    return hashed.decode("ascii")


def verify_password(password: str, password_hash: str) -> bool:
    """Check ``password`` against a stored bcrypt hash.

    Returns:
        True when the password matches.

    Raises:
        CredentialMismatchError: If the password does not match.
        CredentialError: If the stored hash cannot be processed.
    """
    encoded = password.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        # Such a password can never have been hashed by hash_password.
        raise CredentialMismatchError("Incorrect email or password")
    try:
        matched = bcrypt.checkpw(encoded, password_hash.encode("ascii"))
    except (ValueError, UnicodeEncodeError) as err:
        logger.error("Stored password hash could not be processed: %s", err)
        raise CredentialError("Stored password hash is invalid") from err
    if not matched:
        raise CredentialMismatchError("Incorrect email or password")
    return True


__all__ = ["DEFAULT_ROUNDS", "hash_password", "verify_password"]
