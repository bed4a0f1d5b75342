"""Signed access tokens and opaque refresh tokens.

Access tokens are HS256 JWTs carrying ``iss``, ``sub`` (the account id as a
string), ``iat`` and ``exp``. Refresh tokens are 256-bit random hex strings
kept in the snapshot's ``refresh_tokens`` map, each pointing at the access
token it currently authorizes.
"""
from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from jose import JWTError, jwt

from chirpy.core.errors import AuthenticationError, RefreshTokenNotFoundError
from chirpy.db.time import Clock, to_timestamp, utcnow
from chirpy.models.snapshot import Snapshot

__all__ = ["ISSUER", "REFRESH_TOKEN_BYTES", "TokenPair", "TokenService"]

logger = logging.getLogger(__name__)

ISSUER = "chirpy"
REFRESH_TOKEN_BYTES = 32


@dataclass(frozen=True)
class TokenPair:
    """Access token plus the refresh token that can renew it."""

    access_token: str
    refresh_token: str


class TokenService:
    """Issue and verify credentials with a single symmetric secret."""

    def __init__(
        self,
        secret_key: str | bytes,
        *,
        algorithm: str = "HS256",
        clock: Clock = utcnow,
    ) -> None:
        self._secret_key = secret_key
        self.algorithm = algorithm
        self._clock = clock

    def issue_access_token(self, subject_id: int, expires_in_seconds: int) -> str:
        """Return a signed access token for ``subject_id``."""
        issued_at = self._clock()
        expires_at = issued_at + timedelta(seconds=expires_in_seconds)
        claims: dict[str, Any] = {
            "iss": ISSUER,
            "sub": str(subject_id),
            "iat": to_timestamp(issued_at),
            "exp": to_timestamp(expires_at),
        }
        encoded: str = jwt.encode(claims, self._secret_key, algorithm=self.algorithm)
        return encoded

    def verify_access_token(self, token: str) -> int:
        """Return the account id asserted by a valid, unexpired token.

        Raises:
            AuthenticationError: If the token is malformed, carries a bad
                signature or issuer, lacks a usable subject or has expired.
        """
        claims = self._decode(token)
        expires_at = claims.get("exp")
        if isinstance(expires_at, bool) or not isinstance(expires_at, int | float):
            raise AuthenticationError("Token has no expiry")
        if to_timestamp(self._clock()) >= expires_at:
            raise AuthenticationError("Token has expired")
        return self._subject(claims)

    def subject_from_signature(self, token: str) -> int:
        """Return the account id of a correctly signed token, expired or not."""
        return self._subject(self._decode(token))

    def new_refresh_token(self) -> str:
        """Return a fresh random refresh token (64 lowercase hex characters)."""
        return secrets.token_hex(REFRESH_TOKEN_BYTES)

    def issue_refresh_pair(
        self,
        snapshot: Snapshot,
        subject_id: int,
        expires_in_seconds: int,
    ) -> TokenPair:
        """Mint an access/refresh pair and record it in ``snapshot``."""
        access_token = self.issue_access_token(subject_id, expires_in_seconds)
        refresh_token = self.new_refresh_token()
        snapshot.refresh_tokens[refresh_token] = access_token
        return TokenPair(access_token=access_token, refresh_token=refresh_token)

    def refresh(self, snapshot: Snapshot, refresh_token: str, expires_in_seconds: int) -> str:
        """Rotate the access token stored under ``refresh_token``.

        The subject comes from the stored access token, so the refresh token is
        the only credential the caller has to present.

        Raises:
            RefreshTokenNotFoundError: If the refresh token is unknown or revoked.
            AuthenticationError: If the stored access token fails verification.
        """
        stored = snapshot.refresh_tokens.get(refresh_token)
        if stored is None:
            raise RefreshTokenNotFoundError("Refresh token not found")
        subject_id = self.subject_from_signature(stored)
        access_token = self.issue_access_token(subject_id, expires_in_seconds)
        snapshot.refresh_tokens[refresh_token] = access_token
        return access_token

    def revoke(self, snapshot: Snapshot, refresh_token: str) -> None:
        """Forget ``refresh_token``; revoking an unknown token is an error."""
        if refresh_token not in snapshot.refresh_tokens:
            raise RefreshTokenNotFoundError("Refresh token not found")
        del snapshot.refresh_tokens[refresh_token]

    def _decode(self, token: str) -> dict[str, Any]:
        try:
            claims: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.algorithm],
                issuer=ISSUER,
                options={"verify_exp": False},
            )
        except JWTError as err:
            logger.info("Rejected access token: %s", err)
            raise AuthenticationError("Could not validate credentials") from err
        return claims

    @staticmethod
    def _subject(claims: dict[str, Any]) -> int:
        subject = claims.get("sub")
        if not isinstance(subject, str):
            raise AuthenticationError("Token has no subject")
        try:
            return int(subject)
        except ValueError as err:
            raise AuthenticationError("Token subject is not an account id") from err
