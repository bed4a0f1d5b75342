"""Refresh-token operations over the snapshot store."""
from __future__ import annotations

import logging

from chirpy.core.tokens import TokenService
from chirpy.db.storage import SnapshotStore

__all__ = ["RefreshTokenRepository"]

logger = logging.getLogger(__name__)


class RefreshTokenRepository:
    """Wraps the snapshot-level token operations in atomic store cycles."""

    def __init__(self, store: SnapshotStore, tokens: TokenService) -> None:
        self.store = store
        self.tokens = tokens

    def refresh(self, refresh_token: str, expires_in_seconds: int) -> str:
        """Return a new access token for the session behind ``refresh_token``."""
        return self.store.with_snapshot(
            lambda snapshot: self.tokens.refresh(snapshot, refresh_token, expires_in_seconds)
        )

    def revoke(self, refresh_token: str) -> None:
        """Revoke ``refresh_token``. A second revoke raises RefreshTokenNotFoundError."""
        self.store.with_snapshot(lambda snapshot: self.tokens.revoke(snapshot, refresh_token))
        logger.info("Revoked a refresh token")
