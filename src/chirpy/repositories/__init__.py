"""Repositories enforcing per-entity invariants on top of the snapshot store."""

from .account_repo import AccountRepository
from .post_repo import PostRepository
from .token_repo import RefreshTokenRepository

__all__ = ["AccountRepository", "PostRepository", "RefreshTokenRepository"]
