"""Pydantic schemas exchanged with callers of the core."""

from .account import (
    AccountCreate,
    AccountOut,
    AccountUpdate,
    AuthenticatedAccount,
    LoginRequest,
    TokenResponse,
    WebhookEvent,
)
from .post import PostCreate, PostOut

__all__ = [
    "AccountCreate",
    "AccountOut",
    "AccountUpdate",
    "AuthenticatedAccount",
    "LoginRequest",
    "PostCreate",
    "PostOut",
    "TokenResponse",
    "WebhookEvent",
]
