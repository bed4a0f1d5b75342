"""Account and session Pydantic schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from chirpy.models.account import Account


class AccountCreate(BaseModel):
    """Schema for registering a new account."""

    email: str = Field(..., min_length=3, description="Login email, unique per account")
    password: str = Field(..., min_length=1, description="Plaintext password")


class AccountUpdate(BaseModel):
    """Partial account update; empty or missing fields are left unchanged."""

    email: str | None = Field(None, description="New login email")
    password: str | None = Field(None, description="New plaintext password")


class LoginRequest(BaseModel):
    """Schema for email/password login."""

    email: str
    password: str
    expires_in_seconds: int | None = Field(
        None,
        description="Requested access token lifetime; capped by server configuration",
    )


class AccountOut(BaseModel):
    """Public view of an account. Never includes the password hash."""

    id: int
    email: str
    is_premium: bool

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_account(cls, account: Account) -> AccountOut:
        """Build the public view of a stored account."""
        return cls(id=account.id, email=account.email, is_premium=account.is_premium)


class AuthenticatedAccount(AccountOut):
    """Public account view returned by a successful login."""

    token: str = Field(..., description="Signed access token")
    refresh_token: str = Field(..., description="Opaque refresh token")


class TokenResponse(BaseModel):
    """Response returned after refreshing an access token."""

    token: str = Field(..., description="New signed access token")


class WebhookData(BaseModel):
    user_id: int


class WebhookEvent(BaseModel):
    """Payment provider notification."""

    event: str = Field(..., description="Event name, e.g. 'user.upgraded'")
    data: WebhookData
