"""Login and session endpoints for the Chirpy API."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from chirpy.api.v1.dependencies import (
    AccountRepoDep,
    BearerTokenDep,
    RefreshRepoDep,
    SettingsDep,
)
from chirpy.schemas.account import AuthenticatedAccount, LoginRequest, TokenResponse

router = APIRouter(prefix="/auth", tags=["authentication"])


def _access_token_lifetime(requested: int | None, maximum: int) -> int:
    """Clamp a client-requested lifetime to ``(0, maximum]``."""
    if requested is None or requested <= 0 or requested > maximum:
        return maximum
    return requested


@router.post("/login", summary="Log in with email and password", response_model=AuthenticatedAccount)
def login(payload: LoginRequest, repo: AccountRepoDep, config: SettingsDep) -> AuthenticatedAccount:
    """Verify credentials and return an access token plus a refresh token."""
    expires_in = _access_token_lifetime(
        payload.expires_in_seconds,
        config.access_token_expire_seconds,
    )
    return repo.authenticate(payload.email, payload.password, expires_in)


@router.post("/refresh", summary="Exchange a refresh token for a new access token", response_model=TokenResponse)
def refresh(repo: RefreshRepoDep, refresh_token: BearerTokenDep, config: SettingsDep) -> TokenResponse:
    token = repo.refresh(refresh_token, config.access_token_expire_seconds)
    return TokenResponse(token=token)


@router.post(
    "/revoke",
    summary="Revoke a refresh token",
    status_code=status.HTTP_204_NO_CONTENT,
)
def revoke(repo: RefreshRepoDep, refresh_token: BearerTokenDep) -> Response:
    repo.revoke(refresh_token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
