"""Shared API dependencies: configuration, storage handle, repositories, credentials."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from chirpy.core.settings import Settings, settings
from chirpy.core.tokens import TokenService
from chirpy.db.storage import SnapshotStore
from chirpy.repositories import AccountRepository, PostRepository, RefreshTokenRepository

# HTTP Bearer scheme; missing credentials are turned into 401 below.
bearer_scheme = HTTPBearer(auto_error=False)


def get_settings() -> Settings:
    """Return the process-wide settings."""
    return settings


SettingsDep = Annotated[Settings, Depends(get_settings)]


@lru_cache
def _open_store(path: str, durable_writes: bool) -> SnapshotStore:
    # One handle, and therefore one lock, per snapshot file.
    return SnapshotStore(path, durable_writes=durable_writes)


def get_store(config: SettingsDep) -> SnapshotStore:
    """Return the snapshot store configured for this process."""
    return _open_store(config.database_path, config.durable_writes)


def get_token_service(config: SettingsDep) -> TokenService:
    """Return a token service bound to the configured secret."""
    return TokenService(config.secret_key, algorithm=config.jwt_algorithm)


StoreDep = Annotated[SnapshotStore, Depends(get_store)]
TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]


def get_post_repository(
    store: StoreDep,
    tokens: TokenServiceDep,
    config: SettingsDep,
) -> PostRepository:
    return PostRepository(store, tokens, max_body_length=config.max_post_length)


def get_account_repository(
    store: StoreDep,
    tokens: TokenServiceDep,
    config: SettingsDep,
) -> AccountRepository:
    return AccountRepository(store, tokens, bcrypt_rounds=config.bcrypt_rounds)


def get_refresh_token_repository(
    store: StoreDep,
    tokens: TokenServiceDep,
) -> RefreshTokenRepository:
    return RefreshTokenRepository(store, tokens)


PostRepoDep = Annotated[PostRepository, Depends(get_post_repository)]
AccountRepoDep = Annotated[AccountRepository, Depends(get_account_repository)]
RefreshRepoDep = Annotated[RefreshTokenRepository, Depends(get_refresh_token_repository)]


def get_bearer_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> str:
    """Extract the raw token from an ``Authorization: Bearer`` header.

    The token is not verified here; repositories verify it inside their
    storage cycle.

    Raises:
        HTTPException: If the header is missing or not a bearer credential.
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return credentials.credentials


BearerTokenDep = Annotated[str, Depends(get_bearer_token)]
