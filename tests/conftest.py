# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from fastapi import FastAPI
from fastapi.testclient import TestClient

from chirpy.api.v1.dependencies import get_settings
from chirpy.core.settings import Settings
from chirpy.core.tokens import TokenService
from chirpy.db.storage import SnapshotStore
from chirpy.main import app as fastapi_app
from chirpy.repositories import AccountRepository, PostRepository, RefreshTokenRepository
from chirpy.schemas.account import AuthenticatedAccount

TEST_SECRET = "test-secret-key"
TEST_BCRYPT_ROUNDS = 4
TOKEN_TTL_SECONDS = 3600
WEBHOOK_API_KEY = "test-webhook-key"


class FakeClock:
    """Manually advanced clock for token expiry tests."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture()
def snapshot_path(tmp_path: Path) -> Path:
    return tmp_path / "database" / "database.json"


@pytest.fixture()
def store(snapshot_path: Path) -> SnapshotStore:
    return SnapshotStore(snapshot_path)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def token_service(clock: FakeClock) -> TokenService:
    return TokenService(TEST_SECRET, clock=clock)


@pytest.fixture()
def post_repo(store: SnapshotStore, token_service: TokenService) -> PostRepository:
    return PostRepository(store, token_service)


@pytest.fixture()
def account_repo(store: SnapshotStore, token_service: TokenService) -> AccountRepository:
    return AccountRepository(store, token_service, bcrypt_rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture()
def refresh_repo(store: SnapshotStore, token_service: TokenService) -> RefreshTokenRepository:
    return RefreshTokenRepository(store, token_service)


@pytest.fixture()
def login(account_repo: AccountRepository) -> Callable[..., AuthenticatedAccount]:
    """Register an account and log it in, returning the session."""

    def _login(email: str, password: str = "secret") -> AuthenticatedAccount:
        account_repo.create(email, password)
        return account_repo.authenticate(email, password, TOKEN_TTL_SECONDS)

    return _login


@pytest.fixture()
def test_settings(tmp_path: Path) -> Settings:
    """Settings pointing the app at a per-test snapshot file."""
    return Settings(
        SECRET_KEY=TEST_SECRET,
        DATABASE_PATH=str(tmp_path / "api" / "database.json"),
        BCRYPT_ROUNDS=TEST_BCRYPT_ROUNDS,
        WEBHOOK_API_KEY=WEBHOOK_API_KEY,
    )


@pytest.fixture()
def app(test_settings: Settings) -> Iterator[FastAPI]:
    fastapi_app.dependency_overrides[get_settings] = lambda: test_settings
    try:
        yield fastapi_app
    finally:
        fastapi_app.dependency_overrides.pop(get_settings, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def api_login(client: TestClient) -> Callable[..., dict]:
    """Register and log in through the HTTP API, returning the login body."""

    def _api_login(email: str, password: str = "secret") -> dict:
        created = client.post("/api/v1/users", json={"email": email, "password": password})
        assert created.status_code == 201
        response = client.post("/api/v1/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200
        return response.json()

    return _api_login
