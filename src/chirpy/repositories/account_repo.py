"""Data access helpers for accounts and logins."""
from __future__ import annotations

import logging

from chirpy.core import security
from chirpy.core.errors import AccountNotFoundError, ConflictError
from chirpy.core.tokens import TokenService
from chirpy.db.storage import SnapshotStore
from chirpy.models import Account, Snapshot
from chirpy.schemas.account import AccountOut, AuthenticatedAccount

__all__ = ["AccountRepository"]

logger = logging.getLogger(__name__)


class AccountRepository:
    """Account operations over the snapshot store.

    Every write goes through :meth:`Snapshot.put_account`, which keeps the
    email and id indices pointing at the same record.
    """

    def __init__(
        self,
        store: SnapshotStore,
        tokens: TokenService,
        *,
        bcrypt_rounds: int = security.DEFAULT_ROUNDS,
    ) -> None:
        self.store = store
        self.tokens = tokens
        self.bcrypt_rounds = bcrypt_rounds

    def create(self, email: str, password: str) -> AccountOut:
        """Register a new account.

        Raises:
            ConflictError: If the email is already registered.
            ValidationError: If the password is too long to hash.
        """
        # Hash outside the lock; bcrypt is deliberately slow.
        password_hash = security.hash_password(password, rounds=self.bcrypt_rounds)

        def _create(snapshot: Snapshot) -> Account:
            if email in snapshot.accounts_by_email:
                raise ConflictError("An account with this email already exists")
            account = Account(
                id=snapshot.next_account_id(),
                email=email,
                password_hash=password_hash,
            )
            snapshot.put_account(account)
            return account

        account = self.store.with_snapshot(_create)
        logger.info("Created account %d", account.id)
        return AccountOut.from_account(account)

    def get(self, account_id: int) -> AccountOut | None:
        """Return the public view of an account, or None if absent."""
        account = self.store.read(lambda snapshot: snapshot.accounts_by_id.get(account_id))
        return AccountOut.from_account(account) if account is not None else None

    def authenticate(
        self,
        email: str,
        password: str,
        expires_in_seconds: int,
    ) -> AuthenticatedAccount:
        """Check an email/password pair and open a session.

        On success an access token and a refresh token are issued and the
        refresh mapping is persisted.

        Raises:
            AccountNotFoundError: If no account uses ``email``.
            CredentialMismatchError: If the password is wrong. No tokens are
                issued.
        """

        def _authenticate(snapshot: Snapshot) -> AuthenticatedAccount:
            account = snapshot.accounts_by_email.get(email)
            if account is None:
                raise AccountNotFoundError("Account not found")
            security.verify_password(password, account.password_hash)
            pair = self.tokens.issue_refresh_pair(snapshot, account.id, expires_in_seconds)
            return AuthenticatedAccount(
                id=account.id,
                email=account.email,
                is_premium=account.is_premium,
                token=pair.access_token,
                refresh_token=pair.refresh_token,
            )

        result = self.store.with_snapshot(_authenticate)
        logger.info("Account %d logged in", result.id)
        return result

    def update(
        self,
        token: str,
        email: str | None = None,
        password: str | None = None,
    ) -> AccountOut:
        """Change the email and/or password of the token's account.

        Empty or missing values leave the field unchanged. When the email
        changes, the record moves to the new email key and the old key is
        dropped.

        Raises:
            AuthenticationError: If the token does not verify.
            AccountNotFoundError: If the token names a missing account.
            ConflictError: If the new email belongs to another account.
        """
        account_id = self.tokens.verify_access_token(token)
        password_hash = (
            security.hash_password(password, rounds=self.bcrypt_rounds) if password else None
        )

        def _update(snapshot: Snapshot) -> Account:
            account = snapshot.accounts_by_id.get(account_id)
            if account is None:
                raise AccountNotFoundError("Account not found")

            changes: dict[str, str] = {}
            if email:
                owner = snapshot.accounts_by_email.get(email)
                if owner is not None and owner.id != account.id:
                    raise ConflictError("An account with this email already exists")
                changes["email"] = email
            if password_hash is not None:
                changes["password_hash"] = password_hash

            updated = account.model_copy(update=changes)
            snapshot.put_account(updated, previous_email=account.email)
            return updated

        account = self.store.with_snapshot(_update)
        logger.info("Updated account %d", account.id)
        return AccountOut.from_account(account)

    def upgrade(self, account_id: int) -> AccountOut:
        """Mark an account as premium.

        Raises:
            AccountNotFoundError: If ``account_id`` is unknown.
        """

        def _upgrade(snapshot: Snapshot) -> Account:
            account = snapshot.accounts_by_id.get(account_id)
            if account is None:
                raise AccountNotFoundError("Account not found")
            upgraded = account.model_copy(update={"is_premium": True})
            snapshot.put_account(upgraded, previous_email=account.email)
            return upgraded

        account = self.store.with_snapshot(_upgrade)
        logger.info("Upgraded account %d to premium", account.id)
        return AccountOut.from_account(account)
