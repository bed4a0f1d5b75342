# src/chirpy/models/snapshot.py
"""The in-memory image of the whole snapshot file."""

from __future__ import annotations

from pydantic import BaseModel, Field

from chirpy.models.account import Account
from chirpy.models.post import Post


class Snapshot(BaseModel):
    """All persisted records, loaded and saved as one unit.

    ``accounts_by_email`` and ``accounts_by_id`` index the same accounts. Go
    through :meth:`put_account` to change either of them so both stay in step.
    """

    posts: dict[int, Post] = Field(default_factory=dict)
    accounts_by_email: dict[str, Account] = Field(default_factory=dict)
    accounts_by_id: dict[int, Account] = Field(default_factory=dict)
    # refresh token -> access token it currently authorizes
    refresh_tokens: dict[str, str] = Field(default_factory=dict)

    def next_post_id(self) -> int:
        """Return ``len(posts) + 1``; ids can repeat once posts are deleted."""
        return len(self.posts) + 1

    def next_account_id(self) -> int:
        """Return ``len(accounts_by_id) + 1``."""
        return len(self.accounts_by_id) + 1

    def put_account(self, account: Account, *, previous_email: str | None = None) -> None:
        """Write ``account`` through both indices.

        Args:
            account: The new value of the record.
            previous_email: Email the record was stored under before an
                update; its key is dropped when the email changed.
        """
        if previous_email is not None and previous_email != account.email:
            self.accounts_by_email.pop(previous_email, None)
        self.accounts_by_email[account.email] = account
        self.accounts_by_id[account.id] = account
