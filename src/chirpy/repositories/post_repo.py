"""Data access helpers for working with posts."""
from __future__ import annotations

import logging

from chirpy.core.errors import AccountNotFoundError, AuthorizationError, ValidationError
from chirpy.core.tokens import TokenService
from chirpy.db.storage import SnapshotStore
from chirpy.models import Post, Snapshot

__all__ = ["DEFAULT_MAX_BODY_LENGTH", "PostRepository"]

logger = logging.getLogger(__name__)

DEFAULT_MAX_BODY_LENGTH = 140


class PostRepository:
    """Post operations, each running as one atomic snapshot cycle."""

    def __init__(
        self,
        store: SnapshotStore,
        tokens: TokenService,
        *,
        max_body_length: int = DEFAULT_MAX_BODY_LENGTH,
    ) -> None:
        self.store = store
        self.tokens = tokens
        self.max_body_length = max_body_length

    def create(self, body: str, token: str) -> Post:
        """Store a post owned by the account the access token names.

        Args:
            body: Post text, already scrubbed by the caller.
            token: Access token presented by the author.

        Raises:
            ValidationError: If ``body`` exceeds the length limit. Checked
                before the store is touched.
            AuthenticationError: If the token does not verify.
            AccountNotFoundError: If the token names an account that does not
                exist.
        """
        if len(body) > self.max_body_length:
            raise ValidationError(f"Post is too long (limit {self.max_body_length} characters)")

        def _create(snapshot: Snapshot) -> Post:
            account_id = self.tokens.verify_access_token(token)
            account = snapshot.accounts_by_id.get(account_id)
            if account is None:
                raise AccountNotFoundError("Account not found")
            post = Post(id=snapshot.next_post_id(), body=body, author_id=account.id)
            snapshot.posts[post.id] = post
            return post

        post = self.store.with_snapshot(_create)
        logger.debug("Created post %d for account %d", post.id, post.author_id)
        return post

    def get(self, post_id: int) -> Post | None:
        """Return a post by identifier, or None when it does not exist."""
        return self.store.read(lambda snapshot: snapshot.posts.get(post_id))

    def list_all(self) -> list[Post]:
        """Return every post sorted by ascending id."""
        return self.store.read(
            lambda snapshot: sorted(snapshot.posts.values(), key=lambda post: post.id)
        )

    def delete(self, post_id: int, token: str) -> None:
        """Delete a post on behalf of its author.

        Deleting an id that does not exist succeeds without checking the
        token.

        Raises:
            AuthenticationError: If the token does not verify.
            AuthorizationError: If the token belongs to someone other than the
                author; the post is kept.
        """

        def _delete(snapshot: Snapshot) -> bool:
            post = snapshot.posts.get(post_id)
            if post is None:
                return False
            account_id = self.tokens.verify_access_token(token)
            if account_id != post.author_id:
                logger.warning(
                    "Account %d attempted to delete post %d owned by %d",
                    account_id,
                    post_id,
                    post.author_id,
                )
                raise AuthorizationError("Only the author may delete this post")
            del snapshot.posts[post_id]
            return True

        if self.store.with_snapshot(_delete):
            logger.debug("Deleted post %d", post_id)
