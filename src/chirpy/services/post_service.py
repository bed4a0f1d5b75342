"""Service-level helpers for submitting posts."""
from __future__ import annotations

from chirpy.core.errors import ValidationError
from chirpy.models import Post
from chirpy.repositories.post_repo import PostRepository
from chirpy.schemas.post import PostOut
from chirpy.services.profanity import clean_profane


def submit_post(*, repo: PostRepository, body: str, token: str) -> Post:
    """Scrub ``body`` and store it as a post owned by the token's account.

    The length limit applies to the text as submitted, not to the scrubbed
    version.

    Args:
        repo: Repository used to persist the post.
        body: Raw text submitted by the client.
        token: Access token of the author.

    Raises:
        ValidationError: If the raw body exceeds the repository's length limit.
        AuthenticationError: If the token does not verify.
        AccountNotFoundError: If the token names a missing account.
    """
    if len(body) > repo.max_body_length:
        raise ValidationError(f"Post is too long (limit {repo.max_body_length} characters)")
    return repo.create(clean_profane(body), token)


def to_post_out(post: Post) -> PostOut:
    """Convert a stored post to its API schema."""
    return PostOut.model_validate(post, from_attributes=True)
