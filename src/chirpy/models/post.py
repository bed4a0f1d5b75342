# src/chirpy/models/post.py
"""Persisted post records."""

from pydantic import BaseModel, ConfigDict


class Post(BaseModel):
    """Short text post owned by the account that created it.

    Posts are never edited after creation; the only mutation is deletion by
    the author.
    """

    id: int
    body: str
    author_id: int

    model_config = ConfigDict(frozen=True)
