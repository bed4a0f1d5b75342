# src/chirpy/schemas/post.py
"""Post-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    """Schema for submitting a new post.

    The length limit is enforced by the repository so that it follows the
    configured ``MAX_POST_LENGTH``.
    """

    body: str = Field(..., description="Post text before scrubbing")


class PostOut(BaseModel):
    """Schema for post information returned by the API."""

    id: int
    body: str
    author_id: int

    model_config = ConfigDict(from_attributes=True)
