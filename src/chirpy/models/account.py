# src/chirpy/models/account.py
"""Persisted account records."""

from pydantic import BaseModel, ConfigDict


class Account(BaseModel):
    """Email/password identity.

    ``password_hash`` is a bcrypt hash; the plaintext never reaches storage.
    Updates replace the whole record via ``model_copy`` so the value stored
    under both snapshot indices stays identical.
    """

    id: int
    email: str
    password_hash: str
    is_premium: bool = False

    model_config = ConfigDict(frozen=True)
