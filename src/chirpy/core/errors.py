"""Typed failures raised by the storage and authentication core.

Every error carries a short machine-readable ``code`` and the HTTP status the
front end should answer with. Callers that do not speak HTTP can ignore
``http_status`` and branch on the class instead.
"""

from __future__ import annotations


class ChirpyError(Exception):
    """Base class for all Chirpy failures."""

    code = "internal_error"
    http_status = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict[str, dict[str, str]]:
        """Return the JSON error envelope used by the HTTP layer."""
        return {"error": {"code": self.code, "message": self.message}}


class StorageError(ChirpyError):
    """Reading or writing the snapshot file failed."""

    code = "storage_error"


class SnapshotCorruptError(StorageError):
    """The snapshot file is non-empty but cannot be decoded."""

    code = "snapshot_corrupt"


class NotFoundError(ChirpyError):
    code = "not_found"
    http_status = 404


class AccountNotFoundError(NotFoundError):
    code = "account_not_found"


class RefreshTokenNotFoundError(NotFoundError):
    # The refresh token is itself the credential, so an unknown one is a 401.
    code = "refresh_token_not_found"
    http_status = 401


class AuthenticationError(ChirpyError):
    """Credentials were rejected: bad signature, malformed or expired token."""

    code = "authentication_failed"
    http_status = 401


class CredentialMismatchError(AuthenticationError):
    """The supplied password does not match the stored hash."""

    code = "credential_mismatch"


class AuthorizationError(ChirpyError):
    """A valid credential tried to act on a resource it does not own."""

    code = "forbidden"
    http_status = 403


class ValidationError(ChirpyError):
    """Caller-supplied input was rejected before any storage access."""

    code = "validation_error"
    http_status = 400


class ConflictError(ChirpyError):
    code = "conflict"
    http_status = 409


class CredentialError(ChirpyError):
    """The password hashing backend could not process a stored hash."""

    code = "credential_error"


__all__ = [
    "AccountNotFoundError",
    "AuthenticationError",
    "AuthorizationError",
    "ChirpyError",
    "ConflictError",
    "CredentialError",
    "CredentialMismatchError",
    "NotFoundError",
    "RefreshTokenNotFoundError",
    "SnapshotCorruptError",
    "StorageError",
    "ValidationError",
]
