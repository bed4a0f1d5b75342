"""Record types persisted in the snapshot file."""

from .account import Account
from .post import Post
from .snapshot import Snapshot

__all__ = ["Account", "Post", "Snapshot"]
