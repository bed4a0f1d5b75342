"""Snapshot persistence."""

from .storage import SnapshotStore

__all__ = ["SnapshotStore"]
