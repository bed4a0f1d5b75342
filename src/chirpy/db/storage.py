"""Snapshot storage engine.

The whole data set lives in one JSON file. Every operation runs inside
:meth:`SnapshotStore.with_snapshot`, which takes the store's single lock,
loads the file, lets the caller inspect or mutate the snapshot, writes the
complete snapshot back and releases the lock. Reads take the same lock as
writes, so all access to a store is fully serialized.

By default the file is rewritten in place. A crash between truncation and
the end of the write can leave the file empty or corrupt. Passing
``durable_writes=True`` writes a temporary file next to the snapshot and
swaps it in with ``os.replace`` instead.
"""
from __future__ import annotations

import logging
import os
import tempfile
import threading
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from pydantic import ValidationError as PydanticValidationError

from chirpy.core.errors import SnapshotCorruptError, StorageError
from chirpy.models.snapshot import Snapshot

__all__ = ["SnapshotStore"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SnapshotStore:
    """Owned handle on a snapshot file, shared by the repositories."""

    def __init__(self, path: str | os.PathLike[str], *, durable_writes: bool = False) -> None:
        """Open the store, creating an empty snapshot file if none exists.

        Existing content is left untouched.

        Raises:
            StorageError: If the file or its directory cannot be created.
        """
        self.path = Path(path)
        self.durable_writes = durable_writes
        self._lock = threading.Lock()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.touch(exist_ok=True)
        except OSError as err:
            raise StorageError(f"Could not create snapshot file {self.path}: {err}") from err

    def with_snapshot(self, mutator: Callable[[Snapshot], T], *, persist: bool = True) -> T:
        """Run ``mutator`` against a freshly loaded snapshot under the lock.

        Args:
            mutator: Receives the snapshot and may change it in place. Raising
                aborts the cycle without writing anything.
            persist: Write the snapshot back after ``mutator`` returns.

        Returns:
            Whatever ``mutator`` returned.

        Raises:
            StorageError: If the file cannot be read or written.
            SnapshotCorruptError: If the file content cannot be decoded.
        """
        with self._lock:
            snapshot = self._load()
            result = mutator(snapshot)
            if persist:
                self._write(snapshot)
            return result

    def read(self, reader: Callable[[Snapshot], T]) -> T:
        """Run ``reader`` under the lock without writing the snapshot back."""
        return self.with_snapshot(reader, persist=False)

    def _load(self) -> Snapshot:
        try:
            data = self.path.read_bytes()
        except FileNotFoundError:
            return Snapshot()
        except OSError as err:
            logger.error("Failed to read snapshot %s: %s", self.path, err)
            raise StorageError(f"Could not read snapshot file {self.path}") from err

        if not data.strip():
            return Snapshot()

        try:
            return Snapshot.model_validate_json(data)
        except PydanticValidationError as err:
            logger.error("Snapshot %s is corrupt: %s", self.path, err)
            raise SnapshotCorruptError(f"Snapshot file {self.path} is corrupt") from err

    def _write(self, snapshot: Snapshot) -> None:
        payload = snapshot.model_dump_json().encode("utf-8")
        try:
            if self.durable_writes:
                self._replace_atomically(payload)
            else:
                self.path.write_bytes(payload)
        except OSError as err:
            logger.error("Failed to write snapshot %s: %s", self.path, err)
            raise StorageError(f"Could not write snapshot file {self.path}") from err

    def _replace_atomically(self, payload: bytes) -> None:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.",
            suffix=".tmp",
            dir=self.path.parent,
        )
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self.path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
