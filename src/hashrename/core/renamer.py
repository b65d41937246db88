"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/renamer.py
Per-file unit of work: filter, hash, compute the content-addressed name, rename.

A RenameWorker is owned by exactly one pool thread. Every failure is confined to the
file being processed and comes back as a FAILED RenameResult instead of an exception.
"""

import errno
import os
import threading
import logging
from typing import Optional

from hashrename.core.errors import FileOperationError, RenameError
from hashrename.core.interfaces import Hasher
from hashrename.core.models import CollisionPolicy, RenameOutcome, RenameResult
from hashrename.core.name_filter import HashedNameFilter
from hashrename.services.file_service import FileService

logger = logging.getLogger(__name__)


class RenameWorker:
    """
    Renames one file at a time to `<lowercase hex digest><original extension>`.

    Attributes:
        hasher: Per-worker hasher (never shared between workers)
        name_filter: Skips files whose names already look like a hash
        dry_run: Report the would-be rename without touching the filesystem
        on_collision: What to do when the target name already exists
        rename_lock: Shared by all workers of a pool; serializes check-and-rename
                     for the ERROR and TRASH policies
    """

    def __init__(
        self,
        hasher: Hasher,
        name_filter: HashedNameFilter,
        dry_run: bool = False,
        on_collision: CollisionPolicy = CollisionPolicy.ERROR,
        rename_lock: Optional[threading.Lock] = None
    ):
        self.hasher = hasher
        self.name_filter = name_filter
        self.dry_run = dry_run
        self.on_collision = on_collision
        self.rename_lock = rename_lock if rename_lock is not None else threading.Lock()

    def process(self, path: str) -> RenameResult:
        """Processes one file. Never raises FileOperationError."""
        try:
            return self._process(path)
        except FileOperationError as e:
            logger.debug(f"Failed to process {path}: {e}")
            return RenameResult(source=path, outcome=RenameOutcome.FAILED, error=e)

    def _process(self, path: str) -> RenameResult:
        if self.name_filter.matches(path):
            return RenameResult(source=path, outcome=RenameOutcome.SKIPPED)

        digest = self.hasher.hash_file(path)
        destination = self.target_path(path, digest)

        if self._same_path(path, destination):
            return RenameResult(source=path, outcome=RenameOutcome.UNCHANGED, destination=destination)

        if self.dry_run:
            return RenameResult(source=path, outcome=RenameOutcome.DRY_RUN, destination=destination)

        return self._rename(path, destination, digest)

    @staticmethod
    def target_path(path: str, digest: bytes) -> str:
        """Hex digest plus the original extension, in the source's directory."""
        directory, name = os.path.split(path)
        _, extension = os.path.splitext(name)
        return os.path.join(directory, digest.hex() + extension)

    def _rename(self, source: str, destination: str, digest: bytes) -> RenameResult:
        try:
            if self.on_collision is CollisionPolicy.OVERWRITE:
                FileService.replace(source, destination)
                return RenameResult(source=source, outcome=RenameOutcome.RENAMED, destination=destination)

            with self.rename_lock:
                if self.on_collision is CollisionPolicy.TRASH and os.path.lexists(destination):
                    if not self._holds_same_content(destination, digest):
                        raise FileExistsError(errno.EEXIST, "target exists but is not a copy of the source", destination)
                    logger.debug(f"{destination} already exists, moving duplicate {source} to trash")
                    FileService.move_to_trash(source)
                    return RenameResult(source=source, outcome=RenameOutcome.TRASHED, destination=destination)
                FileService.rename_no_clobber(source, destination)
        except (OSError, RuntimeError) as e:
            raise RenameError(source, e) from e

        return RenameResult(source=source, outcome=RenameOutcome.RENAMED, destination=destination)

    def _holds_same_content(self, destination: str, digest: bytes) -> bool:
        """A hash-shaped name proves nothing: only a regular file whose content hashes to `digest` counts."""
        if not os.path.isfile(destination):
            return False
        return self.hasher.hash_file(destination) == digest

    @staticmethod
    def _same_path(a: str, b: str) -> bool:
        return os.path.normcase(os.path.normpath(a)) == os.path.normcase(os.path.normpath(b))
