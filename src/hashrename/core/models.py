"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for discovery, per-file results and run configuration.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, Iterator, List, Optional

from hashrename.core.errors import InvalidConcurrency, UsageError
from hashrename.core.hasher import DEFAULT_ALGORITHM, DEFAULT_CHUNK_SIZE, get_algorithm


# =============================
# Enums
# =============================

class RenameOutcome(Enum):
    """What happened to one file."""
    RENAMED = "renamed"
    UNCHANGED = "unchanged"  # already carries its content-addressed name
    SKIPPED = "skipped"      # name already looks like a hash
    DRY_RUN = "dry-run"
    TRASHED = "trashed"      # target existed, source moved to trash
    FAILED = "failed"

    @property
    def display_name(self) -> str:
        """Human-readable name for summaries."""
        mapping = {
            RenameOutcome.RENAMED: "renamed",
            RenameOutcome.UNCHANGED: "already named",
            RenameOutcome.SKIPPED: "skipped",
            RenameOutcome.DRY_RUN: "would rename",
            RenameOutcome.TRASHED: "moved to trash",
            RenameOutcome.FAILED: "failed",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


class CollisionPolicy(Enum):
    """
    What a live rename does when the content-addressed target already exists.
    """
    ERROR = "error"
    OVERWRITE = "overwrite"
    TRASH = "trash"

    @property
    def description(self) -> str:
        mapping = {
            CollisionPolicy.ERROR:
                "Fail the file, never overwrite an existing target",
            CollisionPolicy.OVERWRITE:
                "Replace the existing target (last writer wins)",
            CollisionPolicy.TRASH:
                "Keep the existing target, move the source to the system trash",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class RenameResult:
    """Outcome of processing a single file. Never persisted."""
    source: str
    outcome: RenameOutcome
    destination: Optional[str] = None
    error: Optional[Exception] = None

    @property
    def failed(self) -> bool:
        return self.outcome is RenameOutcome.FAILED

    def __repr__(self):
        return f"<RenameResult {self.source} {self.outcome.value} {self.destination or ''}>"


class FileSet:
    """
    Immutable set of discovered file paths.
    Paths are normalized on the way in, so each physical path appears exactly once.
    Iteration is sorted to keep dispatch order reproducible.
    """

    def __init__(self, paths: Iterable[str] = ()):
        self._paths: FrozenSet[str] = frozenset(os.path.normpath(p) for p in paths)

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._paths))

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and os.path.normpath(path) in self._paths

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileSet):
            return NotImplemented
        return self._paths == other._paths

    def __hash__(self) -> int:
        return hash(self._paths)

    def __repr__(self):
        return f"<FileSet count={len(self._paths)}>"


"""
DTO for rename parameters with built-in validation.
Interface-agnostic — built by the CLI, consumed by RenameCommand.
"""

@dataclass
class RenameParams:
    """Parameters for one run with validation."""
    patterns: List[str]
    dry_run: bool = False
    concurrency: int = 0  # 0 = pick automatically
    hash_name: str = DEFAULT_ALGORITHM
    skip_hashed_filenames: bool = True
    on_collision: CollisionPolicy = CollisionPolicy.ERROR
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.patterns:
            raise UsageError("At least one glob pattern is required")

        if self.concurrency < 0:
            raise InvalidConcurrency("Concurrency must be non-negative")

        if self.chunk_size <= 0:
            raise UsageError("Chunk size must be positive")

        if isinstance(self.on_collision, str):
            try:
                self.on_collision = CollisionPolicy(self.on_collision)
            except ValueError:
                raise UsageError(f"Unknown collision policy: {self.on_collision!r}") from None

        get_algorithm(self.hash_name)  # raises UnsupportedAlgorithm

    @property
    def algorithm(self):
        return get_algorithm(self.hash_name)
