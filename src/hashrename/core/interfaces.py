"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the renaming pipeline.
These protocols enforce structural typing using Python's `typing.Protocol` so that
hash libraries, scanners and output sinks can be swapped without touching the pool.

Key Components:
---------------
- HashState: Incremental hash object (hashlib and xxhash objects both satisfy it).
- Hasher: Interface for streaming a whole file through a per-worker hash state.
- FileScanner: Interface for expanding glob patterns into a FileSet.
- ResultSink: Callable receiving every per-file RenameResult.
"""

from typing import Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from hashrename.core.models import FileSet, RenameResult


# ===== Interfaces =====

class HashState(Protocol):
    """Incremental hash state."""
    digest_size: int

    def update(self, data: bytes) -> None: ...
    def digest(self) -> bytes: ...
    def copy(self) -> "HashState": ...


class Hasher(Protocol):
    """Interface for hashing the full content of a file."""
    def reset(self) -> None: ...
    def hash_file(self, path: str) -> bytes: ...


class FileScanner(Protocol):
    """
    Interface for discovering the files to process.

    Methods:
        scan: Expands the configured patterns and returns every matched file exactly once.
    """
    def scan(self) -> "FileSet":
        ...


class ResultSink(Protocol):
    """Receives the outcome of every processed file (called from worker threads)."""
    def __call__(self, result: "RenameResult") -> None:
        ...
