"""
hashrename — rename files to the hash of their contents.

Core features:
- Glob patterns expanded once, each file processed exactly once
- Bounded pool of worker threads, one reusable hash state per worker
- sha1 / sha256 / sha512_256 / blake2b (hashlib) and xxh64 / xxh128 (xxhash)
- Files already named like a hash are skipped; dry-run mode for previews
- Per-file failures are counted and reported without stopping the batch
- Optional collision handling: refuse, overwrite, or move duplicates to trash (via send2trash)
"""

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("hashrename")
except Exception:
    import tomllib

    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API
from hashrename.commands import RenameCommand
from hashrename.core import (
    CollisionPolicy, FileSet, RenameOutcome, RenameParams, RenameResult, ResultAggregator,
    available_algorithms, get_algorithm)
from hashrename.services.file_service import FileService

__all__ = [
    "RenameCommand",
    "CollisionPolicy",
    "FileSet",
    "RenameOutcome",
    "RenameParams",
    "RenameResult",
    "ResultAggregator",
    "available_algorithms",
    "get_algorithm",
    "FileService",
    "__version__",
]
