"""
Core renaming engine — hash registry, name filter, scanner, per-file worker and pool.

This package contains the concurrent foundation of hashrename:
- get_algorithm + HasherImpl: hashlib/xxhash registry and per-worker streaming hasher
- HashedNameFilter: skips files whose names already look like a digest
- GlobScannerImpl: glob expansion into a deduplicated FileSet
- RenameWorker: hash-and-rename of a single file
- WorkerPool + ResultAggregator: bounded fan-out and thread-safe failure tally
- Models and errors: FileSet, RenameResult, RenameParams, error taxonomy

All components are pure Python with no terminal dependencies — usable from the CLI or as a library.
"""

from .errors import (
    HashRenameError, ConfigurationError, UsageError, InvalidPattern, UnsupportedAlgorithm,
    InvalidConcurrency, FileOperationError, OpenError, ReadError, CloseError, RenameError)
from .models import CollisionPolicy, FileSet, RenameOutcome, RenameParams, RenameResult
from .hasher import (
    DEFAULT_ALGORITHM, HashAlgorithm, HasherImpl, available_algorithms, default_algorithm_name, get_algorithm,
    register_algorithm)
from .name_filter import HashedNameFilter
from .scanner import GlobScannerImpl
from .renamer import RenameWorker
from .aggregator import ResultAggregator
from .pool import WorkerPool, resolve_concurrency

__all__ = [
    "HashRenameError",
    "ConfigurationError",
    "UsageError",
    "InvalidPattern",
    "UnsupportedAlgorithm",
    "InvalidConcurrency",
    "FileOperationError",
    "OpenError",
    "ReadError",
    "CloseError",
    "RenameError",
    "CollisionPolicy",
    "FileSet",
    "RenameOutcome",
    "RenameParams",
    "RenameResult",
    "DEFAULT_ALGORITHM",
    "HashAlgorithm",
    "HasherImpl",
    "available_algorithms",
    "default_algorithm_name",
    "get_algorithm",
    "register_algorithm",
    "HashedNameFilter",
    "GlobScannerImpl",
    "RenameWorker",
    "ResultAggregator",
    "WorkerPool",
    "resolve_concurrency",
]
