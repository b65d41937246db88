"""
Unified command orchestrator for content-addressed renaming.
This is the SINGLE source of truth for the pipeline — the CLI only parses flags and prints.
"""
import threading
import time
import logging
from typing import Callable, Optional

from hashrename.core.aggregator import ResultAggregator
from hashrename.core.hasher import HasherImpl
from hashrename.core.models import FileSet, RenameParams, RenameResult
from hashrename.core.name_filter import HashedNameFilter
from hashrename.core.pool import WorkerPool, resolve_concurrency
from hashrename.core.renamer import RenameWorker
from hashrename.core.scanner import GlobScannerImpl

logger = logging.getLogger(__name__)


class RenameCommand:
    """
    Orchestrates the entire rename workflow:
    1. Expand glob patterns into a FileSet (fails before any work on a bad pattern)
    2. Start the worker pool, one hasher per worker
    3. Dispatch every file and wait for all of them

    Usage:
        params = RenameParams(patterns=["photos/*.jpg"], dry_run=True)
        command = RenameCommand()
        stats = command.execute(
            params,
            on_result=print_result,
            on_discovered=lambda count: print(f"Processing {count} file(s)")
        )
        sys.exit(0 if stats.ok else 1)
    """

    def __init__(self):
        self._file_set: FileSet = FileSet()

    def execute(
            self,
            params: RenameParams,
            on_result: Optional[Callable[[RenameResult], None]] = None,
            on_discovered: Optional[Callable[[int], None]] = None
    ) -> ResultAggregator:
        """
        Execute one run with given parameters.

        Args:
            params: Validated rename parameters
            on_result: (result: RenameResult) -> None, called from worker threads
            on_discovered: (file_count: int) -> None, called once before dispatch

        Returns:
            ResultAggregator with outcome counts and failures

        Raises:
            InvalidPattern: If a glob pattern is malformed
            InvalidConcurrency: If concurrency is negative
        """
        start_time = time.time()
        algorithm = params.algorithm
        concurrency = resolve_concurrency(params.concurrency)

        # Step 1: Discover every file before renaming anything
        scanner = GlobScannerImpl(params.patterns)
        self._file_set = scanner.scan()
        if on_discovered:
            on_discovered(len(self._file_set))

        # Step 2: Fan out to the pool
        name_filter = HashedNameFilter(algorithm.digest_size, enabled=params.skip_hashed_filenames)
        rename_lock = threading.Lock()

        def worker_factory() -> RenameWorker:
            return RenameWorker(
                hasher=HasherImpl(algorithm, chunk_size=params.chunk_size),
                name_filter=name_filter,
                dry_run=params.dry_run,
                on_collision=params.on_collision,
                rename_lock=rename_lock
            )

        logger.debug(
            f"Renaming {len(self._file_set)} file(s) with {algorithm.name}, "
            f"concurrency={concurrency}, dry_run={params.dry_run}"
        )
        pool = WorkerPool(concurrency, worker_factory, ResultAggregator(), on_result)
        stats = pool.run(self._file_set)

        stats.total_time = time.time() - start_time
        return stats

    def get_files(self) -> FileSet:
        """Get the FileSet discovered by the last execution."""
        return self._file_set
