"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/pool.py
Bounded worker pool: C threads draining one shared work queue.

The dispatcher enqueues every path of the FileSet, then one stop sentinel per
thread; the sentinels are the only "no more work" signal. `run` returns once
every thread has seen its sentinel, i.e. after every path was processed or failed.
"""

import os
import queue
import threading
import logging
from typing import Callable, List, Optional

from hashrename.core.aggregator import ResultAggregator
from hashrename.core.errors import InvalidConcurrency
from hashrename.core.interfaces import ResultSink
from hashrename.core.models import FileSet, RenameOutcome, RenameResult
from hashrename.core.renamer import RenameWorker

logger = logging.getLogger(__name__)

_STOP = object()


def resolve_concurrency(concurrency: int) -> int:
    """Maps 0 to the number of CPUs this process may run on."""
    if concurrency < 0:
        raise InvalidConcurrency("The --concurrency flag must be non-negative.")
    if concurrency > 0:
        return concurrency
    try:
        available = len(os.sched_getaffinity(0))
    except AttributeError:  # not available on macOS / Windows
        available = os.cpu_count() or 1
    logger.debug(f"Auto-detected concurrency: {available}")
    return max(1, available)


class WorkerPool:
    """
    Runs exactly `concurrency` long-lived threads.
    Each thread builds one RenameWorker (and thus one hash state) through `worker_factory`
    and keeps it for its whole life.
    """

    def __init__(
        self,
        concurrency: int,
        worker_factory: Callable[[], RenameWorker],
        aggregator: Optional[ResultAggregator] = None,
        on_result: Optional[ResultSink] = None
    ):
        if concurrency < 1:
            raise InvalidConcurrency(f"Worker pool needs at least one worker, got {concurrency}")
        self.concurrency = concurrency
        self.worker_factory = worker_factory
        self.aggregator = aggregator if aggregator is not None else ResultAggregator()
        self.on_result = on_result

    def run(self, file_set: FileSet) -> ResultAggregator:
        """Processes every path in `file_set` exactly once and blocks until all are done."""
        work: "queue.Queue[object]" = queue.Queue()
        threads: List[threading.Thread] = []

        for idx in range(self.concurrency):
            worker = self.worker_factory()
            thread = threading.Thread(
                target=self._drain,
                args=(work, worker),
                name=f"hashrename-worker-{idx}",
                daemon=True
            )
            threads.append(thread)
            thread.start()
        logger.debug(f"Started {len(threads)} worker(s)")

        for path in file_set:
            work.put(path)
        for _ in threads:
            work.put(_STOP)

        for thread in threads:
            thread.join()
        logger.debug("All workers finished")
        return self.aggregator

    def _drain(self, work: "queue.Queue[object]", worker: RenameWorker) -> None:
        while True:
            path = work.get()
            if path is _STOP:
                return
            try:
                result = worker.process(path)
            except Exception as e:
                logger.exception(f"Unexpected error while processing {path}")
                result = RenameResult(source=path, outcome=RenameOutcome.FAILED, error=e)
            self.aggregator.record(result)
            self._emit(result)

    def _emit(self, result: RenameResult) -> None:
        if self.on_result is None:
            return
        try:
            self.on_result(result)
        except Exception:
            logger.exception(f"Error in result handler for {result.source}")
