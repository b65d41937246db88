"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/aggregator.py
Thread-safe tally of per-file outcomes.

Written by every worker, read once after the pool has joined. The failure count
decides the exit status: any failure marks the run as failed even though the
successful renames already happened.
"""

import threading
from typing import Dict, List

from hashrename.core.models import RenameOutcome, RenameResult


class ResultAggregator:
    """Collects RenameResults from concurrent workers."""

    def __init__(self):
        self._lock = threading.Lock()
        self._counts: Dict[RenameOutcome, int] = {outcome: 0 for outcome in RenameOutcome}
        self._failed: List[RenameResult] = []
        self.total_time: float = 0.0

    def record(self, result: RenameResult) -> None:
        with self._lock:
            self._counts[result.outcome] += 1
            if result.failed:
                self._failed.append(result)

    @property
    def failures(self) -> int:
        with self._lock:
            return self._counts[RenameOutcome.FAILED]

    @property
    def processed(self) -> int:
        with self._lock:
            return sum(self._counts.values())

    @property
    def counts(self) -> Dict[RenameOutcome, int]:
        """Snapshot of outcome counts."""
        with self._lock:
            return dict(self._counts)

    @property
    def failed_results(self) -> List[RenameResult]:
        with self._lock:
            return list(self._failed)

    @property
    def ok(self) -> bool:
        return self.failures == 0

    def summary(self) -> str:
        counts = self.counts
        parts = [
            f"{counts[outcome]} {outcome.display_name}"
            for outcome in RenameOutcome
            if counts[outcome] > 0
        ]
        total = sum(counts.values())
        if not parts:
            return f"Processed {total} file(s)"
        return f"Processed {total} file(s): {', '.join(parts)}"
