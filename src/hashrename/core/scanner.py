"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements file discovery from glob patterns.
Features:
- Validates every pattern before expanding any of them
- Expands patterns in order with the standard glob module (`**` is recursive, `*` matches dotfiles)
- Unions all matches into a FileSet, so overlapping patterns never yield a path twice
- Drops directory matches: only regular files can be content-addressed
"""

import glob
import os
import time
import logging
from typing import List, Sequence

logger = logging.getLogger(__name__)

# Local imports
from hashrename.core.errors import InvalidPattern
from hashrename.core.interfaces import FileScanner
from hashrename.core.models import FileSet


class GlobScannerImpl(FileScanner):
    """
    Expands glob patterns into the set of files to rename.

    Discovery is sequential and finishes before any file is dispatched, so a file
    renamed mid-run can never be picked up again under its new name.

    Attributes:
        patterns: Glob patterns in the order given on the command line
    """

    def __init__(self, patterns: Sequence[str]):
        self.patterns: List[str] = list(patterns)

    def scan(self) -> FileSet:
        """
        Returns every file matched by at least one pattern, exactly once.

        Raises:
            InvalidPattern: if any pattern is malformed (nothing is expanded in that case)
        """
        logger.debug("Starting scan operation")
        logger.debug(f"Patterns: {self.patterns}")

        for pattern in self.patterns:
            self._validate_pattern(pattern)

        start_time = time.time()
        found = set()
        for pattern in self.patterns:
            matches = glob.glob(pattern, recursive=True, include_hidden=True)
            logger.debug(f"Pattern {pattern!r} matched {len(matches)} path(s)")
            for path in matches:
                if self._is_directory(path):
                    logger.debug(f"Skipping directory: {path}")
                    continue
                found.add(path)

        file_set = FileSet(found)
        logger.debug(f"Total scan time: {time.time() - start_time:.2f} seconds")
        logger.debug(f"Scan completed. Found {len(file_set)} unique file(s).")
        return file_set

    @staticmethod
    def _validate_pattern(pattern: str) -> None:
        """
        Rejects patterns the glob module would silently misinterpret.
        Checks: NUL byte, unterminated character class. An empty pattern is valid and matches nothing.
        """
        if "\x00" in pattern:
            raise InvalidPattern(f"Bad glob {pattern!r}: embedded NUL byte")

        i, n = 0, len(pattern)
        while i < n:
            if pattern[i] != "[":
                i += 1
                continue
            j = i + 1
            if j < n and pattern[j] == "!":
                j += 1
            if j < n and pattern[j] == "]":
                j += 1  # a leading ']' is a literal member of the class
            j = pattern.find("]", j)
            if j == -1:
                raise InvalidPattern(f"Bad glob {pattern!r}: unterminated character class")
            i = j + 1

    @staticmethod
    def _is_directory(path: str) -> bool:
        try:
            return os.path.isdir(path)
        except (OSError, ValueError):
            return False
