"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/name_filter.py
Detects filenames that already look like a content hash.

The check is about shape only: `2 * digest_size` lowercase hex characters,
optionally followed by a dot and any extension. Whether the digest actually
matches the file's content is never verified.
"""

import os
import re
import logging

logger = logging.getLogger(__name__)


class HashedNameFilter:
    """
    Predicate over a file's basename.

    Attributes:
        digest_size: Digest length in bytes of the configured algorithm
        enabled: When False, `matches` always returns False (nothing is filtered)
    """

    def __init__(self, digest_size: int, enabled: bool = True):
        if digest_size <= 0:
            raise ValueError("Digest size must be positive")
        self.digest_size = digest_size
        self.enabled = enabled
        self._pattern = re.compile(rf"[0-9a-f]{{{2 * digest_size}}}(\..*)?", re.DOTALL)

    def matches(self, path: str) -> bool:
        """True if the basename of `path` is hash-shaped and filtering is enabled."""
        if not self.enabled:
            return False
        if self._pattern.fullmatch(os.path.basename(path)) is None:
            return False
        logger.debug(f"Filename already looks like a hash: {path}")
        return True

    def __call__(self, path: str) -> bool:
        return self.matches(path)
