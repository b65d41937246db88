"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Hash algorithm registry and the per-worker file hasher.

The registry maps a configuration name to a constructor and its digest length.
HasherImpl owns a single hash state for its whole lifetime and resets it before
every file, so one worker never allocates more than one state and two workers
never share one.
"""

import hashlib
import logging
from dataclasses import dataclass
from functools import partial
from typing import Callable, Dict, List

import xxhash

from hashrename.core.errors import CloseError, OpenError, ReadError, UnsupportedAlgorithm
from hashrename.core.interfaces import Hasher, HashState

logger = logging.getLogger(__name__)

PREFERRED_ALGORITHM = "sha512_256"
FALLBACK_ALGORITHM = "sha256"
DEFAULT_CHUNK_SIZE = 1024 * 1024  # 1 MiB


@dataclass(frozen=True)
class HashAlgorithm:
    """Immutable per-run hash configuration, shared read-only by all workers."""
    name: str
    constructor: Callable[[], HashState]
    digest_size: int  # in bytes

    def new(self) -> HashState:
        """Returns a fresh hash state."""
        return self.constructor()

    @property
    def hex_length(self) -> int:
        return 2 * self.digest_size


_REGISTRY: Dict[str, HashAlgorithm] = {}


def register_algorithm(name: str, constructor: Callable[[], HashState]) -> HashAlgorithm:
    """Registers a constructor under `name`. The digest length is read from a probe instance."""
    algorithm = HashAlgorithm(name=name, constructor=constructor, digest_size=constructor().digest_size)
    _REGISTRY[name] = algorithm
    return algorithm


def get_algorithm(name: str) -> HashAlgorithm:
    try:
        return _REGISTRY[name]
    except KeyError:
        raise UnsupportedAlgorithm(
            f"Unknown hash {name!r}. Supported values: {', '.join(available_algorithms())}"
        ) from None


def available_algorithms() -> List[str]:
    return sorted(_REGISTRY)


def register_builtin_algorithms() -> None:
    """Registers the hashlib and xxhash algorithms this interpreter can provide."""
    register_algorithm("sha1", hashlib.sha1)
    register_algorithm("sha256", hashlib.sha256)
    register_algorithm("blake2b", hashlib.blake2b)
    # sha512_256 comes from OpenSSL and is missing from some builds
    if PREFERRED_ALGORITHM in hashlib.algorithms_available:
        register_algorithm(PREFERRED_ALGORITHM, partial(hashlib.new, PREFERRED_ALGORITHM))
    register_algorithm("xxh64", xxhash.xxh64)
    register_algorithm("xxh128", xxhash.xxh3_128)


def default_algorithm_name() -> str:
    """sha512_256 when registered, otherwise sha256. Both produce 32-byte digests."""
    if PREFERRED_ALGORITHM in _REGISTRY:
        return PREFERRED_ALGORITHM
    return FALLBACK_ALGORITHM


register_builtin_algorithms()
DEFAULT_ALGORITHM = default_algorithm_name()


class HasherImpl(Hasher):
    """
    Streams whole files through one reusable hash state.
    Not thread-safe: each worker owns its own instance.
    """

    def __init__(self, algorithm: HashAlgorithm, chunk_size: int = DEFAULT_CHUNK_SIZE):
        self.algorithm = algorithm
        self.chunk_size = chunk_size
        self._pristine = algorithm.new()
        self._state = self._pristine.copy()

    def reset(self) -> None:
        """Restores the state to empty input. xxhash states reset in place, hashlib ones from the pristine copy."""
        if hasattr(self._state, "reset"):
            self._state.reset()
        else:
            self._state = self._pristine.copy()

    def hash_file(self, path: str) -> bytes:
        """
        Computes the digest of the full content of `path`.

        Raises:
            OpenError: the file could not be opened
            ReadError: an I/O error occurred mid-stream (partial state is discarded)
            CloseError: closing the file reported an error
        """
        self.reset()
        try:
            f = open(path, "rb")
        except OSError as e:
            raise OpenError(path, e) from e

        try:
            for chunk in iter(lambda: f.read(self.chunk_size), b""):
                self._state.update(chunk)
        except OSError as e:
            self._close_quietly(f, path)
            self.reset()
            raise ReadError(path, e) from e

        try:
            f.close()
        except OSError as e:
            raise CloseError(path, e) from e

        return self._state.digest()

    @staticmethod
    def _close_quietly(f, path: str) -> None:
        """Closes after a read failure; the read error is the one reported."""
        try:
            f.close()
        except OSError as e:
            logger.debug(f"Ignoring close error for {path} after failed read: {e}")
