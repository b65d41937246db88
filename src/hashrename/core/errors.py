"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
Error taxonomy for hashrename.

Two families:
- ConfigurationError: bad patterns, flags or algorithm names. Fatal, raised before any file work.
- FileOperationError: a single file could not be opened, read, closed or renamed.
  Counted and reported, the batch continues.
"""


class HashRenameError(Exception):
    """Base error for the project."""


# =============================
# Configuration / validation
# =============================

class ConfigurationError(HashRenameError, ValueError):
    pass


class UsageError(ConfigurationError):
    pass


class InvalidPattern(ConfigurationError):
    pass


class UnsupportedAlgorithm(ConfigurationError):
    pass


class InvalidConcurrency(ConfigurationError):
    pass


# =============================
# Per-file operations
# =============================

class FileOperationError(HashRenameError):
    """A failure confined to one file. Keeps the path and the underlying OS error."""

    action = "handle"

    def __init__(self, path: str, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"couldn't {self.action}: {cause}")


class OpenError(FileOperationError):
    action = "open"


class ReadError(FileOperationError):
    action = "read"


class CloseError(FileOperationError):
    action = "close"


class RenameError(FileOperationError):
    action = "rename"
