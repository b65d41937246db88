"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/file_service.py
Filesystem mutations used by the rename workers.
Renames either refuse or replace an existing target; duplicates can be sent to the system trash.
"""
import errno
import os
from pathlib import Path

from send2trash import send2trash


class FileService:
    """
    Rename and trash operations.
    OS errors from renames propagate unchanged so callers can wrap them with the file's context.
    """

    @staticmethod
    def rename_no_clobber(source: str, destination: str) -> None:
        """
        Renames `source` to `destination`, refusing to replace an existing entry.
        Callers that race on the same destination must serialize this call.
        """
        if os.path.lexists(destination):
            raise FileExistsError(errno.EEXIST, "target already exists", destination)
        os.rename(source, destination)

    @staticmethod
    def replace(source: str, destination: str) -> None:
        """Renames `source` to `destination`, replacing an existing file."""
        os.replace(source, destination)

    @staticmethod
    def move_to_trash(file_path: str):
        """Moves a file to the system trash."""
        path = Path(os.path.abspath(file_path))

        if not os.path.lexists(path):
            raise FileNotFoundError(f"File not found: {path}")

        try:
            send2trash(str(path))
        except Exception as e:
            raise RuntimeError(f"Failed to move to trash: {e}") from e
