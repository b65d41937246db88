"""
Shared fixtures for hashrename tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
from pathlib import Path
from typing import Dict


@pytest.fixture
def temp_dir(tmp_path, monkeypatch):
    """Isolated directory; the working directory is switched into it for relative globs."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files for renaming scenarios:
    - 2 files with distinct content and extensions
    - 1 file without extension
    - 1 file whose name already looks like a 32-byte digest (wrong content on purpose)
    - 1 file in a subdirectory
    - 1 subdirectory (must never be renamed)
    """
    files = {}

    files["photo"] = temp_dir / "photo.jpg"
    files["photo"].write_bytes(b"JPEG" * 256)

    files["notes"] = temp_dir / "notes.txt"
    files["notes"].write_bytes(b"some notes\n")

    files["plain"] = temp_dir / "README"
    files["plain"].write_bytes(b"no extension here")

    files["hashed"] = temp_dir / ("ab" * 32 + ".bin")
    files["hashed"].write_bytes(b"content does not match the name")

    subdir = temp_dir / "nested"
    subdir.mkdir()
    files["subdir"] = subdir
    files["nested"] = subdir / "deep.txt"
    files["nested"].write_bytes(b"deep content")

    return files
