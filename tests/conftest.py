"""
Shared fixtures for deduplication core tests.
Creates isolated temporary directories with controlled test files.
"""
import os
import pytest
import tempfile
from pathlib import Path
from typing import Dict
import sys

# Add src/ to sys.path so 'dupfinder' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


def write_file(path: Path, content: bytes, mtime: float = None) -> Path:
    """Write bytes and optionally pin the modification time."""
    path.write_bytes(content)
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        # Resolved so paths match what the CLI prints (e.g. /tmp → /private/tmp on macOS)
        yield Path(tmpdir).resolve()


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files for deduplication scenarios:
    - 3 identical 1KB files of 'A' (one in a subdirectory)
    - 2 identical 2KB files of 'B'
    - 2 unique files (different content)
    - 1 empty file (unique, so never grouped)
    - 1 file with .tmp extension (excluded by a .txt filter)
    Modification times are pinned so "oldest" is predictable.
    """
    files = {}

    # Duplicate set #1 (1KB of 'A')
    content_a = b"A" * 1024
    files["dup1_a"] = write_file(temp_dir / "dup1_a.txt", content_a, mtime=1000)
    files["dup1_b"] = write_file(temp_dir / "dup1_b.txt", content_a, mtime=2000)

    # Duplicate pair #2 (2KB of 'B')
    content_b = b"B" * 2048
    files["dup2_a"] = write_file(temp_dir / "dup2_a.txt", content_b, mtime=3000)
    files["dup2_b"] = write_file(temp_dir / "dup2_b.txt", content_b, mtime=1500)

    # Unique files
    files["unique1"] = write_file(temp_dir / "unique1.txt", b"C" * 1500, mtime=1000)
    files["unique2"] = write_file(temp_dir / "unique2.txt", b"D" * 2500, mtime=1000)

    # Empty file (single zero-byte file, so no group forms)
    files["empty"] = write_file(temp_dir / "empty.txt", b"", mtime=1000)

    # Filtered file (wrong extension for .txt filter)
    files["filtered"] = write_file(temp_dir / "ignore.tmp", b"E" * 1024, mtime=1000)

    # Subdirectory with the oldest copy of 'A'
    subdir = temp_dir / "subdir"
    subdir.mkdir()
    files["sub_dup"] = write_file(subdir / "dup_in_subdir.txt", content_a, mtime=500)

    return files
