"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
Exception hierarchy for the scanning pipeline.

Hard errors (ScanError and subclasses) abort a scan and reach the caller.
SizeMismatchError is a soft, per-file error: the scanner logs it and moves on.
"""
from typing import Optional


class DupFinderError(Exception):
    """Base class for all dupfinder errors."""


class ScanError(DupFinderError):
    """A directory could not be enumerated; the whole scan is aborted."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class InvalidRootError(ScanError):
    """Root path does not exist or is not a directory."""


class SizeMismatchError(DupFinderError, OSError):
    """Bytes streamed through the hash differ from the size reported by metadata."""

    def __init__(self, path: str, expected: int, actual: int):
        super().__init__(
            f"Size mismatch for {path}: metadata says {expected} bytes, read {actual} bytes"
        )
        self.path = path
        self.expected = expected
        self.actual = actual
