"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the deduplication system.
These protocols enforce structural typing using Python's `typing.Protocol` to ensure
consistency across modules while maintaining flexibility and modularity.

Key Components:
---------------
- HashAlgorithm: Standardized interface for streaming hash functions (MD5, xxHash).
- Hasher: Interface for computing the full-content digest of a file.
- FileScanner: Interface for scanning directories and returning file records.
- FileGrouper: Interface for grouping records by digest.
- Deduplicator: Interface for turning records into ordered duplicate groups.
- Reporter: Interface for the keep/removable classification policy.
"""

from typing import Protocol, List, Dict, Optional, Callable, Sequence
from dupfinder.core.models import (
    FileRecord,
    DuplicateGroup,
    ClassificationReport,
)


# ===== Interfaces =====

class HashState(Protocol):
    """Incremental hash object (hashlib / xxhash compatible)."""
    def update(self, data: bytes) -> None: ...
    def digest(self) -> bytes: ...


class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Allows plugging in different hashing functions like MD5 or xxHash
    without affecting the rest of the deduplication logic.
    """

    name: str

    @staticmethod
    def new() -> HashState:
        """Returns a fresh incremental hash object."""
        ...


class Hasher(Protocol):
    """Interface for hashing the full content of a file."""
    def compute_digest(self, path: str, expected_size: int) -> bytes: ...


class FileScanner(Protocol):
    """
    Interface for scanning file systems and collecting file records.

    Methods:
        scan: Walks the tree and returns hashed records.
    """
    def scan(
        self,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> List[FileRecord]:
        """
        Scan files from the configured directory.

        Args:
            progress_callback: Optional callback for reporting progress (stage, current, total).

        Returns:
            Records for every regular file matching the extension filter.

        Raises:
            ScanError: If a directory cannot be enumerated.
        """
        ...


class FileGrouper(Protocol):
    """Interface for grouping records by content digest."""
    def group_by_digest(self, records: Sequence[FileRecord]) -> Dict[bytes, List[FileRecord]]:
        """Group records by digest, keeping only keys shared by two or more records."""
        ...


class Deduplicator(Protocol):
    """
    Interface for the deduplication engine.
    """
    def find_duplicates(self, records: Sequence[FileRecord]) -> List[DuplicateGroup]:
        """
        Returns duplicate groups ordered by size descending,
        members ordered oldest first.
        """
        ...


class Reporter(Protocol):
    """Interface for deciding which member of each group is kept."""
    def classify(self, groups: Sequence[DuplicateGroup]) -> ClassificationReport: ...
