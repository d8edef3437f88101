"""
Core deduplication engine: scanner, hasher, grouper, deduplicator and reporter.

This package contains the whole pipeline:
- FileScannerImpl: recursive directory traversal with extension filter and content hashing
- HasherImpl + MD5AlgorithmImpl / XXHashAlgorithmImpl: streaming full-content digests
- FileGrouperImpl: digest-based grouping with single-file filtering
- DeduplicatorImpl: ordered duplicate groups (largest first, oldest member first)
- ReporterImpl: keep-oldest policy and reclaimable space totals
- Models: FileRecord, DuplicateGroup, classification results and ScanParams

All components are pure Python with no UI dependencies, suitable for CLI and library usage.
"""

from .errors import DupFinderError, ScanError, InvalidRootError, SizeMismatchError
from .scanner import FileScannerImpl
from .grouper import FileGrouperImpl
from .hasher import HasherImpl, MD5AlgorithmImpl, XXHashAlgorithmImpl, get_algorithm
from .deduplicator import DeduplicatorImpl
from .reporter import ReporterImpl
from .sorter import Sorter
from .models import (
    FileRecord, SkippedFile, DuplicateGroup, GroupClassification, ClassificationReport,
    DeduplicationStats, DuplicateReport, HashAlgorithmName, ScanParams, Stage)

__all__ = [
    "DupFinderError",
    "ScanError",
    "InvalidRootError",
    "SizeMismatchError",
    "FileScannerImpl",
    "FileGrouperImpl",
    "HasherImpl",
    "MD5AlgorithmImpl",
    "XXHashAlgorithmImpl",
    "get_algorithm",
    "DeduplicatorImpl",
    "ReporterImpl",
    "Sorter",
    "FileRecord",
    "SkippedFile",
    "DuplicateGroup",
    "GroupClassification",
    "ClassificationReport",
    "DeduplicationStats",
    "DuplicateReport",
    "HashAlgorithmName",
    "ScanParams",
    "Stage",
]
