"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

api.py

Functional facade over the core engine. Three operations, chained through explicit data:

    records = scan("/photos", {".jpg"})
    groups = find_duplicates(records)
    report = classify(groups)
    report.total_wasted_bytes

No state is kept between calls.
"""
from typing import Iterable, List, Sequence

from dupfinder.core.deduplicator import DeduplicatorImpl
from dupfinder.core.hasher import HasherImpl, get_algorithm
from dupfinder.core.models import (
    ClassificationReport,
    DuplicateGroup,
    FileRecord,
    HashAlgorithmName,
)
from dupfinder.core.reporter import ReporterImpl
from dupfinder.core.scanner import FileScannerImpl


def scan(
    root_path: str,
    extensions: Iterable[str] = (),
    algorithm: HashAlgorithmName = HashAlgorithmName.MD5,
    workers: int = 1,
) -> List[FileRecord]:
    """
    Hash every regular file under root_path whose extension is in extensions
    (all files when empty). Unreadable files are skipped.

    Raises:
        InvalidRootError: root_path is missing or not a directory
        ScanError: a directory under root_path could not be listed
    """
    if isinstance(extensions, str):
        extensions = [extensions]
    scanner = FileScannerImpl(
        root_dir=root_path,
        extensions=list(extensions),
        hasher=HasherImpl(get_algorithm(HashAlgorithmName(algorithm))),
        workers=workers,
    )
    return scanner.scan()


def find_duplicates(records: Sequence[FileRecord]) -> List[DuplicateGroup]:
    """Group records by digest; see DeduplicatorImpl.find_duplicates."""
    return DeduplicatorImpl().find_duplicates(records)


def classify(groups: Sequence[DuplicateGroup]) -> ClassificationReport:
    """Mark the oldest file of each group as kept and total the reclaimable bytes."""
    return ReporterImpl().classify(groups)
