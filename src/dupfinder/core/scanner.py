"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Walks a directory tree and turns every matching regular file into a hashed FileRecord.
Features:
- Recursive traversal with os.walk (symlinks are never followed)
- Case-insensitive extension filter
- Per-file errors are soft: the file is skipped and the walk continues
- Directory enumeration errors are hard: the scan aborts with ScanError
- Optional bounded thread pool for hashing
"""

import os
import stat
import time
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import List, Optional, Callable, Iterable, Tuple

from dupfinder.core.errors import ScanError, InvalidRootError
from dupfinder.core.hasher import HasherImpl
from dupfinder.core.interfaces import FileScanner, Hasher
from dupfinder.core.models import FileRecord, SkippedFile, file_extension, normalize_extensions

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, Optional[int]], None]


class FileScannerImpl(FileScanner):
    """
    Scans directories recursively and hashes files that pass the extension filter.

    Attributes:
        root_dir: Root directory to scan
        extensions: Normalized allowed extensions (e.g., [".txt", ".jpg"]); empty means all
        hasher: Hasher used to compute content digests
        workers: Number of hashing threads; 1 keeps the sequential reference behavior
        skipped: Files skipped by the last scan (soft errors)
    """

    # Progress throttling: update every N files
    PROGRESS_INTERVAL = 500

    def __init__(
        self,
        root_dir: str,
        extensions: Optional[Iterable[str]] = None,
        hasher: Optional[Hasher] = None,
        workers: int = 1
    ):
        if workers < 1:
            raise ValueError("Worker count must be at least 1")
        self.root_dir = root_dir
        self.extensions = normalize_extensions(extensions)
        self.hasher = hasher or HasherImpl()
        self.workers = workers
        self.skipped: List[SkippedFile] = []

    def scan(self, progress_callback: Optional[ProgressCallback] = None) -> List[FileRecord]:
        """
        Returns records for every regular file under root_dir matching the filter.
        Sequential mode emits records in walk order; pooled mode sorts them by path.

        Raises:
            InvalidRootError: root_dir is missing or not a directory
            ScanError: a directory could not be enumerated
        """
        logger.debug("Starting scan operation")
        logger.debug(f"Root directory: {self.root_dir}")
        logger.debug(f"Filters: extensions={self.extensions}, workers={self.workers}")

        self._validate_root()
        self.skipped = []
        start_time = time.time()

        if self.workers == 1:
            found_files = self._scan_sequential(progress_callback)
        else:
            found_files = self._scan_pooled(progress_callback)

        elapsed_time = time.time() - start_time
        logger.debug(f"Total scan time: {elapsed_time:.2f} seconds")
        logger.debug(
            f"Scan completed. Found {len(found_files)} matching files, skipped {len(self.skipped)}."
        )
        return found_files

    def _validate_root(self) -> None:
        root_path = Path(self.root_dir)
        if not root_path.exists():
            error_msg = f"Directory does not exist: {self.root_dir}"
            logger.error(error_msg)
            raise InvalidRootError(error_msg, path=self.root_dir)
        if not root_path.is_dir():
            error_msg = f"Not a directory: {self.root_dir}"
            logger.error(error_msg)
            raise InvalidRootError(error_msg, path=self.root_dir)

    def _scan_sequential(self, progress_callback: Optional[ProgressCallback]) -> List[FileRecord]:
        found_files = []
        processed = 0
        for path, st in self._walk():
            record = self._hash_file(path, st)
            if record:
                found_files.append(record)
            processed += 1
            if progress_callback and processed % self.PROGRESS_INTERVAL == 0:
                progress_callback('scanning', processed, None)

        if progress_callback:
            progress_callback('scanning', processed, processed)
        return found_files

    def _scan_pooled(self, progress_callback: Optional[ProgressCallback]) -> List[FileRecord]:
        # Walk first so directory errors abort before any hashing starts
        candidates = list(self._walk())
        total = len(candidates)
        if progress_callback:
            progress_callback('scanning', total, None)

        found_files = []
        done = 0
        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            futures = {
                executor.submit(self.hasher.compute_digest, path, st.st_size): (path, st)
                for path, st in candidates
            }
            # Fan-in happens on this thread only
            for future in as_completed(futures):
                path, st = futures[future]
                try:
                    digest = future.result()
                except OSError as e:
                    self._skip(path, e)
                else:
                    found_files.append(self._make_record(path, st, digest))
                done += 1
                if progress_callback and (done % self.PROGRESS_INTERVAL == 0 or done == total):
                    progress_callback('hashing', done, total)

        found_files.sort(key=lambda r: r.path)
        self.skipped.sort(key=lambda s: s.path)
        return found_files

    def _walk(self) -> Iterable[Tuple[str, os.stat_result]]:
        """Yields (path, lstat) for each regular file that passes the extension filter."""
        for root, dirs, files in os.walk(self.root_dir, onerror=self._on_walk_error):
            for filename in files:
                if not self._extension_passes(filename):
                    logger.debug(f"Skipping {filename} (extension not allowed)")
                    continue
                path = os.path.join(root, filename)
                st = self._regular_file_stat(path)
                if st is not None:
                    yield path, st

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        """os.walk error hook: failing to list a directory aborts the scan."""
        error_msg = f"Cannot read directory {error.filename}: {error.strerror or error}"
        logger.error(error_msg)
        raise ScanError(error_msg, path=error.filename) from error

    def _regular_file_stat(self, path: str) -> Optional[os.stat_result]:
        try:
            st = os.lstat(path)
        except OSError as e:
            self._skip(path, e)
            return None

        if stat.S_ISLNK(st.st_mode):
            logger.debug(f"Skipping symbolic link: {path}")
            return None
        if not stat.S_ISREG(st.st_mode):
            logger.debug(f"Skipping non-regular file: {path}")
            return None
        return st

    def _hash_file(self, path: str, st: os.stat_result) -> Optional[FileRecord]:
        """
        Hash a single file and build its record.
        Returns:
            Optional[FileRecord]: None if the file could not be read
        """
        try:
            digest = self.hasher.compute_digest(path, st.st_size)
        except OSError as e:
            self._skip(path, e)
            return None
        return self._make_record(path, st, digest)

    @staticmethod
    def _make_record(path: str, st: os.stat_result, digest: bytes) -> FileRecord:
        logger.debug(f"Accepted file: {path} ({st.st_size} bytes)")
        return FileRecord(path=path, size=st.st_size, digest=digest, modified=st.st_mtime)

    def _skip(self, path: str, error: Exception) -> None:
        logger.warning(f"Skipping unreadable file {path}: {error}")
        self.skipped.append(SkippedFile(path=path, reason=str(error)))

    def _extension_passes(self, filename: str) -> bool:
        """
        Check if file matches any of the allowed extensions.
        Returns:
            True if no filter is set or the extension is allowed
        """
        if not self.extensions:
            return True
        return file_extension(filename) in self.extensions
