"""
Unified command orchestrator for deduplication.
This is the SINGLE source of truth for the run workflow, used by the CLI and library callers.
"""
import time
from typing import Optional, Callable

from dupfinder.core.deduplicator import DeduplicatorImpl
from dupfinder.core.hasher import HasherImpl, get_algorithm
from dupfinder.core.models import DeduplicationStats, DuplicateReport, ScanParams, Stage
from dupfinder.core.reporter import ReporterImpl
from dupfinder.core.scanner import FileScannerImpl


class DeduplicationCommand:
    """
    Orchestrates the entire deduplication workflow:
    1. Scan the root directory into hashed records
    2. Group records into ordered duplicate groups
    3. Classify each group into keep/removable and total the reclaimable space

    Usage:
        params = ScanParams(root_dir="~/Downloads", extensions=[".jpg"])
        report = DeduplicationCommand().execute(
            params,
            progress_callback=cli_progress_printer
        )
    """

    def __init__(self):
        self._deduplicator = DeduplicatorImpl()
        self._reporter = ReporterImpl()

    def execute(
            self,
            params: ScanParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> DuplicateReport:
        """
        Execute a full run with given parameters.

        Args:
            params: Validated scan parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None

        Returns:
            DuplicateReport with records, groups, classification and stats

        Raises:
            InvalidRootError: If the root directory is missing or not a directory
            ScanError: If a directory cannot be enumerated
        """
        stats = DeduplicationStats()
        total_start_time = time.time()

        # Step 1: Scan
        hasher = HasherImpl(get_algorithm(params.algorithm), chunk_size=params.chunk_size)
        scanner = FileScannerImpl(
            root_dir=params.root_dir,
            extensions=params.extensions,
            hasher=hasher,
            workers=params.workers
        )
        start_time = time.time()
        records = scanner.scan(progress_callback=progress_callback)
        skipped = list(scanner.skipped)
        stats.files_scanned = len(records)
        stats.files_skipped = len(skipped)
        stats.update_stage(Stage.SCAN.value, len(records), len(records) + len(skipped),
                           time.time() - start_time)

        # Step 2: Group
        start_time = time.time()
        groups = self._deduplicator.find_duplicates(records)
        stats.update_stage(Stage.GROUP.value, len(groups), len(records), time.time() - start_time)

        # Step 3: Classify
        start_time = time.time()
        classification = self._reporter.classify(groups)
        stats.update_stage(Stage.CLASSIFY.value, classification.removable_count,
                           sum(g.count for g in groups), time.time() - start_time)

        stats.total_time = time.time() - total_start_time

        return DuplicateReport(
            records=records,
            groups=groups,
            classification=classification,
            skipped=skipped,
            stats=stats,
        )
