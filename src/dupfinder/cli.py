#!/usr/bin/env python3
"""
dupfinder CLI: Command line interface for duplicate file detection.
Reports duplicate groups and reclaimable space. Files are never modified or deleted:
the [DEL] marker is a recommendation only.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from pathlib import Path
from typing import Optional, NoReturn
import logging

LOG_FORMAT = "%(levelname)-8s | %(name)-25s | %(message)s"

logging.basicConfig(
    level=logging.WARNING,
    format=LOG_FORMAT
)

from dupfinder.core.errors import ScanError
from dupfinder.core.models import HashAlgorithmName, ScanParams, DuplicateReport
from dupfinder.commands import DeduplicationCommand
from dupfinder.utils.convert_utils import ConvertUtils
from dupfinder.aliases import (
    ALGORITHM_ALIASES, ALGORITHM_CHOICES, ALGORITHM_HELP_TEXT,
    EPILOG_TEXT
)


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False
        self.details: bool = False

        # Fix encoding for Windows consoles to prevent UnicodeEncodeError
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding='utf-8')
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding='utf-8')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse and validate command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="dupfinder",
            description="dupfinder: Find duplicate files by content and report reclaimable space",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        # Required arguments
        parser.add_argument(
            "--input", "-i",
            required=True,
            type=str,
            help="Input directory to scan for duplicates"
        )

        # Filtering options
        parser.add_argument(
            "--extensions", "-x",
            nargs="+",
            default=[],
            type=str,
            metavar='',
            help="File extensions to include, space or comma separated (e.g., .jpg .png or .jpg,.png). Default: all files"
        )

        # Hashing options
        parser.add_argument(
            "--algorithm", "-a",
            choices=ALGORITHM_CHOICES,
            default="md5",
            type=str,
            help=ALGORITHM_HELP_TEXT
        )
        parser.add_argument(
            "--workers", "-w",
            default=1,
            type=int,
            metavar='',
            help="Number of threads used for hashing. Default: 1 (sequential)"
        )

        # Output options
        parser.add_argument(
            "--details", "-d",
            action="store_true",
            help="Show size and modification time of every file"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show detailed statistics, progress and debug logging"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.quiet and args.verbose:
            self.error_exit("--quiet and --verbose cannot be used together")

        root_path = Path(args.input).resolve()
        if not root_path.exists():
            self.error_exit(f"Directory not found: {args.input}")
        if not root_path.is_dir():
            self.error_exit(f"Path is not a directory: {args.input}")

        if args.workers < 1:
            self.error_exit("Number of workers must be at least 1")

    def create_params(self, args: argparse.Namespace) -> ScanParams:
        """Create ScanParams from CLI arguments."""
        try:
            algorithm = ALGORITHM_ALIASES.get(args.algorithm, HashAlgorithmName.MD5)
            return ScanParams.from_human_readable(
                root_dir=str(Path(args.input).resolve()),
                extensions_str=",".join(args.extensions),
                algorithm=algorithm,
                workers=args.workers,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def configure_logging(self) -> None:
        """Package log level follows --verbose / --quiet."""
        if self.verbose:
            level = logging.DEBUG
        elif self.quiet:
            level = logging.ERROR
        else:
            level = logging.WARNING
        logging.getLogger("dupfinder").setLevel(level)

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(
                f"\r  [{stage}] {current}/{total} ({percent:.1f}%)"
            )
            sys.stderr.flush()
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files processed...")
            sys.stderr.flush()

    def run_deduplication(self, params: ScanParams) -> DuplicateReport:
        """Execute the scan → group → classify workflow."""
        command = DeduplicationCommand()
        if self.verbose:
            print(f"Hashing with {params.algorithm.display_name} ({params.workers} worker(s))...")

        try:
            report = command.execute(
                params,
                progress_callback=self.progress_callback if self.verbose else None
            )
        except ScanError as e:
            self.error_exit(f"Scan failed: {e}")

        if self.verbose:
            sys.stderr.write("\n")
            print("\n" + report.stats.print_summary())

        return report

    def output_results(self, report: DuplicateReport) -> None:
        """Output duplicate groups with keep/removable markers and a summary."""
        if self.quiet:
            return

        if report.skipped:
            self.warning(f"Skipped {len(report.skipped)} unreadable file(s)")
            if self.details:
                for skipped in report.skipped:
                    print(f"   [SKIP] {skipped.path}: {skipped.reason}", file=sys.stderr)

        if not report.records:
            print("No files found.")
            return

        print(f"Found {len(report.records)} files")

        if not report.groups:
            print("No duplicate groups found.")
            return

        for idx, classified in enumerate(report.classification.groups, 1):
            group = classified.group
            print(
                f"\n📁 Group {idx} | Hash: {group.hex_digest[:8]}... | "
                f"Size: {ConvertUtils.bytes_to_human(group.size)} | Files: {group.count}"
            )
            self._print_file("[KEEP]", classified.keep)
            for file in classified.removable:
                self._print_file("[DEL] ", file)
            print(f"   Reclaimable: {ConvertUtils.bytes_to_human(classified.wasted_bytes)}")

        print("=" * 60)
        print(
            f"Summary: {len(report.groups)} duplicate groups, "
            f"{report.classification.removable_count} removable files"
        )
        print(f"Total reclaimable space: {ConvertUtils.bytes_to_human(report.total_wasted_bytes)}")

    def _print_file(self, marker: str, file) -> None:
        if self.details:
            print(
                f"   {marker} {file.path} "
                f"({ConvertUtils.bytes_to_human(file.size)}, "
                f"{ConvertUtils.timestamp_to_human(file.modified)})"
            )
        else:
            print(f"   {marker} {file.path}")

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point with conditional output behavior."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet
        self.details = args.details

        self.validate_args(args)
        self.configure_logging()
        params = self.create_params(args)

        if not self.quiet:
            print(f"Scanning directory: {params.root_dir}")

        report = self.run_deduplication(params)
        self.output_results(report)

        # Show completion time
        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.2f} seconds")


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
