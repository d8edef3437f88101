"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models and domain logic for file scanning and deduplication.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Union, Tuple
import logging
import os
from enum import Enum

logger = logging.getLogger(__name__)


# =============================
# Enums
# =============================

class HashAlgorithmName(Enum):
    """
    Content digest used to identify files.
    Neither option is collision-resistant against crafted input.
    """
    MD5 = "md5"
    XXHASH = "xxhash"

    @property
    def display_name(self) -> str:
        """Human-readable name for UI display."""
        mapping = {
            HashAlgorithmName.MD5: "MD5",
            HashAlgorithmName.XXHASH: "xxHash64",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


class Stage(str, Enum):
    SCAN = "scan"
    GROUP = "group"
    CLASSIFY = "classify"


def file_extension(filename: str) -> str:
    """
    Lower-cased suffix from the last dot of the base name, dot included.
    A leading dot counts, so ".gitignore" has the extension ".gitignore".
    """
    base = os.path.basename(filename)
    idx = base.rfind('.')
    return base[idx:].lower() if idx >= 0 else ""


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class FileRecord:
    """
    A single scanned file. Identity is the path; dedup equality is the digest.
    """
    path: str
    size: int  # in bytes, from metadata
    digest: bytes
    modified: float  # POSIX timestamp

    def __post_init__(self):
        if self.size < 0:
            raise ValueError(f"File size cannot be negative: {self.path}")
        if not isinstance(self.digest, bytes) or not self.digest:
            raise ValueError(f"Digest must be non-empty bytes: {self.path}")

    @property
    def hex_digest(self) -> str:
        return self.digest.hex()

    @property
    def name(self) -> str:
        return os.path.basename(self.path)

    @property
    def extension(self) -> str:
        return file_extension(self.name)  # ".JPG" → ".jpg"

    def __repr__(self):
        return f"<FileRecord path={self.path}, size={self.size}, digest={self.hex_digest[:8]}>"


@dataclass(frozen=True)
class SkippedFile:
    """A file the scanner could not read (soft error)."""
    path: str
    reason: str


@dataclass(frozen=True)
class DuplicateGroup:
    """
    Files sharing one digest. Always holds two or more members,
    all with the group's digest and size.
    """
    digest: bytes
    size: int
    files: Tuple[FileRecord, ...]

    def __post_init__(self):
        # Accept any sequence but store an immutable tuple
        object.__setattr__(self, "files", tuple(self.files))

        if len(self.files) < 2:
            raise ValueError("Duplicate group must contain at least two files")
        for file in self.files:
            if file.digest != self.digest:
                raise ValueError(f"Cannot add file with different digest to a group: {file.path}")
            if file.size != self.size:
                raise ValueError(
                    f"Equal digest but different size ({file.size} != {self.size}): {file.path}"
                )

    @property
    def count(self) -> int:
        """How many files are in this group."""
        return len(self.files)

    @property
    def hex_digest(self) -> str:
        return self.digest.hex()

    @property
    def wasted_bytes(self) -> int:
        """Bytes held by every member except one."""
        return self.size * (self.count - 1)

    def __repr__(self):
        return f"<DuplicateGroup digest={self.hex_digest[:8]}, size={self.size}, count={self.count}>"


@dataclass(frozen=True)
class GroupClassification:
    """Keep/removable verdict for one duplicate group."""
    group: DuplicateGroup
    keep: FileRecord
    removable: Tuple[FileRecord, ...]

    @property
    def wasted_bytes(self) -> int:
        return self.group.size * len(self.removable)


@dataclass(frozen=True)
class ClassificationReport:
    groups: Tuple[GroupClassification, ...] = ()
    total_wasted_bytes: int = 0

    @property
    def removable_paths(self) -> List[str]:
        return [f.path for g in self.groups for f in g.removable]

    @property
    def removable_count(self) -> int:
        return sum(len(g.removable) for g in self.groups)


class DeduplicationStats:
    """
    Statistics collected during a deduplication run.
    """
    def __init__(self):
        self.total_time: float = 0.0
        self.files_scanned: int = 0
        self.files_skipped: int = 0
        self.stage_stats: Dict[str, Dict[str, Union[int, float]]] = {}

    def update_stage(
            self,
            stage_name: str,
            items_out: int,
            items_in: int,
            duration: float
    ) -> None:
        if stage_name not in self.stage_stats:
            self.stage_stats[stage_name] = {
                "in": 0,
                "out": 0,
                "time": 0.0
            }
        self.stage_stats[stage_name]["in"] += items_in
        self.stage_stats[stage_name]["out"] += items_out
        self.stage_stats[stage_name]["time"] += duration
        logger.debug(
            f"Stage {stage_name}: in={items_in} out={items_out} time={duration:.3f}s"
        )

    def print_summary(self) -> str:
        labels = {
            Stage.SCAN.value: "Scan (files)",
            Stage.GROUP.value: "Grouping (groups)",
            Stage.CLASSIFY.value: "Classification (removable)",
        }

        lines = [
            "Deduplication Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s",
            f"Files scanned / skipped: {self.files_scanned} / {self.files_skipped}\n",
            "Stage: IN / OUT / TIME"
        ]

        for stage, data in self.stage_stats.items():
            label = labels.get(stage, stage.title())
            lines.append(f"{label}: {data['in']} / {data['out']} / {data['time']:.3f}s")

        return "\n".join(lines)


@dataclass
class DuplicateReport:
    """Everything produced by one DeduplicationCommand run."""
    records: List[FileRecord]
    groups: List[DuplicateGroup]
    classification: ClassificationReport
    skipped: List[SkippedFile] = field(default_factory=list)
    stats: Optional[DeduplicationStats] = None

    @property
    def total_wasted_bytes(self) -> int:
        return self.classification.total_wasted_bytes


"""
DTO for scan parameters with built-in validation.
Interface-agnostic: used by the CLI and by library callers.
"""

DEFAULT_CHUNK_SIZE = 1024 * 1024


def normalize_extensions(extensions) -> List[str]:
    """Trim, lower-case and dot-prefix extension filters; drop blanks and repeats."""
    normalized = []
    for ext in extensions or []:
        ext = ext.strip().lower()
        if ext and not ext.startswith('.'):
            ext = f".{ext}"
        if ext and ext not in normalized:
            normalized.append(ext)
    return normalized


@dataclass
class ScanParams:
    """Parameters for a deduplication run with validation."""
    root_dir: str
    extensions: List[str] = field(default_factory=list)
    algorithm: HashAlgorithmName = HashAlgorithmName.MD5
    workers: int = 1
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        if self.workers < 1:
            raise ValueError("Worker count must be at least 1")

        if self.chunk_size <= 0:
            raise ValueError("Chunk size must be positive")

        if isinstance(self.algorithm, str):
            self.algorithm = HashAlgorithmName(self.algorithm)

        self.extensions = normalize_extensions(self.extensions)

    @staticmethod
    def from_human_readable(
            root_dir: str,
            extensions_str: str = "",
            algorithm: HashAlgorithmName = HashAlgorithmName.MD5,
            workers: int = 1,
    ) -> 'ScanParams':
        """
        Factory method to create params from a comma-separated extension string.
        Useful for CLI argument parsing.
        """
        ext_list = [
            ext.strip() for ext in extensions_str.split(",") if ext.strip()
        ] if extensions_str else []

        return ScanParams(
            root_dir=root_dir,
            extensions=ext_list,
            algorithm=algorithm,
            workers=workers,
        )
