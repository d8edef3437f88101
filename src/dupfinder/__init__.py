"""
dupfinder: duplicate file finder that reports reclaimable space.

Core features:
- Recursive scan with case-insensitive extension filter
- Full-content digests (MD5 by default, xxHash64 optional), optional thread pool
- Duplicate groups ordered largest first, members oldest first
- Keep-oldest policy with total reclaimable bytes (report only, never deletes)
- CLI interface for headless/server usage
"""

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("dupfinder")
except Exception:
    try:
        import tomllib  # Python 3.11+
    except ImportError:
        import tomli as tomllib  # Python < 3.11: pip install tomli

    from pathlib import Path as _Path

    with open(_Path(__file__).resolve().parents[2] / "pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API: only what users should import directly
from dupfinder.api import scan, find_duplicates, classify
from dupfinder.commands import DeduplicationCommand
from dupfinder.core import (
    ScanParams, HashAlgorithmName, FileRecord, DuplicateGroup, GroupClassification,
    ClassificationReport, DuplicateReport, SkippedFile, ScanError, InvalidRootError)
from dupfinder.utils.convert_utils import ConvertUtils

__all__ = [
    "scan",
    "find_duplicates",
    "classify",
    "DeduplicationCommand",
    "ScanParams",
    "HashAlgorithmName",
    "FileRecord",
    "DuplicateGroup",
    "GroupClassification",
    "ClassificationReport",
    "DuplicateReport",
    "SkippedFile",
    "ScanError",
    "InvalidRootError",
    "ConvertUtils",
    "__version__",
]
