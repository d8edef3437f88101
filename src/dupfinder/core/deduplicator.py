"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

deduplicator.py
Turns scanned records into ordered duplicate groups.

Grouping key is the full content digest. Zero-byte files share one digest
and are reported together as a single group that wastes 0 bytes.
"""
import logging
from typing import List, Sequence

from dupfinder.core.grouper import FileGrouperImpl
from dupfinder.core.interfaces import Deduplicator, FileGrouper
from dupfinder.core.models import FileRecord, DuplicateGroup
from dupfinder.core.sorter import Sorter

logger = logging.getLogger(__name__)


class DeduplicatorImpl(Deduplicator):
    """
    Pure transformation: records in, groups out. Input is never modified.
    """
    def __init__(self, grouper: FileGrouper = None):
        self.grouper = grouper or FileGrouperImpl()

    def find_duplicates(self, records: Sequence[FileRecord]) -> List[DuplicateGroup]:
        """
        Args:
            records: Scanned file records, in any order
        Returns:
            Groups of 2+ records sharing a digest, largest size first,
            members oldest first
        Raises:
            ValueError: If records with one digest report different sizes
        """
        logger.debug(f"Searching for duplicates among {len(records)} files")

        groups = []
        for digest, members in self.grouper.group_by_digest(records).items():
            ordered = Sorter.sort_files(members)
            groups.append(DuplicateGroup(digest=digest, size=ordered[0].size, files=tuple(ordered)))

        groups = Sorter.sort_groups(groups)
        logger.debug(f"Found {len(groups)} duplicate groups")
        return groups
