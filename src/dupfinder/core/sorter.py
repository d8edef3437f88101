"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/sorter.py
Pure ordering logic for duplicate groups: zero dependencies outside core.
Orders are total so that output is reproducible regardless of walk order.
"""
from typing import List, Sequence
from dupfinder.core.models import DuplicateGroup, FileRecord


class Sorter:
    """
    Ordering rules for reporting:
    1. Groups: largest size first, ties by hex digest ascending
    2. Files inside a group: oldest modification time first, ties by path
    """

    @staticmethod
    def file_key(record: FileRecord):
        return record.modified, record.path

    @staticmethod
    def sort_files(records: Sequence[FileRecord]) -> List[FileRecord]:
        """Returns a new list of records ordered oldest first."""
        return sorted(records, key=Sorter.file_key)

    @staticmethod
    def sort_groups(groups: Sequence[DuplicateGroup]) -> List[DuplicateGroup]:
        """Returns a new list of groups ordered by descending size."""
        if not groups:
            return []
        return sorted(groups, key=lambda g: (-g.size, g.hex_digest))
