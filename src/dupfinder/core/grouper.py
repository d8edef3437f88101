"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Groups file records by a computed key, dropping keys held by a single record.
"""

from typing import List, Dict, Any, Callable, Sequence
from collections import defaultdict
from dupfinder.core.interfaces import FileGrouper
from dupfinder.core.models import FileRecord


class FileGrouperImpl(FileGrouper):
    """
    A concrete implementation of FileGrouper.
    Records carry their digest, so no I/O happens here.
    """

    def group_by_digest(self, records: Sequence[FileRecord]) -> Dict[bytes, List[FileRecord]]:
        """Groups records by full content digest."""
        return self._group_by(records, lambda r: r.digest)

    @staticmethod
    def _group_by(records: Sequence[FileRecord], key_func: Callable[[FileRecord], Any]) -> Dict[Any, List[FileRecord]]:
        """
        Helper method to group records by any computed key.
        Args:
            records: Records to group
            key_func: Function that computes a hashable key from a FileRecord
        Returns:
            Dict[key, List[FileRecord]] with only groups of 2+ records,
            members kept in input order
        """
        groups = defaultdict(list)
        for record in records:
            groups[key_func(record)].append(record)

        return {key: group for key, group in groups.items() if len(group) >= 2}
