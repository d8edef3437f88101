"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/reporter.py
Keep/removable policy for duplicate groups.

The oldest file of each group is kept; every other member is removable.
This is a recommendation only; nothing in core deletes files.
"""
from typing import Sequence

from dupfinder.core.interfaces import Reporter
from dupfinder.core.models import DuplicateGroup, GroupClassification, ClassificationReport
from dupfinder.core.sorter import Sorter


class ReporterImpl(Reporter):

    @staticmethod
    def classify_group(group: DuplicateGroup) -> GroupClassification:
        index = min(range(group.count), key=lambda i: Sorter.file_key(group.files[i]))
        removable = group.files[:index] + group.files[index + 1:]
        return GroupClassification(group=group, keep=group.files[index], removable=removable)

    def classify(self, groups: Sequence[DuplicateGroup]) -> ClassificationReport:
        """
        Classify every group and sum reclaimable bytes.
        Group order is preserved.
        """
        classified = tuple(self.classify_group(g) for g in groups)
        total = sum(c.wasted_bytes for c in classified)
        return ClassificationReport(groups=classified, total_wasted_bytes=total)
