"""
Tests for DeduplicatorImpl, unit-level and end-to-end with the scanner.
Verifies grouping invariants, ordering and the zero-byte file policy.
"""
import pytest
from dupfinder.core import FileScannerImpl, DeduplicatorImpl, FileRecord


def record(path, digest, size=3, modified=0.0):
    return FileRecord(path=path, size=size, digest=digest, modified=modified)


class TestDeduplicatorUnit:

    def test_every_group_has_two_or_more_members_with_shared_digest(self):
        records = [
            record("/a", b"x" * 16), record("/b", b"x" * 16), record("/c", b"x" * 16),
            record("/d", b"y" * 16), record("/e", b"y" * 16),
            record("/f", b"z" * 16),
        ]
        groups = DeduplicatorImpl().find_duplicates(records)

        assert len(groups) == 2
        for g in groups:
            assert g.count == len(g.files) >= 2
            assert all(f.digest == g.digest for f in g.files)

    def test_union_of_members_equals_colliding_records(self):
        records = [
            record("/a", b"1" * 16), record("/b", b"1" * 16),
            record("/c", b"2" * 16),
            record("/d", b"3" * 16), record("/e", b"3" * 16),
        ]
        groups = DeduplicatorImpl().find_duplicates(records)
        members = {f.path for g in groups for f in g.files}
        assert members == {"/a", "/b", "/d", "/e"}

    def test_groups_ordered_by_size_then_digest(self):
        records = [
            record("/s1", b"\x02" * 16, size=10), record("/s2", b"\x02" * 16, size=10),
            record("/l1", b"\x09" * 16, size=50), record("/l2", b"\x09" * 16, size=50),
            record("/t1", b"\x01" * 16, size=10), record("/t2", b"\x01" * 16, size=10),
        ]
        groups = DeduplicatorImpl().find_duplicates(records)
        assert [(g.size, g.digest[:1]) for g in groups] == [
            (50, b"\x09"), (10, b"\x01"), (10, b"\x02")
        ]

    def test_members_ordered_oldest_first(self):
        records = [
            record("/new", b"h" * 16, modified=30.0),
            record("/old", b"h" * 16, modified=10.0),
            record("/mid", b"h" * 16, modified=20.0),
        ]
        groups = DeduplicatorImpl().find_duplicates(records)
        assert [f.path for f in groups[0].files] == ["/old", "/mid", "/new"]

    def test_input_not_modified(self):
        records = [record("/b", b"h" * 16, modified=2.0), record("/a", b"h" * 16, modified=1.0)]
        snapshot = list(records)
        DeduplicatorImpl().find_duplicates(records)
        assert records == snapshot

    def test_zero_byte_files_form_one_group(self):
        """Empty files share a digest and are reported together, wasting nothing."""
        empty_digest = b"e" * 16
        records = [record(f"/empty{i}", empty_digest, size=0) for i in range(3)]
        groups = DeduplicatorImpl().find_duplicates(records)

        assert len(groups) == 1
        assert groups[0].count == 3
        assert groups[0].wasted_bytes == 0

    def test_same_digest_different_size_is_an_error(self):
        records = [record("/a", b"h" * 16, size=3), record("/b", b"h" * 16, size=4)]
        with pytest.raises(ValueError):
            DeduplicatorImpl().find_duplicates(records)

    def test_empty_input(self):
        assert DeduplicatorImpl().find_duplicates([]) == []


class TestDeduplicatorIntegration:
    """Test full scan → dedup pipeline with real files."""

    def test_finds_both_duplicate_sets(self, test_files, temp_dir):
        files = FileScannerImpl(root_dir=str(temp_dir), extensions=[".txt"]).scan()
        groups = DeduplicatorImpl().find_duplicates(files)

        assert [g.size for g in groups] == [2048, 1024]
        assert groups[0].count == 2
        assert groups[1].count == 3

    def test_members_ordered_by_mtime(self, test_files, temp_dir):
        files = FileScannerImpl(root_dir=str(temp_dir)).scan()
        groups = DeduplicatorImpl().find_duplicates(files)

        group_a = next(g for g in groups if g.size == 1024)
        assert [f.path for f in group_a.files] == [
            str(test_files["sub_dup"]), str(test_files["dup1_a"]), str(test_files["dup1_b"])
        ]

    def test_empty_directory_returns_empty_result(self, temp_dir):
        files = FileScannerImpl(root_dir=str(temp_dir)).scan()
        assert DeduplicatorImpl().find_duplicates(files) == []

    def test_real_empty_files_grouped(self, temp_dir):
        for name in ("a", "b", "c"):
            (temp_dir / name).write_bytes(b"")
        files = FileScannerImpl(root_dir=str(temp_dir)).scan()
        groups = DeduplicatorImpl().find_duplicates(files)

        assert len(groups) == 1
        assert groups[0].size == 0
        assert groups[0].count == 3
