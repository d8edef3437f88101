"""
Unit tests for core data models.
Verifies record validation, group invariants and parameter normalization.
"""
import dataclasses
import pytest
from dupfinder.core.models import (
    FileRecord, DuplicateGroup, GroupClassification, ClassificationReport,
    DeduplicationStats, ScanParams, HashAlgorithmName, normalize_extensions, file_extension,
)


def make_record(path, size=3, digest=b"\x01" * 16, modified=0.0):
    return FileRecord(path=path, size=size, digest=digest, modified=modified)


class TestFileRecord:

    def test_record_is_immutable(self):
        record = make_record("/a.txt")
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.size = 10

    def test_hex_digest_and_derived_names(self):
        record = make_record("/photos/IMG_01.JPG", digest=bytes.fromhex("00ff10"))
        assert record.hex_digest == "00ff10"
        assert record.name == "IMG_01.JPG"
        assert record.extension == ".jpg"

    def test_negative_size_rejected(self):
        with pytest.raises(ValueError):
            make_record("/a.txt", size=-1)

    def test_empty_digest_rejected(self):
        with pytest.raises(ValueError):
            make_record("/a.txt", digest=b"")

    def test_zero_size_allowed(self):
        assert make_record("/empty", size=0).size == 0


class TestDuplicateGroup:

    def test_count_and_wasted_bytes(self):
        files = [make_record(f"/{i}.txt") for i in range(3)]
        group = DuplicateGroup(digest=b"\x01" * 16, size=3, files=files)
        assert group.count == 3
        assert group.wasted_bytes == 6
        assert isinstance(group.files, tuple)

    def test_single_member_rejected(self):
        with pytest.raises(ValueError, match="at least two"):
            DuplicateGroup(digest=b"\x01" * 16, size=3, files=[make_record("/a")])

    def test_member_with_other_digest_rejected(self):
        files = [make_record("/a"), make_record("/b", digest=b"\x02" * 16)]
        with pytest.raises(ValueError, match="digest"):
            DuplicateGroup(digest=b"\x01" * 16, size=3, files=files)

    def test_equal_digest_different_size_rejected(self):
        """Equal digest must imply equal size; a violation is reported, not assumed away."""
        files = [make_record("/a", size=3), make_record("/b", size=4)]
        with pytest.raises(ValueError, match="different size"):
            DuplicateGroup(digest=b"\x01" * 16, size=3, files=files)


class TestClassificationModels:

    def test_report_aggregates_removable(self):
        files = (make_record("/a"), make_record("/b"), make_record("/c"))
        group = DuplicateGroup(digest=b"\x01" * 16, size=3, files=files)
        classified = GroupClassification(group=group, keep=files[0], removable=files[1:])
        report = ClassificationReport(groups=(classified,), total_wasted_bytes=6)

        assert classified.wasted_bytes == 6
        assert report.removable_paths == ["/b", "/c"]
        assert report.removable_count == 2

    def test_empty_report_defaults(self):
        report = ClassificationReport()
        assert report.total_wasted_bytes == 0
        assert report.removable_paths == []


class TestDeduplicationStats:

    def test_update_stage_accumulates(self):
        stats = DeduplicationStats()

        stats.update_stage("scan", 5, 6, 0.5)
        stats.update_stage("scan", 1, 1, 0.25)

        assert stats.stage_stats["scan"] == {"in": 7, "out": 6, "time": 0.75}

    def test_print_summary_lists_stages(self):
        stats = DeduplicationStats()
        stats.update_stage("scan", 4, 4, 0.1)
        summary = stats.print_summary()
        assert "Scan (files): 4 / 4" in summary


class TestScanParams:

    def test_extensions_normalized(self):
        params = ScanParams(root_dir="/tmp", extensions=[" JPG", ".Png ", "", "jpg"])
        assert params.extensions == [".jpg", ".png"]

    def test_algorithm_accepts_string(self):
        params = ScanParams(root_dir="/tmp", algorithm="xxhash")
        assert params.algorithm is HashAlgorithmName.XXHASH

    @pytest.mark.parametrize("kwargs", [
        {"root_dir": ""},
        {"root_dir": "/tmp", "workers": 0},
        {"root_dir": "/tmp", "chunk_size": 0},
    ])
    def test_invalid_params_rejected(self, kwargs):
        with pytest.raises(ValueError):
            ScanParams(**kwargs)

    def test_from_human_readable_splits_commas(self):
        params = ScanParams.from_human_readable("/tmp", "jpg, .PNG,,gif")
        assert params.extensions == [".jpg", ".png", ".gif"]

    def test_normalize_extensions_handles_none(self):
        assert normalize_extensions(None) == []


class TestFileExtension:

    @pytest.mark.parametrize("name, expected", [
        ("photo.JPG", ".jpg"),
        ("archive.tar.gz", ".gz"),
        ("README", ""),
        (".txt", ".txt"),
        (".gitignore", ".gitignore"),
        ("/some.dir/file", ""),
        ("trailing.", "."),
    ])
    def test_suffix_from_last_dot(self, name, expected):
        assert file_extension(name) == expected

    def test_dotfile_record_extension(self):
        assert make_record("/repo/.gitignore").extension == ".gitignore"
