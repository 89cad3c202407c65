"""Tests for directory listing and choice building."""

import pytest

from tfselect.core.directory_scanner import build_choices, list_subdirectories


class TestListSubdirectories:
    def test_only_directories(self, infra_root):
        names = list_subdirectories(infra_root)
        assert sorted(names) == ["prod", "staging", "terraform"]

    def test_nested(self, infra_root):
        assert sorted(list_subdirectories(infra_root / "prod")) == ["eu-west-1", "us-east-1"]

    def test_empty(self, tmp_path):
        assert list_subdirectories(tmp_path) == []

    def test_missing_path_raises(self, tmp_path):
        with pytest.raises(OSError):
            list_subdirectories(tmp_path / "missing")

    def test_file_path_raises(self, infra_root):
        with pytest.raises(OSError):
            list_subdirectories(infra_root / "README.md")


class TestBuildChoices:
    def test_sorted(self):
        assert build_choices(["b", "c", "a"]) == ["a", "b", "c"]

    def test_previous_first_and_deduplicated(self):
        assert build_choices(["b", "a", "c"], previous="c") == ["c", "a", "b"]

    def test_previous_not_on_disk_still_offered(self):
        assert build_choices(["a"], previous="gone") == ["gone", "a"]

    def test_excludes_only_reserved(self):
        assert build_choices(["prod", "terraform", "dev"], exclude=["terraform"]) == ["dev", "prod"]

    def test_duplicates_removed(self):
        assert build_choices(["a", "a", "b"]) == ["a", "b"]
