"""
Unit tests for blob name sanitization and download targets.
"""

from pathlib import Path

import pytest

from report_sync.core.utils import build_download_target, sanitize_blob_name


class TestSanitizeBlobName:
    """Test suite for sanitize_blob_name."""

    def test_replaces_colons_with_hyphens(self):
        assert sanitize_blob_name("2024-01-01T00:00:00Z") == "2024-01-01T00-00-00Z"

    @pytest.mark.parametrize(
        "name",
        [
            "2024-01-01T00:00:00Z",
            "folder/sub/report.pdf",
            'a<b>c"d|e?f*g\\h',
            "..",
            "plain-report.csv",
            "tab\there",
        ],
    )
    def test_is_idempotent(self, name):
        """Test that sanitizing twice equals sanitizing once."""
        once = sanitize_blob_name(name)
        assert sanitize_blob_name(once) == once

    def test_flattens_virtual_folders(self):
        assert sanitize_blob_name("2024/01/report.pdf") == "2024-01-report.pdf"

    def test_dot_only_names_are_neutralized(self):
        assert sanitize_blob_name("..") == "--"
        assert sanitize_blob_name(".") == "-"

    def test_leaves_safe_names_untouched(self):
        assert sanitize_blob_name("report-b") == "report-b"
        assert sanitize_blob_name(".hidden.txt") == ".hidden.txt"


class TestBuildDownloadTarget:
    """Test suite for build_download_target."""

    def test_joins_sanitized_name_with_reports_dir(self, tmp_path):
        target = build_download_target("2024-01-01T00:00:00Z.json", tmp_path)

        assert target.source_name == "2024-01-01T00:00:00Z.json"
        assert target.destination_path == tmp_path / "2024-01-01T00-00-00Z.json"

    @pytest.mark.parametrize("name", ["../escape.txt", "..", "/etc/passwd", "a/../../b"])
    def test_destination_stays_inside_reports_dir(self, tmp_path, name):
        """Test that traversal attempts still land directly in the reports directory."""
        target = build_download_target(name, tmp_path)

        assert target.destination_path.parent == tmp_path
        assert target.source_name == name

    def test_accepts_string_directory(self, tmp_path):
        target = build_download_target("report-a", str(tmp_path))
        assert target.destination_path == Path(tmp_path) / "report-a"

    def test_empty_name_raises(self, tmp_path):
        with pytest.raises(ValueError, match="empty"):
            build_download_target("", tmp_path)
