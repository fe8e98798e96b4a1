"""Tests for preview key and file name conventions."""

from dbox_shared import (
    build_display_file_name,
    build_preview_file_name,
    build_preview_key,
)


class TestPreviewKey:
    """Preview key derivation from the source key."""

    def test_preview_key_appends_preview_file(self) -> None:
        assert build_preview_key("inodes/u1/abc", "html") == "inodes/u1/abc/preview.html"

    def test_preview_key_is_deterministic(self) -> None:
        assert build_preview_key("k", "html") == build_preview_key("k", "html")

    def test_preview_file_name(self) -> None:
        assert build_preview_file_name("html") == "preview.html"


class TestDisplayFileName:
    def test_appends_extension_to_original_name(self) -> None:
        assert build_display_file_name("report.csv", "html") == "report.csv.html"

    def test_keeps_unicode_name(self) -> None:
        assert build_display_file_name("données.csv", "html") == "données.csv.html"
