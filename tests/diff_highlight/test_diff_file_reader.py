"""Tests for the diff file reader."""

import pytest

from diff_highlight.diff_file_reader import DiffFileReader
from diff_highlight.diff_highlight_exceptions import DiffHighlightError, DiffReadError


class TestDiffFileReader:
    """Test reading diff files from disk."""

    def test_read_utf8(self, tmp_path):
        """Test reading a UTF-8 file."""
        path = tmp_path / "full.diff"
        path.write_bytes("+café\n".encode("utf-8"))

        assert DiffFileReader().read(str(path)) == "+café\n"

    def test_invalid_bytes_become_replacement_characters(self, tmp_path):
        """Test that undecodable bytes are replaced rather than failing."""
        path = tmp_path / "full.diff"
        path.write_bytes(b"+ok\xff\xfe\n")

        text = DiffFileReader().read(str(path))

        assert text.startswith("+ok")
        assert "\ufffd" in text

    def test_carriage_returns_preserved(self, tmp_path):
        """Test that reading does not alter line endings; the parsers handle them."""
        path = tmp_path / "full.diff"
        path.write_bytes(b"a\r\nb\r\n")

        assert DiffFileReader().read(str(path)) == "a\r\nb\r\n"

    def test_missing_file(self, tmp_path):
        """Test that an unreadable path raises DiffReadError."""
        missing = str(tmp_path / "missing.diff")

        with pytest.raises(DiffReadError) as exc_info:
            DiffFileReader().read(missing)

        assert isinstance(exc_info.value, DiffHighlightError)
        assert exc_info.value.error_details['path'] == missing

    def test_directory(self, tmp_path):
        """Test that a directory cannot be read as a diff."""
        with pytest.raises(DiffReadError):
            DiffFileReader().read(str(tmp_path))

    def test_read_optional_none(self):
        """Test that no path means no text."""
        assert DiffFileReader().read_optional(None) is None

    def test_read_optional_path(self, tmp_path):
        """Test that a given path is read."""
        path = tmp_path / "compare.diff"
        path.write_text("x\n", encoding="utf-8")

        assert DiffFileReader().read_optional(str(path)) == "x\n"
