"""Tests for the diff sanitizer."""

from diff_highlight.diff_sanitizer import sanitize_diff_text


class TestSanitizeDiffText:
    """Test removal of encoding debris."""

    def test_removes_carriage_returns(self):
        """Test that CRLF line endings become LF."""
        assert sanitize_diff_text("a\r\nb\r\n") == "a\nb\n"

    def test_removes_nul_bytes(self):
        """Test that NUL bytes are removed."""
        assert sanitize_diff_text("a\x00b") == "ab"

    def test_removes_replacement_characters(self):
        """Test that U+FFFD characters are removed."""
        assert sanitize_diff_text("caf\ufffd\ufffd") == "caf"

    def test_leaves_other_text_alone(self):
        """Test that ordinary text, tabs and non-ASCII characters survive."""
        text = "+\tcafé = 'naïve'\n"

        assert sanitize_diff_text(text) == text

    def test_empty_text(self):
        """Test that empty text stays empty."""
        assert sanitize_diff_text("") == ""

    def test_idempotent(self):
        """Test that sanitizing twice gives the same result as once."""
        text = "a\r\n\x00b\ufffd\n"

        assert sanitize_diff_text(sanitize_diff_text(text)) == sanitize_diff_text(text)
