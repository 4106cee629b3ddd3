"""Removal of encoding debris from raw diff text."""

# U+FFFD shows up wherever a diff was decoded with replacement
_GARBAGE_CHARACTERS = ('\ufffd', '\x00', '\r')


def sanitize_diff_text(text: str) -> str:
    """
    Strip replacement characters, NUL bytes and carriage returns from diff text.

    Args:
        text: Raw diff text

    Returns:
        Cleaned diff text
    """
    for ch in _GARBAGE_CHARACTERS:
        text = text.replace(ch, '')

    return text
