"""Reading diff files handed over by the file selection layer."""

import logging

from diff_highlight.diff_highlight_exceptions import DiffReadError


class DiffFileReader:
    """Reads diff files as text."""

    def __init__(self) -> None:
        """Initialize the reader."""
        self._logger = logging.getLogger("DiffFileReader")

    def read(self, path: str) -> str:
        """
        Read a diff file.

        Bytes that are not valid UTF-8 decode to U+FFFD, which the parsers strip
        before splitting.

        Args:
            path: Path to the diff file

        Returns:
            Text of the file

        Raises:
            DiffReadError: If the file cannot be read
        """
        try:
            with open(path, 'rb') as f:
                data = f.read()

        except OSError as e:
            self._logger.exception("Failed to read diff file: %s", path)
            raise DiffReadError(
                f"Could not read diff file: {path}",
                {'path': path, 'detail': str(e)}
            ) from e

        self._logger.debug("Read %d bytes from %s", len(data), path)
        return data.decode('utf-8', errors='replace')

    def read_optional(self, path: str | None) -> str | None:
        """
        Read a diff file that may not have been selected yet.

        Args:
            path: Path to the diff file, or None

        Returns:
            Text of the file, or None if no path was given

        Raises:
            DiffReadError: If the file cannot be read
        """
        if path is None:
            return None

        return self.read(path)
