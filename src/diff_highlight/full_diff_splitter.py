"""Recovery of file contents from a diff against the empty tree."""

import re
from typing import List, Tuple

from diff_highlight.diff_splitter import DIFF_GIT_HEADER, DiffSplitter
from diff_highlight.diff_highlight_types import FileEntry


class FullDiffSplitter(DiffSplitter):
    """
    Splitter for "full" diffs, where every file was added against the empty tree.

    Every file header must announce a new regular file with a single hunk starting
    at line 0, so the body that follows is the complete file with each line
    prefixed by '+'.
    """

    # Header lines that follow `diff --git`, ending with the single hunk header
    _HEADER_TAIL = [
        re.compile(r'^new file mode 100644$'),
        re.compile(r'^index 0{7}\.\.[a-f0-9]+$'),
        re.compile(r'^--- /dev/null$'),
        re.compile(r'^\+\+\+ b/.+$'),
        re.compile(r'^@@ -0,0 \+\d+(?:,\d+)? @@'),
    ]

    def _match_header(self, lines: List[str], index: int) -> Tuple[str, int] | None:
        match = DIFF_GIT_HEADER.match(lines[index])
        if not match:
            return None

        if not self._match_sequence(lines, index + 1, self._HEADER_TAIL):
            return None

        return match.group(1), 1 + len(self._HEADER_TAIL)

    def split_files(self, text: str) -> List[FileEntry]:
        """
        Split a full diff into one entry per file.

        Args:
            text: Raw full diff text

        Returns:
            List of file entries in diff order.  Files with an empty body are omitted.
        """
        files: List[FileEntry] = []
        for file_name, body in self.split(text):
            if not any(body):
                self._logger.debug("Dropping file with empty body: %s", file_name)
                continue

            files.append(FileEntry(file_name, '\n'.join(body)))

        return files
