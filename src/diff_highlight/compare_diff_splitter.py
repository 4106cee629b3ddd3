"""Splitting of a compare diff into per-file hunks."""

import re
from typing import Dict, List, Tuple

from diff_highlight.diff_splitter import DIFF_GIT_HEADER, DiffSplitter
from diff_highlight.diff_highlight_types import HunkEntry


class CompareDiffSplitter(DiffSplitter):
    """
    Splitter for "compare" diffs, taken against an arbitrary earlier commit.

    Accepts headers for both new and modified files.  Only the hunk headers and
    the line prefixes of the bodies are of any interest to later stages.
    """

    _NEW_FILE_MODE = re.compile(r'^new file mode 100644$')
    _HEADER_TAIL = [
        re.compile(r'^index [a-f0-9]+\.\.[a-f0-9]+(?: 100644)?$'),
        re.compile(r'^--- (?:a/.+|/dev/null)$'),
        re.compile(r'^\+\+\+ b/.+$'),
    ]

    # @@ -old_start[,old_count] +new_start[,new_count] @@ optional section heading
    _HUNK_HEADER = re.compile(r'^@@ -\d+(?:,\d+)? \+(\d+)(?:,\d+)? @@')

    def _match_header(self, lines: List[str], index: int) -> Tuple[str, int] | None:
        match = DIFF_GIT_HEADER.match(lines[index])
        if not match:
            return None

        header_length = 1
        if index + 1 < len(lines) and self._NEW_FILE_MODE.match(lines[index + 1]):
            header_length += 1

        if not self._match_sequence(lines, index + header_length, self._HEADER_TAIL):
            return None

        return match.group(1), header_length + len(self._HEADER_TAIL)

    def split_hunks(self, text: str) -> Dict[str, List[HunkEntry]]:
        """
        Split a compare diff into hunks, grouped by file.

        Args:
            text: Raw compare diff text

        Returns:
            Dictionary mapping file names to their hunks in diff order.  A file
            that appears more than once keeps the hunks of its last appearance.
        """
        changes: Dict[str, List[HunkEntry]] = {}
        for file_name, body in self.split(text):
            if file_name in changes:
                self._logger.debug("Duplicate file in compare diff, replacing earlier hunks: %s", file_name)

            changes[file_name] = self._split_body(file_name, body)

        return changes

    def _split_body(self, file_name: str, body: List[str]) -> List[HunkEntry]:
        """
        Split one file's body on its hunk headers.

        Args:
            file_name: Name of the file the body belongs to
            body: Lines following the file header

        Returns:
            List of hunks.  Lines ahead of the first hunk header are ignored.
        """
        hunks: List[HunkEntry] = []
        start_line = 0
        hunk_lines: List[str] | None = None

        for line in body:
            match = self._HUNK_HEADER.match(line)
            if match:
                if hunk_lines is not None:
                    hunks.append(HunkEntry(file_name, start_line, '\n'.join(hunk_lines)))

                start_line = int(match.group(1))
                hunk_lines = []
                continue

            if hunk_lines is not None:
                hunk_lines.append(line)

        if hunk_lines is not None:
            hunks.append(HunkEntry(file_name, start_line, '\n'.join(hunk_lines)))

        return hunks
