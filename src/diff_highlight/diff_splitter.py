"""Line-oriented splitting of multi-file git diffs."""

import logging
import re
from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import List, Tuple

from diff_highlight.diff_sanitizer import sanitize_diff_text


# First line of every git file header; also ends the preceding file's body
DIFF_GIT_HEADER = re.compile(r'^diff --git a/(.+) b/.+$')


class DiffSplitterState(Enum):
    """States of the splitting state machine."""
    SEEKING_HEADER = auto()
    IN_BODY = auto()


class DiffSplitter(ABC):
    """
    Abstract base class for splitting a git diff into per-file bodies.

    Each `diff --git` line closes the current file.  If the lines starting there
    form a header the subclass recognises, a new file body begins after the
    header.  Otherwise the splitter seeks forward to the next header and
    everything in between is dropped.
    """

    def __init__(self) -> None:
        """Initialize the splitter."""
        self._logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def _match_header(self, lines: List[str], index: int) -> Tuple[str, int] | None:
        """
        Try to match a complete file header.

        Args:
            lines: All lines of the diff
            index: Index of a `diff --git` line

        Returns:
            Tuple of (file name, number of header lines), or None if the lines
            at this position are not a header this splitter accepts
        """

    def split(self, text: str) -> List[Tuple[str, List[str]]]:
        """
        Split diff text into per-file bodies.

        Args:
            text: Raw diff text

        Returns:
            List of (file name, body lines) tuples in the order they appear.  A
            body ends with an empty line if its last line was newline-terminated.
        """
        lines = sanitize_diff_text(text).split('\n')
        sections: List[Tuple[str, List[str]]] = []
        state = DiffSplitterState.SEEKING_HEADER
        file_name = ''
        body: List[str] = []
        skipped = 0

        i = 0
        while i < len(lines):
            line = lines[i]

            if DIFF_GIT_HEADER.match(line):
                if state == DiffSplitterState.IN_BODY:
                    # The newline in front of this header terminated the last body line
                    body.append('')
                    sections.append((file_name, body))

                header = self._match_header(lines, i)
                if header is None:
                    self._logger.debug("Skipping file section with unsupported header: %s", line)
                    skipped += 1
                    state = DiffSplitterState.SEEKING_HEADER
                    i += 1
                    continue

                file_name, header_length = header
                body = []
                state = DiffSplitterState.IN_BODY
                i += header_length
                continue

            if state == DiffSplitterState.IN_BODY:
                body.append(line)

            i += 1

        if state == DiffSplitterState.IN_BODY:
            sections.append((file_name, body))

        self._logger.debug("Split diff into %d file section(s), skipped %d", len(sections), skipped)
        return sections

    @staticmethod
    def _match_sequence(lines: List[str], index: int, patterns: List[re.Pattern[str]]) -> bool:
        """
        Check that consecutive lines match a sequence of patterns.

        Args:
            lines: All lines of the diff
            index: Index of the first line to check
            patterns: One compiled pattern per line

        Returns:
            True if every pattern matched its line
        """
        if index + len(patterns) > len(lines):
            return False

        return all(pattern.match(lines[index + offset]) for offset, pattern in enumerate(patterns))
