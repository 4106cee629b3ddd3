"""Joining full-diff content and compare-diff highlights into per-file records."""

import logging
from typing import Dict, List

from diff_highlight.compare_diff_splitter import CompareDiffSplitter
from diff_highlight.content_normalizer import normalize_content
from diff_highlight.diff_file_reader import DiffFileReader
from diff_highlight.diff_highlight_config import DiffHighlightConfig
from diff_highlight.diff_highlight_types import DiffHighlightResult, FileEntry, FileRecord, HunkEntry
from diff_highlight.full_diff_splitter import FullDiffSplitter
from diff_highlight.highlight_reducer import reduce_highlights


class DiffHighlighter:
    """
    Builds the per-file records the rendering layer displays.

    The full diff (taken against the empty tree) supplies each file's content and
    the compare diff supplies which of its lines were added.  Only files present
    in the full diff appear in the output.

    The most recent parse of each input is kept, so rebuilding after only one of
    the two diffs changed re-parses just that one.
    """

    def __init__(self, config: DiffHighlightConfig | None = None) -> None:
        """
        Initialize the highlighter.

        Args:
            config: Language configuration, or None for the built-in defaults
        """
        self._logger = logging.getLogger("DiffHighlighter")
        self._config = config or DiffHighlightConfig.create_default()
        self._full_splitter = FullDiffSplitter()
        self._compare_splitter = CompareDiffSplitter()
        self._reader = DiffFileReader()

        self._full_text: str | None = None
        self._files: List[FileEntry] = []
        self._compare_text: str | None = None
        self._changes: Dict[str, List[HunkEntry]] = {}

    def build(self, full_diff_text: str | None, compare_diff_text: str | None) -> DiffHighlightResult:
        """
        Build file records from a full diff and a compare diff.

        Args:
            full_diff_text: Text of `git diff <empty-tree> HEAD`, or None if not loaded yet
            compare_diff_text: Text of `git diff <start-commit> HEAD`, or None if not loaded yet

        Returns:
            DiffHighlightResult.  The file names come from the full diff alone; the
            file dictionary stays empty unless both diffs yielded files.
        """
        files = self._parse_full(full_diff_text)
        changes = self._parse_compare(compare_diff_text)
        file_names = [file.file_name for file in files]

        if not files or not changes:
            return DiffHighlightResult(file_names, {})

        return DiffHighlightResult(file_names, self.build_file_dict(files, changes))

    def build_from_files(self, full_diff_path: str | None, compare_diff_path: str | None) -> DiffHighlightResult:
        """
        Build file records from diff files on disk.

        Args:
            full_diff_path: Path to the full diff, or None if not selected yet
            compare_diff_path: Path to the compare diff, or None if not selected yet

        Returns:
            DiffHighlightResult as for build()

        Raises:
            DiffReadError: If either file cannot be read
        """
        return self.build(
            self._reader.read_optional(full_diff_path),
            self._reader.read_optional(compare_diff_path)
        )

    def build_file_dict(
        self,
        files: List[FileEntry],
        changes: Dict[str, List[HunkEntry]]
    ) -> Dict[str, FileRecord]:
        """
        Join file contents with their highlights and language hints.

        Args:
            files: Files split from the full diff
            changes: Hunks split from the compare diff, keyed by file name

        Returns:
            Dictionary mapping file names to records.  A file name that occurs
            more than once keeps its last record.
        """
        file_dict: Dict[str, FileRecord] = {}
        for file in files:
            file_dict[file.file_name] = FileRecord(
                file_name=file.file_name,
                content=normalize_content(file.content),
                highlighted_lines=reduce_highlights(changes.get(file.file_name, [])),
                language=self._config.language_for(file.file_name)
            )

        unmatched = [name for name in changes if name not in file_dict]
        if unmatched:
            self._logger.debug("%d file(s) in compare diff are missing from full diff", len(unmatched))

        return file_dict

    def _parse_full(self, text: str | None) -> List[FileEntry]:
        """Split the full diff, reusing the last parse if the text has not changed."""
        if text is None:
            return []

        if text != self._full_text:
            self._files = self._full_splitter.split_files(text)
            self._full_text = text
            self._logger.debug("Parsed %d file(s) from full diff", len(self._files))

        return self._files

    def _parse_compare(self, text: str | None) -> Dict[str, List[HunkEntry]]:
        """Split the compare diff, reusing the last parse if the text has not changed."""
        if text is None:
            return {}

        if text != self._compare_text:
            self._changes = self._compare_splitter.split_hunks(text)
            self._compare_text = text
            self._logger.debug("Parsed %d file(s) from compare diff", len(self._changes))

        return self._changes
