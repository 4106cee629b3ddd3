"""
Reconstruction and change highlighting of git diffs.

This package turns a diff against the empty tree into per-file content and
marks the lines a second, narrower diff added, ready for a syntax-highlighting
renderer to display.
"""

from diff_highlight.compare_diff_splitter import CompareDiffSplitter
from diff_highlight.content_normalizer import normalize_content
from diff_highlight.diff_file_reader import DiffFileReader
from diff_highlight.diff_highlight_config import DiffHighlightConfig
from diff_highlight.diff_highlight_exceptions import (
    DiffHighlightConfigError,
    DiffHighlightError,
    DiffReadError,
)
from diff_highlight.diff_highlight_types import (
    ADDED_LINE_MARK,
    DiffHighlightResult,
    FileEntry,
    FileRecord,
    HunkEntry,
    LineMark,
)
from diff_highlight.diff_highlighter import DiffHighlighter
from diff_highlight.diff_sanitizer import sanitize_diff_text
from diff_highlight.full_diff_splitter import FullDiffSplitter
from diff_highlight.highlight_language import HighlightLanguage
from diff_highlight.highlight_language_utils import HighlightLanguageUtils
from diff_highlight.highlight_reducer import reduce_highlights

__all__ = [
    # Exceptions
    'DiffHighlightError',
    'DiffHighlightConfigError',
    'DiffReadError',
    # Types
    'LineMark',
    'ADDED_LINE_MARK',
    'FileEntry',
    'HunkEntry',
    'FileRecord',
    'DiffHighlightResult',
    'HighlightLanguage',
    # Core functions and classes
    'sanitize_diff_text',
    'normalize_content',
    'reduce_highlights',
    'FullDiffSplitter',
    'CompareDiffSplitter',
    'HighlightLanguageUtils',
    'DiffHighlightConfig',
    'DiffFileReader',
    'DiffHighlighter',
]
