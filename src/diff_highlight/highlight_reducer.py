"""Conversion of compare-diff hunks into added-line marks."""

from typing import Dict, List

from diff_highlight.diff_highlight_types import ADDED_LINE_MARK, HunkEntry, LineMark


def reduce_highlights(hunks: List[HunkEntry]) -> Dict[int, LineMark]:
    """
    Compute the line numbers that a file's hunks added.

    Line numbers within a hunk count up from its start line, but deleted lines
    do not exist in the post-change file, so each deletion pulls every later
    line in the hunk back by one.

    Args:
        hunks: Hunks for one file, in diff order

    Returns:
        Dictionary mapping 1-indexed line numbers to their marks.  Where hunks
        overlap, the later hunk's mark wins.
    """
    result: Dict[int, LineMark] = {}
    for hunk in hunks:
        offset = 0
        for i, line in enumerate(hunk.body.split('\n')):
            if line.startswith('-'):
                offset += 1
                continue

            if line.startswith('+'):
                result[hunk.start_line + i - offset] = ADDED_LINE_MARK

    return result
