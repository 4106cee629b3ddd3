"""Shared dataclasses for diff highlighting."""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class LineMark:
    """Display annotation attached to a single line."""

    color: str
    label: str


ADDED_LINE_MARK = LineMark("green", "+")


@dataclass(frozen=True)
class FileEntry:
    """A file recovered from a full diff."""

    file_name: str
    content: str  # Raw body, each line still carries its '+' prefix


@dataclass(frozen=True)
class HunkEntry:
    """A single hunk from a compare diff."""

    file_name: str
    start_line: int  # First line of the post-change side (1-indexed)
    body: str  # Patch lines following the hunk header


@dataclass
class FileRecord:
    """Reconstructed file content joined with its added-line marks."""

    file_name: str
    content: str
    highlighted_lines: Dict[int, LineMark] = field(default_factory=dict)
    language: str | None = None

    def highlight_count(self) -> int:
        """Get the number of highlighted lines."""
        return len(self.highlighted_lines)


@dataclass
class DiffHighlightResult:
    """Output handed to the rendering layer."""

    file_names: List[str] = field(default_factory=list)
    file_dict: Dict[str, FileRecord] = field(default_factory=dict)

    def records_by_change_count(self) -> List[FileRecord]:
        """
        Get the file records ordered by how many lines they had added.

        Files with the most highlighted lines come first.  Files with the same
        number of highlights keep the order they had in the full diff.

        Returns:
            List of file records
        """
        return sorted(self.file_dict.values(), key=lambda record: -record.highlight_count())
