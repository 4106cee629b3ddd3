"""Shared fixtures and utilities for diff highlight tests."""

from typing import List

import pytest

from diff_highlight.compare_diff_splitter import CompareDiffSplitter
from diff_highlight.diff_highlighter import DiffHighlighter
from diff_highlight.full_diff_splitter import FullDiffSplitter


class DiffTextBuilder:
    """Helper utilities for building git diff text."""

    @staticmethod
    def new_file(path: str, lines: List[str], index_hash: str = "1a2b3c4", no_newline: bool = False) -> str:
        """Build the diff of a file added against the empty tree."""
        count = f"{len(lines)}" if len(lines) == 1 else f"1,{len(lines)}"
        parts = [
            f"diff --git a/{path} b/{path}",
            "new file mode 100644",
            f"index 0000000..{index_hash}",
            "--- /dev/null",
            f"+++ b/{path}",
            f"@@ -0,0 +{count} @@",
        ]
        parts.extend(f"+{line}" for line in lines)
        if no_newline:
            parts.append("\\ No newline at end of file")

        return "\n".join(parts) + "\n"

    @staticmethod
    def modified_file(path: str, hunks: List[str]) -> str:
        """Build the diff of a modified file from pre-formatted hunk text."""
        parts = [
            f"diff --git a/{path} b/{path}",
            "index 1111111..2222222 100644",
            f"--- a/{path}",
            f"+++ b/{path}",
        ]
        return "\n".join(parts) + "\n" + "".join(hunks)

    @staticmethod
    def hunk(header: str, lines: List[str]) -> str:
        """Build hunk text from its header and body lines."""
        return "\n".join([header] + lines) + "\n"


@pytest.fixture
def builder():
    """Provide diff text building utilities."""
    return DiffTextBuilder


@pytest.fixture
def full_splitter():
    """Create a full diff splitter for testing."""
    return FullDiffSplitter()


@pytest.fixture
def compare_splitter():
    """Create a compare diff splitter for testing."""
    return CompareDiffSplitter()


@pytest.fixture
def highlighter():
    """Create a diff highlighter with the default configuration."""
    return DiffHighlighter()


@pytest.fixture
def sample_full_diff():
    """A full diff holding a TypeScript file, a Markdown file without final newline and a binary-ish file."""
    return (
        DiffTextBuilder.new_file(
            "src/app.ts",
            ['import x from "x";', '', 'const a = 1;', 'const b = 2;', 'export default a;']
        )
        + DiffTextBuilder.new_file("README.md", ["# Title", "Some text"], index_hash="5d6e7f8", no_newline=True)
        + DiffTextBuilder.new_file("data.bin", ["payload"], index_hash="9abcdef")
    )


@pytest.fixture
def sample_compare_diff():
    """A compare diff modifying src/app.ts, adding README.md and touching a file absent from the full diff."""
    return (
        DiffTextBuilder.modified_file("src/app.ts", [
            DiffTextBuilder.hunk("@@ -1,4 +1,5 @@", [
                ' import x from "x";',
                ' ',
                '-const a = 0;',
                '+const a = 1;',
                '+const b = 2;',
                ' export default a;',
            ])
        ])
        + "\n".join([
            "diff --git a/README.md b/README.md",
            "new file mode 100644",
            "index 0000000..5d6e7f8",
            "--- /dev/null",
            "+++ b/README.md",
            "@@ -0,0 +1,2 @@",
            "+# Title",
            "+Some text",
            "\\ No newline at end of file",
        ]) + "\n"
        + DiffTextBuilder.modified_file("only/in/compare.cs", [
            DiffTextBuilder.hunk("@@ -3,2 +3,2 @@ class Foo", [
                '-    int x;',
                '+    int y;',
                ' }',
            ])
        ])
    )
