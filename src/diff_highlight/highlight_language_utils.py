"""
Utilities for mapping file names to the language hints handed to the renderer.

This module centralizes conversion between language names, HighlightLanguage enum
values, file extensions and display names.  The renderer only registers syntax
definitions for the languages enumerated in HighlightLanguage, so everything that
resolves a language goes through these tables.
"""

import logging
from typing import Dict, List

from diff_highlight.highlight_language import HighlightLanguage


class HighlightLanguageUtils:
    """
    Utility class for highlight language conversions and metadata.

    This class centralizes all language-related operations including:
    - Converting between name strings and HighlightLanguage enum values
    - Getting the hint string the renderer expects for a language
    - Getting display names for languages
    - Detecting language from a file name's extension
    """

    # Logger for the class
    _logger = logging.getLogger("HighlightLanguageUtils")

    # Mapping from lowercase language names to enum members
    _NAME_TO_LANGUAGE: Dict[str, HighlightLanguage] = {
        "cs": HighlightLanguage.CSHARP,
        "csharp": HighlightLanguage.CSHARP,
        "css": HighlightLanguage.CSS,
        "docker": HighlightLanguage.DOCKER,
        "dockerfile": HighlightLanguage.DOCKER,
        "html": HighlightLanguage.HTML,
        "javascript": HighlightLanguage.JAVASCRIPT,
        "js": HighlightLanguage.JAVASCRIPT,
        "json": HighlightLanguage.JSON,
        "jsx": HighlightLanguage.JSX,
        "markdown": HighlightLanguage.MARKDOWN,
        "md": HighlightLanguage.MARKDOWN,
        "sass": HighlightLanguage.SASS,
        "scss": HighlightLanguage.SCSS,
        "sql": HighlightLanguage.SQL,
        "svg": HighlightLanguage.SVG,
        "ts": HighlightLanguage.TYPESCRIPT,
        "tsconfig": HighlightLanguage.TSCONFIG,
        "tsx": HighlightLanguage.TSX,
        "typescript": HighlightLanguage.TYPESCRIPT,
        "xml": HighlightLanguage.XML,
        "yaml": HighlightLanguage.YAML,
        "yml": HighlightLanguage.YAML
    }

    # Mapping from enum members to the hint strings the renderer understands
    _LANGUAGE_TO_NAME: Dict[HighlightLanguage, str] = {
        HighlightLanguage.CSHARP: "csharp",
        HighlightLanguage.CSS: "css",
        HighlightLanguage.DOCKER: "docker",
        HighlightLanguage.HTML: "html",
        HighlightLanguage.JAVASCRIPT: "js",
        HighlightLanguage.JSON: "json",
        HighlightLanguage.JSX: "jsx",
        HighlightLanguage.MARKDOWN: "md",
        HighlightLanguage.SASS: "sass",
        HighlightLanguage.SCSS: "scss",
        HighlightLanguage.SQL: "sql",
        HighlightLanguage.SVG: "svg",
        HighlightLanguage.TSCONFIG: "tsconfig",
        HighlightLanguage.TSX: "tsx",
        HighlightLanguage.TYPESCRIPT: "ts",
        HighlightLanguage.XML: "xml",
        HighlightLanguage.YAML: "yaml"
    }

    # Mapping from file extensions (without the dot) to languages
    _EXTENSION_TO_LANGUAGE: Dict[str, HighlightLanguage] = {
        'cs': HighlightLanguage.CSHARP,
        'css': HighlightLanguage.CSS,
        'docker': HighlightLanguage.DOCKER,
        'html': HighlightLanguage.HTML,
        'js': HighlightLanguage.JAVASCRIPT,
        'json': HighlightLanguage.JSON,
        'jsx': HighlightLanguage.JSX,
        'md': HighlightLanguage.MARKDOWN,
        'sass': HighlightLanguage.SASS,
        'scss': HighlightLanguage.SCSS,
        'sql': HighlightLanguage.SQL,
        'svg': HighlightLanguage.SVG,
        'ts': HighlightLanguage.TYPESCRIPT,
        'tsconfig': HighlightLanguage.TSCONFIG,
        'tsx': HighlightLanguage.TSX,
        'xml': HighlightLanguage.XML,
        'yaml': HighlightLanguage.YAML,
        'yml': HighlightLanguage.YAML
    }

    # Mapping from languages to display names
    _LANGUAGE_TO_DISPLAY_NAME: Dict[HighlightLanguage, str] = {
        HighlightLanguage.CSHARP: "C#",
        HighlightLanguage.CSS: "CSS",
        HighlightLanguage.DOCKER: "Dockerfile",
        HighlightLanguage.HTML: "HTML",
        HighlightLanguage.JAVASCRIPT: "JavaScript",
        HighlightLanguage.JSON: "JSON",
        HighlightLanguage.JSX: "JSX",
        HighlightLanguage.MARKDOWN: "Markdown",
        HighlightLanguage.SASS: "Sass",
        HighlightLanguage.SCSS: "SCSS",
        HighlightLanguage.SQL: "SQL",
        HighlightLanguage.SVG: "SVG",
        HighlightLanguage.TSCONFIG: "TSConfig",
        HighlightLanguage.TSX: "TSX",
        HighlightLanguage.TYPESCRIPT: "TypeScript",
        HighlightLanguage.UNKNOWN: "Plain text",
        HighlightLanguage.XML: "XML",
        HighlightLanguage.YAML: "YAML"
    }

    @classmethod
    def get_all_languages(cls) -> List[HighlightLanguage]:
        """
        Get a list of all languages the renderer can highlight.

        Returns:
            List of all language enum values excluding UNKNOWN
        """
        return [lang for lang in HighlightLanguage if lang != HighlightLanguage.UNKNOWN]

    @classmethod
    def get_default_extension_table(cls) -> Dict[str, HighlightLanguage]:
        """
        Get a copy of the built-in extension table.

        Returns:
            Dictionary mapping extensions (without the dot) to languages
        """
        return dict(cls._EXTENSION_TO_LANGUAGE)

    @classmethod
    def from_name(cls, name: str) -> HighlightLanguage:
        """
        Convert a language name string to a HighlightLanguage enum value.

        Args:
            name: The name of the language

        Returns:
            The corresponding HighlightLanguage enum value,
            or HighlightLanguage.UNKNOWN if not found
        """
        if not name:
            return HighlightLanguage.UNKNOWN

        normalized = name.strip().lower()
        language = cls._NAME_TO_LANGUAGE.get(normalized)
        if language is None:
            cls._logger.debug("Unrecognised language name: %s", name)
            return HighlightLanguage.UNKNOWN

        return language

    @classmethod
    def get_extension(cls, file_name: str) -> str | None:
        """
        Get the text after the final '.' of a file name.

        Args:
            file_name: Path of the file within the repository

        Returns:
            The extension without the dot, or None if the name has no extension
        """
        base_name = file_name.rsplit('/', 1)[-1]
        if '.' not in base_name:
            return None

        return base_name.rsplit('.', 1)[1]

    @classmethod
    def from_file_name(
        cls,
        file_name: str | None,
        extension_table: Dict[str, HighlightLanguage] | None = None
    ) -> HighlightLanguage:
        """
        Detect the language of a file from its extension.

        Extensions are matched case-sensitively.

        Args:
            file_name: Path of the file or None
            extension_table: Table to look the extension up in, or None for the built-in table

        Returns:
            The detected language enum value,
            or HighlightLanguage.UNKNOWN if not detected
        """
        if not file_name:
            return HighlightLanguage.UNKNOWN

        ext = cls.get_extension(file_name)
        if ext is None:
            return HighlightLanguage.UNKNOWN

        table = cls._EXTENSION_TO_LANGUAGE if extension_table is None else extension_table
        return table.get(ext, HighlightLanguage.UNKNOWN)

    @classmethod
    def get_name(cls, language: HighlightLanguage) -> str | None:
        """
        Get the hint string the renderer expects for a language.

        Args:
            language: The language enum value

        Returns:
            Language hint, or None for UNKNOWN (rendered as plain text)
        """
        return cls._LANGUAGE_TO_NAME.get(language)

    @classmethod
    def get_display_name(cls, language: HighlightLanguage) -> str:
        """
        Get the human-readable display name for a language.

        Args:
            language: The language enum value

        Returns:
            Human-readable language name for display
        """
        return cls._LANGUAGE_TO_DISPLAY_NAME.get(language, "Code")
