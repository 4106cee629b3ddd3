"""Configuration of the extension to language table."""

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict

import yaml

from diff_highlight.diff_highlight_exceptions import DiffHighlightConfigError
from diff_highlight.highlight_language import HighlightLanguage
from diff_highlight.highlight_language_utils import HighlightLanguageUtils


@dataclass
class DiffHighlightConfig:
    """
    Settings injected into the highlighter.

    The extension table is the set of languages the rendering layer has to have
    syntax definitions registered for.  Extensions are given without the dot.
    """
    extensions: Dict[str, HighlightLanguage] = field(
        default_factory=HighlightLanguageUtils.get_default_extension_table
    )

    @classmethod
    def create_default(cls) -> "DiffHighlightConfig":
        """Create a configuration with the built-in extension table."""
        return cls()

    @classmethod
    def load(cls, path: str) -> "DiffHighlightConfig":
        """
        Load a configuration from a YAML file.

        The file holds a `languages` mapping from extension to language name,
        applied on top of the built-in table.  A null language removes the
        extension, so files using it render as plain text:

            languages:
              mjs: javascript
              svg: null

        Args:
            path: Path to the configuration file

        Returns:
            DiffHighlightConfig with the overrides applied

        Raises:
            DiffHighlightConfigError: If the file is missing, is not valid YAML
                or names an unrecognised language
        """
        if not os.path.exists(path):
            raise DiffHighlightConfigError(
                f"Configuration file not found: {path}",
                {'path': path, 'reason': 'missing'}
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)

        except yaml.YAMLError as e:
            raise DiffHighlightConfigError(
                f"Invalid configuration file: {path}",
                {'path': path, 'reason': 'invalid_yaml', 'detail': str(e)}
            ) from e

        except OSError as e:
            raise DiffHighlightConfigError(
                f"Could not read configuration file: {path}",
                {'path': path, 'reason': 'unreadable', 'detail': str(e)}
            ) from e

        config = cls.create_default()
        config.apply_overrides(cls._languages_section(data, path), path)
        return config

    @staticmethod
    def _languages_section(data: Any, path: str) -> Dict[Any, Any]:
        """Extract the `languages` mapping from parsed YAML."""
        # An empty file parses to None
        if data is None:
            return {}

        if not isinstance(data, dict):
            raise DiffHighlightConfigError(
                f"Configuration must be a mapping: {path}",
                {'path': path, 'reason': 'not_a_mapping'}
            )

        languages = data.get('languages') or {}
        if not isinstance(languages, dict):
            raise DiffHighlightConfigError(
                f"'languages' must be a mapping of extension to language: {path}",
                {'path': path, 'reason': 'languages_not_a_mapping'}
            )

        return languages

    def apply_overrides(self, overrides: Dict[Any, Any], source: str = "<overrides>") -> None:
        """
        Apply extension overrides to this configuration.

        Args:
            overrides: Mapping of extension to language name, or None to remove the extension
            source: Where the overrides came from, for error reporting

        Raises:
            DiffHighlightConfigError: If a language name is not recognised
        """
        logger = logging.getLogger("DiffHighlightConfig")

        for ext, name in overrides.items():
            ext = str(ext).lstrip('.')
            if name is None:
                if self.extensions.pop(ext, None) is None:
                    logger.warning("Extension '%s' removed in %s was not configured", ext, source)

                continue

            language = HighlightLanguageUtils.from_name(str(name))
            if language == HighlightLanguage.UNKNOWN:
                raise DiffHighlightConfigError(
                    f"Unrecognised language '{name}' for extension '{ext}'",
                    {
                        'path': source,
                        'reason': 'unknown_language',
                        'extension': ext,
                        'language': name,
                        'known_languages': [
                            HighlightLanguageUtils.get_name(lang)
                            for lang in HighlightLanguageUtils.get_all_languages()
                        ]
                    }
                )

            self.extensions[ext] = language

    def language_for(self, file_name: str) -> str | None:
        """
        Get the renderer's language hint for a file.

        Args:
            file_name: Path of the file within the repository

        Returns:
            Language hint, or None if the file should render as plain text
        """
        language = HighlightLanguageUtils.from_file_name(file_name, self.extensions)
        return HighlightLanguageUtils.get_name(language)
