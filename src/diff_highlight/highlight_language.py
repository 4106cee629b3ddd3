from enum import IntEnum, auto


class HighlightLanguage(IntEnum):
    """Languages the rendering layer loads syntax definitions for."""
    UNKNOWN = -1
    CSHARP = auto()
    CSS = auto()
    DOCKER = auto()
    HTML = auto()
    JAVASCRIPT = auto()
    JSON = auto()
    JSX = auto()
    MARKDOWN = auto()
    SASS = auto()
    SCSS = auto()
    SQL = auto()
    SVG = auto()
    TSCONFIG = auto()
    TSX = auto()
    TYPESCRIPT = auto()
    XML = auto()
    YAML = auto()
