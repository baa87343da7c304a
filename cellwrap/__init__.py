from .fragment import Word, WordFragmenter, Words, word_splitter
from .shape import CellMeasure, display_width, is_han, monospace_measure
from .text import WrappedText, get_lines, render_line, wrap_text
from .wrap import DEFAULT_PENALTY, DEFAULT_SPACING, SEPARATOR, break_lines, line_lengths, wrap_words

__all__ = [
    "CellMeasure",
    "DEFAULT_PENALTY",
    "DEFAULT_SPACING",
    "SEPARATOR",
    "Word",
    "WordFragmenter",
    "Words",
    "WrappedText",
    "break_lines",
    "display_width",
    "get_lines",
    "is_han",
    "line_lengths",
    "monospace_measure",
    "render_line",
    "word_splitter",
    "wrap_text",
    "wrap_words",
]
