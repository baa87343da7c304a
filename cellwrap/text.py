import logging
from functools import cached_property
from typing import Optional, Sequence

from .fragment import WordFragmenter, Words
from .shape import is_han
from .types import IntVector, Measure
from .wrap import DEFAULT_PENALTY, DEFAULT_SPACING, SEPARATOR, break_lines

logger = logging.getLogger(__name__)


def render_line(words: Sequence[str]) -> str:
    """Join the words of one line into a printable string.

    Every word carries its own trailing separator, except words ending in a Han character which are written
    bare so that runs of ideographs read without artificial spacing. An empty word renders as a single
    separator.
    """
    parts = []
    for word in words:
        if not word:
            parts.append(SEPARATOR)
        elif is_han(word[-1]):
            parts.append(word)
        else:
            parts.append(word + SEPARATOR)
    return "".join(parts)


def get_lines(s: str) -> list[str]:
    """Splits a multi-line string into its lines, keeping empty ones."""
    return s.split("\n")


class WrappedText:
    """
    Wraps a word sequence into a column of a given width with minimal raggedness.

    The column width is a lower bound on the width actually used: if a single word is wider than the column,
    the effective width grows to fit that word. Callers laying out a table cell should read back
    `effective_width` to size the column.
    """

    def __init__(
        self,
        words: Words,
        column_width: int,
        penalty: int = DEFAULT_PENALTY,
        spacing: int = DEFAULT_SPACING,
    ):
        self.words = words
        self.column_width = column_width
        self.penalty = penalty
        self.spacing = spacing

    @cached_property
    def effective_width(self) -> int:
        if not len(self.words):
            return self.column_width

        width = max(self.column_width, self.words.max_width)
        if width != self.column_width:
            logger.debug("Raised column width %d to widest word %d", self.column_width, width)
        return width

    @cached_property
    def _layout(self) -> tuple[IntVector, int]:
        return break_lines(self.words.widths, self.spacing, self.effective_width, self.penalty)

    @property
    def wrap(self) -> IntVector:
        """Break indices [0, b1, ..., n]; line k holds words wrap[k]..wrap[k+1]-1."""
        return self._layout[0]

    @property
    def cost(self) -> int:
        """Total raggedness of the layout, including overflow penalties."""
        return self._layout[1]

    def groups(self) -> list[list[str]]:
        breaks = self.wrap
        return [self.words.texts[a:b] for a, b in zip(breaks[:-1], breaks[1:])]

    def to_list(self) -> list[str]:
        """Breaks the text into printable lines."""
        return [render_line(group) for group in self.groups()]


def wrap_text(
        text: str,
        limit: int,
        measure: Optional[Measure] = None,
        penalty: int = DEFAULT_PENALTY,
) -> tuple[list[str], int]:
    """Wraps text into lines of at most `limit` display cells, with minimal raggedness.

    Returns the lines and the limit actually used. That limit is silently raised to the width of the widest
    word when the requested one is too small (including zero or negative limits), so it is always at least the
    requested limit. Empty text yields no lines and leaves the limit untouched.
    """
    words = WordFragmenter(measure=measure)(text)
    column = WrappedText(words, column_width=limit, penalty=penalty)
    return column.to_list(), column.effective_width
