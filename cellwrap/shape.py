import numpy as np
import regex
from wcwidth import wcswidth, wcwidth

from cellwrap.types import IntVector
from typing import Optional

re_han = regex.compile(r"\p{Han}")


def is_han(ch: str) -> bool:
    """True if the character belongs to the Han (CJK ideograph) script."""
    return bool(ch) and re_han.fullmatch(ch) is not None


def display_width(text: str) -> int:
    """Number of terminal cells needed to display the text.

    Wide and fullwidth glyphs count as two cells, combining marks as zero. Characters that wcwidth
    considers non-printable (control characters, tabs) count as zero so the width is never negative.
    """
    width = wcswidth(text)
    if width >= 0:
        return width
    return sum(max(wcwidth(ch), 0) for ch in text)


class CellMeasure():
    def __init__(self, unicode_version: Optional[str] = None):
        self.unicode_version = unicode_version or "auto"

    def __call__(self, text: str) -> int:
        width = wcswidth(text, unicode_version=self.unicode_version)
        if width >= 0:
            return width
        return int(self.character_widths(text).sum())

    def character_widths(self, text: str) -> IntVector:
        """Maps every code point of the text to its cell width.

        Zero-width and non-printable code points map to 0. Note that the sum of this vector can differ from
        calling the measure on the whole string when wcwidth recognises multi-codepoint sequences (e.g. emoji
        joined by ZWJ).
        """
        widths = [wcwidth(ch, unicode_version=self.unicode_version) for ch in text]
        return np.maximum(np.array(widths, dtype=np.int64), 0)


def monospace_measure(s: str) -> int:
    return len(s)
