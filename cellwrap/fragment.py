from typing import Callable, Iterable, Iterator, NamedTuple, Optional

import numpy as np
import regex

from .shape import display_width
from .types import IntVector, Measure, Span

# A Han ideograph on its own, or a run of anything but Han, spaces and newlines
re_words = regex.compile(r"\p{Han}|[^\p{Han} \n]+")


def word_splitter(s: str) -> list[Span]:
    return [m.span() for m in re_words.finditer(s)]


class Word(NamedTuple):
    text: str
    width: int


class Words:
    """
    An ordered sequence of words with their precomputed display widths.

    The order is the order of first appearance in the source and never changes. Line breaking only ever looks
    at the width vector; the texts are carried along so that lines can be rendered afterwards.
    """

    texts: list[str]
    widths: IntVector

    def __init__(self, texts: list[str], widths: IntVector):
        if len(texts) != len(widths):
            raise ValueError("Every word needs exactly one width.")

        self.texts = texts
        self.widths = widths

    @classmethod
    def from_strings(cls, strings: Iterable[str], measure: Optional[Measure] = None) -> "Words":
        """Builds a word sequence from caller-tokenized strings, keeping them verbatim."""
        if measure is None:
            measure = display_width

        texts = list(strings)
        widths = np.array([measure(t) for t in texts], dtype=np.int64)
        return cls(texts, widths)

    def __len__(self) -> int:
        return len(self.texts)

    def __getitem__(self, i: int) -> Word:
        return Word(self.texts[i], int(self.widths[i]))

    def __iter__(self) -> Iterator[Word]:
        for text, width in zip(self.texts, self.widths):
            yield Word(text, int(width))

    @property
    def max_width(self) -> int:
        """Width of the widest word, 0 for an empty sequence."""
        return int(self.widths.max()) if len(self.widths) else 0


class WordFragmenter:
    def __init__(
            self,
            measure: Optional[Measure] = None,
            splitter: Optional[Callable[[str], list[Span]]] = None,
    ):
        if measure is None:
            measure = display_width

        if splitter is None:
            splitter = word_splitter

        self.measure = measure
        self.splitter = splitter

    def __call__(self, text: str) -> Words:
        texts = [text[a:b] for a, b in self.splitter(text)]
        return Words.from_strings(texts, self.measure)
