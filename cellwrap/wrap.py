"""wrap.py

Minimum raggedness line breaking.

A paragraph of n words is split into lines so that the sum over all lines but
the last of (limit - line width)**2 is minimal. Lines wider than the limit,
which only happen when a word on its own is wider than the limit, are allowed
but cost an extra penalty.

The problem is solved with the classic O(n**2) dynamic program, running from
the last word backwards: cost[i] is the cheapest way to lay out the words
i..n-1, and nbrk[i] is the first word of the line following the line that
starts at word i.
"""

import logging
from typing import Optional, Sequence

import numpy as np

from .fragment import Words
from .types import IntMatrix, IntVector, Measure

logger = logging.getLogger(__name__)

DEFAULT_PENALTY = 100_000
DEFAULT_SPACING = 1
SEPARATOR = " "


def line_lengths(widths: IntVector, spacing: int) -> IntMatrix:
    """
    Table of line widths: entry [i, j] is the width of words i..j set on one
    line with `spacing` units between adjacent words. That is

        length[i, i] = widths[i]
        length[i, j] = length[i, j-1] + spacing + widths[j]

    Only entries with i <= j are meaningful, the others are 0.
    """
    widths = np.asarray(widths, dtype=np.int64)
    n = len(widths)

    prefix = np.zeros(n + 1, dtype=np.int64)
    prefix[1:] = widths.cumsum()
    idx = np.arange(n, dtype=np.int64)

    length = prefix[None, 1:] - prefix[:-1, None] + spacing * (idx[None, :] - idx[:, None])
    return np.triu(length)


def break_lines(
        widths: IntVector,
        spacing: int,
        limit: int,
        penalty: int = DEFAULT_PENALTY,
) -> tuple[IntVector, int]:
    """Find the line breaks with minimal raggedness.

    Returns a vector of break indices [0, b1, ..., n], such that line k holds
    words breaks[k]..breaks[k+1]-1, together with the total cost of the
    layout. When two break points are equally cheap, the earlier one wins.

    A non-positive limit cannot be met by any word, so it is raised to the
    width of the widest word.
    """
    widths = np.asarray(widths, dtype=np.int64)
    n = len(widths)
    if n == 0:
        return np.zeros(1, dtype=np.int64), 0

    if limit <= 0:
        logger.debug("Clamping non-positive line limit %d to widest word %d", limit, widths.max())
        limit = int(widths.max())

    length = line_lengths(widths, spacing)

    # cost[n] stays 0 so cost[j] is defined for every break point j
    cost = np.zeros(n + 1, dtype=np.int64)
    nbrk = np.full(n, n, dtype=np.int64)

    for i in range(n - 1, -1, -1):
        # The remaining words fit on a final line, which is free
        if length[i, n - 1] <= limit:
            continue

        # A last word that is too wide on its own has no alternative
        if i == n - 1:
            logger.debug("Word %d of width %d overflows the last line (limit %d)", i, widths[i], limit)
            cost[i] = penalty
            continue

        # Candidate lines i..j-1 for j = i+1..n-1
        lines = length[i, i:n - 1]
        slack = limit - lines
        candidates = slack * slack + cost[i + 1:n] + penalty * (lines > limit)

        # argmin returns the first minimum, i.e. the earliest break point
        k = int(np.argmin(candidates))
        cost[i] = candidates[k]
        nbrk[i] = i + 1 + k

    breaks = [0]
    while breaks[-1] < n:
        breaks.append(int(nbrk[breaks[-1]]))

    return np.array(breaks, dtype=np.int64), int(cost[0])


def wrap_words(
        words: Sequence[str],
        spacing: int,
        limit: int,
        penalty: int = DEFAULT_PENALTY,
        measure: Optional[Measure] = None,
) -> list[list[str]]:
    """Group a list of words into lines with minimal raggedness.

    This is the low-level entry point for callers that do their own
    tokenization. Words are measured with `measure` (terminal display width by
    default), `spacing` units are accounted between adjacent words on a line
    and lines are kept within `limit` units where possible. Too-long lines get
    `penalty` added to their cost, once per line.

    The returned groups hold the caller's strings, in their original order.
    """
    fragments = words if isinstance(words, Words) else Words.from_strings(words, measure)
    breaks, _ = break_lines(fragments.widths, spacing, limit, penalty)
    return [fragments.texts[a:b] for a, b in zip(breaks[:-1], breaks[1:])]
