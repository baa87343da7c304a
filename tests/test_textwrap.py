import re
from concurrent.futures import ThreadPoolExecutor

import pytest

from cellwrap import WordFragmenter, WrappedText, get_lines, render_line, wrap_text
from cellwrap.shape import display_width

TEXTS = [
    """
        Whether I shall turn out to be the hero of my own life, or whether that
        station will be held by anybody else, these pages must show. To begin my
        life with the beginning of my life, I record that I was born (as I have
        been informed and believe) on a Friday, at twelve o’clock at night.
        It was remarked that the clock began to strike, and I began to cry,
        simultaneously.
        """,
    """
        In consideration of the day and hour of my birth, it was declared by
        the nurse, and by some sage women in the neighbourhood who had taken a
        lively interest in me several months before there was any possibility
        of our becoming personally acquainted, first, that I was destined to be
        unlucky in life; and secondly, that I was privileged to see ghosts and
        spirits; both these gifts inevitably attaching, as they believed, to
        all unlucky infants of either gender, born towards the small hours on a
        Friday night.
        """,
]

TEXTS = [re.sub(r"\s+", " ", x.strip()) for x in TEXTS]

CJK_TEXT = "天下大势，分久必合，合久必分。Records of the Three Kingdoms 三国演义"


def test_wrap_plaintext():
    print("\n")
    for text in TEXTS:
        lines, limit = wrap_text(text, 30)
        print("\n".join([f"{len(l):02d}:  {l}" for l in lines]), end="\n\n")

        assert limit == 30
        for line in lines:
            assert (
                display_width(line.rstrip()) <= 30
            ), f"This line is too long with {len(line)} characters: {line}"


def test_word_preservation():
    for text in TEXTS + [CJK_TEXT]:
        words = WordFragmenter()(text)
        for width in [1, 8, 20, 45, 200]:
            column = WrappedText(words, column_width=width)
            regrouped = [w for group in column.groups() for w in group]
            assert regrouped == words.texts, f"Words were lost or reordered at width {width}"


def test_feasibility_and_fit():
    for text in TEXTS + [CJK_TEXT]:
        words = WordFragmenter()(text)
        for width in [-5, 0, 3, 10, 33]:
            lines, limit = wrap_text(text, width)
            assert limit >= width
            assert limit >= words.max_width

            column = WrappedText(words, column_width=width)
            breaks = column.wrap
            for a, b in zip(breaks[:-1], breaks[1:]):
                natural = int(words.widths[a:b].sum()) + (b - a - 1)
                assert natural <= limit or b - a == 1, f"Line of words {a}..{b - 1} overflows {limit}"


def test_simple_paragraph():
    assert wrap_text("The quick brown fox", 10) == (["The quick ", "brown fox "], 10)


def test_cjk_rendering():
    assert wrap_text("你好world", 80) == (["你好world "], 80)
    assert wrap_text("你好世界", 5) == (["你好", "世界"], 5)
    assert wrap_text("你好世界", 4) == (["你", "好", "世", "界"], 4)


def test_newline_is_a_separator():
    assert wrap_text("hello\nworld", 80) == (["hello world "], 80)


@pytest.mark.parametrize("limit", [7, 0, -1])
def test_empty_text(limit):
    assert wrap_text("", limit) == ([], limit)
    assert wrap_text(" \n ", limit) == ([], limit)


def test_limit_raised_to_widest_word():
    assert wrap_text("hello", 0) == (["hello "], 5)

    lines, limit = wrap_text("a extraordinary b", 4)
    assert limit == len("extraordinary")
    assert lines == ["a ", "extraordinary ", "b "]


def test_custom_measure():
    lines, limit = wrap_text("你好世界", 3, measure=len)
    assert lines == ["你好", "世界"]
    assert limit == 3


def test_render_line():
    assert render_line(["你", "好", "world"]) == "你好world "
    assert render_line(["ab你"]) == "ab你"
    assert render_line(["你ab"]) == "你ab "
    assert render_line(["", "a"]) == " a "
    assert render_line([]) == ""


def test_get_lines():
    assert get_lines("a\n\nb") == ["a", "", "b"]
    assert get_lines("") == [""]


def test_cost_is_exposed():
    column = WrappedText(WordFragmenter()("aaa bb c"), column_width=5)
    assert column.groups() == [["aaa"], ["bb", "c"]]
    assert column.cost == 4


def test_deterministic_under_concurrency():
    expected = [wrap_text(text, 25) for text in TEXTS * 8]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda t: wrap_text(t, 25), TEXTS * 8))

    assert results == expected
