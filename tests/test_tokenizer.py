"""Unit tests for the line tokenizer."""

import pytest

from simpletab.errors import TabSyntaxError
from simpletab.tokenizer import tokenize, tokenize_line
from simpletab.tokens import (
    Accidental,
    BeatSpread,
    NextBeat,
    Note,
    Number,
    Rest,
    RestSpread,
)


def test_note_literals_with_accidentals() -> None:
    assert tokenize_line("E C# Gb") == [
        Note("E"),
        Note("C", Accidental.SHARP),
        Note("G", Accidental.FLAT),
    ]


def test_numbers_rests_and_next_beat() -> None:
    assert tokenize_line("27 . ,") == [Number(27), Rest(), NextBeat()]


def test_spreads() -> None:
    assert tokenize_line(":2 ;4") == [RestSpread(2), BeatSpread(4)]


def test_spread_count_is_not_a_fret() -> None:
    assert tokenize_line(":12") == [RestSpread(12)]
    assert tokenize_line(";3 5") == [BeatSpread(3), Number(5)]


def test_tokens_need_no_whitespace() -> None:
    assert tokenize_line("1.2,") == [Number(1), Rest(), Number(2), NextBeat()]
    assert tokenize_line(":3 5,") == [RestSpread(3), Number(5), NextBeat()]


def test_note_str_round_trips_spelling() -> None:
    assert [str(token) for token in tokenize_line("Bb F# A")] == ["Bb", "F#", "A"]


def test_tokens_carry_positions() -> None:
    tokens = tokenize_line("  5 :3", line_no=7)
    assert [(token.line, token.column) for token in tokens] == [(7, 3), (7, 5)]


def test_blank_line_has_no_tokens() -> None:
    assert tokenize_line("   \t ") == []


@pytest.mark.parametrize(
    ("line", "column"),
    [("0 x", 3), (":", 1), ("c", 1), ("5;", 2), ("E H", 3), ("3 :a", 3)],
)
def test_unknown_characters_raise(line: str, column: int) -> None:
    with pytest.raises(TabSyntaxError) as exc_info:
        tokenize_line(line, line_no=4)
    assert exc_info.value.line == 4
    assert exc_info.value.column == column


def test_tokenize_keeps_line_numbers_for_blank_and_comment_lines() -> None:
    lines = tokenize("C C\n\n// first riff\n0,\n")
    assert lines[0] == [Note("C"), Note("C")]
    assert lines[1] == []
    assert lines[2] == []
    assert lines[3] == [Number(0), NextBeat()]
    assert lines[3][0].line == 4


def test_comment_may_be_indented() -> None:
    assert tokenize("   // ;4 not a spread") == [[]]


@pytest.mark.parametrize(
    ("line", "column"),
    [("\u0663,", 1), ("1 \u0662", 3), (":\u0664", 1), (";\uff12", 1)],
)
def test_non_ascii_digits_raise(line: str, column: int) -> None:
    with pytest.raises(TabSyntaxError) as exc_info:
        tokenize_line(line)
    assert exc_info.value.column == column
