"""Line-local tokenizer for simplified tab notation."""

from __future__ import annotations

import re
from typing import Final

from simpletab.errors import TabSyntaxError
from simpletab.tokens import (
    Accidental,
    BeatSpread,
    NextBeat,
    Note,
    Number,
    Rest,
    RestSpread,
    Token,
)

# Alternatives are tried in order; spreads consume their digits so a count is
# never read as a fret number.
_TOKEN_PATTERN: Final = re.compile(
    r"""
      (?P<space>\s+)
    | (?P<note>[A-G][b\#]?)
    | (?P<number>[0-9]+)
    | (?P<rest>\.)
    | (?P<next_beat>,)
    | (?P<rest_spread>:[0-9]+)
    | (?P<beat_spread>;[0-9]+)
    """,
    re.VERBOSE,
)

_COMMENT_PREFIX: Final = "//"


def _make_token(kind: str, text: str, line: int, column: int) -> Token:
    if kind == "note":
        return Note(text[0], Accidental(text[1:]), line=line, column=column)
    if kind == "number":
        return Number(int(text), line=line, column=column)
    if kind == "rest":
        return Rest(line=line, column=column)
    if kind == "next_beat":
        return NextBeat(line=line, column=column)
    if kind == "rest_spread":
        return RestSpread(int(text[1:]), line=line, column=column)
    return BeatSpread(int(text[1:]), line=line, column=column)


def tokenize_line(line: str, line_no: int = 1) -> list[Token]:
    """
    Scan one line of notation into tokens.

    Args:
        line:    The text of a single line, without its newline.
        line_no: 1-based line number used in tokens and error positions.

    Raises:
        TabSyntaxError: At the first character that starts no token.
    """
    tokens: list[Token] = []
    pos = 0
    while pos < len(line):
        match = _TOKEN_PATTERN.match(line, pos)
        if match is None:
            raise TabSyntaxError(
                f"unexpected character {line[pos]!r}", line=line_no, column=pos + 1
            )
        kind = match.lastgroup
        if kind is not None and kind != "space":
            tokens.append(_make_token(kind, match.group(), line_no, pos + 1))
        pos = match.end()
    return tokens


def is_comment(line: str) -> bool:
    return line.lstrip().startswith(_COMMENT_PREFIX)


def tokenize(text: str) -> list[list[Token]]:
    """Tokenize every line; blank and ``//`` comment lines yield empty lists."""
    return [
        [] if is_comment(line) else tokenize_line(line, line_no)
        for line_no, line in enumerate(text.splitlines(), start=1)
    ]
