"""Token variants produced by the tokenizer and consumed by the grid builder."""

from dataclasses import dataclass, field
from enum import Enum


class Accidental(Enum):
    NONE = ""
    FLAT = "b"
    SHARP = "#"


@dataclass(frozen=True)
class Note:
    """A note literal such as ``E``, ``Bb`` or ``F#``; names one string on the tuning line."""

    letter: str
    accidental: Accidental = Accidental.NONE
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return f"{self.letter}{self.accidental.value}"


@dataclass(frozen=True)
class Number:
    """A fret number."""

    value: int
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)


@dataclass(frozen=True)
class Rest:
    """``.``: one empty slot."""

    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)


@dataclass(frozen=True)
class NextBeat:
    """``,``: pad with empty slots up to the next beat boundary."""

    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)


@dataclass(frozen=True)
class RestSpread:
    """``:n``: ``n`` consecutive empty slots."""

    count: int
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)


@dataclass(frozen=True)
class BeatSpread:
    """``;n``: ``n`` full beats of empty slots, starting on a beat boundary."""

    count: int
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)


Token = Note | Number | Rest | NextBeat | RestSpread | BeatSpread

SPREAD_TOKENS = (RestSpread, BeatSpread)


def describe(token: Token) -> str:
    """Return the notation text a token was read from, for error messages."""
    if isinstance(token, Note):
        return str(token)
    if isinstance(token, Number):
        return str(token.value)
    if isinstance(token, Rest):
        return "."
    if isinstance(token, NextBeat):
        return ","
    if isinstance(token, RestSpread):
        return f":{token.count}"
    return f";{token.count}"
