"""Exceptions raised while compiling tab notation.

Every stage fails fast with the first problem it finds, so each error carries
just enough position information to point the user at the offending input.
"""

from __future__ import annotations


class ParseError(Exception):
    """Base class for every failure raised by :func:`simpletab.parse`."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        if self.column is None:
            return f"[line {self.line}] {self.message}"
        return f"[line {self.line}, column {self.column}] {self.message}"


class ConfigError(ParseError):
    """A ``time`` or ``fidelity`` value in the option header is malformed."""


class TabSyntaxError(ParseError):
    """A character sequence matches no rule of the notation grammar."""


class SemanticError(ParseError):
    """The input is well formed but its rhythm or track layout is inconsistent."""
