"""Tuning/track resolution and the public ``parse`` entry point."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from simpletab.beat_grid import GridBuilder
from simpletab.errors import SemanticError, TabSyntaxError
from simpletab.options import parse_options
from simpletab.tab_models import Configuration, Document, Slot, Track
from simpletab.tokenizer import tokenize
from simpletab.tokens import SPREAD_TOKENS, Note, Token, describe

logger = logging.getLogger(__name__)


def is_global_spread(tokens: Sequence[Token]) -> bool:
    """True for a line holding a single ``;n`` or ``:n`` token and nothing else."""
    return len(tokens) == 1 and isinstance(tokens[0], SPREAD_TOKENS)


class TrackResolver:
    """
    Routes rhythm lines to the strings declared on the tuning line.

    Lines are consumed in groups, one per string in tuning order. A standalone
    spread line between groups rests every string at once; inside a group it
    could equally be one string's line, so it is rejected there.
    """

    def __init__(self, configuration: Configuration) -> None:
        self.configuration = configuration
        self.grid = GridBuilder(configuration.fidelity)

    def _read_tuning(self, tokens: Sequence[Token]) -> list[Note]:
        notes: list[Note] = []
        for token in tokens:
            if not isinstance(token, Note):
                raise TabSyntaxError(
                    f"tuning line may only contain notes, found '{describe(token)}'",
                    line=token.line,
                    column=token.column,
                )
            notes.append(token)
        return notes

    def _check_group(self, group: list[list[Slot]], line: int) -> None:
        lengths = {len(slots) for slots in group}
        if len(lengths) > 1:
            raise SemanticError(
                f"track length mismatch: lines in this group span {sorted(lengths)} slots",
                line=line,
            )

    def resolve(self, lines: Sequence[Sequence[Token]]) -> Document:
        """
        Build a Document from non-empty token lines.

        Args:
            lines: Token lists, tuning line first. Blank lines already removed.

        Raises:
            SemanticError:  On a missing tuning line, a partial or uneven
                            group, or a spread line inside a group.
            TabSyntaxError: If the tuning line holds anything but notes.
        """
        if not lines:
            raise SemanticError("missing tuning line")

        tuning = self._read_tuning(lines[0])
        track_slots: list[list[Slot]] = [[] for _ in tuning]
        group: list[list[Slot]] = []
        last_line = lines[0][0].line

        for tokens in lines[1:]:
            last_line = tokens[0].line
            if is_global_spread(tokens):
                if group:
                    raise SemanticError(
                        "ambiguous spread line: it falls inside a group of "
                        f"{len(tuning)} track lines after {len(group)} of them",
                        line=last_line,
                    )
                spread = self.grid.build(tokens)
                for slots in track_slots:
                    slots.extend(spread)
                continue

            group.append(self.grid.build(tokens))
            if len(group) == len(tuning):
                self._check_group(group, last_line)
                for slots, line_slots in zip(track_slots, group):
                    slots.extend(line_slots)
                group = []

        if group:
            raise SemanticError(
                f"track count mismatch: expected {len(tuning)} rhythm lines, got {len(group)}",
                line=last_line,
            )

        tracks = [Track(note, slots) for note, slots in zip(tuning, track_slots)]
        logger.debug(
            "Resolved %d track(s) of %d slot(s) each",
            len(tracks),
            len(track_slots[0]) if track_slots else 0,
        )
        return Document(configuration=self.configuration, tracks=tracks)


def parse(raw_text: str) -> Document:
    """
    Parse a simplified tab notation document.

    Raises:
        ConfigError:    If the option header holds a malformed value.
        TabSyntaxError: If the text does not match the notation grammar.
        SemanticError:  If the rhythm or the track layout is inconsistent.
    """
    configuration, body = parse_options(raw_text)
    lines = [tokens for tokens in tokenize(body) if tokens]
    return TrackResolver(configuration).resolve(lines)
