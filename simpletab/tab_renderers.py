"""Renderer implementations for tablature output formats."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from simpletab.tab_models import Configuration, Document, Slot

REST_CELL = "-"
SEPARATOR = "-"
BAR_LINE = "|"

_SUBDIVISION_NAMES = ("e", "&", "a")


def _cell(slot: Slot) -> str:
    return REST_CELL if slot is None else str(slot)


def _column_widths(rows: Sequence[Sequence[str]]) -> list[int]:
    """Widest cell of every column across all rows."""
    return [max(len(cell) for cell in column) for column in zip(*rows)]


def _pad(row: Sequence[str], widths: Sequence[int], fill: str) -> list[str]:
    return [cell.ljust(width, fill) for cell, width in zip(row, widths)]


def _track_cells(document: Document) -> list[list[str]]:
    """
    Text of every slot, one row per track.

    Raises:
        ValueError: If the tracks do not all have the same number of slots.
    """
    lengths = {len(track.slots) for track in document.tracks}
    if len(lengths) > 1:
        raise ValueError(f"tracks must have equal slot counts, got {sorted(lengths)}")
    return [[_cell(slot) for slot in track.slots] for track in document.tracks]


class TabRenderer(ABC):
    """Abstract tablature renderer."""

    @property
    @abstractmethod
    def default_extension(self) -> str:
        """Default filename extension for this renderer."""

    @abstractmethod
    def render(self, document: Document) -> str:
        """Render a parsed document into file content."""


class AsciiTabRenderer(TabRenderer):
    """
    Bare tablature: one line per string, frets and dashes only.

    Columns are aligned across strings: every cell in a column is padded with
    trailing dashes to the widest fret in that column, so a two-digit fret on
    one string never pushes the other strings out of step.
    """

    @property
    def default_extension(self) -> str:
        return ".txt"

    def render(self, document: Document) -> str:
        rows = _track_cells(document)
        widths = _column_widths(rows)
        lines = [SEPARATOR.join(_pad(row, widths, REST_CELL)) for row in rows]
        return "\n".join(lines) + "\n"


class LabeledTabRenderer(TabRenderer):
    """
    Tablature with string names, bar lines and a beat-counter footer.

    Each line starts with the string's tuning note, a ``|`` closes every
    measure, and the footer names each beat (``1 2 3 ...``) plus its ``e & a``
    subdivisions when the fidelity splits a beat into quarters, or just ``&``
    when it only splits into halves.
    """

    @property
    def default_extension(self) -> str:
        return ".txt"

    def beat_labels(self, configuration: Configuration, slot_count: int) -> list[str]:
        """Counter text for each slot position; empty where nothing is counted."""
        fidelity = configuration.fidelity
        quarter = fidelity // 4 if fidelity % 4 == 0 else 0
        half = fidelity // 2 if fidelity % 2 == 0 else 0
        labels: list[str] = []
        for position in range(slot_count):
            offset = position % fidelity
            if offset == 0:
                beat = (position // fidelity) % configuration.beats_per_measure
                labels.append(str(beat + 1))
            elif quarter and offset % quarter == 0:
                labels.append(_SUBDIVISION_NAMES[offset // quarter - 1])
            elif half and offset == half:
                labels.append("&")
            else:
                labels.append("")
        return labels

    def _join_measures(self, cells: list[str], per_measure: int, separator: str, bar: str) -> str:
        measures = [
            separator.join(cells[start:start + per_measure])
            for start in range(0, len(cells), per_measure)
        ]
        return "".join(measure + bar for measure in measures)

    def render(self, document: Document) -> str:
        configuration = document.configuration
        rows = _track_cells(document)
        labels = self.beat_labels(configuration, document.slot_count)
        widths = _column_widths([*rows, labels])
        per_measure = configuration.slots_per_measure

        name_width = max((len(track.name) for track in document.tracks), default=0)
        lines = [
            f"{track.name.ljust(name_width)}{BAR_LINE}"
            + self._join_measures(_pad(row, widths, REST_CELL), per_measure, SEPARATOR, BAR_LINE)
            for track, row in zip(document.tracks, rows)
        ]
        counter = " " * (name_width + 1) + self._join_measures(
            _pad(labels, widths, " "), per_measure, " ", " "
        )
        lines.append("")
        lines.append(counter.rstrip())
        return "\n".join(lines) + "\n"


RENDERERS: dict[str, type[TabRenderer]] = {
    "plain": AsciiTabRenderer,
    "labeled": LabeledTabRenderer,
}


def render(document: Document, renderer: TabRenderer | None = None) -> str:
    """Render a Document, as bare ASCII tablature unless another renderer is given."""
    return (renderer or AsciiTabRenderer()).render(document)
