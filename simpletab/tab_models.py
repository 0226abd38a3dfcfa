"""Data models passed from the parser to the tablature renderers."""

from dataclasses import dataclass, field

from simpletab.errors import ConfigError
from simpletab.tokens import Note

DEFAULT_BEATS_PER_MEASURE = 4
DEFAULT_BEAT_UNIT = 4
DEFAULT_FIDELITY = 16

#: One time unit on a track: ``None`` for a rest, otherwise the fret number.
Slot = int | None


@dataclass(frozen=True)
class Configuration:
    """
    Document-wide timing options read from the ``[key=value; ...]`` header.

    Attributes:
        beats_per_measure: Numerator of the time signature.
        beat_unit:         Denominator of the time signature.
        fidelity:          Number of slots that make up one beat.
    """

    beats_per_measure: int = DEFAULT_BEATS_PER_MEASURE
    beat_unit: int = DEFAULT_BEAT_UNIT
    fidelity: int = DEFAULT_FIDELITY

    def __post_init__(self) -> None:
        for name in ("beats_per_measure", "beat_unit", "fidelity"):
            value = getattr(self, name)
            if value < 1:
                raise ConfigError(f"{name.replace('_', ' ')} must be at least 1, got {value}")

    @property
    def time_signature(self) -> str:
        """The time signature as written in the header, e.g. ``'6/8'``."""
        return f"{self.beats_per_measure}/{self.beat_unit}"

    @property
    def slots_per_measure(self) -> int:
        return self.beats_per_measure * self.fidelity


@dataclass(frozen=True)
class Track:
    """One guitar string: its tuning note and its slot sequence."""

    tuning_note: Note
    slots: list[Slot] = field(default_factory=list)

    @property
    def name(self) -> str:
        return str(self.tuning_note)


@dataclass(frozen=True)
class Document:
    """Parsed notation: the configuration plus tracks in tuning-line order."""

    configuration: Configuration
    tracks: list[Track]

    @property
    def slot_count(self) -> int:
        """Length shared by every track's slot sequence."""
        return len(self.tracks[0].slots) if self.tracks else 0
