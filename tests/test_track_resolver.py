"""Unit tests for tuning/track resolution and ``parse``."""

import pytest

from simpletab import parse
from simpletab.errors import SemanticError, TabSyntaxError
from simpletab.tab_models import Configuration
from simpletab.tokens import Accidental, Note


def test_two_strings_one_group() -> None:
    document = parse("[fidelity=4]\nC C\n0 2,\n3 .,\n")
    assert [track.name for track in document.tracks] == ["C", "C"]
    assert document.tracks[0].slots == [0, 2, None, None]
    assert document.tracks[1].slots == [3, None, None, None]


def test_standalone_beat_spread_rests_every_string() -> None:
    document = parse("[fidelity=4]\nE A\n;2\n")
    assert document.tracks[0].slots == [None] * 8
    assert document.tracks[1].slots == [None] * 8


def test_time_signature_header() -> None:
    document = parse("[time=6/8; fidelity=8]\nE\n1,\n")
    assert document.configuration == Configuration(beats_per_measure=6, beat_unit=8, fidelity=8)
    assert document.tracks[0].slots == [1] + [None] * 7


def test_defaults_without_header() -> None:
    document = parse("E\n0,\n")
    assert document.configuration == Configuration()
    assert len(document.tracks[0].slots) == 16


def test_tuning_order_is_preserved() -> None:
    document = parse("E A D G B E\n")
    assert [track.name for track in document.tracks] == ["E", "A", "D", "G", "B", "E"]
    assert all(track.slots == [] for track in document.tracks)


def test_tuning_notes_keep_accidentals() -> None:
    document = parse("Eb Ab\n")
    assert document.tracks[0].tuning_note == Note("E", Accidental.FLAT)


def test_lines_cycle_through_tracks() -> None:
    document = parse("[fidelity=2]\nE A\n1,\n2,\n3,\n4,\n")
    assert document.tracks[0].slots == [1, None, 3, None]
    assert document.tracks[1].slots == [2, None, 4, None]


def test_spread_line_between_groups() -> None:
    document = parse("[fidelity=2]\nE A\n1,\n2,\n:2\n3,\n4,\n")
    assert document.tracks[0].slots == [1, None, None, None, 3, None]
    assert document.tracks[1].slots == [2, None, None, None, 4, None]


def test_blank_and_comment_lines_are_ignored() -> None:
    document = parse("[fidelity=2]\n\n// tuning\nE A\n\n1,\n// second string\n2,\n")
    assert document.tracks[0].slots == [1, None]
    assert document.tracks[1].slots == [2, None]


def test_every_track_has_equal_slot_count() -> None:
    document = parse(
        "[time=3/4; fidelity=4]\n"
        "E A D\n"
        "0 . 2, ;1\n"
        "12,, ;1\n"
        ":4 :4\n"
        ";3\n"
        "1 1 1 1, 2,, \n"
        ":2 5 5 ;1\n"
        "7, ;1\n"
    )
    lengths = {len(track.slots) for track in document.tracks}
    assert lengths == {document.slot_count}
    assert document.slot_count == 4 * (2 + 3 + 2)


def test_spread_line_inside_group_is_ambiguous() -> None:
    with pytest.raises(SemanticError, match="ambiguous spread line") as exc_info:
        parse("[fidelity=2]\nE A\n1,\n;1\n2,\n")
    assert exc_info.value.line == 4


def test_partial_group_is_a_track_count_mismatch() -> None:
    with pytest.raises(SemanticError, match="track count mismatch"):
        parse("[fidelity=2]\nE A D\n1,\n2,\n")


def test_uneven_group_is_a_track_length_mismatch() -> None:
    with pytest.raises(SemanticError, match="track length mismatch"):
        parse("[fidelity=2]\nE A\n1,\n2, ;1\n")


def test_incomplete_beat_reports_its_line() -> None:
    with pytest.raises(SemanticError, match="incomplete beat") as exc_info:
        parse("[fidelity=4]\nE\n1 2 3\n")
    assert exc_info.value.line == 3


def test_number_on_tuning_line_is_a_syntax_error() -> None:
    with pytest.raises(TabSyntaxError, match="tuning line") as exc_info:
        parse("E A 5\n")
    assert exc_info.value.column == 5


def test_note_in_rhythm_line_is_a_syntax_error() -> None:
    with pytest.raises(TabSyntaxError):
        parse("[fidelity=2]\nE A\n1,\nE,\n")


@pytest.mark.parametrize("text", ["", "\n\n", "[fidelity=4]\n", "// nothing here\n"])
def test_missing_tuning_line(text: str) -> None:
    with pytest.raises(SemanticError, match="missing tuning line"):
        parse(text)
