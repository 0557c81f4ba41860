"""
Tests for the chord grammar parser.

Covers the segment rules, error kinds, determinism and the
parse(store) round trip.
"""

import itertools

import pytest

from chuk_mcp_chords.core import (
    Chord,
    ChordParseError,
    EmptyInputError,
    IntervalClass,
    InvalidChordSuffixError,
    InvalidNoteError,
    Inversion,
    N,
    Note,
    Quality,
    chord_text,
    parse_chord,
)


class TestParseChord:
    """Tests for successful parses."""

    @pytest.mark.parametrize(
        "text,root,quality,interval,inversion",
        [
            ("C", "C", Quality.MAJOR, IntervalClass.TRIAD, Inversion.GROUND),
            ("C:m7", "C", Quality.MINOR, IntervalClass.SEVENTH, Inversion.GROUND),
            ("C:M7", "C", Quality.MAJOR, IntervalClass.SEVENTH, Inversion.GROUND),
            ("E:D7", "E", Quality.DOMINANT, IntervalClass.SEVENTH, Inversion.GROUND),
            ("E:m:2", "E", Quality.MINOR, IntervalClass.TRIAD, Inversion.SECOND),
            ("C:o7", "C", Quality.DIMINISHED, IntervalClass.SEVENTH, Inversion.GROUND),
            ("C:A", "C", Quality.AUGMENTED, IntervalClass.TRIAD, Inversion.GROUND),
            ("C:M6:2", "C", Quality.MAJOR, IntervalClass.SIXTH, Inversion.SECOND),
            ("C:6", "C", Quality.MAJOR, IntervalClass.SIXTH, Inversion.GROUND),
            ("C:7", "C", Quality.MAJOR, IntervalClass.SEVENTH, Inversion.GROUND),
            ("C#:1", "C#", Quality.MAJOR, IntervalClass.TRIAD, Inversion.FIRST),
            ("G3:D7:3", "G3", Quality.DOMINANT, IntervalClass.SEVENTH, Inversion.THIRD),
            ("Bb:m:0", "Bb", Quality.MINOR, IntervalClass.TRIAD, Inversion.GROUND),
        ],
    )
    def test_fields(
        self,
        text: str,
        root: str,
        quality: Quality,
        interval: IntervalClass,
        inversion: Inversion,
    ) -> None:
        chord = parse_chord(text)
        assert chord == Chord(N(root), quality, interval, inversion)
        assert chord.root.store_text() == root

    def test_third_segment_overrides_inversion_digit(self) -> None:
        """Segment 3 wins over a lone inversion digit in segment 2."""
        assert parse_chord("C:1:2").inversion == Inversion.SECOND
        assert parse_chord("C:3:0").inversion == Inversion.GROUND

    def test_empty_inversion_is_ground(self) -> None:
        """An empty third segment reads as an absent inversion."""
        chord = parse_chord("C:m:")
        assert chord.inversion == Inversion.GROUND
        assert chord == parse_chord("C:m")
        assert chord.store_text() == "chord('C:m')"

    def test_rest_root(self) -> None:
        chord = parse_chord("1=")
        assert chord.root == Note.rest()
        assert chord.quality == Quality.MAJOR

    def test_surrounding_whitespace(self) -> None:
        assert parse_chord("  C:m7 ") == parse_chord("C:m7")

    def test_deterministic(self) -> None:
        for text in ("C", "E:m:2", "F#:D7:1", "1="):
            assert parse_chord(text) == parse_chord(text)


class TestParseErrors:
    """Tests for rejected input."""

    def test_empty(self) -> None:
        with pytest.raises(EmptyInputError):
            parse_chord("")

    def test_blank(self) -> None:
        with pytest.raises(EmptyInputError):
            parse_chord("   ")

    def test_invalid_note(self) -> None:
        with pytest.raises(InvalidNoteError) as info:
            parse_chord("Z")
        assert info.value.token == "Z"

    def test_invalid_note_with_suffix(self) -> None:
        with pytest.raises(InvalidNoteError) as info:
            parse_chord("X:m7")
        assert info.value.token == "X"

    @pytest.mark.parametrize("text", ["C:", "C:x", "C:m8", "C:7m", "C:mm", "C:4", "C:0", "C:M67"])
    def test_invalid_second_segment(self, text: str) -> None:
        with pytest.raises(InvalidChordSuffixError) as info:
            parse_chord(text)
        assert info.value.text == text

    @pytest.mark.parametrize("text", ["C:m:4", "C:m:x", "C:m:12"])
    def test_invalid_inversion(self, text: str) -> None:
        with pytest.raises(InvalidChordSuffixError):
            parse_chord(text)

    def test_too_many_segments(self) -> None:
        with pytest.raises(InvalidChordSuffixError) as info:
            parse_chord("C:m:1:2")
        assert info.value.segment == "2"

    def test_errors_are_value_errors(self) -> None:
        """Callers can catch the base class or ValueError."""
        for text in ("", "Z", "C:x"):
            with pytest.raises(ChordParseError):
                parse_chord(text)
            with pytest.raises(ValueError):
                parse_chord(text)

    def test_error_kinds(self) -> None:
        kinds = []
        for text in ("", "Z", "C:x"):
            try:
                parse_chord(text)
            except ChordParseError as e:
                kinds.append(e.kind)
        assert kinds == ["EmptyInput", "InvalidNote", "InvalidChordSuffix"]


ROOTS = ["C", "C#", "Db", "E", "Cb", "B#3", "8.F#2", "1Ab5", "="]


class TestRoundTrip:
    """parse_chord(chord_text(c)) == c for every reachable chord."""

    @pytest.mark.parametrize("root", ROOTS)
    def test_all_fields_survive(self, root: str) -> None:
        for quality, interval, inversion in itertools.product(
            Quality, IntervalClass, Inversion
        ):
            chord = Chord(N(root), quality, interval, inversion)
            parsed = parse_chord(chord_text(chord))
            assert parsed == chord
            assert parsed.root.store_text() == chord.root.store_text()
            assert parsed.store_text() == chord.store_text()

    def test_store_text_wraps_chord_text(self) -> None:
        chord = parse_chord("A:o6:1")
        assert chord.store_text() == f"chord('{chord_text(chord)}')"

    def test_parsed_text_round_trips(self) -> None:
        for text in ("C", "C:m7", "E:D7", "E:m:2", "C#:1", "C:7", "C:m7:0"):
            chord = parse_chord(text)
            assert parse_chord(chord_text(chord)) == chord
