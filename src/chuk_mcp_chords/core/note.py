"""
Note primitive - a single pitch or a rest.

A pitch remembers how it was written (letter + accidental + octave) so a
chord root can round-trip exactly. Transposition produces canonically
spelled notes unless the shift is a whole number of octaves.

Grammar of a note token:

    [duration][.]<A-G | =>[# | b][octave]

    C       quarter C4
    C#5     quarter C sharp, octave 5
    8.Eb    dotted eighth E flat
    1=      whole rest
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from fractions import Fraction

from .errors import InvalidNoteError
from .pitch import Accidental, PitchClass, letter_semitone

DEFAULT_OCTAVE = 4
DEFAULT_DURATION = 4  # quarter note
DURATIONS: tuple[int, ...] = (1, 2, 4, 8, 16)
REST_SYMBOL = "="
MIDI_LOWEST = 0
MIDI_HIGHEST = 127

_NOTE_PATTERN = re.compile(
    r"^(?P<duration>16|1|2|4|8)?(?P<dot>\.)?(?P<name>[A-G=])(?P<accidental>[#b]?)(?P<octave>[0-9]?)$"
)


@dataclass(frozen=True, eq=False)
class Note:
    """
    A pitch or a rest, with a duration.

    Pitches compare by sounding pitch (pitch class + octave), so C#4 and
    Db4 are equal. Rests are equal only to rests.

    Immutable and hashable.
    """

    letter: str | None  # None for a rest
    accidental: Accidental = Accidental.NATURAL
    octave: int = DEFAULT_OCTAVE
    duration: int = DEFAULT_DURATION  # 1=whole, 2=half, 4=quarter ...
    dotted: bool = False

    def __post_init__(self) -> None:
        if self.letter is not None:
            letter_semitone(self.letter)
        if self.duration not in DURATIONS:
            raise ValueError(f"Duration must be one of {DURATIONS}, got {self.duration}")

    @classmethod
    def rest(cls, duration: int = DEFAULT_DURATION, dotted: bool = False) -> Note:
        """Create a rest."""
        return cls(None, duration=duration, dotted=dotted)

    @classmethod
    def from_absolute(
        cls, absolute: int, duration: int = DEFAULT_DURATION, dotted: bool = False
    ) -> Note:
        """Create a canonically spelled note from an absolute semitone (C0 = 0)."""
        letter, accidental = PitchClass(absolute % 12).canonical_spelling()
        return cls(letter, accidental, absolute // 12, duration, dotted)

    @property
    def is_rest(self) -> bool:
        return self.letter is None

    @property
    def pitch_class(self) -> PitchClass | None:
        if self.letter is None:
            return None
        return PitchClass.from_spelling(self.letter, self.accidental)

    @property
    def absolute(self) -> int | None:
        """Sounding pitch in semitones above C0; None for a rest."""
        if self.letter is None:
            return None
        return self.octave * 12 + letter_semitone(self.letter) + self.accidental.value

    def midi_number(self) -> int | None:
        """
        MIDI note number. C4 = 60; None for a rest.

        Raises:
            ValueError: If the pitch lies outside MIDI notes 0-127 (above G9)
        """
        absolute = self.absolute
        if absolute is None:
            return None
        number = absolute + 12
        if not MIDI_LOWEST <= number <= MIDI_HIGHEST:
            raise ValueError(
                f"{self.render()} is outside the MIDI range {MIDI_LOWEST}-{MIDI_HIGHEST} (MIDI {number})"
            )
        return number

    def beats(self) -> Fraction:
        """Length in quarter-note beats."""
        length = Fraction(4, self.duration)
        return length * Fraction(3, 2) if self.dotted else length

    def transpose(self, semitones: int) -> Note:
        """
        Transpose by a number of semitones.

        Whole-octave shifts keep the written spelling; any other shift
        uses the canonical spelling of the resulting pitch class. Rests
        are returned unchanged.
        """
        if self.letter is None:
            return self
        if semitones % 12 == 0:
            return Note(
                self.letter,
                self.accidental,
                self.octave + semitones // 12,
                self.duration,
                self.dotted,
            )
        absolute = self.octave * 12 + letter_semitone(self.letter) + self.accidental.value
        return Note.from_absolute(absolute + semitones, self.duration, self.dotted)

    def _prefix(self) -> str:
        prefix = "" if self.duration == DEFAULT_DURATION and not self.dotted else str(self.duration)
        return prefix + ("." if self.dotted else "")

    def _format(self, glyphs: bool) -> str:
        if self.letter is None:
            return self._prefix() + REST_SYMBOL
        mark = self.accidental.glyph if glyphs else self.accidental.token
        octave = "" if self.octave == DEFAULT_OCTAVE else str(self.octave)
        return f"{self._prefix()}{self.letter}{mark}{octave}"

    def render(self) -> str:
        """Display form with ♯/♭ glyphs, e.g. 'E♭' or 'C♯5'."""
        return self._format(glyphs=True)

    def store_text(self) -> str:
        """Token form that parse_note reads back, e.g. 'Eb' or 'C#5'."""
        return self._format(glyphs=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        if self.is_rest or other.is_rest:
            return self.is_rest and other.is_rest
        return self.absolute == other.absolute

    def __hash__(self) -> int:
        return hash(("rest",) if self.is_rest else ("pitch", self.absolute))

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Note({self.store_text()!r})"


def parse_note(token: str) -> Note:
    """
    Parse a note token like 'C', 'C#5', '8.Eb' or '1='.

    Raises:
        InvalidNoteError: If the token does not match the note grammar
    """
    match = _NOTE_PATTERN.match(token.strip())
    if match is None:
        raise InvalidNoteError(token)

    duration = int(match["duration"]) if match["duration"] else DEFAULT_DURATION
    dotted = match["dot"] is not None

    if match["name"] == REST_SYMBOL:
        # A rest has no pitch to alter or place in an octave
        if match["accidental"] or match["octave"]:
            raise InvalidNoteError(token)
        return Note.rest(duration, dotted)

    octave = int(match["octave"]) if match["octave"] else DEFAULT_OCTAVE
    return Note(
        match["name"],
        Accidental.from_token(match["accidental"]),
        octave,
        duration,
        dotted,
    )


def N(token: str) -> Note:  # noqa: N802
    """Shorthand for parse_note, for literals known to be valid."""
    return parse_note(token)
