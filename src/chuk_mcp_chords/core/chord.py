"""
Chord primitives - Quality, IntervalClass, Inversion, Chord.

A chord is a root note plus three closed choices:
- Quality: the triad flavour (and how a 7th is built for dominant)
- IntervalClass: triad, or triad plus a 6th or 7th
- Inversion: how many of the lowest tones move up an octave

Chord tones are derived from a semitone table keyed by (quality, interval).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from operator import attrgetter

from .note import Note
from .sequence import NoteSequence, PitchGroup

OCTAVE = 12


class Quality(str, Enum):
    """Harmonic flavour of a chord."""

    MAJOR = "major"
    MINOR = "minor"
    DOMINANT = "dominant"
    AUGMENTED = "augmented"
    DIMINISHED = "diminished"

    @property
    def symbol(self) -> str:
        """Letter used in the chord grammar."""
        return _QUALITY_SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> Quality:
        """Parse a quality letter; the empty string means major."""
        if symbol == "":
            return cls.MAJOR
        for member, letter in _QUALITY_SYMBOLS.items():
            if letter == symbol:
                return member
        raise ValueError(f"Unknown chord quality: {symbol!r}")


_QUALITY_SYMBOLS: dict[Quality, str] = {
    Quality.MAJOR: "M",
    Quality.MINOR: "m",
    Quality.DOMINANT: "D",
    Quality.AUGMENTED: "A",
    Quality.DIMINISHED: "o",
}


class IntervalClass(str, Enum):
    """Which extension, if any, is stacked on the triad."""

    TRIAD = "triad"
    SIXTH = "sixth"
    SEVENTH = "seventh"

    @property
    def symbol(self) -> str:
        """Digit used in the chord grammar (empty for a triad)."""
        return _INTERVAL_SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> IntervalClass:
        for member, digit in _INTERVAL_SYMBOLS.items():
            if digit == symbol:
                return member
        raise ValueError(f"Unknown interval class: {symbol!r}")


_INTERVAL_SYMBOLS: dict[IntervalClass, str] = {
    IntervalClass.TRIAD: "",
    IntervalClass.SIXTH: "6",
    IntervalClass.SEVENTH: "7",
}


class Inversion(IntEnum):
    """Number of lowest root-position tones moved up an octave."""

    GROUND = 0
    FIRST = 1
    SECOND = 2
    THIRD = 3

    @property
    def symbol(self) -> str:
        return str(self.value)


# Semitones above the root, root position, for every (quality, interval) pair.
# Dominant differs from major only in its seventh.
CHORD_SEMITONES: dict[tuple[Quality, IntervalClass], tuple[int, ...]] = {
    (Quality.MAJOR, IntervalClass.TRIAD): (0, 4, 7),
    (Quality.MAJOR, IntervalClass.SIXTH): (0, 4, 7, 9),
    (Quality.MAJOR, IntervalClass.SEVENTH): (0, 4, 7, 11),
    (Quality.MINOR, IntervalClass.TRIAD): (0, 3, 7),
    (Quality.MINOR, IntervalClass.SIXTH): (0, 3, 7, 9),
    (Quality.MINOR, IntervalClass.SEVENTH): (0, 3, 7, 10),
    (Quality.DOMINANT, IntervalClass.TRIAD): (0, 4, 7),
    (Quality.DOMINANT, IntervalClass.SIXTH): (0, 4, 7, 9),
    (Quality.DOMINANT, IntervalClass.SEVENTH): (0, 4, 7, 10),
    (Quality.AUGMENTED, IntervalClass.TRIAD): (0, 4, 8),
    (Quality.AUGMENTED, IntervalClass.SIXTH): (0, 4, 8, 9),
    (Quality.AUGMENTED, IntervalClass.SEVENTH): (0, 4, 8, 11),
    (Quality.DIMINISHED, IntervalClass.TRIAD): (0, 3, 6),
    (Quality.DIMINISHED, IntervalClass.SIXTH): (0, 3, 6, 9),
    (Quality.DIMINISHED, IntervalClass.SEVENTH): (0, 3, 6, 9),
}

_missing = {(q, i) for q in Quality for i in IntervalClass} - CHORD_SEMITONES.keys()
if _missing:
    raise RuntimeError(f"Chord semitone table is incomplete: {sorted(_missing)}")


def semitones_for(quality: Quality, interval: IntervalClass) -> tuple[int, ...]:
    """Root-position semitone offsets for a quality and interval class."""
    return CHORD_SEMITONES[(quality, interval)]


@dataclass(frozen=True)
class Chord:
    """
    A chord symbol: root note plus quality, interval class and inversion.

    Immutable value; use modified() to get a variant. A chord whose root
    is a rest derives to that rest alone.
    """

    root: Note
    quality: Quality = Quality.MAJOR
    interval: IntervalClass = IntervalClass.TRIAD
    inversion: Inversion = Inversion.GROUND

    @classmethod
    def default(cls) -> Chord:
        """C major triad, ground position."""
        return cls(Note("C"))

    def semitones(self) -> tuple[int, ...]:
        """Root-position offsets from the root."""
        return semitones_for(self.quality, self.interval)

    def root_position(self) -> list[Note]:
        """Chord tones with the root lowest, spelled canonically above the root."""
        if self.root.is_rest:
            return [self.root]
        return [self.root.transpose(offset) for offset in self.semitones()]

    def tones(self) -> PitchGroup:
        """
        Derive the voiced chord tones, lowest first.

        The first k root-position tones (k = inversion, capped at the
        number of tones) move up an octave, then all tones are sorted by
        pitch. A third inversion of a triad moves every tone, giving the
        ground voicing an octave higher.
        """
        notes = self.root_position()
        if self.root.is_rest:
            return PitchGroup(tuple(notes))

        k = min(int(self.inversion), len(notes))
        voiced = [note.transpose(OCTAVE) for note in notes[:k]] + notes[k:]
        voiced.sort(key=attrgetter("absolute"))
        return PitchGroup(tuple(voiced))

    def derive(self) -> NoteSequence:
        """The chord as a one-group sequence, ready for playback."""
        return NoteSequence.of(self.tones())

    def modified(self, *modifiers: Quality | Inversion) -> Chord:
        """
        Return a copy with quality and/or inversion overridden.

        Later modifiers of the same kind win.

        Raises:
            TypeError: If a modifier is neither a Quality nor an Inversion
        """
        changes: dict[str, Quality | Inversion] = {}
        for modifier in modifiers:
            if isinstance(modifier, Quality):
                changes["quality"] = modifier
            elif isinstance(modifier, Inversion):
                changes["inversion"] = modifier
            else:
                raise TypeError(f"Cannot modify a chord with {modifier!r}")
        return replace(self, **changes)

    def symbol(self) -> str:
        """
        Canonical grammar form, e.g. 'C', 'C:m7', 'E:m:2', 'C#:M:1'.

        Segments equal to the default are left out; the quality letter is
        always written when the second segment is present.
        """
        text = self.root.store_text()
        is_default = self.quality == Quality.MAJOR and self.interval == IntervalClass.TRIAD
        if not is_default or self.inversion != Inversion.GROUND:
            text += f":{self.quality.symbol}{self.interval.symbol}"
        if self.inversion != Inversion.GROUND:
            text += f":{self.inversion.symbol}"
        return text

    def store_text(self) -> str:
        """e.g. "chord('C:m7')"."""
        return f"chord('{self.symbol()}')"

    def describe(self) -> str:
        """Readable name, e.g. 'E minor triad, 2nd inversion'."""
        if self.root.is_rest:
            return "rest"
        text = f"{self.root.render()} {self.quality.value} {self.interval.value}"
        if self.inversion != Inversion.GROUND:
            ordinal = {1: "1st", 2: "2nd", 3: "3rd"}[int(self.inversion)]
            text += f", {ordinal} inversion"
        return text

    def __str__(self) -> str:
        return self.symbol()
