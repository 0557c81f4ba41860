"""
Pitch primitives - PitchClass, Accidental and the spelling table.

PitchClass represents the 12 chromatic pitches (octave-independent).
Accidental records how a pitch was written (sharp, flat, natural).

The spelling table decides how derived tones are displayed: black keys
are spelled with flats, everything else is natural. A chord root keeps
whatever letter and accidental the user typed.
"""

from __future__ import annotations

from enum import IntEnum

# Letter mappings (module level to avoid IntEnum member issues)
_NATURAL_LETTERS: dict[str, int] = {
    "C": 0,
    "D": 2,
    "E": 4,
    "F": 5,
    "G": 7,
    "A": 9,
    "B": 11,
}
_FLAT_LETTERS: list[str] = ["C", "D", "D", "E", "E", "F", "G", "G", "A", "A", "B", "B"]

# Pitch classes that need an accidental
BLACK_KEYS: frozenset[int] = frozenset({1, 3, 6, 8, 10})


class Accidental(IntEnum):
    """How a pitch was spelled: the semitone offset from its letter."""

    FLAT = -1
    NATURAL = 0
    SHARP = 1

    @property
    def token(self) -> str:
        """ASCII form used in the note grammar."""
        return _TOKENS[self]

    @property
    def glyph(self) -> str:
        """Display form."""
        return _GLYPHS[self]

    @classmethod
    def from_token(cls, token: str) -> Accidental:
        """Parse '#', 'b' or '' into an Accidental."""
        for member, text in _TOKENS.items():
            if text == token:
                return member
        raise ValueError(f"Unknown accidental: {token!r}")


_TOKENS: dict[Accidental, str] = {
    Accidental.FLAT: "b",
    Accidental.NATURAL: "",
    Accidental.SHARP: "#",
}
_GLYPHS: dict[Accidental, str] = {
    Accidental.FLAT: "♭",
    Accidental.NATURAL: "",
    Accidental.SHARP: "♯",
}


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % 12)

    def canonical_spelling(self) -> tuple[str, Accidental]:
        """
        Letter and accidental used for a derived (non-root) chord tone.

        Black keys are spelled flat: 3 -> E♭, 6 -> G♭, 10 -> B♭.
        """
        if self.value in BLACK_KEYS:
            return _FLAT_LETTERS[self.value], Accidental.FLAT
        return _FLAT_LETTERS[self.value], Accidental.NATURAL

    def spell(self, glyphs: bool = True) -> str:
        """Get the canonical human-readable name."""
        letter, accidental = self.canonical_spelling()
        return letter + (accidental.glyph if glyphs else accidental.token)

    @classmethod
    def from_spelling(cls, letter: str, accidental: Accidental) -> PitchClass:
        """
        Resolve a letter plus accidental to a pitch class.

        Cb resolves to B and E# to F.

        Raises:
            ValueError: If the letter is not A-G
        """
        return cls((letter_semitone(letter) + accidental.value) % 12)


def letter_semitone(letter: str) -> int:
    """Semitone of a natural letter within the octave (C=0 ... B=11)."""
    if letter not in _NATURAL_LETTERS:
        raise ValueError(f"Unknown pitch letter: {letter!r}")
    return _NATURAL_LETTERS[letter]
