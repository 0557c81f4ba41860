"""
Core chord primitives - the notation engine.

These are pure, immutable values that everything else composes on:
- PitchClass / Accidental: pitch classes and the spelling table
- Note: a pitch or a rest, with duration
- PitchGroup / NoteSequence: voicings and the sequences a player consumes
- Quality / IntervalClass / Inversion / Chord: chord symbols and tone derivation
- parse_chord / parse_note: the text grammar
"""

from chuk_mcp_chords.core.chord import (
    CHORD_SEMITONES,
    Chord,
    IntervalClass,
    Inversion,
    Quality,
    semitones_for,
)
from chuk_mcp_chords.core.errors import (
    ChordParseError,
    EmptyInputError,
    InvalidChordSuffixError,
    InvalidNoteError,
)
from chuk_mcp_chords.core.grammar import chord_text, parse_chord
from chuk_mcp_chords.core.note import N, Note, parse_note
from chuk_mcp_chords.core.pitch import Accidental, PitchClass
from chuk_mcp_chords.core.sequence import NoteSequence, PitchGroup

__all__ = [
    # Pitch
    "PitchClass",
    "Accidental",
    # Note
    "Note",
    "N",
    "parse_note",
    # Sequence
    "PitchGroup",
    "NoteSequence",
    # Chord
    "Quality",
    "IntervalClass",
    "Inversion",
    "Chord",
    "CHORD_SEMITONES",
    "semitones_for",
    # Grammar
    "parse_chord",
    "chord_text",
    # Errors
    "ChordParseError",
    "EmptyInputError",
    "InvalidNoteError",
    "InvalidChordSuffixError",
]
