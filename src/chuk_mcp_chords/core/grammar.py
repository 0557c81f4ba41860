"""
Chord grammar parser.

    chord ::= note (":" quality-interval (":" inversion)?)?

    C        C major triad
    C:m7     C minor 7th
    E:D7     E dominant 7th
    E:m:2    E minor triad, 2nd inversion
    C#:1     C sharp major triad, 1st inversion (lone inversion digit)

Quality letters: M major, m minor, D dominant, A augmented, o diminished.
Interval digits: 6 sixth, 7 seventh; none means a triad.
Inversion digits: 0 (ground), 1, 2, 3; an empty inversion segment is ground.
"""

from __future__ import annotations

import re

from .chord import Chord, IntervalClass, Inversion, Quality
from .errors import EmptyInputError, InvalidChordSuffixError
from .note import parse_note

SEPARATOR = ":"

_QUALITY_INTERVAL = re.compile(r"^(?P<quality>[MmDAo]?)(?P<interval>[67]?)$")
_INVERSIONS: dict[str, Inversion] = {member.symbol: member for member in Inversion}


def parse_chord(text: str) -> Chord:
    """
    Parse a chord symbol like 'C', 'C:m7' or 'E:m:2'.

    Args:
        text: Chord symbol

    Returns:
        The parsed Chord

    Raises:
        EmptyInputError: If text is empty
        InvalidNoteError: If the root note cannot be parsed
        InvalidChordSuffixError: If a quality/interval or inversion segment
            is present but not recognised
    """
    text = text.strip()
    if not text:
        raise EmptyInputError()

    parts = text.split(SEPARATOR)
    root = parse_note(parts[0])
    if len(parts) == 1:
        return Chord(root)
    if len(parts) > 3:
        raise InvalidChordSuffixError(SEPARATOR.join(parts[3:]), text)

    quality, interval, inversion = _read_quality_interval(parts[1], text)
    if len(parts) == 3:
        inversion = _read_inversion(parts[2], text)

    return Chord(root, quality, interval, inversion)


def _read_quality_interval(segment: str, text: str) -> tuple[Quality, IntervalClass, Inversion]:
    # A lone inversion digit stands for a major triad in that inversion
    if segment in ("1", "2", "3"):
        return Quality.MAJOR, IntervalClass.TRIAD, _INVERSIONS[segment]

    match = _QUALITY_INTERVAL.match(segment)
    if not segment or match is None:
        raise InvalidChordSuffixError(segment, text)
    return (
        Quality.from_symbol(match["quality"]),
        IntervalClass.from_symbol(match["interval"]),
        Inversion.GROUND,
    )


def _read_inversion(segment: str, text: str) -> Inversion:
    # An absent inversion digit ("C:m:") means ground position
    if segment == "":
        return Inversion.GROUND
    if segment not in _INVERSIONS:
        raise InvalidChordSuffixError(segment, text)
    return _INVERSIONS[segment]


def chord_text(chord: Chord) -> str:
    """Canonical grammar text of a chord; parse_chord reads it back."""
    return chord.symbol()
