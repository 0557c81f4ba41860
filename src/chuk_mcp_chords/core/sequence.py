"""
Sequence primitives - PitchGroup and NoteSequence.

A PitchGroup is a set of notes sounding together (one chord voicing).
A NoteSequence is the ordered list of groups handed to a player or to
the MIDI exporter.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from fractions import Fraction

from .note import Note


@dataclass(frozen=True)
class PitchGroup:
    """
    Notes that sound together, lowest first.

    Immutable and hashable.
    """

    notes: tuple[Note, ...]

    def __post_init__(self) -> None:
        if not self.notes:
            raise ValueError("PitchGroup needs at least one note")

    def __iter__(self) -> Iterator[Note]:
        return iter(self.notes)

    def __len__(self) -> int:
        return len(self.notes)

    def __getitem__(self, index: int) -> Note:
        return self.notes[index]

    def beats(self) -> Fraction:
        """Length of the group; taken from its first note."""
        return self.notes[0].beats()

    def midi_numbers(self) -> list[int]:
        """MIDI numbers of the sounding notes (rests are skipped); ValueError past 0-127."""
        return [n for n in (note.midi_number() for note in self.notes) if n is not None]

    def store_text(self) -> str:
        """'(C E♭ G)' for a chord, the bare note for a single note."""
        if len(self.notes) == 1:
            return self.notes[0].render()
        return "(" + " ".join(note.render() for note in self.notes) + ")"

    def __str__(self) -> str:
        return self.store_text()


@dataclass(frozen=True)
class NoteSequence:
    """
    An ordered list of PitchGroups.

    This is what a player consumes: groups are played one after another,
    notes within a group at the same time.
    """

    groups: tuple[PitchGroup, ...]

    @classmethod
    def of(cls, *groups: PitchGroup) -> NoteSequence:
        return cls(tuple(groups))

    def __iter__(self) -> Iterator[PitchGroup]:
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)

    def __add__(self, other: NoteSequence) -> NoteSequence:
        if not isinstance(other, NoteSequence):
            return NotImplemented
        return NoteSequence(self.groups + other.groups)

    def beats(self) -> Fraction:
        """Total length in quarter-note beats."""
        return sum((group.beats() for group in self.groups), Fraction(0))

    def store_text(self) -> str:
        """e.g. "sequence('(C E G) (F A C5)')"."""
        body = " ".join(group.store_text() for group in self.groups)
        return f"sequence('{body}')"

    def __str__(self) -> str:
        return self.store_text()
