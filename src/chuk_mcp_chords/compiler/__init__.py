"""
Compiler - NoteSequence to MIDI.

The audio scheduler lives outside this package; MIDI files are the
portable form of the sequences it would play.
"""

from chuk_mcp_chords.compiler.midi import (
    DEFAULT_VELOCITY,
    TICKS_PER_BEAT,
    MidiEvent,
    events_to_midi,
    sequence_to_events,
    sequence_to_midi,
)

__all__ = [
    "DEFAULT_VELOCITY",
    "TICKS_PER_BEAT",
    "MidiEvent",
    "events_to_midi",
    "sequence_to_events",
    "sequence_to_midi",
]
