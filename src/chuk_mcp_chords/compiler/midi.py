"""
MIDI export - the consumer end of the pipeline.

Turns a NoteSequence into timed note events and writes them with mido.
Groups are laid end to end; the notes of a group start together.
All operations are deterministic: same input → same output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mido import Message, MetaMessage, MidiFile, MidiTrack

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chuk_mcp_chords.core.sequence import NoteSequence

logger = logging.getLogger(__name__)

# Standard ticks per beat (quarter note)
TICKS_PER_BEAT = 480

DEFAULT_VELOCITY = 100


@dataclass(frozen=True)
class MidiEvent:
    """
    A single MIDI note event.

    All times are in ticks (absolute from start of track).
    """

    pitch: int  # MIDI note number (0-127)
    start_ticks: int
    duration_ticks: int
    velocity: int = DEFAULT_VELOCITY
    channel: int = 0

    def __post_init__(self) -> None:
        """Validate MIDI ranges."""
        if not 0 <= self.pitch <= 127:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")


def sequence_to_events(
    sequence: NoteSequence,
    velocity: int = DEFAULT_VELOCITY,
    channel: int = 0,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> list[MidiEvent]:
    """
    Lay out a NoteSequence as MIDI events.

    Each group lasts as long as its first note; rests only advance time.

    Args:
        sequence: Groups to play in order
        velocity: Velocity for every note (0-127)
        channel: MIDI channel (0-15)
        ticks_per_beat: Resolution (default 480)

    Returns:
        Events ordered by start time
    """
    events: list[MidiEvent] = []
    position = 0
    for group in sequence:
        length = int(group.beats() * ticks_per_beat)
        for pitch in group.midi_numbers():
            events.append(
                MidiEvent(
                    pitch=pitch,
                    start_ticks=position,
                    duration_ticks=length,
                    velocity=velocity,
                    channel=channel,
                )
            )
        position += length
    return events


def events_to_midi(
    events: Sequence[MidiEvent],
    tempo_bpm: float = 120,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> MidiFile:
    """
    Convert MidiEvents to a single-track MidiFile.

    Args:
        events: Events in any order
        tempo_bpm: Tempo in beats per minute
        ticks_per_beat: Resolution (default 480)

    Returns:
        A mido MidiFile ready to be saved
    """
    if tempo_bpm <= 0:
        raise ValueError(f"Tempo must be positive, got {tempo_bpm}")

    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)
    track.append(MetaMessage("set_tempo", tempo=int(60_000_000 / tempo_bpm), time=0))

    timed: list[tuple[int, Message]] = []
    for event in events:
        timed.append(
            (
                event.start_ticks,
                Message("note_on", channel=event.channel, note=event.pitch, velocity=event.velocity),
            )
        )
        timed.append(
            (
                event.start_ticks + event.duration_ticks,
                Message("note_off", channel=event.channel, note=event.pitch, velocity=0),
            )
        )

    # note_off before note_on at the same tick so repeated pitches re-trigger
    timed.sort(key=lambda item: (item[0], item[1].type != "note_off"))

    current = 0
    for absolute, message in timed:
        track.append(message.copy(time=absolute - current))
        current = absolute

    track.append(MetaMessage("end_of_track", time=0))
    return mid


def sequence_to_midi(
    sequence: NoteSequence,
    tempo_bpm: float = 120,
    velocity: int = DEFAULT_VELOCITY,
    channel: int = 0,
) -> MidiFile:
    """Render a NoteSequence straight to a MidiFile."""
    events = sequence_to_events(sequence, velocity=velocity, channel=channel)
    logger.debug(
        "Rendering %d groups as %d MIDI events at %s bpm", len(sequence), len(events), tempo_bpm
    )
    return events_to_midi(events, tempo_bpm=tempo_bpm)
