"""
MIDI export tests.

Derived chord sequences must come out as correctly timed note events.
"""

from pathlib import Path

import pytest
from mido import MidiFile

from chuk_mcp_chords.compiler.midi import (
    TICKS_PER_BEAT,
    MidiEvent,
    events_to_midi,
    sequence_to_events,
    sequence_to_midi,
)
from chuk_mcp_chords.core import NoteSequence, parse_chord


def progression(*symbols: str) -> NoteSequence:
    sequence = NoteSequence(())
    for symbol in symbols:
        sequence = sequence + parse_chord(symbol).derive()
    return sequence


class TestMidiEvent:
    """Test MidiEvent validation."""

    def test_create_valid_event(self) -> None:
        event = MidiEvent(pitch=60, start_ticks=0, duration_ticks=480)
        assert event.velocity == 100
        assert event.channel == 0

    def test_pitch_range(self) -> None:
        with pytest.raises(ValueError, match="Pitch must be 0-127"):
            MidiEvent(pitch=128, start_ticks=0, duration_ticks=480)

    def test_velocity_range(self) -> None:
        with pytest.raises(ValueError, match="Velocity must be 0-127"):
            MidiEvent(pitch=60, start_ticks=0, duration_ticks=480, velocity=128)

    def test_channel_range(self) -> None:
        with pytest.raises(ValueError, match="Channel must be 0-15"):
            MidiEvent(pitch=60, start_ticks=0, duration_ticks=480, channel=16)

    def test_negative_start(self) -> None:
        with pytest.raises(ValueError, match="Start ticks"):
            MidiEvent(pitch=60, start_ticks=-1, duration_ticks=480)


class TestSequenceToEvents:
    """Test laying out sequences in time."""

    def test_single_chord(self) -> None:
        events = sequence_to_events(parse_chord("C").derive())
        assert [e.pitch for e in events] == [60, 64, 67]
        assert all(e.start_ticks == 0 for e in events)
        assert all(e.duration_ticks == TICKS_PER_BEAT for e in events)

    def test_groups_follow_each_other(self) -> None:
        events = sequence_to_events(progression("2C", "C:m"))
        starts = sorted({e.start_ticks for e in events})
        assert starts == [0, 2 * TICKS_PER_BEAT]
        second = [e.pitch for e in events if e.start_ticks == 2 * TICKS_PER_BEAT]
        assert second == [60, 63, 67]

    def test_rest_advances_time(self) -> None:
        events = sequence_to_events(progression("1=", "C"))
        assert len(events) == 3
        assert all(e.start_ticks == 4 * TICKS_PER_BEAT for e in events)

    def test_dotted_length(self) -> None:
        events = sequence_to_events(parse_chord("8.C").derive())
        assert events[0].duration_ticks == TICKS_PER_BEAT * 3 // 4

    def test_inverted_pitches(self) -> None:
        events = sequence_to_events(parse_chord("E:m:2").derive())
        assert [e.pitch for e in events] == [71, 76, 79]

    def test_velocity_and_channel(self) -> None:
        events = sequence_to_events(parse_chord("C").derive(), velocity=64, channel=2)
        assert {(e.velocity, e.channel) for e in events} == {(64, 2)}


class TestEventsToMidi:
    """Test the events_to_midi function."""

    def test_empty_events(self) -> None:
        mid = events_to_midi([])
        assert len(mid.tracks) == 1
        assert mid.ticks_per_beat == TICKS_PER_BEAT

    def test_tempo(self) -> None:
        mid = events_to_midi([], tempo_bpm=90)
        tempo_msgs = [m for m in mid.tracks[0] if m.type == "set_tempo"]
        assert tempo_msgs[0].tempo == 666666

    def test_invalid_tempo(self) -> None:
        with pytest.raises(ValueError, match="Tempo"):
            events_to_midi([], tempo_bpm=0)

    def test_delta_times(self) -> None:
        events = [
            MidiEvent(pitch=60, start_ticks=0, duration_ticks=480),
            MidiEvent(pitch=62, start_ticks=480, duration_ticks=480),
        ]
        mid = events_to_midi(events)
        notes = [m for m in mid.tracks[0] if m.type in ("note_on", "note_off")]
        assert [(m.type, m.note, m.time) for m in notes] == [
            ("note_on", 60, 0),
            ("note_off", 60, 480),
            ("note_on", 62, 0),
            ("note_off", 62, 480),
        ]


class TestSequenceToMidi:
    """End-to-end export."""

    def test_save_and_reload(self, temp_midi_path: Path) -> None:
        mid = sequence_to_midi(progression("2D3:m7", "2G3:D7", "1C4:M7"), tempo_bpm=100)
        mid.save(str(temp_midi_path))

        loaded = MidiFile(str(temp_midi_path))
        note_ons = [m for m in loaded.tracks[0] if m.type == "note_on" and m.velocity > 0]
        assert len(note_ons) == 12

    def test_deterministic(self) -> None:
        seq = progression("C", "A:m", "F", "G:D7")
        first = [str(m) for m in sequence_to_midi(seq).tracks[0]]
        second = [str(m) for m in sequence_to_midi(seq).tracks[0]]
        assert first == second
