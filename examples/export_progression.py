#!/usr/bin/env python3
"""
Example: Export a chord progression to MIDI.

Usage:
    python examples/export_progression.py
    # Creates: examples/output/ii_v_i.mid
"""

from pathlib import Path

from chuk_mcp_chords.compiler.midi import sequence_to_midi
from chuk_mcp_chords.core import NoteSequence, parse_chord


def main() -> None:
    """Write a ii-V-I in C, one whole note per chord."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    progression = ["1D3:m7", "1G3:D7:2", "1C4:M7"]
    sequence = NoteSequence(())
    for symbol in progression:
        sequence = sequence + parse_chord(symbol).derive()

    print(sequence.store_text())

    mid = sequence_to_midi(sequence, tempo_bpm=90)
    path = output_dir / "ii_v_i.mid"
    mid.save(str(path))
    print(f"  Created: {path}")


if __name__ == "__main__":
    main()
