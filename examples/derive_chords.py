#!/usr/bin/env python3
"""
Example: Parse chord symbols and derive their tones.

Usage:
    python examples/derive_chords.py

Prints each chord's canonical literal, its voiced tones and the
sequence literal a player would receive.
"""

from chuk_mcp_chords.core import ChordParseError, Inversion, Quality, parse_chord

SYMBOLS = [
    "C",
    "C:m7",
    "C:M7",
    "E:D7",
    "E:m:2",
    "C#:1",
    "C:o7",
    "Bb:A6",
    "1=",
]


def main() -> None:
    """Print tones for a handful of chord symbols."""
    for symbol in SYMBOLS:
        chord = parse_chord(symbol)
        tones = " ".join(note.render() for note in chord.tones())
        print(f"{symbol:8} {chord.store_text():20} {tones:24} {chord.derive().store_text()}")

    # Modifying returns a new chord; the original is untouched
    c = parse_chord("C:M7")
    c_minor_first = c.modified(Quality.MINOR, Inversion.FIRST)
    print(f"\n{c} -> {c_minor_first}: {c_minor_first.tones()}")

    # Bad input is reported, not guessed at
    for bad in ["", "Z", "C:x", "C:m:9"]:
        try:
            parse_chord(bad)
        except ChordParseError as e:
            print(f"{bad!r:8} {e.kind}: {e}")


if __name__ == "__main__":
    main()
