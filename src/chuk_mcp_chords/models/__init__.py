"""
Pydantic models for the chord system.

This module provides:
- ChordSummary: Fields and canonical text of a chord
- DerivedChord: A chord with its derived tones
- NoteSummary: A single stored note
- VariableFile: On-disk form of saved variables
"""

from chuk_mcp_chords.models.chord import (
    ChordSummary,
    DerivedChord,
    NoteSummary,
    VariableFile,
)

__all__ = [
    "ChordSummary",
    "DerivedChord",
    "NoteSummary",
    "VariableFile",
]
