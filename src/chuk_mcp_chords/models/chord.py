"""
Chord models - JSON/YAML-facing views of the core values.

The core types are plain frozen dataclasses; these pydantic models are
what tools return and what the variable file stores.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_chords.core.chord import Chord, IntervalClass, Inversion, Quality
from chuk_mcp_chords.core.note import Note

VARIABLE_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class ChordSummary(BaseModel):
    """The fields of a parsed chord plus its canonical text."""

    symbol: str = Field(..., description="Canonical chord symbol (e.g. 'E:m:2')")
    store_text: str = Field(..., description="Round-trip literal (e.g. \"chord('E:m:2')\")")
    description: str = Field(..., description="Readable name")
    root: str = Field(..., description="Root note as written")
    is_rest: bool = Field(False, description="Root is a rest")
    quality: Quality
    interval: IntervalClass
    inversion: Inversion

    model_config = {"frozen": True}

    @classmethod
    def from_chord(cls, chord: Chord) -> ChordSummary:
        return cls(
            symbol=chord.symbol(),
            store_text=chord.store_text(),
            description=chord.describe(),
            root=chord.root.store_text(),
            is_rest=chord.root.is_rest,
            quality=chord.quality,
            interval=chord.interval,
            inversion=chord.inversion,
        )


class DerivedChord(BaseModel):
    """Derived tones of a chord."""

    chord: ChordSummary
    tones: list[str] = Field(..., description="Voiced tones, lowest first, display spelling")
    midi: list[int] = Field(default_factory=list, description="MIDI numbers (rests omitted)")
    sequence: str = Field(..., description="Sequence literal of the derived group")

    model_config = {"frozen": True}

    @classmethod
    def from_chord(cls, chord: Chord) -> DerivedChord:
        group = chord.tones()
        return cls(
            chord=ChordSummary.from_chord(chord),
            tones=[note.render() for note in group],
            midi=group.midi_numbers(),
            sequence=chord.derive().store_text(),
        )


class NoteSummary(BaseModel):
    """A single note stored as a variable."""

    note: str
    store_text: str
    is_rest: bool
    midi: int | None = None

    model_config = {"frozen": True}

    @classmethod
    def from_note(cls, note: Note) -> NoteSummary:
        return cls(
            note=note.render(),
            store_text=f"note('{note.store_text()}')",
            is_rest=note.is_rest,
            midi=note.midi_number(),
        )


class VariableFile(BaseModel):
    """
    On-disk form of the variable store.

    Values are round-trip literals such as "chord('C:m7')" or "note('Eb5')".
    """

    schema_version: str = Field("variables/v1", alias="schema")
    variables: dict[str, str] = Field(default_factory=dict)

    model_config = {"populate_by_name": True}

    @field_validator("variables")
    @classmethod
    def validate_names(cls, v: dict[str, str]) -> dict[str, str]:
        """Ensure every variable name is an identifier."""
        for name in v:
            if not VARIABLE_NAME.match(name):
                raise ValueError(f"Invalid variable name: {name}")
        return v

    def to_yaml_dict(self) -> dict[str, Any]:
        return {"schema": self.schema_version, "variables": dict(self.variables)}
