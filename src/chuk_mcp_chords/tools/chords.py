"""
Chord tools - MCP tools for parsing, deriving and exporting chords.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_chords.compiler.midi import sequence_to_midi
from chuk_mcp_chords.constants import (
    DEFAULT_TEMPO,
    MAX_TEMPO,
    MIN_TEMPO,
    ErrorMessages,
    SuccessMessages,
)
from chuk_mcp_chords.core.chord import CHORD_SEMITONES, Inversion, Quality
from chuk_mcp_chords.core.errors import ChordParseError
from chuk_mcp_chords.core.sequence import NoteSequence
from chuk_mcp_chords.models.chord import ChordSummary, DerivedChord
from chuk_mcp_chords.tools.common import error_response, parse_chord_cached

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _resolve_quality(quality: str) -> Quality:
    """Accept a quality name ('minor') or grammar letter ('m')."""
    for member in Quality:
        if quality.lower() == member.value or quality == member.symbol:
            return member
    choices = ", ".join(member.value for member in Quality)
    raise ValueError(ErrorMessages.UNKNOWN_QUALITY.format(quality=quality, choices=choices))


def _resolve_inversion(inversion: int) -> Inversion:
    try:
        return Inversion(inversion)
    except ValueError:
        raise ValueError(ErrorMessages.UNKNOWN_INVERSION.format(inversion=inversion)) from None


def register_chord_tools(mcp: ChukMCPServer, output_dir: Path) -> dict[str, Any]:
    """
    Register chord tools with the MCP server.

    Args:
        mcp: The MCP server instance
        output_dir: Directory for exported MIDI files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chord_parse(text: str) -> str:
        """
        Parse a chord symbol.

        Grammar: note[:quality-interval[:inversion]]. Quality letters are
        M (major), m (minor), D (dominant), A (augmented), o (diminished);
        interval digits are 6 and 7; inversions are 0-3.

        Args:
            text: Chord symbol (e.g. 'C', 'C:m7', 'E:m:2', 'F#:D7:1')

        Returns:
            JSON string with the chord fields and canonical text

        Example:
            chord_parse(text="E:m:2")
        """
        try:
            chord = parse_chord_cached(text)
            return json.dumps(
                {"status": "success", "chord": ChordSummary.from_chord(chord).model_dump(mode="json")}
            )
        except ChordParseError as e:
            logger.info("Rejected chord %r: %s", text, e)
            return error_response(e)
        except Exception as e:
            logger.exception("Failed to parse chord")
            return error_response(e)

    tools["chord_parse"] = chord_parse

    @mcp.tool  # type: ignore[arg-type]
    async def chord_derive(text: str) -> str:
        """
        Derive the tones of a chord.

        Tones are voiced for the chord's inversion and listed lowest
        first. Derived tones on black keys are spelled with flats; the
        root keeps its written spelling.

        Args:
            text: Chord symbol

        Returns:
            JSON string with tones, MIDI numbers and the sequence literal

        Example:
            chord_derive(text="C:m7")
        """
        try:
            chord = parse_chord_cached(text)
            derived = DerivedChord.from_chord(chord)
            return json.dumps({"status": "success", **derived.model_dump(mode="json")})
        except ChordParseError as e:
            logger.info("Rejected chord %r: %s", text, e)
            return error_response(e)
        except ValueError as e:
            return error_response(e)
        except Exception as e:
            logger.exception("Failed to derive chord")
            return error_response(e)

    tools["chord_derive"] = chord_derive

    @mcp.tool  # type: ignore[arg-type]
    async def chord_modify(
        text: str,
        quality: str | None = None,
        inversion: int | None = None,
    ) -> str:
        """
        Change the quality and/or inversion of a chord.

        Args:
            text: Chord symbol to start from
            quality: New quality, by name ('minor') or letter ('m')
            inversion: New inversion (0-3)

        Returns:
            JSON string with the modified chord and its tones

        Example:
            chord_modify(text="C:M7", quality="minor", inversion=1)
        """
        try:
            chord = parse_chord_cached(text)
            modifiers: list[Quality | Inversion] = []
            if quality is not None:
                modifiers.append(_resolve_quality(quality))
            if inversion is not None:
                modifiers.append(_resolve_inversion(inversion))

            modified = chord.modified(*modifiers)
            derived = DerivedChord.from_chord(modified)
            return json.dumps({"status": "success", **derived.model_dump(mode="json")})
        except ChordParseError as e:
            logger.info("Rejected chord %r: %s", text, e)
            return error_response(e)
        except ValueError as e:
            return error_response(e)
        except Exception as e:
            logger.exception("Failed to modify chord")
            return error_response(e)

    tools["chord_modify"] = chord_modify

    @mcp.tool  # type: ignore[arg-type]
    async def chord_table() -> str:
        """
        List the semitone table used for tone derivation.

        Returns:
            JSON string mapping quality -> interval class -> semitone offsets

        Example:
            chord_table()
        """
        table: dict[str, dict[str, list[int]]] = {}
        for (quality, interval), semitones in CHORD_SEMITONES.items():
            table.setdefault(quality.value, {})[interval.value] = list(semitones)
        return json.dumps(
            {
                "status": "success",
                "table": table,
                "symbols": {
                    "quality": {member.symbol: member.value for member in Quality},
                    "interval": {"6": "sixth", "7": "seventh"},
                    "inversion": {member.symbol: member.name.lower() for member in Inversion},
                },
            }
        )

    tools["chord_table"] = chord_table

    @mcp.tool  # type: ignore[arg-type]
    async def chord_export_midi(
        chords: list[str],
        tempo: int = DEFAULT_TEMPO,
        output_name: str = "chords",
    ) -> str:
        """
        Export chords, played one after another, to a MIDI file.

        Each chord lasts as long as its root note's duration
        (e.g. '1C:m7' is a whole note).

        Args:
            chords: Chord symbols in playing order
            tempo: Tempo in BPM
            output_name: Output filename (without .mid extension)

        Returns:
            JSON string with the file path

        Example:
            chord_export_midi(chords=["2C", "2A:m", "2F", "2G:D7"], tempo=90)
        """
        try:
            if not chords:
                return error_response(ErrorMessages.NO_CHORDS)
            if not MIN_TEMPO <= tempo <= MAX_TEMPO:
                return error_response(ErrorMessages.INVALID_TEMPO.format(tempo=tempo))

            sequence = NoteSequence(())
            for text in chords:
                sequence = sequence + parse_chord_cached(text).derive()

            midi_file = sequence_to_midi(sequence, tempo_bpm=tempo)
            output_dir.mkdir(parents=True, exist_ok=True)
            output_path = output_dir / f"{output_name}.mid"
            midi_file.save(str(output_path))
            logger.info("Wrote %s", output_path)

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "sequence": sequence.store_text(),
                    "beats": float(sequence.beats()),
                    "message": SuccessMessages.MIDI_EXPORTED.format(
                        count=len(chords), path=output_path
                    ),
                }
            )
        except ChordParseError as e:
            logger.info("Rejected chord in export: %s", e)
            return error_response(e)
        except ValueError as e:
            return error_response(e)
        except Exception as e:
            logger.exception("Failed to export MIDI")
            return error_response(e)

    tools["chord_export_midi"] = chord_export_midi

    return tools
