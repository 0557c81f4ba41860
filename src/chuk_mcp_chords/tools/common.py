"""
Shared helpers for the chord tools.
"""

from __future__ import annotations

import json
from functools import lru_cache

from chuk_mcp_chords.core.chord import Chord
from chuk_mcp_chords.core.errors import ChordParseError
from chuk_mcp_chords.core.grammar import parse_chord


@lru_cache(maxsize=512)
def parse_chord_cached(text: str) -> Chord:
    """parse_chord memoized by input text; chords are immutable so sharing is safe."""
    return parse_chord(text)


def error_response(error: Exception | str) -> str:
    """JSON error payload; parse errors also report their kind."""
    payload: dict[str, str] = {"status": "error", "message": str(error)}
    if isinstance(error, ChordParseError):
        payload["kind"] = error.kind
    return json.dumps(payload)
