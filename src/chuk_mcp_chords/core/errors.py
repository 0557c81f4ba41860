"""
Parse errors for notes and chord symbols.

All errors are ValueErrors so callers that only care about "bad input"
can catch the builtin.
"""

from __future__ import annotations


class ChordParseError(ValueError):
    """Base class for everything the note and chord parsers reject."""

    kind = "ChordParseError"


class EmptyInputError(ChordParseError):
    """The chord text was empty."""

    kind = "EmptyInput"

    def __init__(self) -> None:
        super().__init__("illegal chord: missing note")


class InvalidNoteError(ChordParseError):
    """A note token could not be parsed."""

    kind = "InvalidNote"

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"illegal note: [{token}]")


class InvalidChordSuffixError(ChordParseError):
    """A quality/interval or inversion segment was present but not understood."""

    kind = "InvalidChordSuffix"

    def __init__(self, segment: str, text: str) -> None:
        self.segment = segment
        self.text = text
        super().__init__(f"illegal chord suffix [{segment}] in [{text}]")
