"""
Variable store - named chords and notes for a session.

Values live in memory; save() and load() persist them as round-trip
literals ("chord('C:m7')", "note('Eb5')") in a YAML file, so a saved
session reads back to equal values.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

import yaml

from chuk_mcp_chords.core.chord import Chord
from chuk_mcp_chords.core.grammar import parse_chord
from chuk_mcp_chords.core.note import Note, parse_note
from chuk_mcp_chords.models.chord import VARIABLE_NAME, VariableFile

logger = logging.getLogger(__name__)

Value = Chord | Note

_LITERAL = re.compile(r"^(?P<kind>chord|note)\('(?P<body>[^']*)'\)$")


def parse_literal(text: str) -> Value:
    """
    Parse a stored literal back into a value.

    Raises:
        ValueError: If the literal is not chord('...') or note('...'),
            or its body does not parse
    """
    match = _LITERAL.match(text.strip())
    if match is None:
        raise ValueError(f"Unsupported literal: {text!r}")
    if match["kind"] == "chord":
        return parse_chord(match["body"])
    return parse_note(match["body"])


def literal_of(value: Value) -> str:
    """The round-trip literal of a value."""
    if isinstance(value, Chord):
        return value.store_text()
    return f"note('{value.store_text()}')"


class VariableStore:
    """
    Maps variable names to chords and notes.

    Values are immutable, so get() hands out the stored object itself.
    """

    def __init__(self, path: Path | None = None):
        """
        Initialize the store.

        Args:
            path: Default YAML file used by save() and load()
        """
        self.path = path
        self._values: dict[str, Value] = {}

    def set(self, name: str, value: Value) -> None:
        """Bind a name, replacing any previous value."""
        if not VARIABLE_NAME.match(name):
            raise ValueError(f"Invalid variable name: {name}")
        if not isinstance(value, (Chord, Note)):
            raise TypeError(f"Cannot store {type(value).__name__}")
        self._values[name] = value

    def get(self, name: str) -> Value | None:
        return self._values.get(name)

    def delete(self, name: str) -> bool:
        """Remove a name; returns False if it was not bound."""
        return self._values.pop(name, None) is not None

    def names(self) -> list[str]:
        return sorted(self._values)

    def items(self) -> list[tuple[str, Value]]:
        return [(name, self._values[name]) for name in self.names()]

    def clear(self) -> None:
        self._values.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def to_file_model(self) -> VariableFile:
        return VariableFile(variables={name: literal_of(value) for name, value in self.items()})

    async def save(self, path: Path | None = None) -> Path:
        """
        Write all variables to YAML.

        Args:
            path: Target file; defaults to the store's path

        Returns:
            Path to the saved file
        """
        target = self._resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)

        with open(target, "w") as f:
            yaml.safe_dump(
                self.to_file_model().to_yaml_dict(), f, default_flow_style=False, sort_keys=False
            )

        logger.info("Saved %d variables to %s", len(self), target)
        return target

    async def load(self, path: Path | None = None) -> int:
        """
        Load variables from YAML, replacing names that already exist.

        All literals are parsed before any binding changes, so a bad file
        leaves the store untouched.

        Returns:
            Number of variables loaded
        """
        source = self._resolve(path)
        with open(source) as f:
            data = yaml.safe_load(f) or {}

        model = VariableFile.model_validate(data)
        parsed = {name: parse_literal(text) for name, text in model.variables.items()}
        self._values.update(parsed)

        logger.info("Loaded %d variables from %s", len(parsed), source)
        return len(parsed)

    def _resolve(self, path: Path | None) -> Path:
        target = path or self.path
        if target is None:
            raise ValueError("No variables file configured")
        return target
