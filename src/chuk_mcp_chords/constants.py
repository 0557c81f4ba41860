"""
Constants and messages for the chord system.

No magic strings - use these for defaults and tool responses.
"""

DEFAULT_TEMPO = 120
MIN_TEMPO = 20
MAX_TEMPO = 400

# Prefix that marks a variable value as a single note rather than a chord
NOTE_PREFIX = "note:"


class ErrorMessages:
    """Standardized error messages."""

    VARIABLE_NOT_FOUND = "Variable '{name}' not found."
    VARIABLES_FILE_NOT_FOUND = "No saved variables at {path}."
    INVALID_TEMPO = "Invalid tempo: {tempo}. Must be between 20 and 400 BPM."
    NO_CHORDS = "At least one chord is required."
    UNKNOWN_QUALITY = "Unknown quality '{quality}'. Use one of: {choices}."
    UNKNOWN_INVERSION = "Unknown inversion '{inversion}'. Use 0, 1, 2 or 3."


class SuccessMessages:
    """Standardized success messages."""

    VARIABLE_SET = "Set '{name}' to {text}."
    VARIABLE_DELETED = "Deleted '{name}'."
    VARIABLES_SAVED = "Saved {count} variables to {path}."
    VARIABLES_LOADED = "Loaded {count} variables from {path}."
    MIDI_EXPORTED = "Exported {count} chords to {path}."
