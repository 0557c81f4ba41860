"""
Session state - the variable store behind the tools.
"""

from chuk_mcp_chords.session.store import VariableStore, literal_of, parse_literal

__all__ = [
    "VariableStore",
    "literal_of",
    "parse_literal",
]
