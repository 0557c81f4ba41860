"""
MCP tool implementations.

Tools are organized by domain:
- chords - Parsing, tone derivation, modification, MIDI export
- variables - Named values and their persistence
"""

from chuk_mcp_chords.tools.chords import register_chord_tools
from chuk_mcp_chords.tools.variables import register_variable_tools

__all__ = [
    "register_chord_tools",
    "register_variable_tools",
]
