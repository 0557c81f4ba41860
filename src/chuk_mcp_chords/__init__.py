"""
CHUK Chords - a chord notation engine with an MCP tool surface.

Parse chord symbols, derive their tones and serialize both back to text.
"""

__version__ = "0.1.0"
