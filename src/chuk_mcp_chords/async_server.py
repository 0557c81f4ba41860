#!/usr/bin/env python3
"""
Async Chord MCP Server using chuk-mcp-server

This server exposes the chord notation engine as MCP tools:
- Parsing chord symbols (C, C:m7, E:m:2) into structured chords
- Deriving voiced chord tones for any quality, extension and inversion
- Modifying chords and exporting them to MIDI
- Naming chords as variables and saving them between sessions
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_chords.session import VariableStore
from chuk_mcp_chords.tools import register_chord_tools, register_variable_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-chords")

# Paths - relative to the working directory
BASE_PATH = Path.cwd()
VARIABLES_PATH = BASE_PATH / "variables" / "variables.yaml"
OUTPUT_DIR = BASE_PATH / "output"

variable_store = VariableStore(VARIABLES_PATH)

# Register all tools
chord_tools = register_chord_tools(mcp, OUTPUT_DIR)
variable_tools = register_variable_tools(mcp, variable_store)

# Export tool functions for direct access
chord_parse = chord_tools["chord_parse"]
chord_derive = chord_tools["chord_derive"]
chord_modify = chord_tools["chord_modify"]
chord_table = chord_tools["chord_table"]
chord_export_midi = chord_tools["chord_export_midi"]

chord_set_variable = variable_tools["chord_set_variable"]
chord_get_variable = variable_tools["chord_get_variable"]
chord_list_variables = variable_tools["chord_list_variables"]
chord_delete_variable = variable_tools["chord_delete_variable"]
chord_save_variables = variable_tools["chord_save_variables"]
chord_load_variables = variable_tools["chord_load_variables"]

logger.info("CHUK Chords MCP Server initialized")
logger.info(f"  Variables file: {VARIABLES_PATH}")
logger.info(f"  Output dir: {OUTPUT_DIR}")
