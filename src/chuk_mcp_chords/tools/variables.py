"""
Variable tools - MCP tools for naming, recalling and saving values.

Variables hold chords (or single notes) so later calls can refer to
them by name; the whole set can be saved to and loaded from YAML.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_chords.constants import NOTE_PREFIX, ErrorMessages, SuccessMessages
from chuk_mcp_chords.core.chord import Chord
from chuk_mcp_chords.core.errors import ChordParseError
from chuk_mcp_chords.core.note import Note, parse_note
from chuk_mcp_chords.models.chord import DerivedChord, NoteSummary
from chuk_mcp_chords.session.store import VariableStore, literal_of
from chuk_mcp_chords.tools.common import error_response, parse_chord_cached

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _describe(value: Chord | Note) -> dict[str, Any]:
    if isinstance(value, Chord):
        return {"type": "chord", **DerivedChord.from_chord(value).model_dump(mode="json")}
    return {"type": "note", **NoteSummary.from_note(value).model_dump(mode="json")}


def register_variable_tools(mcp: ChukMCPServer, store: VariableStore) -> dict[str, Any]:
    """
    Register variable tools with the MCP server.

    Args:
        mcp: The MCP server instance
        store: The session's variable store

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chord_set_variable(name: str, text: str) -> str:
        """
        Store a chord (or a note) under a name.

        Args:
            name: Variable name (letters, digits, underscore)
            text: Chord symbol, or 'note:<token>' for a single note

        Returns:
            JSON string with the stored value

        Example:
            chord_set_variable(name="ii", text="D:m7")
        """
        try:
            value: Chord | Note
            if text.startswith(NOTE_PREFIX):
                value = parse_note(text[len(NOTE_PREFIX) :])
            else:
                value = parse_chord_cached(text)
            described = _describe(value)
            store.set(name, value)
            return json.dumps(
                {
                    "status": "success",
                    "name": name,
                    "value": described,
                    "message": SuccessMessages.VARIABLE_SET.format(
                        name=name, text=literal_of(value)
                    ),
                }
            )
        except (ChordParseError, ValueError) as e:
            return error_response(e)
        except Exception as e:
            logger.exception("Failed to set variable")
            return error_response(e)

    tools["chord_set_variable"] = chord_set_variable

    @mcp.tool  # type: ignore[arg-type]
    async def chord_get_variable(name: str) -> str:
        """
        Get a stored variable.

        Args:
            name: Variable name

        Returns:
            JSON string with the value, its tones and its literal

        Example:
            chord_get_variable(name="ii")
        """
        value = store.get(name)
        if value is None:
            return error_response(ErrorMessages.VARIABLE_NOT_FOUND.format(name=name))
        try:
            return json.dumps({"status": "success", "name": name, "value": _describe(value)})
        except ValueError as e:
            return error_response(e)

    tools["chord_get_variable"] = chord_get_variable

    @mcp.tool  # type: ignore[arg-type]
    async def chord_list_variables() -> str:
        """
        List all stored variables.

        Returns:
            JSON string mapping names to literals

        Example:
            chord_list_variables()
        """
        return json.dumps(
            {
                "status": "success",
                "variables": {name: literal_of(value) for name, value in store.items()},
                "count": len(store),
            }
        )

    tools["chord_list_variables"] = chord_list_variables

    @mcp.tool  # type: ignore[arg-type]
    async def chord_delete_variable(name: str) -> str:
        """
        Delete a stored variable.

        Args:
            name: Variable name

        Returns:
            JSON string with the result

        Example:
            chord_delete_variable(name="ii")
        """
        if not store.delete(name):
            return error_response(ErrorMessages.VARIABLE_NOT_FOUND.format(name=name))
        return json.dumps(
            {"status": "success", "message": SuccessMessages.VARIABLE_DELETED.format(name=name)}
        )

    tools["chord_delete_variable"] = chord_delete_variable

    @mcp.tool  # type: ignore[arg-type]
    async def chord_save_variables() -> str:
        """
        Save all variables to the session's YAML file.

        Returns:
            JSON string with the file path

        Example:
            chord_save_variables()
        """
        try:
            path = await store.save()
            return json.dumps(
                {
                    "status": "success",
                    "path": str(path),
                    "message": SuccessMessages.VARIABLES_SAVED.format(count=len(store), path=path),
                }
            )
        except Exception as e:
            logger.exception("Failed to save variables")
            return error_response(e)

    tools["chord_save_variables"] = chord_save_variables

    @mcp.tool  # type: ignore[arg-type]
    async def chord_load_variables() -> str:
        """
        Load variables from the session's YAML file.

        Loaded names replace existing ones; other names are kept.

        Returns:
            JSON string with the number of variables loaded

        Example:
            chord_load_variables()
        """
        try:
            if store.path is None or not store.path.exists():
                return error_response(
                    ErrorMessages.VARIABLES_FILE_NOT_FOUND.format(path=store.path)
                )
            count = await store.load()
            return json.dumps(
                {
                    "status": "success",
                    "count": count,
                    "message": SuccessMessages.VARIABLES_LOADED.format(
                        count=count, path=store.path
                    ),
                }
            )
        except Exception as e:
            logger.exception("Failed to load variables")
            return error_response(e)

    tools["chord_load_variables"] = chord_load_variables

    return tools
