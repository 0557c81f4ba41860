"""
Tests for the command line entry point.
"""

from pathlib import Path

import pytest

from chuk_mcp_chords.core import parse_chord
from chuk_mcp_chords.server import build_parser, preload_variables
from chuk_mcp_chords.session import VariableStore


class TestArguments:
    """Tests for argument parsing."""

    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.transport == "stdio"
        assert args.port == 8000
        assert not args.load_variables
        assert not args.debug

    def test_http_with_variables(self) -> None:
        args = build_parser().parse_args(
            ["--transport", "http", "--port", "9000", "--load-variables"]
        )
        assert args.transport == "http"
        assert args.port == 9000
        assert args.load_variables

    def test_unknown_transport(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--transport", "sse"])


class TestPreloadVariables:
    """Tests for restoring saved variables at startup."""

    @pytest.mark.asyncio
    async def test_missing_file_loads_nothing(self, variables_path: Path) -> None:
        store = VariableStore(variables_path)
        assert await preload_variables(store) == 0
        assert len(store) == 0

    @pytest.mark.asyncio
    async def test_no_path_loads_nothing(self) -> None:
        assert await preload_variables(VariableStore()) == 0

    @pytest.mark.asyncio
    async def test_restores_saved_variables(self, variables_path: Path) -> None:
        saved = VariableStore(variables_path)
        saved.set("ii", parse_chord("D:m7"))
        saved.set("V", parse_chord("G:D7:1"))
        await saved.save()

        restored = VariableStore(variables_path)
        assert await preload_variables(restored) == 2
        assert restored.get("V") == parse_chord("G:D7:1")
