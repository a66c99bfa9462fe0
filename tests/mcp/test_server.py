"""Tests for MCP server entry point and protocol implementation.

Tests cover:
1. list_tools: returns the registry's MCP tools
2. call_tool: routes through dispatch, error handling
3. list_resources: returns available resources
4. read_resource: reads palette:// URIs
5. run: --list-tools mode
"""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest

from palette_mcp.core.exceptions import ConfigException, ConstraintViolation
from palette_mcp.mcp.server import (
    INSTANCE_ID,
    call_tool,
    get_catalog,
    get_server_info,
    list_resources,
    list_tools,
    read_resource,
    run,
)
from palette_mcp.mcp.tools import REGISTRY

# ---------------------------------------------------------------------------
# Tests: list_tools
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_list_tools_returns_registry_tools():
    result = await list_tools()
    assert [tool.name for tool in result] == REGISTRY.names()
    assert all(tool.inputSchema["type"] == "object" for tool in result)


# ---------------------------------------------------------------------------
# Tests: call_tool
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_call_tool_success():
    result = await call_tool("colorHarmony", {"method": "complementary", "baseHue": 0})
    assert len(result) == 1
    assert result[0].type == "text"
    assert json.loads(result[0].text) == [0, 180]


@pytest.mark.asyncio
async def test_call_tool_css_string_verbatim():
    result = await call_tool("toCSS", {"color": [200, 0.5, 0.5], "mode": "hsl"})
    assert result[0].text == "hsl(200 50% 50%)"


@pytest.mark.asyncio
async def test_call_tool_unknown_tool():
    result = await call_tool("nonexistent_tool", {})
    data = json.loads(result[0].text)
    assert data["success"] is False
    assert data["error"] == "Unknown tool: nonexistent_tool"
    assert data["details"] == {"tool_name": "nonexistent_tool"}


@pytest.mark.asyncio
async def test_call_tool_validation_error():
    result = await call_tool("generate", {"total": 1})
    data = json.loads(result[0].text)
    assert data["success"] is False
    assert data["error"].startswith("Validation error:")
    assert data["details"]["field"] == "total"


@pytest.mark.asyncio
async def test_call_tool_unknown_alias():
    result = await call_tool("toCSS", {"color": [0, 0, 0], "mode": "rgb"})
    data = json.loads(result[0].text)
    assert data["success"] is False
    assert "hsl" in data["details"]["accepted"]


@pytest.mark.asyncio
async def test_call_tool_palette_error():
    with patch("palette_mcp.mcp.server.dispatch", side_effect=ConfigException("bad setup")):
        result = await call_tool("generate", {})
    data = json.loads(result[0].text)
    assert data == {"success": False, "error": "bad setup", "details": {}}


@pytest.mark.asyncio
async def test_call_tool_validation_exception_from_dispatch():
    with patch("palette_mcp.mcp.server.dispatch", side_effect=ConstraintViolation("hStart", "must be <= 360", 400)):
        result = await call_tool("generate", {"hStart": 400})
    data = json.loads(result[0].text)
    assert data["details"]["bound"] == "must be <= 360"


@pytest.mark.asyncio
async def test_call_tool_engine_error():
    # A curve method the engine rejects inside the utils passthrough
    result = await call_tool("utils", {"fn": "curvePoint", "args": ["spline", 0.5, 0.2]})
    data = json.loads(result[0].text)
    assert data["success"] is False
    assert data["error"].startswith("Internal error:")


@pytest.mark.asyncio
async def test_call_tool_none_arguments():
    result = await call_tool("uniqueRandomHues", None)
    assert len(json.loads(result[0].text)) == 9


# ---------------------------------------------------------------------------
# Tests: resources
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_list_resources_returns_expected():
    result = await list_resources()
    assert [str(r.uri) for r in result] == ["palette://tools", "palette://server"]
    assert all(r.mimeType == "application/json" for r in result)


@pytest.mark.asyncio
async def test_read_resource_tools():
    result = await read_resource("palette://tools")
    data = json.loads(result[0].text)
    generate = next(t for t in data["tools"] if t["name"] == "generate")
    assert generate["examples"]
    assert "curveMethod" in generate["inputSchema"]["properties"]


@pytest.mark.asyncio
async def test_read_resource_server(clean_env, monkeypatch):
    monkeypatch.setenv("PALETTE_SERVER_DESCRIPTION", "Test palettes")
    result = await read_resource("palette://server")
    data = json.loads(result[0].text)
    assert data["description"] == "Test palettes"
    assert data["instanceId"] == INSTANCE_ID


@pytest.mark.asyncio
async def test_read_resource_unknown_uri():
    result = await read_resource("palette://nope")
    data = json.loads(result[0].text)
    assert data["error"] == "Unknown resource: palette://nope"


def test_get_server_info_lists_tools(clean_env):
    info = get_server_info()
    assert info["id"] == "rampensau"
    assert info["tools"] == REGISTRY.names()


def test_catalog_covers_registry():
    assert len(get_catalog()["tools"]) == len(REGISTRY)


# ---------------------------------------------------------------------------
# Tests: run
# ---------------------------------------------------------------------------


def test_run_list_tools(capsys, clean_env):
    with patch("sys.argv", ["palette-mcp", "--list-tools"]), patch("palette_mcp.mcp.server.configure_logging"):
        with pytest.raises(SystemExit) as exc_info:
            run()
    assert exc_info.value.code == 0
    catalog = json.loads(capsys.readouterr().out)
    assert {t["name"] for t in catalog["tools"]} == set(REGISTRY.names())


def test_run_serves_stdio(clean_env):
    with (
        patch("sys.argv", ["palette-mcp", "--log-level", "DEBUG"]),
        patch("palette_mcp.mcp.server.configure_logging") as mock_configure,
        patch("palette_mcp.mcp.server.asyncio.run") as mock_run,
    ):
        run()
    mock_configure.assert_called_once_with(level="DEBUG")
    mock_run.assert_called_once()
    mock_run.call_args.args[0].close()
