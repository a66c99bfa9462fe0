"""MCP server exposing the palette tools over stdio."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import secrets
import sys
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Resource, TextContent, TextResourceContents, Tool
from pydantic import AnyUrl

from palette_mcp.core.config import get_config
from palette_mcp.core.exceptions import PaletteException, ValidationException
from palette_mcp.core.logging import configure_logging

from .dispatch import dispatch
from .tools import REGISTRY

logger = logging.getLogger(__name__)

# One id per process, so clients can tell restarted servers apart
INSTANCE_ID = secrets.token_urlsafe(16)

server = Server(get_config().server_name)


# ============================================================================
# MCP Server Protocol Implementation
# ============================================================================


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List all available tools."""
    return REGISTRY.mcp_tools()


@server.call_tool(validate_input=False)
async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
    """Route tool calls through the dispatcher.

    Input validation is left to the dispatcher so clients get its error taxonomy.
    """
    try:
        return dispatch(name, arguments).content

    except ValidationException as e:
        logger.warning(f"Validation error in tool {name}: {e}")
        return [
            TextContent(
                type="text",
                text=json.dumps({"success": False, "error": f"Validation error: {e.message}", "details": e.details}),
            )
        ]
    except PaletteException as e:
        logger.warning(f"Error in tool {name}: {e}")
        return [
            TextContent(
                type="text",
                text=json.dumps({"success": False, "error": e.message, "details": e.details}),
            )
        ]
    except Exception as e:
        logger.exception(f"Unexpected error in tool {name}")
        return [
            TextContent(
                type="text",
                text=json.dumps({"success": False, "error": f"Internal error: {str(e)}"}),
            )
        ]


# ============================================================================
# Resource Definitions
# ============================================================================


@server.list_resources()
async def list_resources() -> list[Resource]:
    """List available resources."""
    return [
        Resource(
            uri=AnyUrl("palette://tools"),
            name="Tool Catalog",
            description="Every tool with its input schema and example arguments",
            mimeType="application/json",
        ),
        Resource(
            uri=AnyUrl("palette://server"),
            name="Server Info",
            description="Server name, description and instance id",
            mimeType="application/json",
        ),
    ]


@server.read_resource()
async def read_resource(uri: AnyUrl | str) -> list[TextResourceContents]:
    """Read a resource by URI."""
    uri = str(uri)
    if uri == "palette://tools":
        data: dict[str, Any] = get_catalog()
    elif uri == "palette://server":
        data = get_server_info()
    else:
        data = {"error": f"Unknown resource: {uri}"}

    return [
        TextResourceContents(
            uri=AnyUrl(uri),
            mimeType="application/json",
            text=json.dumps(data, indent=2, ensure_ascii=False),
        )
    ]


def get_catalog() -> dict[str, Any]:
    """Tool catalog including documentation-only example inputs."""
    return {"tools": [descriptor.to_dict() for descriptor in REGISTRY]}


def get_server_info() -> dict[str, Any]:
    config = get_config()
    return {
        "id": config.server_name,
        "instanceId": INSTANCE_ID,
        "description": config.server_description,
        "tools": REGISTRY.names(),
    }


# ============================================================================
# Server Entry Point
# ============================================================================


def run() -> None:
    """Run the palette MCP server."""
    parser = argparse.ArgumentParser(description=get_config().server_description)
    parser.add_argument("--list-tools", action="store_true", help="Print the tool catalog as JSON and exit")
    parser.add_argument("--log-level", default=None, help="Override PALETTE_LOG_LEVEL")
    args = parser.parse_args()

    configure_logging(level=args.log_level)

    if args.list_tools:
        print(json.dumps(get_catalog(), indent=2, ensure_ascii=False))
        sys.exit(0)

    logger.info(f"{server.name} MCP server starting ({len(REGISTRY)} tools, instance {INSTANCE_ID})")

    async def main():
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())

    asyncio.run(main())


if __name__ == "__main__":
    run()
