# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""palette-mcp MCP server package."""

from .dispatch import dispatch
from .server import run
from .tools import PALETTE_TOOLS, REGISTRY

__all__ = ["PALETTE_TOOLS", "REGISTRY", "dispatch", "run"]
