# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""palette-mcp - RampenSau colour tools over the Model Context Protocol.

Tool calls flow through one path:
  raw arguments
    → schema rules (shape, bounds, aliases, percentage normalization)
    → canonical arguments
    → handler → colour engine
    → {content: [{type: "text", text}]}

Server entry point: ``palette-mcp``
"""

__version__ = "0.1.0"
