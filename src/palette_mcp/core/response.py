# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Uniform response envelope for tool results.

Every tool result, whatever its Python type, reaches the client as a single
text content item::

    {"content": [{"type": "text", "text": <payload>}]}

Strings are used verbatim. Everything else is rendered as indented JSON.

Usage::

    from palette_mcp.core.response import as_result

    envelope = as_result([[120.0, 0.4, 0.5]])
    envelope.content[0].text
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from mcp.types import TextContent


def _json_default(obj: Any) -> Any:
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return str(obj)


def to_text(data: Any) -> str:
    """Render a handler result as the envelope's text payload."""
    if isinstance(data, str):
        return data
    return json.dumps(data, indent=2, ensure_ascii=False, default=_json_default)


@dataclass
class ResponseEnvelope:
    """Response returned by the dispatcher.

    Attributes:
        content: Ordered content items. The dispatcher always produces
                 exactly one text item.
    """

    content: list[TextContent] = field(default_factory=list)

    @property
    def text(self) -> str:
        """Text of the first content item."""
        return self.content[0].text

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the wire shape."""
        return {"content": [{"type": item.type, "text": item.text} for item in self.content]}


def as_result(data: Any) -> ResponseEnvelope:
    """Wrap a handler result into a single-item envelope."""
    return ResponseEnvelope(content=[TextContent(type="text", text=to_text(data))])
