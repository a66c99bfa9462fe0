# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Tool descriptors and the read-only registry they live in."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from mcp.types import Tool

from palette_mcp.core.exceptions import ConfigException, ToolNotFound
from palette_mcp.core.schema import ToolArguments, parameters_schema
from palette_mcp.engine.base import ColorEngine

Handler = Callable[[ColorEngine, dict[str, Any]], Any]


@dataclass(frozen=True)
class ToolDescriptor:
    """A remote-callable tool.

    Attributes:
        name:        Unique, stable tool name.
        description: Text shown to clients.
        arguments:   Argument model validating the raw input.
        handler:     Called with the engine and the canonical arguments.
        examples:    Example argument sets, for documentation only.
        free_args:   Argument carrying untyped positional arguments, if any.
    """

    name: str
    description: str
    arguments: type[ToolArguments]
    handler: Handler
    examples: tuple[dict[str, Any], ...] = ()
    free_args: str | None = None

    def __post_init__(self):
        if self.free_args is not None and self.free_args not in self.arguments.model_fields:
            raise ConfigException(
                f"Tool {self.name}: free_args '{self.free_args}' is not an argument",
                setting=self.free_args,
            )

    def input_schema(self) -> dict[str, Any]:
        return parameters_schema(self.arguments)

    def to_mcp_tool(self) -> Tool:
        return Tool(name=self.name, description=self.description, inputSchema=self.input_schema())

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
            "examples": [dict(example) for example in self.examples],
        }


@dataclass(frozen=True)
class ToolRegistry:
    """Immutable name -> descriptor catalog."""

    _tools: Mapping[str, ToolDescriptor] = field(default_factory=dict)

    @classmethod
    def from_descriptors(cls, descriptors: Iterable[ToolDescriptor]) -> ToolRegistry:
        tools: dict[str, ToolDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.name in tools:
                raise ConfigException(f"Duplicate tool name: {descriptor.name}", setting=descriptor.name)
            tools[descriptor.name] = descriptor
        return cls(MappingProxyType(tools))

    def get(self, name: str) -> ToolDescriptor:
        """Return the descriptor for ``name``.

        Raises:
            ToolNotFound: No tool is registered under ``name``.
        """
        try:
            return self._tools[name]
        except KeyError:
            raise ToolNotFound(name) from None

    def names(self) -> list[str]:
        return list(self._tools)

    def mcp_tools(self) -> list[Tool]:
        return [descriptor.to_mcp_tool() for descriptor in self._tools.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[ToolDescriptor]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)
