"""Tests for tool descriptors, the registry and the published tool set."""

from __future__ import annotations

from typing import Any
from unittest.mock import Mock

import pytest
from mcp.types import Tool
from pydantic import Field

from palette_mcp.core.exceptions import ConfigException, ToolNotFound
from palette_mcp.core.schema import Integer, ToolArguments
from palette_mcp.mcp.registry import ToolDescriptor, ToolRegistry
from palette_mcp.mcp.tools import HARMONY_METHODS, PALETTE_TOOLS, REGISTRY, UTILITY_NAMES


class NoArguments(ToolArguments):
    pass


class CountArguments(ToolArguments):
    n: Integer


class FreeArguments(ToolArguments):
    args: list[Any] = Field(default_factory=list)


def _descriptor(name="spy", **kwargs):
    kwargs.setdefault("arguments", NoArguments)
    return ToolDescriptor(name=name, description="spy tool", handler=Mock(), **kwargs)


class TestToolDescriptor:
    def test_free_args_must_exist(self):
        with pytest.raises(ConfigException):
            _descriptor(free_args="args")

    def test_free_args_declared(self):
        assert _descriptor(arguments=FreeArguments, free_args="args").free_args == "args"

    def test_to_mcp_tool(self):
        tool = _descriptor(arguments=CountArguments).to_mcp_tool()
        assert isinstance(tool, Tool)
        assert tool.inputSchema["required"] == ["n"]
        assert tool.inputSchema["additionalProperties"] is False
        assert "title" not in tool.inputSchema

    def test_to_dict_includes_examples(self):
        data = _descriptor(examples=({"n": 1},)).to_dict()
        assert data["examples"] == [{"n": 1}]


class TestToolRegistry:
    def test_duplicate_names_rejected(self):
        with pytest.raises(ConfigException):
            ToolRegistry.from_descriptors([_descriptor("a"), _descriptor("a")])

    def test_get_unknown(self):
        with pytest.raises(ToolNotFound):
            ToolRegistry.from_descriptors([_descriptor("a")]).get("b")

    def test_preserves_order(self):
        registry = ToolRegistry.from_descriptors([_descriptor("b"), _descriptor("a")])
        assert registry.names() == ["b", "a"]
        assert len(registry) == 2
        assert "a" in registry


class TestPaletteTools:
    def test_published_names(self):
        assert REGISTRY.names() == ["generate", "uniqueRandomHues", "colorHarmony", "toCSS", "harveyHue", "utils"]

    def test_every_tool_has_object_schema(self):
        for descriptor in PALETTE_TOOLS:
            schema = descriptor.input_schema()
            assert schema["type"] == "object"
            assert descriptor.description

    def test_generate_schema(self):
        props = REGISTRY.get("generate").input_schema()["properties"]
        assert props["total"]["minimum"] == 3
        assert props["total"]["default"] == 10
        assert props["format"]["default"] == "array"
        assert "css" in props["format"]["enum"]
        curve = next(s for s in props["curveMethod"]["anyOf"] if "enum" in s)
        assert "sine" in curve["enum"]

    def test_harmony_choices(self):
        props = REGISTRY.get("colorHarmony").input_schema()
        assert props["properties"]["method"]["enum"] == list(HARMONY_METHODS)
        assert sorted(props["required"]) == ["baseHue", "method"]

    def test_utils_free_args(self):
        descriptor = REGISTRY.get("utils")
        assert descriptor.free_args == "args"
        schema = descriptor.input_schema()
        assert schema["properties"]["fn"]["enum"] == list(UTILITY_NAMES)
        assert schema["properties"]["args"]["type"] == "array"

    def test_only_utils_has_free_args(self):
        assert [d.name for d in PALETTE_TOOLS if d.free_args] == ["utils"]
