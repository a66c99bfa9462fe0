# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Alias tables mapping user-facing enum spellings to canonical identifiers.

Tables are read-only mappings fixed at import time. Lookups are
case-sensitive; case variants are listed explicitly.

Kinds:
    format  Output format of ``generate`` (``array`` or ``css-<space>``)
    mode    Colour space handed to the engine's CSS converter
    curve   Curve method for curve-aware ramps
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from .exceptions import UnknownAlias

FORMAT_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "array": "array",
        "css": "css-hsl",
        "css-hsl": "css-hsl",
        "css-hsv": "css-hsv",
        "css-lch": "css-lch",
        "css-oklch": "css-oklch",
        "ARRAY": "array",
        "CSS": "css-hsl",
        "CSS-HSL": "css-hsl",
        "CSS-HSV": "css-hsv",
        "CSS-LCH": "css-lch",
        "CSS-OKLCH": "css-oklch",
    }
)

MODE_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "hsl": "hsl",
        "hsv": "hsv",
        "lch": "lch",
        "oklch": "oklch",
        "HSL": "hsl",
        "HSV": "hsv",
        "LCH": "lch",
        "OKLCH": "oklch",
        "css": "hsl",
        "css-hsl": "hsl",
        "css-hsv": "hsv",
        "css-lch": "lch",
        "css-oklch": "oklch",
    }
)

CURVE_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "lamé": "lamé",
        "Lamé": "lamé",
        "lame": "lamé",
        "Lame": "lamé",
        "arc": "arc",
        "sine": "arc",
        "pow": "pow",
        "power": "pow",
        "powX": "powX",
        "powY": "powY",
        "linear": "linear",
    }
)

ALIAS_TABLES: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "format": FORMAT_ALIASES,
        "mode": MODE_ALIASES,
        "curve": CURVE_ALIASES,
    }
)


def accepted_spellings(kind: str) -> list[str]:
    """All spellings accepted for ``kind``, in table order."""
    return list(ALIAS_TABLES[kind])


def canonical_values(kind: str) -> list[str]:
    """Distinct canonical identifiers for ``kind``, in first-seen order."""
    return list(dict.fromkeys(ALIAS_TABLES[kind].values()))


def resolve_alias(kind: str, value: str, field: str | None = None) -> str:
    """Resolve ``value`` to its canonical identifier.

    Raises:
        UnknownAlias: ``value`` is not a recognised spelling.
        KeyError: ``kind`` is not a known alias table.
    """
    table = ALIAS_TABLES[kind]
    if not isinstance(value, str) or value not in table:
        raise UnknownAlias(kind, value, list(table), field=field)
    return table[value]
