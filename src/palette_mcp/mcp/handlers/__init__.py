# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Tool handlers. Each takes the colour engine and canonical arguments."""

from .hues import color_harmony, harvey_hue, unique_random_hues
from .palette import generate, to_css
from .utils import UTILITIES, run_utility, utils

__all__ = [
    "UTILITIES",
    "color_harmony",
    "generate",
    "harvey_hue",
    "run_utility",
    "to_css",
    "unique_random_hues",
    "utils",
]
