# Copyright (c) 2026 ColorStory
# SPDX-License-Identifier: MIT

"""Shared palettes.

Each palette is built so that every token has exactly one candidate in the
named mode, which makes the enumeration result fully determined.
"""

import pytest

from colorstory.schema import Color


def grey(name, L):
    return Color.from_oklch(name, (L, 0.0, 0.0))


def _accents(soft_L):
    return [
        Color.from_oklch("jade", (0.65, 0.10, 150.0)),
        Color.from_oklch("celadon", (soft_L, 0.06, 150.0)),
    ]


def dark_palette_colors():
    return [
        grey("ink", 0.12),        # bgApp
        grey("coal", 0.20),       # bgSurface
        grey("slate", 0.27),      # bgElevated
        grey("paper", 0.95),      # textPrimary
        grey("fog", 0.82),        # textMuted
        grey("pewter", 0.40),     # borderSubtle
        grey("ash", 0.60),        # borderStrong
        *_accents(soft_L=0.33),   # accentSolid, accentSoft
    ]


def light_palette_colors():
    return [
        grey("snow", 0.97),       # bgApp
        grey("linen", 0.90),      # bgSurface
        grey("bone", 0.84),       # bgElevated
        grey("ink", 0.15),        # textPrimary
        grey("graphite", 0.29),   # textMuted
        grey("silver", 0.72),     # borderSubtle
        grey("ash", 0.55),        # borderStrong
        *_accents(soft_L=0.78),   # accentSolid, accentSoft
    ]


@pytest.fixture
def dark_palette():
    return dark_palette_colors()


@pytest.fixture
def light_palette():
    return light_palette_colors()


@pytest.fixture
def dark_palette_three_texts():
    """Dark palette with three interchangeable textPrimary candidates."""
    return dark_palette_colors() + [grey("chalk", 0.93), grey("pearl", 0.96)]
