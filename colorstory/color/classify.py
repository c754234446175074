# Copyright (c) 2026 ColorStory
# SPDX-License-Identifier: MIT

"""
Palette classification by tone and chroma.

Every color lands in exactly one of nine tone × chroma buckets. Separately,
chromatic reds and bricks are collected as destructive candidates.

Thresholds (OKLCH):
- Tone: dark if L <= 0.35, light if L > 0.75, otherwise mid
- Chroma: neutral if C < 0.04, vivid if C >= 0.08, otherwise muted
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from colorstory.schema import Color


# Tone thresholds (by OKLCH L)
TONE_DARK_MAX = 0.35
TONE_LIGHT_MIN = 0.75

# Chroma thresholds (by OKLCH C)
CHROMA_NEUTRAL_MAX = 0.04
CHROMA_VIVID_MIN = 0.08

# Below this chroma hue is noise, so destructive candidacy is ruled out
DESTRUCTIVE_MIN_CHROMA = 0.02


class Tone(Enum):
    DARK = "dark"
    MID = "mid"
    LIGHT = "light"


class ChromaClass(Enum):
    NEUTRAL = "neutral"
    MUTED = "muted"
    VIVID = "vivid"


def get_tone(L: float) -> Tone:
    """Classify lightness. 0.35 is dark, 0.75 is still mid."""
    if L <= TONE_DARK_MAX:
        return Tone.DARK
    if L > TONE_LIGHT_MIN:
        return Tone.LIGHT
    return Tone.MID


def get_chroma_class(C: float) -> ChromaClass:
    """Classify chroma. 0.04 is muted, 0.08 is vivid."""
    if C < CHROMA_NEUTRAL_MAX:
        return ChromaClass.NEUTRAL
    if C < CHROMA_VIVID_MIN:
        return ChromaClass.MUTED
    return ChromaClass.VIVID


@dataclass(frozen=True, slots=True)
class HueRange:
    """
    Inclusive hue interval in degrees.

    With ``wrap=True`` the interval runs through 0°, e.g. 350-40 covers
    [350, 360) and [0, 40].
    """
    min: float
    max: float
    wrap: bool = False

    def contains(self, h: float) -> bool:
        if self.wrap:
            return h >= self.min or h <= self.max
        return self.min <= h <= self.max


# Reds and bricks
DESTRUCTIVE_HUE = HueRange(min=350.0, max=40.0, wrap=True)


@dataclass(frozen=True, slots=True)
class ClassifiedPalette:
    """
    Palette split into tone × chroma buckets.

    Buckets are disjoint. ``destructive_candidates`` overlaps them freely
    and ``all`` is the unmodified input.
    """
    dark_neutrals: tuple[Color, ...] = ()
    mid_neutrals: tuple[Color, ...] = ()
    light_neutrals: tuple[Color, ...] = ()
    dark_muted: tuple[Color, ...] = ()
    mid_muted: tuple[Color, ...] = ()
    light_muted: tuple[Color, ...] = ()
    dark_vivid: tuple[Color, ...] = ()
    mid_vivid: tuple[Color, ...] = ()
    light_vivid: tuple[Color, ...] = ()
    destructive_candidates: tuple[Color, ...] = ()
    all: tuple[Color, ...] = ()

    def bucket(self, tone: Tone, chroma: ChromaClass) -> tuple[Color, ...]:
        """Get the bucket for a tone/chroma pair."""
        return getattr(self, _bucket_name(tone, chroma))


def _bucket_name(tone: Tone, chroma: ChromaClass) -> str:
    suffix = "neutrals" if chroma is ChromaClass.NEUTRAL else chroma.value
    return f"{tone.value}_{suffix}"


def is_destructive_candidate(color: Color) -> bool:
    """Chromatic enough to have a hue, and that hue is red/brick."""
    return color.C >= DESTRUCTIVE_MIN_CHROMA and DESTRUCTIVE_HUE.contains(color.H)


def classify_palette(colors: Sequence[Color]) -> ClassifiedPalette:
    """
    Classify all colors in a palette into buckets.

    Args:
        colors: Palette colors (order is preserved within each bucket)

    Returns:
        ClassifiedPalette
    """
    buckets: dict[str, list[Color]] = {}
    destructive: list[Color] = []

    for color in colors:
        name = _bucket_name(get_tone(color.L), get_chroma_class(color.C))
        buckets.setdefault(name, []).append(color)
        if is_destructive_candidate(color):
            destructive.append(color)

    return ClassifiedPalette(
        **{name: tuple(members) for name, members in buckets.items()},
        destructive_candidates=tuple(destructive),
        all=tuple(colors),
    )


# =============================================================================
# Selection Helpers
# =============================================================================


def sort_by_chroma(colors: Sequence[Color], descending: bool = True) -> list[Color]:
    """Sort by chroma (stable; most saturated first by default)."""
    return sorted(colors, key=lambda c: c.C, reverse=descending)


def sort_by_lightness(colors: Sequence[Color], descending: bool = False) -> list[Color]:
    """Sort by lightness (stable; darkest first by default)."""
    return sorted(colors, key=lambda c: c.L, reverse=descending)


def filter_by_lightness(colors: Sequence[Color], min_l: float, max_l: float) -> list[Color]:
    """Colors with min_l <= L <= max_l."""
    return [c for c in colors if min_l <= c.L <= max_l]


def find_closest_by_lightness(colors: Sequence[Color], target_l: float) -> Optional[Color]:
    """Color whose lightness is nearest ``target_l`` (first wins ties), or None."""
    if not colors:
        return None
    return min(colors, key=lambda c: abs(c.L - target_l))
