# Copyright (c) 2026 ColorStory
# SPDX-License-Identifier: MIT

"""
Color primitives: WCAG math, OKLCH conversion and palette classification.

All functions here are pure and reentrant.
"""

from colorstory.color.classify import (
    ChromaClass,
    ClassifiedPalette,
    Tone,
    classify_palette,
    get_chroma_class,
    get_tone,
)
from colorstory.color.colorspace import (
    hex_to_rgb,
    oklch_to_rgb,
    parse_color_string,
    rgb_to_hex,
    rgb_to_oklch,
)
from colorstory.color.contrast import (
    contrast_ratio,
    hue_difference,
    relative_luminance,
)
from colorstory.color.guidelines import validate_palette

__all__ = [
    "contrast_ratio",
    "relative_luminance",
    "hue_difference",
    "rgb_to_oklch",
    "oklch_to_rgb",
    "hex_to_rgb",
    "rgb_to_hex",
    "parse_color_string",
    "Tone",
    "ChromaClass",
    "ClassifiedPalette",
    "classify_palette",
    "get_tone",
    "get_chroma_class",
    "validate_palette",
]
