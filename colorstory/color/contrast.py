# Copyright (c) 2026 ColorStory
# SPDX-License-Identifier: MIT

"""
Low-level color math primitives.

WCAG 2.x relative luminance and contrast, plus circular hue distance.
Channel inputs are sRGB integers [0, 255]; functions accept scalars or
NumPy arrays where noted.

References:
- https://www.w3.org/TR/WCAG21/#dfn-relative-luminance
- https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

ArrayLike = Union[float, Sequence[float], NDArray[np.float64]]


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(value: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB channel values [0, 255] to linear light [0, 1].

    sRGB uses a piecewise gamma curve on the normalized value v = value/255:
    - For v <= 0.04045: v / 12.92
    - For v > 0.04045: ((v + 0.055) / 1.055) ^ 2.4
    """
    v = np.asarray(value, dtype=np.float64) / 255.0
    return np.where(
        v <= 0.04045,
        v / 12.92,
        np.power((v + 0.055) / 1.055, 2.4),
    )


def linear_to_srgb(value: ArrayLike) -> NDArray[np.int64]:
    """
    Convert linear light [0, 1] to sRGB channel integers [0, 255].

    Inverse of srgb_to_linear. Out-of-gamut input is clamped and the
    result is rounded half-up to the nearest integer.
    """
    linear = np.asarray(value, dtype=np.float64)
    # Clip negative values to avoid NaN in power function
    linear_safe = np.maximum(linear, 0.0)
    v = np.where(
        linear_safe <= 0.0031308,
        linear * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055,
    )
    return np.floor(np.clip(v * 255.0, 0.0, 255.0) + 0.5).astype(np.int64)


# =============================================================================
# Luminance and Contrast
# =============================================================================


def relative_luminance(rgb: Sequence[int]) -> float:
    """
    WCAG relative luminance of an sRGB color.

    Args:
        rgb: (R, G, B) integers [0, 255]

    Returns:
        Luminance in [0, 1]
    """
    r, g, b = srgb_to_linear(rgb)
    return float(0.2126 * r + 0.7152 * g + 0.0722 * b)


def contrast_ratio(rgb1: Sequence[int], rgb2: Sequence[int]) -> float:
    """
    WCAG contrast ratio between two colors.

    Symmetric in its arguments. Ranges from 1 (identical luminance)
    to 21 (black on white).
    """
    l1 = relative_luminance(rgb1)
    l2 = relative_luminance(rgb2)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def meets_contrast(rgb1: Sequence[int], rgb2: Sequence[int], threshold: float = 4.5) -> bool:
    """True if the pair reaches ``threshold`` (4.5 = WCAG AA body text)."""
    return contrast_ratio(rgb1, rgb2) >= threshold


# =============================================================================
# Hue
# =============================================================================


def hue_difference(h1: float, h2: float) -> float:
    """Shortest angular distance between two hues in degrees, in [0, 180]."""
    diff = abs(h1 - h2) % 360.0
    return 360.0 - diff if diff > 180.0 else diff
