# Copyright (c) 2026 ColorStory
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chain: sRGB [0,255] → Linear RGB → OKLab → OKLCH

References:
- OKLab: https://bottosson.github.io/posts/oklab/
- OKLCH: Cylindrical form of OKLab (Lightness, Chroma, Hue)

Palette coordinates are stored rounded (L and C to 3 decimals, H to whole
degrees), so sRGB → OKLCH → sRGB reproduces each channel within ±1.
"""

from __future__ import annotations

import re
from typing import Optional, Sequence

import numpy as np
from numpy.typing import NDArray

from colorstory.color.contrast import linear_to_srgb, srgb_to_linear


# =============================================================================
# Linear RGB ↔ OKLab
# =============================================================================

# Matrices from https://bottosson.github.io/posts/oklab/

# Linear sRGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

# Inverse matrices
_M1_INV = np.linalg.inv(_M1)
_M2_INV = np.linalg.inv(_M2)


def _round_half_up(value: NDArray[np.float64], decimals: int) -> NDArray[np.float64]:
    scale = 10.0 ** decimals
    return np.floor(value * scale + 0.5) / scale


def rgb_to_oklab(rgb: Sequence[int]) -> NDArray[np.float64]:
    """
    Convert sRGB integers to OKLab.

    Args:
        rgb: Array of shape (..., 3) with sRGB values [0, 255]

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    linear = srgb_to_linear(rgb)

    # RGB to LMS
    lms = np.einsum('...j,ij->...i', linear, _M1)

    # Cube root (np.cbrt keeps the sign for out-of-gamut input)
    lms_cbrt = np.cbrt(lms)

    # LMS to OKLab
    return np.einsum('...j,ij->...i', lms_cbrt, _M2)


def oklab_to_rgb(lab: Sequence[float]) -> NDArray[np.int64]:
    """
    Convert OKLab to sRGB integers [0, 255], clamped to gamut.

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Integer array of shape (..., 3)
    """
    lab = np.asarray(lab, dtype=np.float64)

    # OKLab to LMS (cubed)
    lms_cbrt = np.einsum('...j,ij->...i', lab, _M2_INV)
    lms = lms_cbrt ** 3

    # LMS to linear RGB
    linear = np.einsum('...j,ij->...i', lms, _M1_INV)
    return linear_to_srgb(linear)


# =============================================================================
# OKLab ↔ OKLCH
# =============================================================================


def oklab_to_oklch(lab: Sequence[float]) -> NDArray[np.float64]:
    """
    Convert OKLab to OKLCH (cylindrical coordinates).

    Returns:
        Array of shape (..., 3) with OKLCH values (L, C, H)
        H is in degrees [0, 360)
    """
    lab = np.asarray(lab, dtype=np.float64)

    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.sqrt(a**2 + b**2)
    H = np.degrees(np.arctan2(b, a)) % 360.0

    return np.stack([L, C, H], axis=-1)


def oklch_to_oklab(lch: Sequence[float]) -> NDArray[np.float64]:
    """
    Convert OKLCH (H in degrees) to OKLab.
    """
    lch = np.asarray(lch, dtype=np.float64)

    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = np.radians(lch[..., 2])

    a = C * np.cos(H_rad)
    b = C * np.sin(H_rad)

    return np.stack([L, a, b], axis=-1)


# =============================================================================
# Convenience: sRGB ↔ OKLCH (full chain)
# =============================================================================


def rgb_to_oklch(rgb: Sequence[int]) -> tuple[float, float, float]:
    """
    Convert one sRGB color to rounded OKLCH palette coordinates.

    Full chain: sRGB → Linear RGB → OKLab → OKLCH

    Args:
        rgb: (R, G, B) integers [0, 255]

    Returns:
        (L, C, H) with L and C rounded to 3 decimals and H rounded to
        whole degrees in [0, 360). L is clipped to [0, 1].
    """
    lch = oklab_to_oklch(rgb_to_oklab(rgb))
    L = float(np.clip(_round_half_up(lch[0], 3), 0.0, 1.0))
    C = float(_round_half_up(lch[1], 3))
    H = float(_round_half_up(lch[2], 0) % 360.0)
    return L, C, H


def oklch_to_rgb(oklch: Sequence[float]) -> tuple[int, int, int]:
    """
    Convert one OKLCH color to sRGB integers.

    Full chain: OKLCH → OKLab → Linear RGB → sRGB.
    Values outside the sRGB gamut are clipped per channel.
    """
    r, g, b = oklab_to_rgb(oklch_to_oklab(oklch))
    return int(r), int(g), int(b)


# =============================================================================
# String Parsing and Formatting
# =============================================================================

_HEX_RE = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)
_SHORT_HEX_RE = re.compile(r"^#?([a-f\d])([a-f\d])([a-f\d])$", re.IGNORECASE)
_RGB_RE = re.compile(r"^rgb\s*\(\s*(\d+)[\s,]+(\d+)[\s,]+(\d+)\s*\)$", re.IGNORECASE)
_OKLCH_RE = re.compile(
    r"^oklch\s*\(\s*([\d.]+)[\s,]+([\d.]+)[\s,]+([\d.]+)\s*\)$", re.IGNORECASE
)


def hex_to_rgb(hex_color: str) -> Optional[tuple[int, int, int]]:
    """
    Parse "#RRGGBB", "RRGGBB" or "#RGB" to an (R, G, B) tuple.

    Returns None if the string is not a hex color.
    """
    m = _HEX_RE.match(hex_color)
    if m:
        return tuple(int(g, 16) for g in m.groups())
    m = _SHORT_HEX_RE.match(hex_color)
    if m:
        return tuple(int(g * 2, 16) for g in m.groups())
    return None


def rgb_to_hex(rgb: Sequence[int]) -> str:
    """Format (R, G, B) as lowercase "#rrggbb"."""
    r, g, b = (int(v) for v in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def parse_color_string(text: str) -> Optional[tuple[int, int, int]]:
    """
    Parse a hex, ``rgb(r, g, b)`` or ``oklch(L C H)`` string to sRGB.

    rgb() accepts comma or whitespace separators. oklch() input is
    converted through the full chain and clipped to gamut.

    Returns None for anything unparseable, including rgb() channels
    above 255.
    """
    text = text.strip()

    rgb = hex_to_rgb(text)
    if rgb is not None:
        return rgb

    m = _RGB_RE.match(text)
    if m:
        channels = tuple(int(g, 10) for g in m.groups())
        if all(0 <= v <= 255 for v in channels):
            return channels
        return None

    m = _OKLCH_RE.match(text)
    if m:
        try:
            L, C, H = (float(g) for g in m.groups())
        except ValueError:
            # e.g. "0.5.1" passes the character class but is not a number
            return None
        return oklch_to_rgb((L, C, H))

    return None


def rgb_to_string(rgb: Sequence[int]) -> str:
    """CSS ``rgb(r, g, b)`` string."""
    r, g, b = rgb
    return f"rgb({r}, {g}, {b})"


def oklch_to_string(oklch: Sequence[float]) -> str:
    """CSS ``oklch(L C H)`` string."""
    L, C, H = oklch
    return f"oklch({L:g} {C:g} {H:g})"
