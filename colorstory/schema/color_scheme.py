# Copyright (c) 2026 ColorStory
# SPDX-License-Identifier: MIT

"""
Canonical value types for palettes and derived color schemes.

Design principles:
- Immutable: All types are frozen dataclasses
- Fail fast: Malformed colors are rejected at construction
- Serializable: JSON-ready, matching the palette file shape

OKLCH Color Space:
- L (Lightness): 0.0 = black, 1.0 = white
- C (Chroma): 0.0 = gray, ~0.32 = max saturation in sRGB
- H (Hue): 0-360 degrees (≈30=orange, ≈90=yellow, ≈145=green, ≈250=blue, ≈330=pink/red)
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


# =============================================================================
# Token Contract
# =============================================================================

# Resolution order. A token's constraints may only reference earlier tokens.
TOKEN_ORDER: tuple[str, ...] = (
    "bgApp",
    "bgSurface",
    "bgElevated",
    "textPrimary",
    "textMuted",
    "borderSubtle",
    "borderStrong",
    "accentSolid",
    "accentSoft",
)

# Supplied outside the enumerator (see colorstory.scheme.destructive)
DESTRUCTIVE_TOKEN = "destructive"

SCHEME_TOKENS: tuple[str, ...] = TOKEN_ORDER + (DESTRUCTIVE_TOKEN,)


class Mode(Enum):
    """Scheme mode. Selects the constraint table."""

    DARK = "dark"
    LIGHT = "light"


# =============================================================================
# Color
# =============================================================================


@dataclass(frozen=True, slots=True)
class Color:
    """
    A named palette color carrying both sRGB and OKLCH coordinates.

    The name is the identity key within a palette: configuration ids and
    cache keys are built from names, never from coordinates.

    Attributes:
        name: Unique name within the palette
        rgb: (R, G, B) integers in [0, 255], used for WCAG contrast
        oklch: (L, C, H) with L in [0, 1], C >= 0 and H in [0, 360),
            used for lightness, chroma and hue rules
    """
    name: str
    rgb: tuple[int, int, int]
    oklch: tuple[float, float, float]

    def __post_init__(self) -> None:
        """Validate and normalize coordinates."""
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"Color name must be a non-empty string, got {self.name!r}")

        rgb = tuple(self.rgb)
        if len(rgb) != 3:
            raise ValueError(f"Color {self.name!r}: rgb must have 3 channels, got {len(rgb)}")
        for v in rgb:
            if (
                isinstance(v, bool)
                or not isinstance(v, numbers.Real)
                or not math.isfinite(v)
                or int(v) != v
                or not 0 <= v <= 255
            ):
                raise ValueError(
                    f"Color {self.name!r}: rgb channels must be integers 0-255, got {self.rgb}"
                )
        object.__setattr__(self, "rgb", tuple(int(v) for v in rgb))

        oklch = tuple(self.oklch)
        if len(oklch) != 3:
            raise ValueError(f"Color {self.name!r}: oklch must have 3 values, got {len(oklch)}")
        L, C, H = (float(v) for v in oklch)
        if not all(math.isfinite(v) for v in (L, C, H)):
            raise ValueError(f"Color {self.name!r}: oklch values must be finite, got {self.oklch}")
        if not 0.0 <= L <= 1.0:
            raise ValueError(f"Color {self.name!r}: Lightness must be 0-1, got {L}")
        if C < 0.0:
            raise ValueError(f"Color {self.name!r}: Chroma must be >= 0, got {C}")
        if not 0.0 <= H < 360.0:
            raise ValueError(f"Color {self.name!r}: Hue must be 0-360, got {H}")
        object.__setattr__(self, "oklch", (L, C, H))

    @property
    def L(self) -> float:
        return self.oklch[0]

    @property
    def C(self) -> float:
        return self.oklch[1]

    @property
    def H(self) -> float:
        return self.oklch[2]

    @property
    def is_achromatic(self) -> bool:
        """True if hue is meaningless at this chroma (gray/white/black)."""
        return self.C < 0.02

    @property
    def hex(self) -> str:
        """Lowercase hex string like "#3941c8"."""
        from colorstory.color.colorspace import rgb_to_hex
        return rgb_to_hex(self.rgb)

    @classmethod
    def from_rgb(cls, name: str, rgb: tuple[int, int, int]) -> Color:
        """Build a color from sRGB, deriving rounded OKLCH coordinates."""
        from colorstory.color.colorspace import rgb_to_oklch
        return cls(name=name, rgb=tuple(rgb), oklch=rgb_to_oklch(rgb))

    @classmethod
    def from_oklch(cls, name: str, oklch: tuple[float, float, float]) -> Color:
        """
        Build a color from OKLCH, deriving sRGB.

        The given OKLCH values are kept as-is (hue normalized to [0, 360)).
        Out-of-gamut values are clipped on the sRGB side only.
        """
        from colorstory.color.colorspace import oklch_to_rgb
        L, C, H = oklch
        return cls(name=name, rgb=oklch_to_rgb((L, C, H)), oklch=(L, C, H % 360.0))

    @classmethod
    def from_string(cls, name: str, text: str) -> Color:
        """Build a color from a hex, rgb() or oklch() string."""
        from colorstory.color.colorspace import parse_color_string
        rgb = parse_color_string(text)
        if rgb is None:
            raise ValueError(f"Cannot parse color string for {name!r}: {text!r}")
        return cls.from_rgb(name, rgb)

    def to_dict(self) -> dict:
        """Serialize to the palette file shape."""
        return {"name": self.name, "rgb": list(self.rgb), "oklch": list(self.oklch)}

    @classmethod
    def from_dict(cls, data: dict) -> Color:
        """Deserialize from the palette file shape."""
        return cls(name=data["name"], rgb=tuple(data["rgb"]), oklch=tuple(data["oklch"]))


# =============================================================================
# Configurations and Schemes
# =============================================================================


def _freeze_tokens(tokens: Mapping[str, Color], expected: tuple[str, ...], kind: str) -> Mapping[str, Color]:
    missing = [t for t in expected if t not in tokens]
    extra = [t for t in tokens if t not in expected]
    if missing or extra:
        raise ValueError(f"{kind} must bind exactly {expected}; missing={missing}, extra={extra}")
    for token, color in tokens.items():
        if not isinstance(color, Color):
            raise ValueError(f"{kind} token {token!r} must be a Color, got {type(color).__name__}")
    return MappingProxyType({t: tokens[t] for t in expected})


def configuration_id(tokens: Mapping[str, Color]) -> str:
    """Canonical id: ``token:colorName`` pairs in TOKEN_ORDER, joined by ``|``."""
    return "|".join(f"{token}:{tokens[token].name}" for token in TOKEN_ORDER)


@dataclass(frozen=True, slots=True)
class Configuration:
    """
    A complete assignment of palette colors to the enumerated tokens.

    Never partial: every token in TOKEN_ORDER is bound.

    Attributes:
        tokens: Read-only mapping token name -> Color
        id: Canonical dedup key (see configuration_id)
    """
    tokens: Mapping[str, Color]
    id: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "tokens", _freeze_tokens(self.tokens, TOKEN_ORDER, "Configuration"))
        if self.id != configuration_id(self.tokens):
            raise ValueError(f"Configuration id does not match its tokens: {self.id!r}")

    @classmethod
    def from_tokens(cls, tokens: Mapping[str, Color]) -> Configuration:
        return cls(tokens=tokens, id=configuration_id(tokens))

    def __getitem__(self, token: str) -> Color:
        return self.tokens[token]

    def to_dict(self) -> dict:
        return {"id": self.id, "tokens": {t: c.to_dict() for t, c in self.tokens.items()}}


@dataclass(frozen=True, slots=True)
class ColorScheme:
    """
    A full scheme: the nine enumerated tokens plus ``destructive``.

    Attributes:
        tokens: Read-only mapping over SCHEME_TOKENS
    """
    tokens: Mapping[str, Color]

    def __post_init__(self) -> None:
        object.__setattr__(self, "tokens", _freeze_tokens(self.tokens, SCHEME_TOKENS, "ColorScheme"))

    def __getitem__(self, token: str) -> Color:
        return self.tokens[token]

    def to_dict(self) -> dict:
        return {t: c.to_dict() for t, c in self.tokens.items()}
