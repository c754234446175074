# Copyright (c) 2026 ColorStory
# SPDX-License-Identifier: MIT

"""
Authoritative token constraints for canonical scheme generation.

One table per mode. Each token constraint may declare:
- max_chroma / min_chroma: chroma bounds
- lightness: a static range, or a range derived from already-resolved tokens
- contrast: WCAG ratio requirements against earlier tokens
- hue_same_as: tokens whose hue must be within HUE_LOCK_MAX_DEGREES
- chroma_range: chroma as a fraction of another token's chroma (accentSoft)
- contrast_ratio_to_primary: contrast against a background as a fraction of
  textPrimary's contrast against the same background (textMuted)

The dark and light tables mirror each other; lightness offsets flip sign.
CONSTRAINTS_SPEC_VERSION tracks the shape of these tables and the
classification rules. Bump it when either changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Union

from colorstory.schema import TOKEN_ORDER, Color, Mode

CONSTRAINTS_SPEC_VERSION = "randomizer-constraints-v1"

# Maximum hue distance for hue_same_as
HUE_LOCK_MAX_DEGREES = 30.0


# =============================================================================
# Constraint Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class LightnessRange:
    """Inclusive OKLCH lightness interval. Empty when min > max."""
    min: float
    max: float

    @property
    def is_empty(self) -> bool:
        return self.min > self.max

    def contains(self, L: float) -> bool:
        return self.min <= L <= self.max


@dataclass(frozen=True, slots=True)
class StaticLightness:
    """Lightness rule independent of other tokens."""
    range: LightnessRange

    def resolve(self, deps: Mapping[str, Color]) -> LightnessRange:
        return self.range


@dataclass(frozen=True, slots=True)
class DependentLightness:
    """
    Lightness rule computed from already-resolved tokens.

    Attributes:
        depends_on: Tokens read by ``fn``; all must be resolved first
        fn: Maps resolved tokens to a range (may be empty)
    """
    depends_on: tuple[str, ...]
    fn: Callable[[Mapping[str, Color]], LightnessRange]

    def resolve(self, deps: Mapping[str, Color]) -> LightnessRange:
        return self.fn(deps)


LightnessRule = Union[StaticLightness, DependentLightness]


@dataclass(frozen=True, slots=True)
class ContrastRequirement:
    """WCAG contrast against ``against`` must be >= min (and <= max if set)."""
    against: str
    min: float
    max: Optional[float] = None

    def accepts(self, ratio: float) -> bool:
        if ratio < self.min:
            return False
        return self.max is None or ratio <= self.max


@dataclass(frozen=True, slots=True)
class ChromaRange:
    """Chroma must lie within [min_ratio, max_ratio] × chroma of ``of``."""
    of: str
    min_ratio: float
    max_ratio: float


@dataclass(frozen=True, slots=True)
class RelativeContrast:
    """
    Contrast against ``against`` divided by textPrimary's contrast against
    the same token must lie within [min, max].
    """
    against: str
    min: float
    max: float
    primary: str = "textPrimary"


@dataclass(frozen=True, slots=True)
class TokenConstraint:
    lightness: LightnessRule
    max_chroma: Optional[float] = None
    min_chroma: Optional[float] = None
    contrast: tuple[ContrastRequirement, ...] = ()
    hue_same_as: tuple[str, ...] = ()
    chroma_range: Optional[ChromaRange] = None
    contrast_ratio_to_primary: Optional[RelativeContrast] = None

    def references(self) -> set[str]:
        """All tokens this constraint reads."""
        refs = {req.against for req in self.contrast}
        refs.update(self.hue_same_as)
        if isinstance(self.lightness, DependentLightness):
            refs.update(self.lightness.depends_on)
        if self.chroma_range is not None:
            refs.add(self.chroma_range.of)
        if self.contrast_ratio_to_primary is not None:
            refs.add(self.contrast_ratio_to_primary.against)
            refs.add(self.contrast_ratio_to_primary.primary)
        return refs


def _static(lo: float, hi: float) -> StaticLightness:
    return StaticLightness(LightnessRange(lo, hi))


def _offset(low_token: str, low: float, high_token: str, high: float) -> DependentLightness:
    """Range [L(low_token) + low, L(high_token) + high]."""
    return DependentLightness(
        depends_on=tuple(dict.fromkeys((low_token, high_token))),
        fn=lambda deps: LightnessRange(deps[low_token].L + low, deps[high_token].L + high),
    )


def _border_contrast() -> tuple[ContrastRequirement, ...]:
    return tuple(
        ContrastRequirement(bg, min=1.2, max=3.0)
        for bg in ("bgApp", "bgSurface", "bgElevated")
    )


_TEXT_PRIMARY_CONTRAST = (
    ContrastRequirement("bgApp", min=7.0),
    ContrastRequirement("bgSurface", min=7.0),
    ContrastRequirement("bgElevated", min=4.5),
)

_TEXT_MUTED_CONTRAST = (
    ContrastRequirement("bgApp", min=4.5),
    ContrastRequirement("bgSurface", min=3.0),
)

_MUTED_TO_PRIMARY = RelativeContrast("bgApp", min=0.6, max=0.85)

_ACCENT_SOFT_CHROMA = ChromaRange("accentSolid", min_ratio=0.5, max_ratio=0.8)


# =============================================================================
# Tables
# =============================================================================

DARK_MODE_CONSTRAINTS: Mapping[str, TokenConstraint] = MappingProxyType({
    "bgApp": TokenConstraint(
        max_chroma=0.04,
        lightness=_static(0.08, 0.16),
    ),
    "bgSurface": TokenConstraint(
        max_chroma=0.04,
        lightness=_offset("bgApp", 0.04, "bgApp", 0.12),
    ),
    "bgElevated": TokenConstraint(
        max_chroma=0.04,
        lightness=_offset("bgSurface", 0.04, "bgSurface", 0.10),
    ),
    "textPrimary": TokenConstraint(
        max_chroma=0.05,
        lightness=_static(0.85, 1.0),
        contrast=_TEXT_PRIMARY_CONTRAST,
    ),
    "textMuted": TokenConstraint(
        max_chroma=0.05,
        hue_same_as=("textPrimary",),
        lightness=_offset("bgApp", 0.30, "textPrimary", -0.10),
        contrast=_TEXT_MUTED_CONTRAST,
        contrast_ratio_to_primary=_MUTED_TO_PRIMARY,
    ),
    "borderSubtle": TokenConstraint(
        max_chroma=0.04,
        lightness=_offset("bgApp", 0.05, "textPrimary", -0.30),
        contrast=_border_contrast(),
    ),
    "borderStrong": TokenConstraint(
        max_chroma=0.04,
        lightness=_offset("borderSubtle", 0.05, "textPrimary", -0.15),
        contrast=(ContrastRequirement("bgApp", min=3.0),),
    ),
    "accentSolid": TokenConstraint(
        min_chroma=0.08,
        lightness=_static(0.45, 0.80),
    ),
    "accentSoft": TokenConstraint(
        min_chroma=0.04,
        chroma_range=_ACCENT_SOFT_CHROMA,
        hue_same_as=("accentSolid",),
        lightness=_offset("bgApp", 0.0, "bgApp", 0.25),
        contrast=(ContrastRequirement("bgApp", min=1.5, max=3.0),),
    ),
})

LIGHT_MODE_CONSTRAINTS: Mapping[str, TokenConstraint] = MappingProxyType({
    "bgApp": TokenConstraint(
        max_chroma=0.04,
        lightness=_static(0.92, 1.0),
    ),
    "bgSurface": TokenConstraint(
        max_chroma=0.04,
        lightness=_offset("bgApp", -0.12, "bgApp", -0.04),
    ),
    "bgElevated": TokenConstraint(
        max_chroma=0.04,
        lightness=_offset("bgSurface", -0.10, "bgSurface", -0.04),
    ),
    "textPrimary": TokenConstraint(
        max_chroma=0.05,
        lightness=_static(0.0, 0.20),
        contrast=_TEXT_PRIMARY_CONTRAST,
    ),
    "textMuted": TokenConstraint(
        max_chroma=0.05,
        hue_same_as=("textPrimary",),
        lightness=_offset("textPrimary", 0.10, "bgApp", -0.30),
        contrast=_TEXT_MUTED_CONTRAST,
        contrast_ratio_to_primary=_MUTED_TO_PRIMARY,
    ),
    "borderSubtle": TokenConstraint(
        max_chroma=0.04,
        lightness=_offset("textPrimary", 0.30, "bgApp", -0.05),
        contrast=_border_contrast(),
    ),
    "borderStrong": TokenConstraint(
        max_chroma=0.04,
        lightness=_offset("textPrimary", 0.15, "borderSubtle", -0.05),
        contrast=(ContrastRequirement("bgApp", min=3.0),),
    ),
    "accentSolid": TokenConstraint(
        min_chroma=0.08,
        lightness=_static(0.45, 0.80),
    ),
    "accentSoft": TokenConstraint(
        min_chroma=0.04,
        chroma_range=_ACCENT_SOFT_CHROMA,
        hue_same_as=("accentSolid",),
        lightness=_offset("bgApp", -0.25, "bgApp", 0.0),
        contrast=(ContrastRequirement("bgApp", min=1.5, max=3.0),),
    ),
})

_TABLES = {
    Mode.DARK: DARK_MODE_CONSTRAINTS,
    Mode.LIGHT: LIGHT_MODE_CONSTRAINTS,
}


def constraints_for(mode: Union[Mode, str]) -> Mapping[str, TokenConstraint]:
    """Constraint table for a mode ("dark" / "light" strings accepted)."""
    return _TABLES[Mode(mode)]


def check_dependency_order(table: Mapping[str, TokenConstraint]) -> None:
    """
    Ensure the table covers TOKEN_ORDER and each constraint reads only
    tokens that resolve before it.

    Raises:
        ValueError: On a missing token or forward reference
    """
    if set(table) != set(TOKEN_ORDER):
        raise ValueError(f"Constraint table must cover exactly {TOKEN_ORDER}, got {tuple(table)}")
    for index, token in enumerate(TOKEN_ORDER):
        earlier = set(TOKEN_ORDER[:index])
        forward = table[token].references() - earlier
        if forward:
            raise ValueError(f"{token} references unresolved tokens: {sorted(forward)}")


for _table in _TABLES.values():
    check_dependency_order(_table)
