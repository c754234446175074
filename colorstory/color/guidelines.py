# Copyright (c) 2026 ColorStory
# SPDX-License-Identifier: MIT

"""
Palette validation against the 12-color guidelines.

This checks raw material: does the palette contain enough neutrals at each
tone and at least one strong accent? It is distinct from
``validate_palette_for_scheme``, which asks whether any combination actually
satisfies the token constraints. A palette can pass here and still yield no
canonical scheme.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from colorstory.color.classify import (
    CHROMA_NEUTRAL_MAX,
    CHROMA_VIVID_MIN,
    TONE_DARK_MAX,
    TONE_LIGHT_MIN,
    ChromaClass,
    Tone,
    get_chroma_class,
    get_tone,
)
from colorstory.schema import Color

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GuidelineMinimums:
    """Minimum counts per category. Strong and muted accents count across all tones."""

    dark_neutrals: int = 2
    mid_neutrals: int = 2
    light_neutrals: int = 2
    total_neutrals: int = 6
    strong_accents: int = 1
    muted_accents: int = 1
    total_accents: int = 2
    total_colors: int = 12


MINIMUMS = GuidelineMinimums()


@dataclass(frozen=True, slots=True)
class PaletteCounts:
    total: int = 0
    dark_neutrals: int = 0
    mid_neutrals: int = 0
    light_neutrals: int = 0
    strong_accents: int = 0
    muted_accents: int = 0

    @property
    def total_neutrals(self) -> int:
        return self.dark_neutrals + self.mid_neutrals + self.light_neutrals

    @property
    def total_accents(self) -> int:
        return self.strong_accents + self.muted_accents


@dataclass(frozen=True, slots=True)
class PaletteValidation:
    """
    Attributes:
        valid: True when there are no errors (warnings allowed)
        errors: Critical shortfalls
        warnings: Non-critical recommendations
        counts: Actual counts per category
    """
    valid: bool
    errors: tuple[str, ...]
    warnings: tuple[str, ...]
    counts: PaletteCounts


def count_categories(colors: Sequence[Color]) -> PaletteCounts:
    neutrals = {Tone.DARK: 0, Tone.MID: 0, Tone.LIGHT: 0}
    strong = muted = 0

    for color in colors:
        chroma = get_chroma_class(color.C)
        if chroma is ChromaClass.NEUTRAL:
            neutrals[get_tone(color.L)] += 1
        elif chroma is ChromaClass.VIVID:
            strong += 1
        else:
            muted += 1

    return PaletteCounts(
        total=len(colors),
        dark_neutrals=neutrals[Tone.DARK],
        mid_neutrals=neutrals[Tone.MID],
        light_neutrals=neutrals[Tone.LIGHT],
        strong_accents=strong,
        muted_accents=muted,
    )


def validate_palette(
    colors: Sequence[Color],
    minimums: GuidelineMinimums = MINIMUMS,
) -> PaletteValidation:
    """
    Validate a palette against the 12-color guidelines.

    Missing total colors, neutrals at any tone, or a strong accent are
    errors. A missing muted accent is only a warning.

    Tones follow ``get_tone``, so a neutral at exactly L=0.75 counts as mid.
    Earlier palette tooling counted L >= 0.75 as light; a palette whose only
    light neutrals sit on that boundary passed there and fails here.
    """
    counts = count_categories(colors)
    errors: list[str] = []
    warnings: list[str] = []

    if counts.total < minimums.total_colors:
        errors.append(f"Need {minimums.total_colors} colors, have {counts.total}")

    if counts.dark_neutrals < minimums.dark_neutrals:
        errors.append(
            f"Need {minimums.dark_neutrals} dark neutrals "
            f"(L<={TONE_DARK_MAX}, C<{CHROMA_NEUTRAL_MAX}), have {counts.dark_neutrals}"
        )
    if counts.mid_neutrals < minimums.mid_neutrals:
        errors.append(
            f"Need {minimums.mid_neutrals} mid neutrals "
            f"({TONE_DARK_MAX}<L<={TONE_LIGHT_MIN}, C<{CHROMA_NEUTRAL_MAX}), have {counts.mid_neutrals}"
        )
    if counts.light_neutrals < minimums.light_neutrals:
        errors.append(
            f"Need {minimums.light_neutrals} light neutrals "
            f"(L>{TONE_LIGHT_MIN}, C<{CHROMA_NEUTRAL_MAX}), have {counts.light_neutrals}"
        )
    if counts.strong_accents < minimums.strong_accents:
        errors.append(
            f"Need {minimums.strong_accents} strong accent "
            f"(C>={CHROMA_VIVID_MIN}), have {counts.strong_accents}"
        )
    if counts.muted_accents < minimums.muted_accents:
        warnings.append(
            f"Recommend {minimums.muted_accents} muted accent "
            f"({CHROMA_NEUTRAL_MAX}<=C<{CHROMA_VIVID_MIN}), have {counts.muted_accents}"
        )

    return PaletteValidation(
        valid=not errors,
        errors=tuple(errors),
        warnings=tuple(warnings),
        counts=counts,
    )


def _have_need(have: int, need: int) -> dict:
    return {"have": have, "need": need, "ok": have >= need}


def get_validation_summary(
    result: PaletteValidation,
    minimums: GuidelineMinimums = MINIMUMS,
) -> dict:
    """Nested ``{have, need, ok}`` summary for display."""
    c = result.counts
    return {
        "neutrals": {
            "total": _have_need(c.total_neutrals, minimums.total_neutrals),
            "dark": _have_need(c.dark_neutrals, minimums.dark_neutrals),
            "mid": _have_need(c.mid_neutrals, minimums.mid_neutrals),
            "light": _have_need(c.light_neutrals, minimums.light_neutrals),
        },
        "accents": {
            "total": _have_need(c.total_accents, minimums.total_accents),
            "strong": _have_need(c.strong_accents, minimums.strong_accents),
            "muted": _have_need(c.muted_accents, minimums.muted_accents),
        },
        "total": _have_need(c.total, minimums.total_colors),
    }


def log_validation_result(palette_name: str, result: PaletteValidation) -> None:
    """Log errors as warnings, and warnings-only results at info level."""
    if not result.valid:
        logger.warning("Palette %r is incomplete:", palette_name)
        for message in result.errors + result.warnings:
            logger.warning("  - %s", message)
    elif result.warnings:
        logger.info("Palette %r has warnings:", palette_name)
        for message in result.warnings:
            logger.info("  - %s", message)
