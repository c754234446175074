# Copyright (c) 2026 ColorStory
# SPDX-License-Identifier: MIT

"""Destructive (error/danger) color selection."""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from colorstory.color.classify import CHROMA_VIVID_MIN, ClassifiedPalette, sort_by_chroma
from colorstory.schema import Color

# Muted brick red used when the palette has no red/brick candidates
DEFAULT_DESTRUCTIVE = Color(
    name="default-destructive",
    rgb=(140, 82, 72),
    oklch=(0.45, CHROMA_VIVID_MIN, 25.0),
)


def pick_destructive_color(
    classified: ClassifiedPalette,
    *,
    rng: Optional[np.random.Generator] = None,
) -> Color:
    """
    Pick a destructive color from the palette or fall back to the default.

    Prefers muted candidates: candidates are sorted by ascending chroma and
    one is drawn uniformly from the lower half (rounded up).
    """
    candidates = classified.destructive_candidates
    if not candidates:
        return DEFAULT_DESTRUCTIVE

    if rng is None:
        rng = np.random.default_rng()

    muted_half = sort_by_chroma(candidates, descending=False)[: max(1, math.ceil(len(candidates) / 2))]
    return muted_half[int(rng.integers(len(muted_half)))]
