# Copyright (c) 2026 ColorStory
# SPDX-License-Identifier: MIT

"""
Enumeration of valid color scheme configurations.

Depth-first backtracking over TOKEN_ORDER. At each depth the palette is
filtered against the token's constraint, given the colors already assigned
to earlier tokens. Surviving candidates are shuffled and capped, so the
search is a bounded random sample of the solution space: it never returns
an invalid configuration, but it is not guaranteed to find every valid one,
and repeated runs with different seeds can surface different results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, Union

import numpy as np

from colorstory.color.contrast import contrast_ratio, hue_difference
from colorstory.scheme.constraints import (
    HUE_LOCK_MAX_DEGREES,
    TokenConstraint,
    constraints_for,
)
from colorstory.schema import TOKEN_ORDER, Color, Configuration, Mode, configuration_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnumerationConfig:
    """Search bounds. Both cap worst-case latency on large palettes."""

    # Stop the whole search once this many distinct configurations exist
    max_configurations: int = 12

    # Candidates tried per token after shuffling
    max_candidates_per_token: int = 6

    def __post_init__(self) -> None:
        if self.max_configurations < 1:
            raise ValueError(f"max_configurations must be >= 1, got {self.max_configurations}")
        if self.max_candidates_per_token < 1:
            raise ValueError(
                f"max_candidates_per_token must be >= 1, got {self.max_candidates_per_token}"
            )


def _passes(color: Color, constraint: TokenConstraint, deps: Mapping[str, Color]) -> bool:
    L, C, H = color.oklch

    # Chroma bounds
    if constraint.max_chroma is not None and C >= constraint.max_chroma:
        return False
    if constraint.min_chroma is not None and C < constraint.min_chroma:
        return False

    # Lightness bounds
    if not constraint.lightness.resolve(deps).contains(L):
        return False

    # Contrast requirements
    for req in constraint.contrast:
        against = deps.get(req.against)
        if against is not None and not req.accepts(contrast_ratio(color.rgb, against.rgb)):
            return False

    # Hue lock
    for token in constraint.hue_same_as:
        ref = deps.get(token)
        if ref is not None and hue_difference(H, ref.H) > HUE_LOCK_MAX_DEGREES:
            return False

    # Chroma relative to another token (accentSoft)
    band = constraint.chroma_range
    if band is not None:
        ref = deps.get(band.of)
        if ref is not None and not ref.C * band.min_ratio <= C <= ref.C * band.max_ratio:
            return False

    # Contrast relative to textPrimary's contrast (textMuted)
    rel = constraint.contrast_ratio_to_primary
    if rel is not None:
        bg = deps.get(rel.against)
        primary = deps.get(rel.primary)
        if bg is not None and primary is not None:
            relative = contrast_ratio(color.rgb, bg.rgb) / contrast_ratio(primary.rgb, bg.rgb)
            if not rel.min <= relative <= rel.max:
                return False

    return True


def filter_by_constraint(
    colors: Sequence[Color],
    constraint: TokenConstraint,
    deps: Mapping[str, Color],
) -> list[Color]:
    """
    Colors satisfying ``constraint`` given the resolved tokens in ``deps``.

    An infeasible dependent lightness range (min > max) yields an empty
    list; the caller treats that as a dead branch, not an error.
    """
    if constraint.lightness.resolve(deps).is_empty:
        return []
    return [color for color in colors if _passes(color, constraint, deps)]


def enumerate_configurations(
    colors: Sequence[Color],
    mode: Union[Mode, str],
    *,
    config: Optional[EnumerationConfig] = None,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> list[Configuration]:
    """
    Enumerate valid token configurations from a palette.

    Args:
        colors: Palette colors
        mode: Mode.DARK / Mode.LIGHT (or "dark" / "light")
        config: Search bounds (uses defaults if None)
        seed: Random seed for reproducibility (ignored if ``rng`` is given)
        rng: Random generator used to shuffle candidates

    Returns:
        Up to ``config.max_configurations`` configurations with distinct ids,
        in discovery order. Empty means no canonical scheme was found.
    """
    cfg = config or EnumerationConfig()
    constraints = constraints_for(mode)
    if rng is None:
        rng = np.random.default_rng(seed)

    configurations: list[Configuration] = []
    seen_ids: set[str] = set()

    def backtrack(depth: int, assigned: Mapping[str, Color]) -> None:
        if depth == len(TOKEN_ORDER):
            config_id = configuration_id(assigned)
            if config_id not in seen_ids:
                seen_ids.add(config_id)
                configurations.append(Configuration(tokens=assigned, id=config_id))
            return

        token = TOKEN_ORDER[depth]
        candidates = filter_by_constraint(colors, constraints[token], assigned)
        order = rng.permutation(len(candidates))[: cfg.max_candidates_per_token]

        for index in order:
            # Each level gets its own mapping; nothing to undo on return
            backtrack(depth + 1, {**assigned, token: candidates[index]})
            if len(configurations) >= cfg.max_configurations:
                return

    backtrack(0, {})

    logger.debug(
        "Enumerated %d %s-mode configuration(s) from %d colors",
        len(configurations), Mode(mode).value, len(colors),
    )
    return configurations


def validate_configuration(configuration: Configuration, mode: Union[Mode, str]) -> bool:
    """
    Re-check every contrast requirement for a finished configuration.

    Lightness, chroma and hue rules are enforced during construction and
    are not repeated here.
    """
    constraints = constraints_for(mode)

    for token in TOKEN_ORDER:
        color = configuration.tokens.get(token)
        if color is None:
            return False
        for req in constraints[token].contrast:
            against = configuration.tokens.get(req.against)
            if against is None:
                continue
            if not req.accepts(contrast_ratio(color.rgb, against.rgb)):
                return False

    return True
