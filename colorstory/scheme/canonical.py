# Copyright (c) 2026 ColorStory
# SPDX-License-Identifier: MIT

"""
Canonical (constraint-based) scheme generation.

Only produces schemes that satisfy every contrast/lightness rule in
colorstory.scheme.constraints. An empty result is a normal outcome: it means
no canonical scheme exists for the palette and mode, and callers should fall
back to a heuristic generator rather than report an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Union

import numpy as np

from colorstory.color.classify import classify_palette
from colorstory.scheme.cache import ConfigCache
from colorstory.scheme.destructive import pick_destructive_color
from colorstory.scheme.enumerate import EnumerationConfig, enumerate_configurations
from colorstory.schema import DESTRUCTIVE_TOKEN, Color, ColorScheme, Configuration, Mode


@dataclass(frozen=True, slots=True)
class SchemeValidation:
    valid: bool
    config_count: int


def get_valid_configurations(
    colors: Sequence[Color],
    mode: Union[Mode, str],
    *,
    cache: Optional[ConfigCache] = None,
    config: Optional[EnumerationConfig] = None,
    seed: Optional[int] = None,
) -> list[Configuration]:
    """
    All valid constrained configurations found for a palette (at most
    ``config.max_configurations``).

    With a cache, results are memoized per (palette, mode) and the cache's
    own config and seed apply; ``config`` and ``seed`` are only used when
    enumerating directly.
    """
    if cache is not None:
        return cache.get(colors, mode)
    return enumerate_configurations(colors, mode, config=config, seed=seed)


def clear_config_cache(cache: ConfigCache) -> None:
    """Clear a configuration cache (call when the palette changes)."""
    cache.clear()


def apply_configuration(
    configuration: Configuration,
    colors: Sequence[Color],
    *,
    rng: Optional[np.random.Generator] = None,
) -> ColorScheme:
    """
    Build a full scheme from a configuration.

    The nine enumerated tokens come from the configuration; ``destructive``
    is picked from the palette's red/brick candidates or the default.
    """
    destructive = pick_destructive_color(classify_palette(colors), rng=rng)
    return ColorScheme(tokens={**configuration.tokens, DESTRUCTIVE_TOKEN: destructive})


def validate_palette_for_scheme(
    colors: Sequence[Color],
    mode: Union[Mode, str],
    *,
    cache: Optional[ConfigCache] = None,
    config: Optional[EnumerationConfig] = None,
    seed: Optional[int] = None,
) -> SchemeValidation:
    """
    Check whether a palette produces at least one canonical scheme.

    Distinct from colorstory.color.guidelines.validate_palette, which only
    counts raw material. A palette can have enough colors of each kind and
    still have no combination that satisfies every constraint.
    """
    configs = get_valid_configurations(colors, mode, cache=cache, config=config, seed=seed)
    return SchemeValidation(valid=len(configs) > 0, config_count=len(configs))
