# Copyright (c) 2026 ColorStory
# SPDX-License-Identifier: MIT

"""
ColorStory -- Constraint-based UI color schemes from arbitrary palettes.

Assigns palette colors to UI tokens (backgrounds, text, borders, accents)
so that every OKLCH lightness rule and WCAG contrast rule holds.

Quick start::

    from colorstory import Color, ConfigCache, get_valid_configurations, apply_configuration

    palette = [Color.from_string("ink", "#1c1c1e"), ...]
    cache = ConfigCache()
    configs = get_valid_configurations(palette, "dark", cache=cache)
    if configs:
        scheme = apply_configuration(configs[0], palette)
"""

from __future__ import annotations

__version__ = "1.0.0"

from colorstory.schema import (
    TOKEN_ORDER,
    Color,
    ColorScheme,
    Configuration,
    Mode,
)
from colorstory.color import classify_palette, contrast_ratio, validate_palette
from colorstory.scheme import (
    ConfigCache,
    EnumerationConfig,
    apply_configuration,
    clear_config_cache,
    enumerate_configurations,
    get_valid_configurations,
    validate_configuration,
    validate_palette_for_scheme,
)

__all__ = [
    # Core API
    "get_valid_configurations",
    "validate_palette_for_scheme",
    "apply_configuration",
    "clear_config_cache",
    "enumerate_configurations",
    "validate_configuration",
    "ConfigCache",
    "EnumerationConfig",
    # Types (commonly needed)
    "Color",
    "Configuration",
    "ColorScheme",
    "Mode",
    "TOKEN_ORDER",
    # Palette helpers
    "classify_palette",
    "contrast_ratio",
    "validate_palette",
    # Version
    "__version__",
]
