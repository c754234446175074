# Copyright (c) 2026 ColorStory
# SPDX-License-Identifier: MIT

"""
Color scheme generation.

TOKEN CONTRACT (10 tokens)
--------------------------
A ColorScheme always contains exactly these tokens:

Backgrounds:
  - bgApp: Main application background
  - bgSurface: Card/panel surfaces
  - bgElevated: Elevated elements (modals, dropdowns)

Text:
  - textPrimary: Primary readable text
  - textMuted: Secondary/muted text

Borders:
  - borderSubtle: Subtle dividers (1.2-3:1 contrast)
  - borderStrong: Prominent borders (3:1+ contrast)

Accent:
  - accentSolid: Primary accent color (buttons, links)
  - accentSoft: Muted accent (hover states, backgrounds)

Status:
  - destructive: Error/danger actions (palette red/brick or a default)

The first nine are enumerated under constraints; destructive is picked
separately.
"""

from colorstory.scheme.cache import CacheEntry, ConfigCache, hash_palette
from colorstory.scheme.canonical import (
    SchemeValidation,
    apply_configuration,
    clear_config_cache,
    get_valid_configurations,
    validate_palette_for_scheme,
)
from colorstory.scheme.constraints import (
    CONSTRAINTS_SPEC_VERSION,
    DARK_MODE_CONSTRAINTS,
    LIGHT_MODE_CONSTRAINTS,
    constraints_for,
)
from colorstory.scheme.destructive import DEFAULT_DESTRUCTIVE, pick_destructive_color
from colorstory.scheme.enumerate import (
    EnumerationConfig,
    enumerate_configurations,
    validate_configuration,
)

__all__ = [
    # Canonical API
    "get_valid_configurations",
    "validate_palette_for_scheme",
    "apply_configuration",
    "clear_config_cache",
    "SchemeValidation",
    # Enumeration
    "EnumerationConfig",
    "enumerate_configurations",
    "validate_configuration",
    # Cache
    "ConfigCache",
    "CacheEntry",
    "hash_palette",
    # Constraints
    "CONSTRAINTS_SPEC_VERSION",
    "DARK_MODE_CONSTRAINTS",
    "LIGHT_MODE_CONSTRAINTS",
    "constraints_for",
    # Destructive
    "DEFAULT_DESTRUCTIVE",
    "pick_destructive_color",
]
