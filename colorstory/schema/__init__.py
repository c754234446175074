# Copyright (c) 2026 ColorStory
# SPDX-License-Identifier: MIT

"""
Schema definitions for palettes and color schemes.

All types in this module are immutable (frozen dataclasses).
Colors are validated at construction; everything downstream trusts them.
"""

from colorstory.schema.color_scheme import (
    DESTRUCTIVE_TOKEN,
    SCHEME_TOKENS,
    TOKEN_ORDER,
    Color,
    ColorScheme,
    Configuration,
    Mode,
    configuration_id,
)

__all__ = [
    # Token contract
    "TOKEN_ORDER",
    "DESTRUCTIVE_TOKEN",
    "SCHEME_TOKENS",
    "Mode",
    # Core types
    "Color",
    "Configuration",
    "ColorScheme",
    "configuration_id",
]
