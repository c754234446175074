# Copyright (c) 2026 ColorStory
# SPDX-License-Identifier: MIT

"""
Token serializer for scheme consumers.

Formats a ColorScheme either as JSON or as CSS custom properties. The
serializer never changes which color is bound to which token.
"""

from __future__ import annotations

import json
import re

from colorstory.color.colorspace import oklch_to_string, rgb_to_string
from colorstory.runtime.serializers.base import ColorFormat, SerializerFormat
from colorstory.schema import Color, ColorScheme

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def token_to_css_name(token: str, prefix: str = "--color-") -> str:
    """``bgApp`` → ``--color-bg-app``."""
    return prefix + _CAMEL_BOUNDARY.sub("-", token).lower()


def _format_color(color: Color, color_format: ColorFormat) -> str:
    if color_format == ColorFormat.RGB:
        return rgb_to_string(color.rgb)
    if color_format == ColorFormat.OKLCH:
        return oklch_to_string(color.oklch)
    return color.hex


def to_token_output(
    scheme: ColorScheme,
    *,
    format: SerializerFormat = SerializerFormat.JSON,
    color_format: ColorFormat = ColorFormat.HEX,
    prefix: str = "--color-",
    selector: str = ":root",
) -> str:
    """Serialize a ColorScheme.

    Args:
        scheme: The scheme to serialize.
        format: JSON, JSON_PRETTY or CSS.
        color_format: Value format for CSS output (hex, rgb() or oklch()).
            JSON output always carries all three plus the palette name.
        prefix: Custom property prefix for CSS output.
        selector: Rule selector for CSS output.

    Returns:
        Serialized string.

    Example (CSS)::

        :root {
          --color-bg-app: #1c1c1e;
          --color-bg-surface: #2a2a2d;
          ...
        }
    """
    if format == SerializerFormat.CSS:
        lines = [
            f"  {token_to_css_name(token, prefix)}: {_format_color(color, color_format)};"
            for token, color in scheme.tokens.items()
        ]
        return "\n".join([f"{selector} {{", *lines, "}"])

    data = {
        "tokens": {
            token: {
                "name": color.name,
                "hex": color.hex,
                "rgb": rgb_to_string(color.rgb),
                "oklch": oklch_to_string(color.oklch),
            }
            for token, color in scheme.tokens.items()
        }
    }
    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    return json.dumps(data, separators=(",", ":"))
