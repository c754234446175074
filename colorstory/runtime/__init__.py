# Copyright (c) 2026 ColorStory
# SPDX-License-Identifier: MIT

"""
Delivery runtime for ColorStory.

Serialization of finished ColorSchemes for consumers:

1. JSON -- Token map with hex, rgb() and oklch() per token
2. CSS -- Custom properties under a selector

The delivery layer never modifies scheme content.
"""

from colorstory.runtime.serializers import (
    ColorFormat,
    SerializerFormat,
    to_token_output,
)

__all__ = [
    "to_token_output",
    "SerializerFormat",
    "ColorFormat",
]
