# Copyright (c) 2026 ColorStory
# SPDX-License-Identifier: MIT

"""
Serializers for ColorScheme delivery to consumers.

All serializers preserve the scheme exactly -- no modification or inference.
"""

from colorstory.runtime.serializers.base import ColorFormat, SerializerFormat
from colorstory.runtime.serializers.tokens import to_token_output, token_to_css_name

__all__ = [
    "SerializerFormat",
    "ColorFormat",
    "to_token_output",
    "token_to_css_name",
]
