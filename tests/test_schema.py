# Copyright (c) 2026 ColorStory
# SPDX-License-Identifier: MIT

"""Tests for the value types: Color, Configuration, ColorScheme."""

import dataclasses

import pytest

from colorstory.schema import (
    SCHEME_TOKENS,
    TOKEN_ORDER,
    Color,
    ColorScheme,
    Configuration,
    Mode,
    configuration_id,
)


def _gray(name, L=0.5):
    return Color(name=name, rgb=(100, 100, 100), oklch=(L, 0.0, 0.0))


def _full_tokens():
    return {token: _gray(f"c{i}") for i, token in enumerate(TOKEN_ORDER)}


class TestColorValidation:

    def test_valid(self):
        c = Color(name="slate", rgb=[40, 44, 52], oklch=[0.27, 0.012, 262])
        assert c.rgb == (40, 44, 52)
        assert c.oklch == (0.27, 0.012, 262.0)
        assert (c.L, c.C, c.H) == (0.27, 0.012, 262.0)

    def test_empty_name(self):
        with pytest.raises(ValueError, match="name"):
            Color(name="", rgb=(0, 0, 0), oklch=(0.0, 0.0, 0.0))

    def test_rgb_out_of_range(self):
        with pytest.raises(ValueError, match="rgb"):
            Color(name="x", rgb=(0, 0, 256), oklch=(0.0, 0.0, 0.0))

    def test_rgb_wrong_length(self):
        with pytest.raises(ValueError, match="3 channels"):
            Color(name="x", rgb=(0, 0), oklch=(0.0, 0.0, 0.0))

    def test_rgb_fractional(self):
        with pytest.raises(ValueError, match="rgb"):
            Color(name="x", rgb=(0.5, 0, 0), oklch=(0.0, 0.0, 0.0))

    @pytest.mark.parametrize("channel", [float("inf"), float("-inf"), float("nan"), "12"])
    def test_rgb_non_finite_or_non_numeric(self, channel):
        with pytest.raises(ValueError, match="rgb channels"):
            Color(name="x", rgb=(0, channel, 0), oklch=(0.0, 0.0, 0.0))

    def test_rgb_integral_float_accepted(self):
        assert Color(name="x", rgb=(255.0, 0, 0), oklch=(0.6, 0.2, 29.0)).rgb == (255, 0, 0)

    def test_lightness_out_of_range(self):
        with pytest.raises(ValueError, match="Lightness"):
            Color(name="x", rgb=(0, 0, 0), oklch=(1.2, 0.0, 0.0))

    def test_negative_chroma(self):
        with pytest.raises(ValueError, match="Chroma"):
            Color(name="x", rgb=(0, 0, 0), oklch=(0.5, -0.1, 0.0))

    def test_hue_out_of_range(self):
        with pytest.raises(ValueError, match="Hue"):
            Color(name="x", rgb=(0, 0, 0), oklch=(0.5, 0.1, 360.0))

    def test_nan_rejected(self):
        with pytest.raises(ValueError, match="finite"):
            Color(name="x", rgb=(0, 0, 0), oklch=(float("nan"), 0.1, 10.0))

    def test_immutable(self):
        c = _gray("g")
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.name = "other"

    def test_achromatic(self):
        assert _gray("g").is_achromatic
        assert not Color(name="r", rgb=(200, 0, 0), oklch=(0.5, 0.2, 25.0)).is_achromatic


class TestColorConstructors:

    def test_from_rgb(self):
        c = Color.from_rgb("white", (255, 255, 255))
        assert c.rgb == (255, 255, 255)
        assert c.L == 1.0
        assert c.hex == "#ffffff"

    def test_from_oklch_keeps_coordinates(self):
        c = Color.from_oklch("teal", (0.6, 0.1, 200.0))
        assert c.oklch == (0.6, 0.1, 200.0)
        assert all(0 <= v <= 255 for v in c.rgb)

    def test_from_oklch_normalizes_hue(self):
        assert Color.from_oklch("x", (0.5, 0.1, 370.0)).H == pytest.approx(10.0)

    def test_from_string(self):
        assert Color.from_string("red", "#ff0000").rgb == (255, 0, 0)
        assert Color.from_string("red", "rgb(255, 0, 0)").rgb == (255, 0, 0)

    def test_from_string_invalid(self):
        with pytest.raises(ValueError, match="Cannot parse"):
            Color.from_string("x", "not-a-color")

    def test_dict_roundtrip(self):
        c = Color(name="slate", rgb=(40, 44, 52), oklch=(0.27, 0.012, 262.0))
        d = c.to_dict()
        assert d == {"name": "slate", "rgb": [40, 44, 52], "oklch": [0.27, 0.012, 262.0]}
        assert Color.from_dict(d) == c


class TestConfiguration:

    def test_from_tokens_builds_canonical_id(self):
        config = Configuration.from_tokens(_full_tokens())
        assert config.id == "|".join(f"{t}:c{i}" for i, t in enumerate(TOKEN_ORDER))
        assert config.id == configuration_id(config.tokens)

    def test_token_order(self):
        shuffled = dict(reversed(list(_full_tokens().items())))
        config = Configuration.from_tokens(shuffled)
        assert tuple(config.tokens) == TOKEN_ORDER

    def test_partial_rejected(self):
        tokens = _full_tokens()
        del tokens["accentSoft"]
        with pytest.raises(ValueError, match="accentSoft"):
            Configuration(tokens=tokens, id="x")

    def test_extra_token_rejected(self):
        tokens = _full_tokens()
        tokens["destructive"] = _gray("red")
        with pytest.raises(ValueError, match="extra"):
            Configuration(tokens=tokens, id="x")

    def test_mismatched_id_rejected(self):
        with pytest.raises(ValueError, match="id"):
            Configuration(tokens=_full_tokens(), id="bogus")

    def test_tokens_read_only(self):
        config = Configuration.from_tokens(_full_tokens())
        with pytest.raises(TypeError):
            config.tokens["bgApp"] = _gray("other")

    def test_not_affected_by_source_mutation(self):
        tokens = _full_tokens()
        config = Configuration.from_tokens(tokens)
        tokens["bgApp"] = _gray("other")
        assert config["bgApp"].name == "c0"

    def test_non_color_rejected(self):
        tokens = _full_tokens()
        tokens["bgApp"] = "#000000"
        with pytest.raises(ValueError, match="must be a Color"):
            Configuration(tokens=tokens, id="x")


class TestColorScheme:

    def test_requires_destructive(self):
        with pytest.raises(ValueError, match="destructive"):
            ColorScheme(tokens=_full_tokens())

    def test_valid(self):
        tokens = {**_full_tokens(), "destructive": _gray("red")}
        scheme = ColorScheme(tokens=tokens)
        assert tuple(scheme.tokens) == SCHEME_TOKENS
        assert scheme["destructive"].name == "red"
        assert set(scheme.to_dict()) == set(SCHEME_TOKENS)


class TestMode:

    def test_values(self):
        assert Mode("dark") is Mode.DARK
        assert Mode("light") is Mode.LIGHT

    def test_unknown(self):
        with pytest.raises(ValueError):
            Mode("sepia")
