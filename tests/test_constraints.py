# Copyright (c) 2026 ColorStory
# SPDX-License-Identifier: MIT

"""Tests for the constraint tables and their building blocks."""

import pytest

from colorstory.schema import TOKEN_ORDER, Color, Mode
from colorstory.scheme.constraints import (
    CONSTRAINTS_SPEC_VERSION,
    DARK_MODE_CONSTRAINTS,
    LIGHT_MODE_CONSTRAINTS,
    ContrastRequirement,
    DependentLightness,
    LightnessRange,
    StaticLightness,
    TokenConstraint,
    check_dependency_order,
    constraints_for,
)


def _gray(name, L):
    return Color(name=name, rgb=(128, 128, 128), oklch=(L, 0.0, 0.0))


class TestTables:

    @pytest.mark.parametrize("table", [DARK_MODE_CONSTRAINTS, LIGHT_MODE_CONSTRAINTS])
    def test_covers_token_order(self, table):
        assert set(table) == set(TOKEN_ORDER)

    @pytest.mark.parametrize("table", [DARK_MODE_CONSTRAINTS, LIGHT_MODE_CONSTRAINTS])
    def test_no_forward_references(self, table):
        for index, token in enumerate(TOKEN_ORDER):
            assert table[token].references() <= set(TOKEN_ORDER[:index])

    def test_tables_read_only(self):
        with pytest.raises(TypeError):
            DARK_MODE_CONSTRAINTS["bgApp"] = None

    def test_version(self):
        assert CONSTRAINTS_SPEC_VERSION == "randomizer-constraints-v1"

    def test_constraints_for(self):
        assert constraints_for(Mode.DARK) is DARK_MODE_CONSTRAINTS
        assert constraints_for("light") is LIGHT_MODE_CONSTRAINTS

    def test_constraints_for_unknown_mode(self):
        with pytest.raises(ValueError):
            constraints_for("sepia")


class TestDependentRanges:

    def test_dark_bg_surface_offsets(self):
        rule = DARK_MODE_CONSTRAINTS["bgSurface"].lightness
        r = rule.resolve({"bgApp": _gray("ink", 0.10)})
        assert r.min == pytest.approx(0.14)
        assert r.max == pytest.approx(0.22)

    def test_light_bg_surface_offsets(self):
        rule = LIGHT_MODE_CONSTRAINTS["bgSurface"].lightness
        r = rule.resolve({"bgApp": _gray("snow", 0.96)})
        assert r.min == pytest.approx(0.84)
        assert r.max == pytest.approx(0.92)

    def test_dark_text_muted_spans_two_tokens(self):
        rule = DARK_MODE_CONSTRAINTS["textMuted"].lightness
        r = rule.resolve({"bgApp": _gray("ink", 0.12), "textPrimary": _gray("paper", 0.95)})
        assert r.min == pytest.approx(0.42)
        assert r.max == pytest.approx(0.85)

    def test_range_can_be_empty(self):
        rule = DARK_MODE_CONSTRAINTS["borderStrong"].lightness
        r = rule.resolve({"borderSubtle": _gray("a", 0.70), "textPrimary": _gray("b", 0.85)})
        assert r.is_empty
        assert not r.contains(0.72)

    def test_static_ignores_deps(self):
        rule = StaticLightness(LightnessRange(0.1, 0.2))
        assert rule.resolve({}) == LightnessRange(0.1, 0.2)


class TestContrastRequirement:

    def test_min_only(self):
        req = ContrastRequirement("bgApp", min=4.5)
        assert req.accepts(4.5)
        assert req.accepts(21.0)
        assert not req.accepts(4.49)

    def test_band(self):
        req = ContrastRequirement("bgApp", min=1.2, max=3.0)
        assert req.accepts(1.2)
        assert req.accepts(3.0)
        assert not req.accepts(3.01)


class TestDependencyCheck:

    def test_forward_reference_rejected(self):
        table = dict(DARK_MODE_CONSTRAINTS)
        table["bgApp"] = TokenConstraint(
            lightness=StaticLightness(LightnessRange(0.0, 0.2)),
            contrast=(ContrastRequirement("textPrimary", min=7.0),),
        )
        with pytest.raises(ValueError, match="bgApp"):
            check_dependency_order(table)

    def test_dependent_lightness_forward_reference_rejected(self):
        table = dict(DARK_MODE_CONSTRAINTS)
        table["bgSurface"] = TokenConstraint(
            lightness=DependentLightness(
                depends_on=("bgElevated",),
                fn=lambda deps: LightnessRange(0.0, 1.0),
            ),
        )
        with pytest.raises(ValueError, match="bgElevated"):
            check_dependency_order(table)

    def test_missing_token_rejected(self):
        table = dict(DARK_MODE_CONSTRAINTS)
        del table["accentSoft"]
        with pytest.raises(ValueError, match="cover exactly"):
            check_dependency_order(table)
