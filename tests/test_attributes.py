# test_attributes.py

import copy

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from termstyler.attributes import (
    BackgroundColor,
    Coded,
    Effect,
    ForegroundColor,
)

FOREGROUND_CODES = list(range(30, 38)) + list(range(90, 98))
BACKGROUND_CODES = list(range(40, 48)) + list(range(100, 108))
EFFECT_CODES = [0, 1, 2, 3, 4, 5, 6, 9]


class TestNamedCodes:
    """Code <-> variant lookups for the three families."""

    @pytest.mark.parametrize("family, named", [
        (ForegroundColor, FOREGROUND_CODES),
        (BackgroundColor, BACKGROUND_CODES),
        (Effect, EFFECT_CODES),
    ])
    def test_round_trip(self, family, named):
        for code in named:
            variant = family.from_code(code)
            assert variant is not None
            assert variant.code == code

    @pytest.mark.parametrize("family, named", [
        (ForegroundColor, FOREGROUND_CODES),
        (BackgroundColor, BACKGROUND_CODES),
        (Effect, EFFECT_CODES),
    ])
    def test_unknown_codes_are_none(self, family, named):
        for code in range(256):
            if code not in named:
                assert family.from_code(code) is None

    def test_members_are_enumerable(self):
        assert len(ForegroundColor.members()) == 16
        assert len(BackgroundColor.members()) == 16
        assert [e.code for e in Effect.members()] == EFFECT_CODES

    def test_named_attributes(self):
        assert ForegroundColor.BLUE.code == 34
        assert ForegroundColor.BRIGHT_YELLOW.code == 93
        assert BackgroundColor.WHITE.code == 47
        assert BackgroundColor.BRIGHT_RED.code == 101
        assert Effect.CROSSED_OUT.code == 9

    def test_from_code_returns_shared_member(self):
        assert ForegroundColor.from_code(31) is ForegroundColor.RED

    def test_families_share_the_coded_protocol(self):
        for variant in (ForegroundColor.RED, BackgroundColor.indexed(7), Effect.by_code(7)):
            assert isinstance(variant, Coded)


class TestPaletteColors:
    """256-colour palette variants."""

    def test_indexed_codes(self):
        fg = ForegroundColor.indexed(183)
        assert fg.code == 38
        assert fg.palette_index == 183
        assert fg.additional_codes() == (5, 183)

        bg = BackgroundColor.indexed(17)
        assert bg.code == 48
        assert bg.additional_codes() == (5, 17)

    def test_named_colors_have_no_additional_codes(self):
        assert ForegroundColor.RED.additional_codes() is None
        assert BackgroundColor.BRIGHT_WHITE.additional_codes() is None

    def test_from_code_extended(self):
        assert ForegroundColor.from_code_extended(38, 183) == ForegroundColor.indexed(183)
        assert ForegroundColor.from_code_extended(38, 183).palette_index == 183
        assert BackgroundColor.from_code_extended(48, 9).palette_index == 9

    def test_from_code_extended_ignores_index_for_other_codes(self):
        assert ForegroundColor.from_code_extended(31, 200) is ForegroundColor.RED
        assert ForegroundColor.from_code_extended(48, 200) is None
        assert BackgroundColor.from_code_extended(38, 200) is None

    def test_palette_code_alone_is_not_named(self):
        assert ForegroundColor.from_code(38) is None
        assert BackgroundColor.from_code(48) is None

    def test_description_embeds_index(self):
        assert ForegroundColor.indexed(183).description == "ANSI 256-color (183)"
        assert str(BackgroundColor.indexed(0)) == "ANSI 256-color (0)"

    def test_repr(self):
        assert repr(ForegroundColor.indexed(12)) == "ForegroundColor.indexed(12)"
        assert repr(BackgroundColor.GREEN) == "BackgroundColor.GREEN"

    @pytest.mark.parametrize("index", [-1, 256])
    def test_out_of_range_index(self, index):
        with pytest.raises(ValueError):
            ForegroundColor.indexed(index)

    def test_invalid_color_code(self):
        with pytest.raises(ValueError):
            ForegroundColor(41)
        with pytest.raises(ValueError):
            BackgroundColor(31, 5)
        with pytest.raises(ValueError):
            ForegroundColor(38)


class TestEffects:
    """Display effects and the by-code escape hatch."""

    def test_descriptions(self):
        assert Effect.NORMAL.description == "normal/reset"
        assert Effect.SLOW_BLINK.description == "slow blink"
        assert str(Effect.CROSSED_OUT) == "crossed-out"

    def test_by_code(self):
        effect = Effect.by_code(7)
        assert effect.code == 7
        assert not effect.is_named
        assert effect.description == "SGR Code 7"
        assert effect.additional_codes() is None
        assert repr(effect) == "Effect(7)"

    def test_decode_falls_back_to_by_code(self):
        assert Effect.decode(1) is Effect.BOLD
        assert Effect.decode(22) == Effect.by_code(22)

    def test_named_effects_have_no_additional_codes(self):
        for effect in Effect.members():
            assert effect.additional_codes() is None

    def test_by_code_range(self):
        with pytest.raises(ValueError):
            Effect.by_code(300)
        with pytest.raises(TypeError):
            Effect.by_code("1")


class TestEquality:
    """Attributes compare by code."""

    def test_equal_by_code(self):
        assert Effect.by_code(1) == Effect.BOLD
        assert ForegroundColor(31) == ForegroundColor.RED
        assert hash(ForegroundColor(31)) == hash(ForegroundColor.RED)

    def test_palette_colors_compare_by_primary_code(self):
        assert ForegroundColor.indexed(1) == ForegroundColor.indexed(200)

    def test_families_do_not_mix(self):
        assert ForegroundColor.RED != BackgroundColor.RED
        assert Effect.by_code(31) != ForegroundColor.RED

    def test_immutable(self):
        with pytest.raises(AttributeError):
            ForegroundColor.RED._code = 32


class TestLookupTypes:
    """Lookups only match real integer codes."""

    @pytest.mark.parametrize("code", [31.0, "31", True, None])
    def test_non_int_codes_are_none(self, code):
        assert ForegroundColor.from_code(code) is None
        assert Effect.from_code(code) is None

    def test_from_code_extended_non_int(self):
        assert ForegroundColor.from_code_extended(31.0, 5) is None
        assert BackgroundColor.from_code_extended(48, 5.0) is None

    def test_protocol_declares_from_code(self):
        for family in (ForegroundColor, BackgroundColor, Effect):
            assert family.from_code(family.members()[0].code) is family.members()[0]
        assert "from_code" in dir(Coded)


class TestCopying:
    """Attributes survive copy and deepcopy."""

    def test_named(self):
        assert copy.deepcopy(ForegroundColor.RED) == ForegroundColor.RED
        assert copy.copy(Effect.BOLD) == Effect.BOLD

    def test_palette_keeps_index(self):
        duplicate = copy.deepcopy(BackgroundColor.indexed(17))
        assert duplicate.palette_index == 17
        assert copy.deepcopy(Effect.by_code(22)).code == 22
