"""Tests for the single-digit renderer.

Validates the font table against the expected hex glyphs, the on/off/mask
partition, range checking and scaling to the digit size.
"""

import pytest

from sevenseg.constants import DESIGN_SIZE
from sevenseg.digit import LIT_SEGMENTS, Digit, DigitValue, lit_segments
from sevenseg.geometry import Rect, Size
from sevenseg.segment import ALL_SEGMENTS, Segment

ALL_VALUES = list(range(-2, 16))

# Classic a-g segment letters
LETTER = {
    'a': Segment.TOP,
    'b': Segment.TOP_RIGHT,
    'c': Segment.BOTTOM_RIGHT,
    'd': Segment.BOTTOM,
    'e': Segment.BOTTOM_LEFT,
    'f': Segment.TOP_LEFT,
    'g': Segment.CENTER,
}

# Expected glyphs per value, written as lit a-g letters
EXPECTED_GLYPHS = {
    -2: '',
    -1: 'g',
    0: 'abcdef',
    1: 'bc',
    2: 'abdeg',
    3: 'abcdg',
    4: 'bcfg',
    5: 'acdfg',
    6: 'acdefg',
    7: 'abc',
    8: 'abcdefg',
    9: 'abcdfg',
    10: 'abcefg',   # A
    11: 'cdefg',    # b
    12: 'adef',     # C
    13: 'bcdeg',    # d
    14: 'adefg',    # E
    15: 'aefg',     # F
}


# =========================================================================
# Font table
# =========================================================================

class TestFontTable:
    def test_covers_every_value(self):
        assert sorted(LIT_SEGMENTS) == ALL_VALUES

    @pytest.mark.parametrize("value", ALL_VALUES)
    def test_glyph(self, value):
        expected = frozenset(LETTER[ch] for ch in EXPECTED_GLYPHS[value])
        assert lit_segments(value) == expected

    def test_zero_has_top_bar(self):
        assert Segment.TOP in lit_segments(0)
        assert Segment.CENTER not in lit_segments(0)

    def test_eight_is_all_segments(self):
        assert lit_segments(8) == ALL_SEGMENTS

    def test_special_values(self):
        assert lit_segments(DigitValue.OFF) == frozenset()
        assert lit_segments(DigitValue.MINUS) == {Segment.CENTER}

    @pytest.mark.parametrize("value", [-3, 16, 100, -100])
    def test_out_of_range(self, value):
        with pytest.raises(ValueError):
            lit_segments(value)


# =========================================================================
# Digit state
# =========================================================================

class TestDigitState:
    def test_defaults(self):
        d = Digit()
        assert d.size == DESIGN_SIZE
        assert d.value == DigitValue.OFF

    def test_init_values(self):
        d = Digit(size=(50, 100), value=7)
        assert d.size == Size(50, 100)
        assert d.value == 7

    @pytest.mark.parametrize("value", [-3, 16])
    def test_init_rejects_out_of_range(self, value):
        with pytest.raises(ValueError):
            Digit(value=value)

    def test_setter_rejects_and_keeps_old_value(self):
        d = Digit(value=3)
        with pytest.raises(ValueError):
            d.value = 16
        assert d.value == 3

    def test_init_rejects_float(self):
        with pytest.raises(TypeError):
            Digit(value=3.7)

    def test_setter_rejects_float_and_keeps_old_value(self):
        d = Digit(value=3)
        with pytest.raises(TypeError):
            d.value = 2.0
        assert d.value == 3

    def test_accepts_enum_member(self):
        assert Digit(value=DigitValue.MINUS).value == -1

    def test_set_value_returns_value(self):
        assert Digit().set_value(12) == 12

    def test_size_setter(self):
        d = Digit()
        d.size = (10, 20)
        assert d.size == Size(10, 20)

    def test_lit_segments_follow_value(self):
        d = Digit(value=1)
        assert d.lit_segments == {Segment.TOP_RIGHT, Segment.BOTTOM_RIGHT}
        d.value = -1
        assert d.lit_segments == {Segment.CENTER}


# =========================================================================
# Paths
# =========================================================================

class TestDigitPaths:
    @pytest.mark.parametrize("value", ALL_VALUES)
    def test_on_and_off_partition_mask(self, value):
        d = Digit(value=value)
        on = set(d.on_segments.loops)
        off = set(d.off_segments.loops)
        assert not on & off
        assert on | off == set(d.segment_mask.loops)

    @pytest.mark.parametrize("value", ALL_VALUES)
    def test_on_loop_count_matches_glyph(self, value):
        d = Digit(value=value)
        assert len(d.on_segments) == len(EXPECTED_GLYPHS[value])
        assert len(d.off_segments) == 7 - len(EXPECTED_GLYPHS[value])

    def test_mask_independent_of_value(self):
        masks = {Digit(size=(80, 160), value=v).segment_mask for v in ALL_VALUES}
        assert len(masks) == 1

    def test_blank_has_no_on_segments(self):
        assert Digit(value=-2).on_segments.is_empty

    def test_eight_has_no_off_segments(self):
        assert Digit(value=8).off_segments.is_empty

    def test_outline_is_size_rect(self):
        assert Digit(size=(30, 60)).outline.bounds == Rect(0, 0, 30, 60)

    def test_mask_fills_size(self):
        bounds = Digit(size=(125, 246), value=8).segment_mask.bounds
        assert tuple(bounds) == pytest.approx((0, 0, 125, 246))

    def test_paths_track_size_changes(self):
        d = Digit(value=8)
        d.size = (25, 49.2)
        bounds = d.on_segments.bounds
        assert tuple(bounds) == pytest.approx((0, 0, 25, 49.2))

    def test_minus_is_center_bar(self):
        bounds = Digit(value=-1).on_segments.bounds
        assert tuple(bounds) == pytest.approx((8, 212, 234, 68))


# =========================================================================
# Sizing
# =========================================================================

class TestDigitSizing:
    def test_default_aspect(self):
        assert Digit().default_aspect == pytest.approx(250 / 492)

    def test_current_aspect(self):
        assert Digit(size=(100, 100)).current_aspect == 1.0

    def test_ideal_width_from_height(self):
        assert Digit().ideal_width_from(492) == pytest.approx(250)

    def test_ideal_height_from_width(self):
        assert Digit().ideal_height_from(125) == pytest.approx(246)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
