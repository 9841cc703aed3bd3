"""Tests for display layer selection."""

import pytest

from sevenseg.digit import Digit
from sevenseg.digit_group import DigitGroup, NumberBase
from sevenseg.layers import DisplayType, Layer, layers_for


class TestLayersFor:
    def test_all_paints_outline_off_on(self):
        layers = layers_for(Digit(value=3), DisplayType.ALL)
        assert [layer.name for layer in layers] == ['outline', 'off_segments', 'on_segments']

    def test_default_is_all(self):
        assert len(layers_for(Digit())) == 3

    @pytest.mark.parametrize("display_type,name", [
        (DisplayType.OUTLINE, 'outline'),
        (DisplayType.MASK_ONLY, 'segment_mask'),
        (DisplayType.ON_ONLY, 'on_segments'),
        (DisplayType.OFF_ONLY, 'off_segments'),
    ])
    def test_single_layer_modes(self, display_type, name):
        d = Digit(value=5)
        assert layers_for(d, display_type) == [Layer(name, getattr(d, name))]

    def test_accepts_string_value(self):
        (layer,) = layers_for(Digit(value=8), DisplayType('mask'))
        assert len(layer.path) == 7

    def test_works_for_groups(self):
        g = DigitGroup(3, (375, 246), NumberBase.DECIMAL, value=1)
        (layer,) = layers_for(g, DisplayType.ON_ONLY)
        assert layer.path == g.on_segments
        assert len(layer.path) == 2
