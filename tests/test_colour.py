"""Tests for swatchkit.core.colour — hex normalisation, RGB and contrast text."""

import pytest
from swatchkit.core.colour import (
    contrast_text,
    hex_to_rgb,
    normalize_hex,
    relative_luminance,
    rgb_distance,
    rgb_to_hex,
    srgb_to_linear,
)


class TestNormalizeHex:
    def test_uppercases_valid(self):
        assert normalize_hex('#ff00aa') == '#FF00AA'

    def test_already_canonical(self):
        assert normalize_hex('#2563EB') == '#2563EB'

    @pytest.mark.parametrize(
        'value',
        ['', 'ff0000', '#fff', '#ff00000', '#gg0000', ' #ff0000', '#ff0000 ', 'red', '#ff00aa\n'],
    )
    def test_invalid_returns_black(self, value):
        assert normalize_hex(value) == '#000000'

    def test_non_string_returns_black(self):
        assert normalize_hex(None) == '#000000'
        assert normalize_hex(0xFF0000) == '#000000'

    @pytest.mark.parametrize('value', ['#abcdef', 'nope', '#ABCDEF', '#12'])
    def test_idempotent(self, value):
        once = normalize_hex(value)
        assert normalize_hex(once) == once


class TestHexToRgb:
    def test_white(self):
        assert hex_to_rgb('#FFFFFF') == (255, 255, 255)

    def test_lowercase(self):
        assert hex_to_rgb('#2563eb') == (37, 99, 235)

    def test_invalid_is_black(self):
        assert hex_to_rgb('#fff') == (0, 0, 0)


class TestRgbToHex:
    def test_formats_uppercase(self):
        assert rgb_to_hex(255, 12, 171) == '#FF0CAB'

    def test_clamps(self):
        assert rgb_to_hex(300, -4, 0) == '#FF0000'


class TestLuminance:
    def test_linear_segment(self):
        assert srgb_to_linear(10) == pytest.approx(10 / 255 / 12.92)

    def test_power_segment(self):
        assert srgb_to_linear(255) == pytest.approx(1.0)
        assert srgb_to_linear(128) == pytest.approx(0.2158605, rel=1e-4)

    def test_primaries_use_weights(self):
        assert relative_luminance('#FF0000') == pytest.approx(0.2126)
        assert relative_luminance('#00FF00') == pytest.approx(0.7152)
        assert relative_luminance('#0000FF') == pytest.approx(0.0722)


class TestContrastText:
    def test_white_gets_dark_text(self):
        assert contrast_text('#FFFFFF') == '#111111'

    def test_black_gets_light_text(self):
        assert contrast_text('#000000') == '#FFFFFF'

    def test_green_is_bright(self):
        assert contrast_text('#00FF00') == '#111111'

    def test_red_is_dark(self):
        assert contrast_text('#FF0000') == '#FFFFFF'

    def test_threshold_between_grey_187_and_188(self):
        # Y(#BBBBBB) ~ 0.4969, Y(#BCBCBC) ~ 0.5029
        assert contrast_text('#BBBBBB') == '#FFFFFF'
        assert contrast_text('#BCBCBC') == '#111111'

    def test_invalid_hex_treated_as_black(self):
        assert contrast_text('white') == '#FFFFFF'


class TestRgbDistance:
    def test_same_colour(self):
        assert rgb_distance((255, 255, 255), (255, 255, 255)) == 0.0

    def test_uses_int_not_uint8(self):
        """Ensure no numpy uint8 overflow — (0 - 200) must not wrap."""
        import numpy as np

        d = rgb_distance(tuple(np.array([0, 0, 0], dtype=np.uint8)), (200, 200, 200))
        assert d > 300
