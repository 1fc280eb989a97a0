import pytest

from gamut import (
    CLAMP_CHROMA_TOLERANCE,
    MAX_CHROMA_TOLERANCE,
    clamp_chroma,
    find_max_chroma,
    is_in_gamut,
)
from oklch import OklchColor, hex_to_oklch


class TestIsInGamut:
    @pytest.mark.parametrize("hex_color", ["#5C8FBF", "#389C70", "#C27390", "#808080", "#000000"])
    def test_hex_colors_are_in_gamut(self, hex_color):
        assert is_in_gamut(hex_to_oklch(hex_color))

    def test_gray_is_in_gamut(self):
        assert is_in_gamut(OklchColor(0.7, 0.0, 0))

    @pytest.mark.parametrize("hue", [0, 90, 145, 250, 330])
    def test_high_chroma_is_out_of_gamut(self, hue):
        assert not is_in_gamut(OklchColor(0.5, 0.4, hue))

    def test_lightness_above_one_is_out_of_gamut(self):
        assert not is_in_gamut(OklchColor(1.1, 0.0, 0))


class TestFindMaxChroma:
    @pytest.mark.parametrize("lightness, hue", [(0.3, 30), (0.5, 145), (0.7, 250), (0.9, 100)])
    def test_result_is_supremum(self, lightness, hue):
        c = find_max_chroma(lightness, hue)
        assert is_in_gamut(OklchColor(lightness, c, hue))
        assert not is_in_gamut(OklchColor(lightness, c + MAX_CHROMA_TOLERANCE, hue))

    @pytest.mark.parametrize("hue", [29, 250])
    def test_capacity_shrinks_toward_extremes(self, hue):
        middle = find_max_chroma(0.5, hue)
        assert middle >= find_max_chroma(0.1, hue)
        assert middle >= find_max_chroma(0.9, hue)

    def test_zero_when_gray_is_out_of_gamut(self):
        assert find_max_chroma(1.1, 200) == 0.0


class TestClampChroma:
    def test_in_gamut_color_unchanged(self):
        color = hex_to_oklch("#5C8FBF")
        assert clamp_chroma(color) == color

    @pytest.mark.parametrize("lightness, chroma, hue", [(0.6, 0.35, 145), (0.9, 0.3, 250), (0.2, 0.25, 30)])
    def test_out_of_gamut_color_clamped(self, lightness, chroma, hue):
        color = OklchColor(lightness, chroma, hue)
        assert not is_in_gamut(color)

        clamped = clamp_chroma(color)

        assert clamped.l == color.l
        assert clamped.h == color.h
        assert clamped.c < color.c
        assert is_in_gamut(clamped)
        assert not is_in_gamut(OklchColor(lightness, clamped.c + CLAMP_CHROMA_TOLERANCE, hue))
