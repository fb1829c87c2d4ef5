import pytest

from cubscene.colors import clamp_rgb, good_color, mask_shifts, rgb_to_int

TRUECOLOR = mask_shifts(0xFF0000, 0xFF00, 0xFF)
RGB565 = mask_shifts(0xF800, 0x7E0, 0x1F)


def test_truecolor_mask_shifts():
    assert TRUECOLOR == (16, 8, 8, 8, 0, 8)


def test_rgb565_mask_shifts():
    assert RGB565 == (11, 5, 5, 6, 0, 5)


def test_zero_mask_is_rejected():
    with pytest.raises(ValueError):
        mask_shifts(0, 0xFF00, 0xFF)


@pytest.mark.parametrize("color", [0, 0x123456, 0xFFFFFF, 0xFF99FF, 0x00FFFF])
def test_deep_visual_keeps_color(color):
    assert good_color(color, 24, RGB565) == color
    assert good_color(color, 32, RGB565) == color


@pytest.mark.parametrize("color", [0, 0x123456, 0xFFFFFF, 0xFF99FF, 0x00FFFF])
def test_eight_bit_channels_round_trip_at_low_depth(color):
    assert good_color(color, 16, TRUECOLOR) == color


def test_white_fills_every_565_bit():
    assert good_color(0xFFFFFF, 16, RGB565) == (0xF800 | 0x7E0 | 0x1F)


def test_black_stays_black_at_low_depth():
    assert good_color(0, 16, RGB565) == 0


def test_clamp_rgb_limits_channels():
    assert clamp_rgb(300, -5, 10) == (255, 0, 10)
    assert clamp_rgb(0, 128, 255) == (0, 128, 255)


def test_rgb_to_int_packs_channels():
    assert rgb_to_int(1, 2, 3) == 0x010203
    assert rgb_to_int(0, 0, 0) == 0


def test_rgb_to_int_clamps_before_packing():
    assert rgb_to_int(300, -5, 10) == rgb_to_int(255, 0, 10)
    assert rgb_to_int(999, 999, 999) == rgb_to_int(255, 255, 255)