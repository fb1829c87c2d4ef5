"""Pixel colour helpers: visual channel masks, depth conversion and RGB packing."""

from __future__ import annotations

_CHANNEL_MAX = 255


def _mask_fields(mask: int) -> tuple[int, int]:
    """Return (shift, width) of the contiguous run of set bits in ``mask``."""
    if mask <= 0:
        raise ValueError(f"channel mask must be a positive bit mask, got {mask!r}")
    shift = (mask & -mask).bit_length() - 1
    rest = mask >> shift
    width = (rest ^ (rest + 1)).bit_length() - 1
    return shift, width


def mask_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Return (red shift, red bits, green shift, green bits, blue shift, blue bits)."""
    return (
        *_mask_fields(red_mask),
        *_mask_fields(green_mask),
        *_mask_fields(blue_mask),
    )


def good_color(color: int, depth: int, shifts: tuple[int, ...]) -> int:
    """Convert a 0xRRGGBB colour to the pixel value of a visual.

    Visuals of 24 bits or more take the colour unchanged; shallower ones get
    each channel scaled down to its bit width and moved to its shift.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )


def clamp_rgb(red: int, green: int, blue: int) -> tuple[int, int, int]:
    """Clamp each channel into 0..255."""
    return tuple(min(max(channel, 0), _CHANNEL_MAX) for channel in (red, green, blue))


def rgb_to_int(red: int, green: int, blue: int) -> int:
    """Pack clamped channels into a 0xRRGGBB integer."""
    red, green, blue = clamp_rgb(red, green, blue)
    return red << 16 | green << 8 | blue