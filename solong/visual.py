"""Colour conversion for display visuals with fewer than 24 bits per pixel."""

from __future__ import annotations

TRUE_COLOR_DEPTH = 24
"""From this depth up, 0x00RRGGBB colours are used unchanged."""


def _mask_layout(mask: int) -> tuple[int, int]:
    """Return (shift, bits) of the contiguous run of set bits in mask."""
    if mask <= 0:
        raise ValueError(f"colour mask must be positive, got {mask:#x}")
    shift = 0
    while not mask & 1:
        mask >>= 1
        shift += 1
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return shift, bits


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Return the shift and bit count of each channel of a TrueColor visual.

    The result is (red shift, red bits, green shift, green bits,
    blue shift, blue bits).
    """
    return (
        *_mask_layout(red_mask),
        *_mask_layout(green_mask),
        *_mask_layout(blue_mask),
    )


def convert_color(color: int, depth: int, shifts: tuple[int, ...]) -> int:
    """Convert a 0x00RRGGBB colour to a pixel value for a visual of the given depth."""
    if depth >= TRUE_COLOR_DEPTH:
        return color
    if len(shifts) != 6:
        raise ValueError("shifts must hold six values")
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )