"""
convert.py
==========

Does: Convert canonical hex codes to integer RGB and HSL triples.
Used By: Palette preprocessing, nearest-match distance, packet building.
Returns: RGB(r, g, b) with channels 0–255; HSL(h, s, l) with h in degrees
         and s/l in percent, all rounded half-up at the last step.
"""

from __future__ import annotations

import math
from functools import lru_cache

import webcolors

from hexcolor_namer.naming.types import HSL, RGB

__all__ = [
    "round_half_up",
    "hex_to_rgb",
    "rgb_to_hsl",
    "hex_to_hsl",
]
__docformat__ = "google"


def round_half_up(x: float) -> int:
    """Does: Round to nearest integer, .5 going up (2.5 → 3, -2.5 → -2)."""
    return math.floor(x + 0.5)


@lru_cache(maxsize=4096)
def hex_to_rgb(hex_code: str) -> RGB:
    """Does: Parse a canonical hex code ("RRGGBB", no '#') into an RGB triple."""
    red, green, blue = webcolors.hex_to_rgb(f"#{hex_code}")
    return RGB(red, green, blue)


def rgb_to_hsl(rgb: RGB) -> HSL:
    """
    Does: Standard min/max-channel RGB → HSL.
          Achromatic colors (max == min) get hue 0 and saturation 0.
          When two channels tie for max, red wins over green, green over blue.
    """
    r, g, b = (c / 255 for c in rgb)
    mx = max(r, g, b)
    mn = min(r, g, b)
    l = (mx + mn) / 2  # noqa: E741

    if mx == mn:
        h = s = 0.0
    else:
        delta = mx - mn
        s = delta / (2 - mx - mn) if l > 0.5 else delta / (mx + mn)
        if mx == r:
            h = (g - b) / delta + (6 if b > g else 0)
        elif mx == g:
            h = (b - r) / delta + 2
        else:
            h = (r - g) / delta + 4
        h /= 6

    return HSL(round_half_up(h * 360), round_half_up(s * 100), round_half_up(l * 100))


@lru_cache(maxsize=4096)
def hex_to_hsl(hex_code: str) -> HSL:
    """Does: Canonical hex → HSL via hex_to_rgb()."""
    return rgb_to_hsl(hex_to_rgb(hex_code))
