# tests/test_naming_convert.py
"""RGB/HSL conversion and the pinned half-up rounding rule."""

from __future__ import annotations

import pytest

from hexcolor_namer.naming.convert import hex_to_hsl, hex_to_rgb, rgb_to_hsl, round_half_up
from hexcolor_namer.naming.types import HSL, RGB


# ──────────────────────────────────────────────────────────────────────────────
# Rounding
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "x,expect",
    [(0.5, 1), (1.5, 2), (2.5, 3), (2.4999, 2), (-0.5, 0), (-2.5, -2), (-2.6, -3), (7.0, 7)],
)
def test_round_half_up(x, expect):
    assert round_half_up(x) == expect


# ──────────────────────────────────────────────────────────────────────────────
# RGB
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "hx,expect",
    [
        ("000000", (0, 0, 0)),
        ("FFFFFF", (255, 255, 255)),
        ("1E90FF", (30, 144, 255)),
        ("1E90F0", (30, 144, 240)),
        ("0A0B0C", (10, 11, 12)),
    ],
)
def test_hex_to_rgb(hx, expect):
    rgb = hex_to_rgb(hx)
    assert rgb == expect
    assert isinstance(rgb, RGB)
    assert (rgb.r, rgb.g, rgb.b) == expect


# ──────────────────────────────────────────────────────────────────────────────
# HSL
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "hx,expect",
    [
        ("000000", (0, 0, 0)),
        ("FFFFFF", (0, 0, 100)),
        ("808080", (0, 0, 50)),
        ("FF0000", (0, 100, 50)),
        ("00FF00", (120, 100, 50)),
        ("0000FF", (240, 100, 50)),
        ("FFFF00", (60, 100, 50)),
        ("00FFFF", (180, 100, 50)),
        ("FF00FF", (300, 100, 50)),
        ("1E90FF", (210, 100, 56)),
        ("1E90F0", (207, 88, 53)),
        ("FF0101", (0, 100, 50)),
        ("01FF01", (120, 100, 50)),
        ("0101FF", (240, 100, 50)),
    ],
)
def test_hex_to_hsl(hx, expect):
    hsl = hex_to_hsl(hx)
    assert hsl == expect
    assert isinstance(hsl, HSL)


def test_rgb_to_hsl_matches_hex_path():
    assert rgb_to_hsl(RGB(30, 144, 240)) == hex_to_hsl("1E90F0")


def test_red_tie_for_max_uses_red_branch():
    # r == g == max → hue from the red branch: (g - b) / delta = 1 → 60°
    assert rgb_to_hsl(RGB(200, 200, 0)).h == 60


def test_hue_rounds_up_to_360_near_red():
    # 359.76° rounds at the final step only, so the hue lands on 360
    assert hex_to_hsl("FF0001") == (360, 100, 50)


def test_saturation_branch_for_light_colors():
    # l > 0.5 uses delta / (2 - max - min)
    h, s, l = hex_to_hsl("FFC0CB")
    assert (h, s, l) == (350, 100, 88)
