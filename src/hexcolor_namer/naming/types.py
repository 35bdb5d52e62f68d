"""
types.py.

Does: Define the value types shared by normalization, conversion, palette
      lookup and packet building.
Used by: every module under `hexcolor_namer.naming`, the CLI and tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple

__all__ = [
    "RGB",
    "HSL",
    "ZERO_RGB",
    "ZERO_HSL",
    "PaletteEntry",
    "ColorPacket",
    "INVALID_COLOR_PREFIX",
    "invalid_color_message",
]
__docformat__ = "google"

INVALID_COLOR_PREFIX = "Invalid Color: "


class RGB(NamedTuple):
    """Red, green, blue channels, each 0–255."""

    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """Hue in degrees [0, 360), saturation and lightness as percentages [0, 100]."""

    h: int
    s: int
    l: int  # noqa: E741


ZERO_RGB = RGB(0, 0, 0)
ZERO_HSL = HSL(0, 0, 0)


class PaletteEntry(NamedTuple):
    hex: str
    name: str
    rgb: RGB
    hsl: HSL


@dataclass(frozen=True)
class ColorPacket:
    """
    Resolved color: name, canonical hex, RGB and HSL.

    For invalid input `hex_code` echoes the caller's string verbatim and both
    triples are zero.
    """

    color_name: str
    hex_code: str
    rgb: RGB = ZERO_RGB
    hsl: HSL = ZERO_HSL

    def to_dict(self) -> dict[str, Any]:
        """Does: Return the camel-case wire shape used by JSON consumers."""
        return {
            "colorName": self.color_name,
            "hexCode": self.hex_code,
            "rgb": self.rgb._asdict(),
            "hsl": self.hsl._asdict(),
        }


def invalid_color_message(code: str) -> str:
    return f"{INVALID_COLOR_PREFIX}{code}"
