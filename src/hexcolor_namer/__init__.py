"""
hexcolor_namer
==============

Does: Name arbitrary hex color codes after the closest entry of a reference
      palette, and report normalized hex, RGB and HSL alongside.
Returns: get_color_name(code) -> str, get_color_packet(code) -> ColorPacket.
Used by: CLI (`hexcolor-namer`) and library callers.

Inspired by Chirag Mehta's "Name that Color" (http://chir.ag/projects/ntc).
"""

from __future__ import annotations

from hexcolor_namer.naming import (
    DEFAULT_PALETTE,
    HSL,
    RGB,
    ColorPacket,
    PaletteEntry,
    PaletteError,
    ReferencePalette,
    build_packet,
    get_palette,
    hex_to_hsl,
    hex_to_rgb,
    load_palette,
    normalize_hex,
    resolve_name,
)

__all__ = [
    "get_color_name",
    "get_color_packet",
    "GetColorName",
    "GetColorPacket",
    "RGB",
    "HSL",
    "PaletteEntry",
    "ColorPacket",
    "ReferencePalette",
    "PaletteError",
    "DEFAULT_PALETTE",
    "get_palette",
    "load_palette",
    "normalize_hex",
    "hex_to_rgb",
    "hex_to_hsl",
    "resolve_name",
]
__docformat__ = "google"
__version__ = "1.0.0"


def get_color_name(code: str) -> str:
    """
    Does: Closest human-readable name for a hex color code ("000000", "#FF0000", "F00").
          Exact palette hits win; otherwise the nearest entry by RGB+HSL distance.
    Returns: The name, or "Invalid Color: <code>" when `code` is not a 3/4/6-digit hex.
    """
    return resolve_name(code)


def get_color_packet(code: str) -> ColorPacket:
    """
    Does: Name plus canonical hex, RGB and HSL for `code`.
    Returns: ColorPacket; for invalid input hex_code is `code` verbatim and RGB/HSL are zero.
    """
    return build_packet(code)


# ── Backward-compat (camel-case entry points) ────────────────────────────────
GetColorName = get_color_name
GetColorPacket = get_color_packet
