"""
naming.
======

Does: Aggregate the hex → name pipeline: normalization, RGB/HSL conversion,
      reference palettes, nearest-match resolution and packet building.
Used By: package root entry points, CLI, tests.
"""

# ── Types ────────────────────────────────────────────────────────────────────
from .types import (
    HSL,
    INVALID_COLOR_PREFIX,
    RGB,
    ColorPacket,
    PaletteEntry,
    invalid_color_message,
)

# ── Pipeline stages ──────────────────────────────────────────────────────────
from .hex_normalize import is_valid_hex, normalize_hex
from .convert import hex_to_hsl, hex_to_rgb, rgb_to_hsl, round_half_up
from .palette import (
    DEFAULT_PALETTE,
    PALETTE_CHOICES,
    PaletteError,
    ReferencePalette,
    get_palette,
    load_palette,
    palette_from_webcolors,
)
from .resolver import distance, nearest_entry, resolve
from .packet import build_packet, build_packets, resolve_name

__all__ = [
    # types
    "RGB",
    "HSL",
    "PaletteEntry",
    "ColorPacket",
    "INVALID_COLOR_PREFIX",
    "invalid_color_message",
    # normalization / conversion
    "normalize_hex",
    "is_valid_hex",
    "hex_to_rgb",
    "hex_to_hsl",
    "rgb_to_hsl",
    "round_half_up",
    # palettes
    "ReferencePalette",
    "PaletteError",
    "DEFAULT_PALETTE",
    "PALETTE_CHOICES",
    "palette_from_webcolors",
    "load_palette",
    "get_palette",
    # resolution
    "distance",
    "nearest_entry",
    "resolve",
    "resolve_name",
    "build_packet",
    "build_packets",
]
