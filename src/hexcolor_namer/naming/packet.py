"""
packet.py
=========

Does: Compose normalization, conversion and name resolution into a single
      ColorPacket, including the invalid-input packet.
Used By: public entry points (`hexcolor_namer.get_color_packet`), CLI.
"""

from __future__ import annotations

from collections.abc import Iterable

from hexcolor_namer.naming.convert import hex_to_hsl, hex_to_rgb
from hexcolor_namer.naming.hex_normalize import normalize_hex
from hexcolor_namer.naming.palette import DEFAULT_PALETTE, ReferencePalette
from hexcolor_namer.naming.resolver import resolve
from hexcolor_namer.naming.types import ColorPacket, invalid_color_message

__all__ = [
    "resolve_name",
    "build_packet",
    "build_packets",
]


def resolve_name(code: str, palette: ReferencePalette = DEFAULT_PALETTE) -> str:
    """Does: Name only; "Invalid Color: <code>" when `code` is not a hex color."""
    hx = normalize_hex(code)
    if hx is None:
        return invalid_color_message(code)
    return resolve(hx, palette)


def build_packet(code: str, palette: ReferencePalette = DEFAULT_PALETTE) -> ColorPacket:
    """
    Does: Full packet for `code`.
          Invalid input echoes `code` verbatim as hex_code, with zero RGB/HSL.
    """
    hx = normalize_hex(code)
    if hx is None:
        return ColorPacket(color_name=invalid_color_message(code), hex_code=code)
    return ColorPacket(
        color_name=resolve(hx, palette),
        hex_code=hx,
        rgb=hex_to_rgb(hx),
        hsl=hex_to_hsl(hx),
    )


def build_packets(
    codes: Iterable[str],
    palette: ReferencePalette = DEFAULT_PALETTE,
) -> list[ColorPacket]:
    return [build_packet(c, palette) for c in codes]
