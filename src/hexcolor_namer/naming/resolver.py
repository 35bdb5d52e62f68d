"""
resolver.py
===========

Does: Resolve a canonical hex code to a palette name: exact hit first, then
      nearest entry by combined RGB + HSL squared distance.
Used By: packet builder and the public entry points.
Returns: names (str), distances (int), nearest PaletteEntry.
"""

from __future__ import annotations

import logging

from hexcolor_namer.naming.convert import hex_to_hsl, hex_to_rgb
from hexcolor_namer.naming.palette import DEFAULT_PALETTE, ReferencePalette
from hexcolor_namer.naming.types import HSL, RGB, PaletteEntry
from hexcolor_namer.utils.log import debug

__all__ = [
    "HSL_WEIGHT",
    "distance",
    "nearest_entry",
    "resolve",
    "closest_match_fallback",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

# HSL differences count double against RGB ones
HSL_WEIGHT = 2


def distance(rgb: RGB, hsl: HSL, entry: PaletteEntry) -> int:
    """Does: Squared RGB distance + HSL_WEIGHT × squared HSL distance."""
    rgb_d = sum((a - b) ** 2 for a, b in zip(rgb, entry.rgb))
    hsl_d = sum((a - b) ** 2 for a, b in zip(hsl, entry.hsl))
    return rgb_d + HSL_WEIGHT * hsl_d


def nearest_entry(
    hex_code: str,
    palette: ReferencePalette = DEFAULT_PALETTE,
) -> tuple[PaletteEntry, int] | None:
    """
    Does: Linear scan for the entry closest to `hex_code`.
          Ties go to the first entry in palette order (strict `<`).
    Returns: (entry, distance), or None for an empty palette.
    """
    rgb = hex_to_rgb(hex_code)
    hsl = hex_to_hsl(hex_code)
    best: PaletteEntry | None = None
    best_d = 0
    for entry in palette:
        d = distance(rgb, hsl, entry)
        if best is None or d < best_d:
            best, best_d = entry, d
    if best is None:
        return None
    return best, best_d


def closest_match_fallback(hex_code: str) -> str:
    return f"Closest Match for #{hex_code}"


def resolve(hex_code: str, palette: ReferencePalette = DEFAULT_PALETTE) -> str:
    """
    Does: Name a canonical hex code against `palette`.
          1) exact palette hit → its name
          2) otherwise the nearest entry's name
          3) empty palette → "Closest Match for #<hex>"
    """
    exact = palette.lookup(hex_code)
    if exact is not None:
        return exact

    hit = nearest_entry(hex_code, palette)
    if hit is None:
        logger.debug("Empty palette %r; no match for %s", palette.source, hex_code)
        return closest_match_fallback(hex_code)

    entry, d = hit
    logger.debug("Nearest match for %s: %s (%s, distance=%d)", hex_code, entry.name, entry.hex, d)
    debug(f"{hex_code} → {entry.name} (#{entry.hex}, d={d})", topic="resolver")
    return entry.name
