# hexcolor_namer/naming/hex_normalize.py
"""
hex_normalize.

Does: Turn a user-supplied hex color string into the canonical 6-digit,
      uppercase, prefix-free form.
Returns: normalize_hex() -> str | None (None means "not a hex color"),
         is_valid_hex() -> bool.
Used by: palette construction, name resolution and packet building.
"""

from __future__ import annotations

import re

__all__ = [
    "normalize_hex",
    "is_valid_hex",
]

# 3 (RGB), 4 (RGBA) or 6 (RRGGBB) hex digits, already uppercased
_HEX_RE = re.compile(r"^[0-9A-F]{3}$|^[0-9A-F]{4}$|^[0-9A-F]{6}$")


def normalize_hex(code: str) -> str | None:
    """
    Does: Trim, drop one leading '#', uppercase, validate and expand.
          - "F00"    → "FF0000"
          - "F00A"   → "FF0000" (4th digit is alpha; read but discarded)
          - "1e90ff" → "1E90FF"
    Returns: Canonical hex, or None for anything else (wrong length, non-hex
             characters, non-string input). Never raises.
    """
    if not isinstance(code, str):
        return None
    hx = code.strip()
    if hx.startswith("#"):
        hx = hx[1:]
    hx = hx.upper()

    # fullmatch so a trailing "\n" cannot sneak past the `$` anchors
    if not _HEX_RE.fullmatch(hx):
        return None

    if len(hx) in (3, 4):
        r, g, b = hx[:3]
        hx = f"{r}{r}{g}{g}{b}{b}"
    return hx


def is_valid_hex(code: str) -> bool:
    """Does: True iff normalize_hex(code) would succeed."""
    return normalize_hex(code) is not None
