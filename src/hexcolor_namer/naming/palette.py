"""
palette.py
==========

Does: Build the immutable reference palette (hex, name, RGB, HSL) once from a
      name table, and expose O(1) exact lookup plus an ordered read-only view
      for nearest-match scans.
Used By: resolver, packet builder, CLI palette selection.
Returns: ReferencePalette instances; DEFAULT_PALETTE is the compiled-in table.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

import webcolors

from hexcolor_namer.naming.color_names import COLOR_NAMES
from hexcolor_namer.naming.convert import hex_to_hsl, hex_to_rgb
from hexcolor_namer.naming.hex_normalize import normalize_hex
from hexcolor_namer.naming.types import PaletteEntry
from hexcolor_namer.utils.load_config import load_config

__all__ = [
    "PaletteError",
    "ReferencePalette",
    "DEFAULT_PALETTE",
    "PALETTE_CHOICES",
    "palette_from_webcolors",
    "load_palette",
    "get_palette",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

WEBCOLORS_SPECS = (webcolors.HTML4, webcolors.CSS2, webcolors.CSS21, webcolors.CSS3)


class PaletteError(ValueError):
    """Raise when a name table cannot be turned into a palette."""


# ── Palette ──────────────────────────────────────────────────────────────────
class ReferencePalette:
    """
    Read-only table of PaletteEntry built once from ``{hex: name}`` pairs.

    Keys go through `normalize_hex`, so "#fff", "FFF" and "ffffff" all land on
    "FFFFFF". When two keys normalize to the same hex, the entry keeps the
    position of the first and the name of the last (plain dict semantics).
    Iteration order is insertion order; nearest-match ties depend on it.
    """

    __slots__ = ("_by_hex", "_entries", "source")

    def __init__(
        self,
        names: Mapping[str, str] | Iterable[tuple[str, str]],
        *,
        source: str = "custom",
    ) -> None:
        items = names.items() if isinstance(names, Mapping) else names
        table: dict[str, str] = {}
        for raw_hex, name in items:
            hx = normalize_hex(raw_hex)
            if hx is None:
                raise PaletteError(f"{source}: not a hex color key: {raw_hex!r}")
            if not isinstance(name, str) or not name.strip():
                raise PaletteError(f"{source}: empty or non-string name for {raw_hex!r}")
            table[hx] = name

        self._entries: tuple[PaletteEntry, ...] = tuple(
            PaletteEntry(hx, name, hex_to_rgb(hx), hex_to_hsl(hx)) for hx, name in table.items()
        )
        self._by_hex: Mapping[str, str] = MappingProxyType(table)
        self.source = source
        logger.debug("Built palette %r with %d entries", source, len(self._entries))

    @property
    def entries(self) -> tuple[PaletteEntry, ...]:
        return self._entries

    def lookup(self, hex_code: str) -> str | None:
        """Does: Exact match on a canonical hex; None when absent."""
        return self._by_hex.get(hex_code)

    def __contains__(self, hex_code: object) -> bool:
        return hex_code in self._by_hex

    def __iter__(self) -> Iterator[PaletteEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ReferencePalette(source={self.source!r}, size={len(self)})"


DEFAULT_PALETTE = ReferencePalette(COLOR_NAMES, source="ntc")


# ── Alternative palettes ─────────────────────────────────────────────────────
@lru_cache(maxsize=None)
def palette_from_webcolors(spec: str = webcolors.CSS3) -> ReferencePalette:
    """
    Does: Build a palette from the webcolors name tables ("html4", "css2",
          "css21", "css3"). Names are title-cased ("dodgerblue" → "Dodgerblue").
          Synonyms sharing a hex (gray/grey) keep the name webcolors lists last.
    """
    if spec not in WEBCOLORS_SPECS:
        raise PaletteError(f"Unknown webcolors spec: {spec!r}")
    pairs = [(webcolors.name_to_hex(n, spec=spec), n.title()) for n in webcolors.names(spec)]
    return ReferencePalette(pairs, source=spec)


def _validate_name_table(data: dict[str, Any]) -> dict[str, Any]:
    bad = [k for k, v in data.items() if not isinstance(v, str)]
    if bad:
        raise PaletteError(f"names must be strings (first bad keys: {bad[:3]})")
    if not data:
        raise PaletteError("palette file is empty")
    return data


def load_palette(
    file: str,
    *,
    base_dir: Path | None = None,
    allow_comments: bool = False,
) -> ReferencePalette:
    """
    Does: Load ``<data>/<file>.json`` (an object of hex → name) through
          `load_config` and build a palette from it.
    Raises: DataDirNotFound / ConfigFileNotFound / ConfigParseError /
            ConfigTypeError from the loader, PaletteError for bad hex keys.
    """
    table = load_config(
        file,
        mode="validated_dict",
        base_dir=base_dir,
        validator=_validate_name_table,
        allow_comments=allow_comments,
    )
    return ReferencePalette(table, source=Path(file).stem)


PALETTE_CHOICES = ("ntc", *WEBCOLORS_SPECS)


def get_palette(name: str = "ntc") -> ReferencePalette:
    """Does: Map a palette choice (see PALETTE_CHOICES) to a palette instance."""
    if name == "ntc":
        return DEFAULT_PALETTE
    if name not in PALETTE_CHOICES:
        raise PaletteError(f"Unknown palette {name!r}; choose from {', '.join(PALETTE_CHOICES)}")
    return palette_from_webcolors(name)
