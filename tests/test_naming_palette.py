# tests/test_naming_palette.py
"""Reference palette construction, lookup, validation and alternative sources."""

from __future__ import annotations

import json

import pytest

from hexcolor_namer.naming.color_names import COLOR_NAMES
from hexcolor_namer.naming.palette import (
    DEFAULT_PALETTE,
    PALETTE_CHOICES,
    PaletteError,
    ReferencePalette,
    get_palette,
    load_palette,
    palette_from_webcolors,
)
from hexcolor_namer.naming.types import HSL, RGB, PaletteEntry
from hexcolor_namer.utils.load_config import ConfigParseError, ConfigTypeError, clear_config_cache


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    monkeypatch.delenv("DATA_DIR", raising=False)
    monkeypatch.delenv("HEXCOLOR_DATA_DIR", raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


# ──────────────────────────────────────────────────────────────────────────────
# Static table
# ──────────────────────────────────────────────────────────────────────────────
def test_static_table_keys_are_canonical():
    for hx in COLOR_NAMES:
        assert len(hx) == 6 and hx == hx.upper()
        int(hx, 16)


@pytest.mark.parametrize(
    "hx,name",
    [
        ("000000", "Black"),
        ("FFFFFF", "White"),
        ("FF0000", "Red"),
        ("00FF00", "Green"),
        ("0000FF", "Blue"),
        ("1E90FF", "Dodger Blue"),
        ("FAFAFA", "Alabaster"),
    ],
)
def test_static_table_has_reference_names(hx, name):
    assert COLOR_NAMES[hx] == name


# ──────────────────────────────────────────────────────────────────────────────
# Default palette
# ──────────────────────────────────────────────────────────────────────────────
def test_default_palette_mirrors_static_table():
    assert len(DEFAULT_PALETTE) == len(COLOR_NAMES)
    assert [e.hex for e in DEFAULT_PALETTE] == list(COLOR_NAMES)
    assert DEFAULT_PALETTE.source == "ntc"


def test_entries_carry_precomputed_rgb_hsl():
    entry = next(e for e in DEFAULT_PALETTE if e.hex == "1E90FF")
    assert isinstance(entry, PaletteEntry)
    assert entry == PaletteEntry("1E90FF", "Dodger Blue", RGB(30, 144, 255), HSL(210, 100, 56))


def test_lookup_and_contains():
    assert DEFAULT_PALETTE.lookup("1E90FF") == "Dodger Blue"
    assert DEFAULT_PALETTE.lookup("1E90F0") is None
    assert "000000" in DEFAULT_PALETTE
    assert "#000000" not in DEFAULT_PALETTE


def test_palette_is_read_only():
    assert isinstance(DEFAULT_PALETTE.entries, tuple)
    with pytest.raises(AttributeError):
        DEFAULT_PALETTE.extra = 1  # type: ignore[attr-defined]
    with pytest.raises(TypeError):
        DEFAULT_PALETTE._by_hex["000000"] = "Ink"  # type: ignore[index]


# ──────────────────────────────────────────────────────────────────────────────
# Custom palettes
# ──────────────────────────────────────────────────────────────────────────────
def test_keys_are_normalized():
    pal = ReferencePalette({"#fff": "Snow", "f00a": "Fire", " 00ff00 ": "Leaf"})
    assert [e.hex for e in pal] == ["FFFFFF", "FF0000", "00FF00"]
    assert pal.lookup("FF0000") == "Fire"


def test_duplicate_keys_keep_first_position_last_name():
    pal = ReferencePalette([("fff", "A"), ("000", "Ink"), ("#FFFFFF", "B")])
    assert len(pal) == 2
    assert pal.lookup("FFFFFF") == "B"
    assert [e.name for e in pal] == ["B", "Ink"]


@pytest.mark.parametrize("bad_key", ["GGG", "12", "#12345", ""])
def test_bad_hex_key_raises(bad_key):
    with pytest.raises(PaletteError):
        ReferencePalette({bad_key: "x"})


@pytest.mark.parametrize("bad_name", ["", "   ", None, 3])
def test_bad_name_raises(bad_name):
    with pytest.raises(PaletteError):
        ReferencePalette({"000000": bad_name})


def test_palette_error_is_value_error():
    assert issubclass(PaletteError, ValueError)


def test_empty_palette_is_allowed():
    pal = ReferencePalette({}, source="empty")
    assert len(pal) == 0
    assert list(pal) == []
    assert repr(pal) == "ReferencePalette(source='empty', size=0)"


# ──────────────────────────────────────────────────────────────────────────────
# webcolors palettes
# ──────────────────────────────────────────────────────────────────────────────
def test_css3_palette_from_webcolors():
    pal = palette_from_webcolors("css3")
    assert pal.lookup("1E90FF") == "Dodgerblue"
    assert pal.lookup("FF0000") == "Red"
    assert len(pal) > 100
    assert palette_from_webcolors("css3") is pal


def test_html4_palette_from_webcolors():
    pal = palette_from_webcolors("html4")
    assert len(pal) == 16
    assert pal.lookup("000080") == "Navy"


def test_unknown_webcolors_spec():
    with pytest.raises(PaletteError):
        palette_from_webcolors("css9")


def test_get_palette_choices():
    assert get_palette() is DEFAULT_PALETTE
    assert get_palette("ntc") is DEFAULT_PALETTE
    assert get_palette("css3") is palette_from_webcolors("css3")
    assert "css3" in PALETTE_CHOICES
    with pytest.raises(PaletteError):
        get_palette("pantone")


# ──────────────────────────────────────────────────────────────────────────────
# JSON palettes via the config loader
# ──────────────────────────────────────────────────────────────────────────────
def _write(data_dir, name, payload):
    (data_dir / f"{name}.json").write_text(json.dumps(payload), encoding="utf-8")


def test_load_palette_from_data_dir(tmp_path):
    _write(tmp_path, "mine", {"#fff": "Paper", "000": "Ink"})
    pal = load_palette("mine", base_dir=tmp_path)
    assert pal.source == "mine"
    assert pal.lookup("FFFFFF") == "Paper"
    assert pal.lookup("000000") == "Ink"


def test_load_palette_uses_env_data_dir(tmp_path, monkeypatch):
    _write(tmp_path, "env_pal", {"123456": "Deep"})
    monkeypatch.setenv("HEXCOLOR_DATA_DIR", str(tmp_path))
    assert load_palette("env_pal").lookup("123456") == "Deep"


def test_load_palette_bundled_basic():
    pal = load_palette("basic")
    assert len(pal) == 16
    assert pal.lookup("00FF00") == "Lime"


def test_load_palette_non_string_name(tmp_path):
    _write(tmp_path, "bad_names", {"000000": 1})
    with pytest.raises(ConfigParseError):
        load_palette("bad_names", base_dir=tmp_path)


def test_load_palette_bad_key(tmp_path):
    _write(tmp_path, "bad_keys", {"nothex": "x"})
    with pytest.raises(PaletteError):
        load_palette("bad_keys", base_dir=tmp_path)


def test_load_palette_requires_object(tmp_path):
    _write(tmp_path, "as_list", ["000000", "Black"])
    with pytest.raises(ConfigTypeError):
        load_palette("as_list", base_dir=tmp_path)
