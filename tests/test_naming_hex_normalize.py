# tests/test_naming_hex_normalize.py
"""Hex normalization: prefix/case/whitespace handling, 3/4/6-digit expansion, rejects."""

from __future__ import annotations

import pytest

from hexcolor_namer.naming.hex_normalize import is_valid_hex, normalize_hex


# ──────────────────────────────────────────────────────────────────────────────
# Accepted forms
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "code,expect",
    [
        ("000000", "000000"),
        ("#FF0000", "FF0000"),
        ("#1e90ff", "1E90FF"),
        ("  #1E90FF\t", "1E90FF"),
        ("F00", "FF0000"),
        ("#abc", "AABBCC"),
        ("fff", "FFFFFF"),
        ("#F00F", "FF0000"),
        ("000f", "000000"),
        ("FFFF", "FFFFFF"),
    ],
)
def test_normalize_hex_valid(code, expect):
    assert normalize_hex(code) == expect


@pytest.mark.parametrize("digits", ["000", "F00", "ABC", "1a2", "9fE"])
def test_three_digit_forms_agree(digits):
    doubled = "".join(c * 2 for c in digits.upper())
    assert normalize_hex("#" + digits) == doubled
    assert normalize_hex(digits) == doubled
    assert normalize_hex(digits.lower()) == doubled


def test_alpha_digit_is_ignored():
    assert normalize_hex("F00F") == normalize_hex("F000") == "FF0000"
    assert normalize_hex("#12a0") == normalize_hex("#12a9") == "1122AA"


def test_renormalizing_is_stable():
    hx = normalize_hex("#c0ffee")
    assert normalize_hex(hx) == hx
    assert normalize_hex("#" + hx) == hx


# ──────────────────────────────────────────────────────────────────────────────
# Rejected forms
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "code",
    [
        "",
        "#",
        "12",
        "#12",
        "12345",
        "#GGHHII",
        "#1234567",
        "##FFF",
        "# FFF",
        "FF 00 00",
        "0xFF0000",
        "FFF\n0",
    ],
)
def test_normalize_hex_invalid(code):
    assert normalize_hex(code) is None
    assert is_valid_hex(code) is False


@pytest.mark.parametrize("value", [None, 123, 0xFF0000, b"FF0000"])
def test_non_string_input_is_invalid(value):
    assert normalize_hex(value) is None  # type: ignore[arg-type]


def test_is_valid_hex_true():
    assert is_valid_hex("#1E90FF") is True
