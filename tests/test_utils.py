# tests/test_utils.py
"""Config loader (data dir resolution, cache, modes, errors) and topic debug logger."""

from __future__ import annotations

import importlib
import io
import json
import os

import pytest

from hexcolor_namer.utils.load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
    temp_data_dir,
)

LC = importlib.import_module("hexcolor_namer.utils.load_config")
LOG = importlib.import_module("hexcolor_namer.utils.log")


# ---------- Fixtures ----------
@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    """Provide an isolated data/ dir and point loader via DATA_DIR."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv("DATA_DIR", str(data))
    clear_config_cache()
    return data


@pytest.fixture(autouse=True)
def _reset_env_and_cache(monkeypatch):
    """Reset debug topics and config cache between tests."""
    monkeypatch.delenv("HEXCOLOR_DEBUG_TOPICS", raising=False)
    monkeypatch.delenv("HEXCOLOR_DATA_DIR", raising=False)
    LOG.reload_topics()
    clear_config_cache()
    yield
    LOG.reload_topics()
    clear_config_cache()


def _write_json(folder, name, payload):
    (folder / f"{name}.json").write_text(json.dumps(payload), encoding="utf-8")


# ──────────────────────────────────────────────────────────────────────────────
# load_config: modes
# ──────────────────────────────────────────────────────────────────────────────
def test_raw_mode_returns_parsed_json(tmp_data_dir):
    _write_json(tmp_data_dir, "pal", {"000000": "Black"})
    assert load_config("pal") == {"000000": "Black"}
    assert load_config("pal.json") == {"000000": "Black"}


def test_validated_dict_runs_validator(tmp_data_dir):
    _write_json(tmp_data_dir, "pal", {"a": "1"})
    out = load_config("pal", mode="validated_dict", validator=lambda d: {**d, "b": "2"})
    assert out == {"a": "1", "b": "2"}


def test_validated_dict_rejects_non_dict(tmp_data_dir):
    _write_json(tmp_data_dir, "lst", [1, 2])
    with pytest.raises(ConfigTypeError):
        load_config("lst", mode="validated_dict")


def test_validator_failure_is_parse_error(tmp_data_dir):
    _write_json(tmp_data_dir, "pal", {"a": 1})

    def _boom(_d):
        raise ValueError("nope")

    with pytest.raises(ConfigParseError, match="validator failed"):
        load_config("pal", mode="validated_dict", validator=_boom)


def test_unknown_mode(tmp_data_dir):
    _write_json(tmp_data_dir, "pal", {})
    with pytest.raises(ValueError, match="Unknown mode"):
        load_config("pal", mode="set")  # type: ignore[call-overload]


# ──────────────────────────────────────────────────────────────────────────────
# load_config: cache
# ──────────────────────────────────────────────────────────────────────────────
def test_cache_hit_returns_same_object(tmp_data_dir):
    _write_json(tmp_data_dir, "pal", {"x": "y"})
    first = load_config("pal")
    assert load_config("pal") is first
    clear_config_cache()
    assert load_config("pal") is not first


def test_cache_invalidated_on_mtime_change(tmp_data_dir):
    _write_json(tmp_data_dir, "pal", {"v": "1"})
    assert load_config("pal") == {"v": "1"}
    path = tmp_data_dir / "pal.json"
    _write_json(tmp_data_dir, "pal", {"v": "2"})
    st = path.stat()
    os.utime(path, (st.st_atime, st.st_mtime + 10))
    assert load_config("pal") == {"v": "2"}


def test_validator_results_not_cached(tmp_data_dir):
    _write_json(tmp_data_dir, "pal", {"x": "y"})
    a = load_config("pal", mode="validated_dict", validator=dict)
    b = load_config("pal", mode="validated_dict", validator=dict)
    assert a == b and a is not b


# ──────────────────────────────────────────────────────────────────────────────
# load_config: errors and data dir resolution
# ──────────────────────────────────────────────────────────────────────────────
def test_missing_file(tmp_data_dir):
    with pytest.raises(ConfigFileNotFound):
        load_config("does_not_exist")


def test_refuses_paths_outside_data_dir(tmp_data_dir):
    _write_json(tmp_data_dir.parent, "secret", {"k": "v"})
    with pytest.raises(ConfigFileNotFound, match="outside data dir"):
        load_config("../secret")


def test_invalid_json(tmp_data_dir):
    (tmp_data_dir / "broken.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config("broken")


def test_explicit_base_dir_beats_env(tmp_data_dir, tmp_path):
    other = tmp_path / "other"
    other.mkdir()
    _write_json(other, "pal", {"src": "explicit"})
    _write_json(tmp_data_dir, "pal", {"src": "env"})
    assert load_config("pal", base_dir=other) == {"src": "explicit"}


def test_hexcolor_data_dir_env(tmp_path, monkeypatch):
    monkeypatch.delenv("DATA_DIR", raising=False)
    monkeypatch.setenv("HEXCOLOR_DATA_DIR", str(tmp_path))
    _write_json(tmp_path, "pal", {"src": "hexcolor"})
    assert load_config("pal") == {"src": "hexcolor"}


def test_data_dir_not_found(tmp_path, monkeypatch):
    monkeypatch.delenv("DATA_DIR", raising=False)
    monkeypatch.setattr(LC, "_candidate_data_dirs", lambda start=None: [tmp_path / "nowhere"])
    with pytest.raises(DataDirNotFound):
        load_config("anything")


def test_default_data_dir_discovers_bundled_data(monkeypatch):
    monkeypatch.delenv("DATA_DIR", raising=False)
    found = LC._default_data_dir()
    assert (found / "basic.json").is_file()


def test_temp_data_dir_restores_env(tmp_path, monkeypatch):
    monkeypatch.setenv("DATA_DIR", "/original")
    _write_json(tmp_path, "pal", {"k": "v"})
    with temp_data_dir(tmp_path):
        assert os.environ["DATA_DIR"] == str(tmp_path)
        assert load_config("pal") == {"k": "v"}
    assert os.environ["DATA_DIR"] == "/original"


def test_json5_comments(tmp_data_dir):
    pytest.importorskip("json5")
    (tmp_data_dir / "commented.json").write_text(
        '{\n  // ink\n  "000000": "Ink",\n}\n', encoding="utf-8"
    )
    assert load_config("commented", allow_comments=True) == {"000000": "Ink"}
    with pytest.raises(ConfigParseError):
        load_config("commented")


# ──────────────────────────────────────────────────────────────────────────────
# Topic debug logger
# ──────────────────────────────────────────────────────────────────────────────
def test_debug_silent_without_topics():
    buf = io.StringIO()
    LOG.debug("hello", topic="resolver", stream=buf)
    assert buf.getvalue() == ""
    assert LOG.is_enabled("resolver") is False


def test_debug_prints_enabled_topic(monkeypatch):
    monkeypatch.setenv("HEXCOLOR_DEBUG_TOPICS", "palette, Resolver")
    LOG.reload_topics()
    buf = io.StringIO()
    LOG.debug("hello", topic="resolver", level="info", stream=buf)
    LOG.debug("skipped", topic="cli", stream=buf)
    out = buf.getvalue()
    assert "[resolver][INFO] hello" in out
    assert "skipped" not in out


def test_debug_all_topics(monkeypatch):
    monkeypatch.setenv("HEXCOLOR_DEBUG_TOPICS", "all")
    LOG.reload_topics()
    assert LOG.is_enabled("anything") is True
