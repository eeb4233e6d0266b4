"""Tests for config persistence."""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from quick_sort_studio import config


def test_load_defaults_when_missing(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(config, "get_config_dir", lambda: tmp_path)
    assert config.load_config() == config.AppConfig()


def test_load_defaults_when_corrupt(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(config, "get_config_dir", lambda: tmp_path)
    (tmp_path / "config.json").write_text("{not-json", encoding="utf-8")
    assert config.load_config() == config.AppConfig()


def test_load_defaults_when_not_a_mapping(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(config, "get_config_dir", lambda: tmp_path)
    (tmp_path / "config.json").write_text("[1, 2]", encoding="utf-8")
    assert config.load_config() == config.AppConfig()


def test_save_load_round_trip(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(config, "get_config_dir", lambda: tmp_path)
    original = config.AppConfig(
        array_size=20, speed=300, min_value=1, max_value=50, locale="en"
    )
    config.save_config(original)
    assert config.load_config() == original


def test_save_config_atomic_write(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(config, "get_config_dir", lambda: tmp_path)
    replaced: list[tuple[Path, Path]] = []

    def fake_replace(src: Path, dest: Path) -> None:
        replaced.append((src, dest))
        data = json.loads(src.read_text(encoding="utf-8"))
        assert data["speed"] == 700
        dest.write_text(json.dumps(data), encoding="utf-8")

    monkeypatch.setattr(config.os, "replace", fake_replace)
    config.save_config(config.AppConfig())
    src, dest = replaced[0]
    assert src.suffix == ".tmp"
    assert dest.name == "config.json"


def test_config_from_mapping_sanitizes_values() -> None:
    cfg = config._config_from_mapping(
        {
            "array_size": "big",
            "speed": 5000,
            "min_value": True,
            "max_value": 0,
            "locale": "xx",
        }
    )
    assert cfg.array_size == 12
    assert cfg.speed == 980
    assert cfg.min_value == 15
    assert cfg.max_value == 94
    assert cfg.locale == "ja"


@pytest.mark.parametrize("locale", [["en"], {"name": "en"}, 3, None])
def test_load_config_ignores_non_string_locale(
    monkeypatch, tmp_path: Path, locale: object
) -> None:
    monkeypatch.setattr(config, "get_config_dir", lambda: tmp_path)
    (tmp_path / "config.json").write_text(
        json.dumps({"locale": locale, "speed": 300}), encoding="utf-8"
    )
    cfg = config.load_config()
    assert cfg.locale == "ja"
    assert cfg.speed == 300


def test_config_from_mapping_clamps_size_and_speed() -> None:
    cfg = config._config_from_mapping({"array_size": 500, "speed": 3})
    assert cfg.array_size == config.MAX_ARRAY_SIZE
    assert cfg.speed == 100


def test_inverted_value_range_resets_both_bounds() -> None:
    cfg = config._config_from_mapping({"min_value": 80, "max_value": 20})
    assert (cfg.min_value, cfg.max_value) == (15, 94)


@pytest.mark.skipif(os.name != "posix", reason="XDG layout is POSIX only")
def test_get_config_dir_uses_xdg(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(config, "_is_macos", lambda: False)
    xdg = tmp_path / "xdg"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg))
    path = config.get_config_dir("studio")
    assert path == xdg / "studio"
    assert path.is_dir()
