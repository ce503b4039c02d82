"""
色板注册表验证
==============

- 内置色板：12 细分季型 × 4 色组 × 5 参考色
- 构建期校验：非法 HEX / 未知季型 / 未知色组 → PaletteConfigError
- 只读：数据结构不可修改
- JSON 导出与加载
"""

import dataclasses
import json
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from seasonal_color.service.palette.registry import (
    PaletteConfigError,
    PaletteRegistry,
    get_palette_registry,
)
from seasonal_color.service.season.taxonomy import COLOR_GROUPS, MICRO_SEASONS


@pytest.fixture(scope="module")
def registry():
    return PaletteRegistry.builtin()


# ==================== 内置色板 ====================

def test_builtin_size(registry):
    assert len(registry) == 12 * 4 * 5
    assert registry.micro_seasons == MICRO_SEASONS


def test_every_group_populated(registry):
    for micro_season in MICRO_SEASONS:
        palette = registry.get_micro_season_palette(micro_season)
        assert palette is not None
        for group in COLOR_GROUPS:
            assert len(palette.group(group)) == 5, f"{micro_season}.{group}"


def test_lab_precomputed(registry):
    white = registry.get_micro_season_palette("cool_winter").neutrals[0]
    assert white.name == "True White"
    assert white.lab.L == pytest.approx(100.0, abs=1e-3)


def test_entries_follow_fixed_order(registry):
    seen = []
    for entry in registry.entries():
        if not seen or seen[-1] != entry.micro_season:
            seen.append(entry.micro_season)
    assert tuple(seen) == MICRO_SEASONS


def test_unknown_micro_season_returns_none(registry):
    assert registry.get_micro_season_palette("mid_summer") is None


def test_micro_seasons_for_parent(registry):
    assert registry.get_micro_seasons_for_parent("winter") == [
        "bright_winter", "cool_winter", "deep_winter",
    ]
    assert registry.get_micro_seasons_for_parent("spring") == [
        "light_spring", "warm_spring", "bright_spring",
    ]
    with pytest.raises(ValueError):
        registry.get_micro_seasons_for_parent("monsoon")


def test_unknown_group_raises(registry):
    palette = registry.get_micro_season_palette("light_spring")
    with pytest.raises(ValueError):
        palette.group("pastels")


def test_read_only(registry):
    palette = registry.get_micro_season_palette("light_spring")
    with pytest.raises(dataclasses.FrozenInstanceError):
        palette.neutrals = ()
    with pytest.raises(dataclasses.FrozenInstanceError):
        palette.neutrals[0].hex = "#000000"
    assert isinstance(palette.neutrals, tuple)


def test_process_registry_cached():
    assert get_palette_registry() is get_palette_registry()


# ==================== 构建期校验 ====================

def test_bad_hex_fails_build():
    with pytest.raises(PaletteConfigError, match="Broken"):
        PaletteRegistry({"light_spring": {"neutrals": [("Broken", "#GG0000")]}})


def test_unknown_micro_season_fails_build():
    with pytest.raises(PaletteConfigError):
        PaletteRegistry({"mid_summer": {"neutrals": [("White", "#FFFFFF")]}})


def test_unknown_group_fails_build():
    with pytest.raises(PaletteConfigError):
        PaletteRegistry({"light_spring": {"pastels": [("White", "#FFFFFF")]}})


def test_malformed_entry_fails_build():
    with pytest.raises(PaletteConfigError):
        PaletteRegistry({"light_spring": {"neutrals": ["#FFFFFF"]}})
    with pytest.raises(PaletteConfigError):
        PaletteRegistry({"light_spring": {"neutrals": [{"hex": "#FFFFFF"}]}})
    with pytest.raises(PaletteConfigError):
        PaletteRegistry({"light_spring": ["#FFFFFF"]})


def test_missing_groups_are_empty():
    reg = PaletteRegistry({"deep_winter": {"neutrals": [{"name": "Black", "hex": "#000000"}]}})
    assert len(reg) == 1
    assert reg.micro_seasons == ("deep_winter",)
    palette = reg.get_micro_season_palette("deep_winter")
    assert palette.accents == ()
    assert [c.name for c in palette.all_colors()] == ["Black"]


def test_is_value_error():
    assert issubclass(PaletteConfigError, ValueError)


# ==================== JSON ====================

def test_json_round_trip(registry, tmp_path):
    path = tmp_path / "palette.json"
    path.write_text(json.dumps(registry.to_dict(include_lab=True)), encoding="utf-8")

    loaded = PaletteRegistry.from_json(path)
    assert len(loaded) == len(registry)
    assert [(e.micro_season, e.group, e.color.hex) for e in loaded.entries()] == [
        (e.micro_season, e.group, e.color.hex) for e in registry.entries()
    ]


def test_to_dict_lab_optional(registry):
    plain = registry.to_dict()
    item = plain["cool_winter"]["neutrals"][0]
    assert item == {"name": "True White", "hex": "#FFFFFF"}

    with_lab = registry.to_dict(include_lab=True)
    assert set(with_lab["cool_winter"]["neutrals"][0]["lab"]) == {"L", "a", "b"}


def test_from_json_errors(tmp_path):
    with pytest.raises(PaletteConfigError):
        PaletteRegistry.from_json(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(PaletteConfigError):
        PaletteRegistry.from_json(broken)

    listing = tmp_path / "list.json"
    listing.write_text("[]", encoding="utf-8")
    with pytest.raises(PaletteConfigError):
        PaletteRegistry.from_json(listing)
