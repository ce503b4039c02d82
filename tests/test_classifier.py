"""
服装颜色季型分类验证
====================

- 色板内的颜色都能精确命中自己
- 门控：unclassified / ambiguous / good / great
- 跨季型 secondary 标记
- 平局时按固定枚举顺序先到先得
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from seasonal_color.service.classification.classifier import (
    STATUS_AMBIGUOUS,
    STATUS_GOOD,
    STATUS_GREAT,
    STATUS_UNCLASSIFIED,
    UNCLASSIFIED_DELTA_E,
    classify_garment,
)
from seasonal_color.service.palette.registry import PaletteRegistry


@pytest.fixture(scope="module")
def registry():
    return PaletteRegistry.builtin()


# ==================== 内置色板 ====================

def test_every_palette_color_matches_itself(registry):
    for entry in registry.entries():
        result = classify_garment(entry.color.hex, registry)
        assert result.min_delta_e == pytest.approx(0.0, abs=1e-6), entry.color.name
        assert result.nearest_palette_color.hex.upper() == entry.color.hex.upper()
        assert result.classification_status != STATUS_UNCLASSIFIED


def test_true_white(registry):
    result = classify_garment("#FFFFFF", registry)
    assert result.nearest_palette_color.name == "True White"
    assert result.micro_season_tag == "cool_winter"
    assert result.season_tag == "winter"
    assert result.group_tag == "neutrals"
    assert result.min_delta_e < 1e-6
    assert result.classification_status in (STATUS_GREAT, STATUS_GOOD)


def test_black_is_ambiguous_but_tagged(registry):
    """True Black 与 Cool Black 相差很小：ambiguous，但主标签保留"""
    result = classify_garment("#000000", registry)
    assert result.classification_status == STATUS_AMBIGUOUS
    assert result.micro_season_tag == "deep_winter"
    assert result.season_tag == "winter"
    assert result.group_tag == "neutrals"
    assert result.nearest_palette_color.name == "True Black"
    # runner-up 同属冬季，不是跨季型
    assert result.secondary_micro_season_tag is None


def test_far_color_unclassified_with_diagnostics(registry):
    result = classify_garment("#00FF00", registry)
    assert result.classification_status == STATUS_UNCLASSIFIED
    assert result.micro_season_tag is None
    assert result.season_tag is None
    assert result.group_tag is None
    assert result.lab is not None
    assert result.nearest_palette_color is not None
    assert result.min_delta_e > UNCLASSIFIED_DELTA_E


@pytest.mark.parametrize("bad", ["not-a-color", "", "#12345", None])
def test_invalid_hex(bad, registry):
    result = classify_garment(bad, registry)
    assert result.classification_status == STATUS_UNCLASSIFIED
    assert result.dominant_hex == bad
    assert result.lab is None
    assert result.nearest_palette_color is None
    assert result.min_delta_e is None


def test_short_hex_accepted(registry):
    result = classify_garment("#fff", registry)
    assert result.dominant_hex == "#fff"
    assert result.nearest_palette_color.name == "True White"


def test_default_registry_used():
    result = classify_garment("#FFFFFF")
    assert result.nearest_palette_color.name == "True White"


# ==================== 自定义色板：门控 ====================

def test_empty_registry():
    result = classify_garment("#FFFFFF", PaletteRegistry({}))
    assert result.classification_status == STATUS_UNCLASSIFIED
    assert result.lab is not None
    assert result.nearest_palette_color is None


def test_single_entry_is_great():
    reg = PaletteRegistry({"cool_winter": {"neutrals": [("White", "#FFFFFF")]}})
    result = classify_garment("#FFFFFF", reg)
    assert result.classification_status == STATUS_GREAT
    assert result.secondary_micro_season_tag is None


def test_distant_runner_up_is_great():
    reg = PaletteRegistry({
        "light_spring": {"neutrals": [("White", "#FFFFFF")]},
        "deep_winter": {"neutrals": [("Black", "#000000")]},
    })
    result = classify_garment("#FFFFFF", reg)
    assert result.classification_status == STATUS_GREAT
    assert result.micro_season_tag == "light_spring"
    assert result.secondary_micro_season_tag is None
    assert result.secondary_delta_e is None


def test_gate_threshold():
    reg = PaletteRegistry({"deep_winter": {"neutrals": [("Black", "#000000")]}})
    result = classify_garment("#FFFFFF", reg)
    assert result.classification_status == STATUS_UNCLASSIFIED
    assert result.nearest_palette_color.name == "Black"
    assert result.min_delta_e > UNCLASSIFIED_DELTA_E


def test_good_with_crossover():
    """#808080 vs #888888 的 ΔE ≈ 2.95：gap 落在 [2, 4)"""
    reg = PaletteRegistry({
        "cool_summer": {"neutrals": [("Mid Gray", "#808080")]},
        "warm_autumn": {"neutrals": [("Light Gray", "#888888")]},
    })
    result = classify_garment("#808080", reg)
    assert result.classification_status == STATUS_GOOD
    assert result.micro_season_tag == "cool_summer"
    assert result.season_tag == "summer"
    assert result.secondary_micro_season_tag == "warm_autumn"
    assert result.secondary_season_tag == "autumn"
    assert result.secondary_group_tag == "neutrals"
    assert result.secondary_delta_e == pytest.approx(2.95, abs=0.05)


def test_ambiguous_crossover():
    reg = PaletteRegistry({
        "light_spring": {"accents": [("Peach A", "#FFB38A")]},
        "soft_autumn": {"softs": [("Peach B", "#FFB08A")]},
    })
    result = classify_garment("#FFB28A", reg)
    assert result.classification_status == STATUS_AMBIGUOUS
    assert result.micro_season_tag == "light_spring"
    assert result.group_tag == "accents"
    assert result.nearest_palette_color.name == "Peach A"
    assert result.secondary_micro_season_tag == "soft_autumn"
    assert result.secondary_season_tag == "autumn"
    assert result.secondary_group_tag == "softs"


def test_same_parent_runner_up_not_secondary():
    reg = PaletteRegistry({
        "cool_summer": {"neutrals": [("Mid Gray", "#808080")]},
        "light_summer": {"neutrals": [("Light Gray", "#888888")]},
    })
    result = classify_garment("#808080", reg)
    assert result.classification_status == STATUS_GOOD
    assert result.secondary_micro_season_tag is None
    assert result.secondary_season_tag is None


def test_runner_up_ignores_same_bucket():
    """同一 (细分季型, 色组) 内的近似色不算 runner-up"""
    reg = PaletteRegistry({
        "cool_summer": {"neutrals": [("Mid Gray", "#808080"), ("Near Gray", "#818181")]},
        "warm_autumn": {"neutrals": [("Light Gray", "#888888")]},
    })
    result = classify_garment("#808080", reg)
    assert result.classification_status == STATUS_GOOD
    assert result.secondary_micro_season_tag == "warm_autumn"


def test_tie_goes_to_first_in_fixed_order():
    reg = PaletteRegistry({
        "deep_winter": {"neutrals": [("Ink B", "#123456")]},
        "light_spring": {"neutrals": [("Ink A", "#123456")]},
    })
    result = classify_garment("#123456", reg)
    assert result.micro_season_tag == "light_spring"
    assert result.nearest_palette_color.name == "Ink A"
    assert result.classification_status == STATUS_AMBIGUOUS
    assert result.secondary_micro_season_tag == "deep_winter"
    assert result.secondary_delta_e == pytest.approx(0.0, abs=1e-9)


def test_result_is_frozen(registry):
    result = classify_garment("#FFFFFF", registry)
    with pytest.raises(AttributeError):
        result.classification_status = STATUS_GREAT
