"""细分季型判定验证"""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from seasonal_color.service.season.resolver import DEFAULT_MICRO_SEASONS, determine_micro_season
from seasonal_color.service.season.taxonomy import MICRO_TO_PARENT, parent_season_of


@pytest.mark.parametrize(
    "season, depth, clarity, undertone, expected",
    [
        # 春
        ("spring", "light", None, None, "light_spring"),
        ("spring", "light", "clear", None, "light_spring"),
        ("spring", "medium", "clear", None, "bright_spring"),
        ("spring", "medium", "vivid", None, "bright_spring"),
        ("spring", "deep", "muted", None, "warm_spring"),
        ("spring", None, "medium", "warm", "warm_spring"),
        # 夏
        ("summer", "light", None, None, "light_summer"),
        ("summer", "light", "muted", None, "light_summer"),
        ("summer", "medium", "muted", None, "soft_summer"),
        ("summer", "deep", "clear", None, "cool_summer"),
        # 秋：muted 先于 deep
        ("autumn", "deep", "muted", None, "soft_autumn"),
        ("autumn", "deep", "clear", None, "deep_autumn"),
        ("autumn", "medium", "medium", "warm", "warm_autumn"),
        ("autumn", "light", "clear", "cool", "warm_autumn"),
        # 冬：clear 先于 deep/cool
        ("winter", "deep", "clear", "cool", "bright_winter"),
        ("winter", "deep", "vivid", "cool", "bright_winter"),
        ("winter", None, "clear", None, "bright_winter"),
        ("winter", "deep", "medium", "cool", "deep_winter"),
        ("winter", "deep", "medium", "neutral", "cool_winter"),
        ("winter", "light", "muted", "cool", "cool_winter"),
    ],
)
def test_decision_table(season, depth, clarity, undertone, expected):
    assert determine_micro_season(season, depth, clarity, undertone) == expected


@pytest.mark.parametrize("season", ["spring", "summer", "autumn", "winter"])
def test_defaults_when_depth_and_clarity_missing(season):
    assert determine_micro_season(season) == DEFAULT_MICRO_SEASONS[season]
    # 只有冷暖也走默认
    assert determine_micro_season(season, undertone="cool") == DEFAULT_MICRO_SEASONS[season]


def test_result_belongs_to_parent():
    for season in ("spring", "summer", "autumn", "winter"):
        for depth in (None, "light", "medium", "deep"):
            for clarity in (None, "muted", "medium", "clear", "vivid"):
                for undertone in (None, "warm", "cool", "neutral"):
                    micro = determine_micro_season(season, depth, clarity, undertone)
                    assert MICRO_TO_PARENT[micro] == season


def test_vivid_does_not_mutate_caller():
    profile = {"depth": "medium", "clarity": "vivid", "undertone": "warm"}
    determine_micro_season("spring", **profile)
    assert profile["clarity"] == "vivid"


def test_unknown_parent_season():
    with pytest.raises(ValueError):
        determine_micro_season("monsoon", "light")


def test_parent_season_of():
    assert parent_season_of("soft_autumn") == "autumn"
    with pytest.raises(ValueError):
        parent_season_of("mid_summer")
