"""
细分季型判定
============

根据用户的 {父季型, 深浅, 清浊, 冷暖} 画像确定 12 个细分季型之一。
每个父季型的判定分支有优先级顺序，顺序不可交换。
"""

from __future__ import annotations

import logging

from seasonal_color.service.season.taxonomy import PARENT_SEASONS

logger = logging.getLogger(__name__)

# 深浅、清浊都缺失时的默认细分季型
DEFAULT_MICRO_SEASONS: dict[str, str] = {
    "spring": "warm_spring",
    "summer": "cool_summer",
    "autumn": "warm_autumn",
    "winter": "cool_winter",
}


def _resolve_spring(depth: str | None, clarity: str | None, undertone: str | None) -> str:
    if depth == "light":
        return "light_spring"
    if clarity == "clear":
        return "bright_spring"
    return "warm_spring"


def _resolve_summer(depth: str | None, clarity: str | None, undertone: str | None) -> str:
    if depth == "light":
        return "light_summer"
    if clarity == "muted":
        return "soft_summer"
    return "cool_summer"


def _resolve_autumn(depth: str | None, clarity: str | None, undertone: str | None) -> str:
    # 秋季：muted 先于 deep 判定
    if clarity == "muted":
        return "soft_autumn"
    if depth == "deep":
        return "deep_autumn"
    if undertone == "warm" and clarity == "medium":
        return "warm_autumn"
    return "warm_autumn"


def _resolve_winter(depth: str | None, clarity: str | None, undertone: str | None) -> str:
    # 冬季：clear 先于 deep/cool 判定
    if clarity == "clear":
        return "bright_winter"
    if undertone == "cool" and depth == "deep":
        return "deep_winter"
    return "cool_winter"


_RESOLVERS = {
    "spring": _resolve_spring,
    "summer": _resolve_summer,
    "autumn": _resolve_autumn,
    "winter": _resolve_winter,
}


def determine_micro_season(
    parent_season: str,
    depth: str | None = None,
    clarity: str | None = None,
    undertone: str | None = None,
) -> str:
    """父季型 + 画像属性 → 细分季型（纯函数，不修改调用方数据）。"""
    if parent_season not in PARENT_SEASONS:
        raise ValueError(f"未知父季型: {parent_season!r}")

    # vivid 仅在本次判定中视为 clear
    if clarity == "vivid":
        clarity = "clear"

    if depth is None and clarity is None:
        micro_season = DEFAULT_MICRO_SEASONS[parent_season]
    else:
        micro_season = _RESOLVERS[parent_season](depth, clarity, undertone)

    logger.debug(
        "【determine_micro_season】%s depth=%s clarity=%s undertone=%s → %s",
        parent_season, depth, clarity, undertone, micro_season,
    )
    return micro_season
