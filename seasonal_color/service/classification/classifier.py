"""
服装颜色季型分类
================

算法：
1. 输入 HEX → Lab
2. 与色板中全部参考色计算 ΔE00，找出全局最近 best
3. runner-up：(细分季型, 色组) 与 best 不同的最近条目
4. 门控：
   - best.ΔE > 12 → unclassified（仍返回最近色与 ΔE 作为诊断信息）
   - runner-up.ΔE ≤ 10 且父季型不同 → 记录 secondary（跨季型色）
   - gap = runner-up.ΔE − best.ΔE：< 2 ambiguous，< 4 good，否则 great

阈值为经验调校值，移植或重构时不要改动。
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from seasonal_color.service.palette.registry import (
    PaletteEntry,
    PaletteRegistry,
    get_palette_registry,
)
from seasonal_color.service.season.taxonomy import parent_season_of
from seasonal_color.utils.color_space import Lab, hex_to_lab
from seasonal_color.utils.delta_e import delta_e

logger = logging.getLogger(__name__)

UNCLASSIFIED_DELTA_E = 12.0
CROSSOVER_DELTA_E = 10.0
AMBIGUOUS_GAP = 2.0
GREAT_GAP = 4.0

STATUS_GREAT = "great"
STATUS_GOOD = "good"
STATUS_AMBIGUOUS = "ambiguous"
STATUS_UNCLASSIFIED = "unclassified"


@dataclass(frozen=True)
class NearestColor:
    name: str
    hex: str


@dataclass(frozen=True)
class ClassificationResult:
    dominant_hex: str
    lab: Lab | None
    classification_status: str  # great / good / ambiguous / unclassified
    micro_season_tag: str | None = None
    season_tag: str | None = None
    group_tag: str | None = None
    nearest_palette_color: NearestColor | None = None
    min_delta_e: float | None = None
    secondary_micro_season_tag: str | None = None
    secondary_season_tag: str | None = None
    secondary_group_tag: str | None = None
    secondary_delta_e: float | None = None


@dataclass(frozen=True)
class _Match:
    entry: PaletteEntry
    delta_e: float


def _status_for_gap(gap: float) -> str:
    if gap < AMBIGUOUS_GAP:
        return STATUS_AMBIGUOUS
    if gap < GREAT_GAP:
        return STATUS_GOOD
    return STATUS_GREAT


def _find_best_and_runner_up(
    input_lab: Lab, registry: PaletteRegistry
) -> tuple[_Match | None, _Match | None]:
    """
    返回 (best, runner_up)

    先按 (细分季型, 色组) 取组内最小 ΔE，再在各组最小值之间选出前两名，
    因此 runner-up 一定来自与 best 不同的组。
    注意不要改回"单次扫描、新 best 出现时把旧 best 降为 runner-up"的写法：
    那种写法在同组条目先后出现时会把同组的颜色当作 runner-up，gap 被低估。
    """
    # dict 保持首次出现顺序
    bucket_best: dict[tuple[str, str], _Match] = {}
    for entry in registry.entries():
        de = delta_e(input_lab, entry.color.lab)
        key = (entry.micro_season, entry.group)
        current = bucket_best.get(key)
        if current is None or de < current.delta_e:
            bucket_best[key] = _Match(entry, de)

    best: _Match | None = None
    runner_up: _Match | None = None
    # 严格小于：平局时先出现的保留
    for match in bucket_best.values():
        if best is None or match.delta_e < best.delta_e:
            runner_up = best
            best = match
        elif runner_up is None or match.delta_e < runner_up.delta_e:
            runner_up = match
    return best, runner_up


def classify_garment(hex_str: str, registry: PaletteRegistry | None = None) -> ClassificationResult:
    """将服装主色分类到细分季型 + 色组，非法输入以 unclassified 表示，不抛异常。"""
    input_lab = hex_to_lab(hex_str)
    if input_lab is None:
        logger.debug("【classify_garment】无法解析颜色: %r", hex_str)
        return ClassificationResult(
            dominant_hex=hex_str,
            lab=None,
            classification_status=STATUS_UNCLASSIFIED,
        )

    if registry is None:
        registry = get_palette_registry()

    best, runner_up = _find_best_and_runner_up(input_lab, registry)

    if best is None:
        logger.warning("【classify_garment】色板为空，无法分类: %s", hex_str)
        return ClassificationResult(
            dominant_hex=hex_str,
            lab=input_lab,
            classification_status=STATUS_UNCLASSIFIED,
        )

    nearest = NearestColor(name=best.entry.color.name, hex=best.entry.color.hex)

    # Gate 1: 离所有参考色都太远
    if best.delta_e > UNCLASSIFIED_DELTA_E:
        logger.debug(
            "【classify_garment】%s 超出门限: 最近 %s ΔE=%.2f",
            hex_str, nearest.name, best.delta_e,
        )
        return ClassificationResult(
            dominant_hex=hex_str,
            lab=input_lab,
            classification_status=STATUS_UNCLASSIFIED,
            nearest_palette_color=nearest,
            min_delta_e=best.delta_e,
        )

    primary_parent = parent_season_of(best.entry.micro_season)

    secondary: _Match | None = None
    if (
        runner_up is not None
        and runner_up.delta_e <= CROSSOVER_DELTA_E
        and parent_season_of(runner_up.entry.micro_season) != primary_parent
    ):
        secondary = runner_up

    gap = runner_up.delta_e - best.delta_e if runner_up is not None else math.inf
    status = _status_for_gap(gap)

    logger.debug(
        "【classify_garment】%s → %s/%s (%s) ΔE=%.2f gap=%.2f status=%s",
        hex_str, best.entry.micro_season, best.entry.group, nearest.name,
        best.delta_e, gap, status,
    )

    return ClassificationResult(
        dominant_hex=hex_str,
        lab=input_lab,
        classification_status=status,
        micro_season_tag=best.entry.micro_season,
        season_tag=primary_parent,
        group_tag=best.entry.group,
        nearest_palette_color=nearest,
        min_delta_e=best.delta_e,
        secondary_micro_season_tag=secondary.entry.micro_season if secondary else None,
        secondary_season_tag=parent_season_of(secondary.entry.micro_season) if secondary else None,
        secondary_group_tag=secondary.entry.group if secondary else None,
        secondary_delta_e=secondary.delta_e if secondary else None,
    )
