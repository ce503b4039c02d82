"""
用户画像配色评分
================

与 classify_garment 的全局分类不同，这里只针对某个用户：
在其父季型下的全部细分季型色板中找最近参考色，再结合冷暖/清浊做封顶修正。

评分流程：
1. 基础评级只看 ΔE（深色 L < 40 放宽阈值）
2. 冷暖真冲突 → risky（硬失败）
3. 清浊封顶：muted 用户 + 鲜艳服装、clear 用户 + 浑浊服装
4. ΔE ≤ 4.5 且冷暖允许 → 至少 good
5. 冷暖允许且 ΔE 在 ok 阈值内 → 不低于 ok
6. 按评级和原因生成总结 + 三条要点
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from seasonal_color.service.palette.registry import (
    PaletteColor,
    PaletteRegistry,
    get_palette_registry,
)
from seasonal_color.service.scoring.attributes import (
    AttributeCompatibility,
    check_attribute_compatibility,
    chroma,
    expected_undertone,
    garment_clarity,
    garment_depth,
    garment_undertone,
    hue_angle,
    is_undertone_allowed,
)
from seasonal_color.service.scoring.explanation import (
    ExplanationBullet,
    build_explanation,
    insufficient,
)
from seasonal_color.service.season.resolver import determine_micro_season
from seasonal_color.service.season.taxonomy import COLOR_GROUPS
from seasonal_color.utils.color_space import hex_to_lab
from seasonal_color.utils.delta_e import delta_e

logger = logging.getLogger(__name__)

RATING_GREAT = "great"
RATING_GOOD = "good"
RATING_OK = "ok"
RATING_RISKY = "risky"
RATING_INSUFFICIENT = "insufficient_data"

STANDARD_THRESHOLDS = {"great": 6.0, "good": 12.0, "ok": 22.0}
DEEP_THRESHOLDS = {"great": 8.0, "good": 16.0, "ok": 30.0}
_DEEP_L = 40.0
_PALETTE_MATCH_DELTA_E = 4.5

_VIVID_LEVELS = ("vivid", "very_vivid", "neon")


@dataclass
class GarmentAttributes:
    undertone: str
    depth: str
    clarity: str
    chroma: float
    hue_angle: float


@dataclass
class RatingDecision:
    """封顶修正后的评级，以及生成文案需要的上下文"""
    rating: str
    caps_applied: list[str] = field(default_factory=list)
    clarity_cap: str | None = None
    vivid_warning: bool = False


@dataclass
class ColorScore:
    rating: str
    summary: str
    bullets: tuple[ExplanationBullet, ...] = ()
    base_rating: str | None = None
    delta_e: float | None = None
    micro_season: str | None = None
    best_micro_season: str | None = None
    closest_color: PaletteColor | None = None
    closest_group: str | None = None
    delta_e_by_micro_season: dict[str, float] = field(default_factory=dict)
    garment_attributes: GarmentAttributes | None = None
    compatibility: AttributeCompatibility | None = None
    chroma_level: str | None = None
    caps_applied: list[str] = field(default_factory=list)


def _chroma_level(c: float) -> str:
    if c >= 70:
        return "neon"
    if c >= 55:
        return "very_vivid"
    if c >= 45:
        return "vivid"
    if c >= 30:
        return "mild"
    return "soft"


def _base_rating(min_de: float, thresholds: dict[str, float]) -> str:
    if min_de <= thresholds["great"]:
        return RATING_GREAT
    if min_de <= thresholds["good"]:
        return RATING_GOOD
    if min_de <= thresholds["ok"]:
        return RATING_OK
    return RATING_RISKY


def apply_rating_caps(
    base_rating: str,
    min_de: float,
    thresholds: dict[str, float],
    *,
    has_true_conflict: bool = False,
    too_vivid: bool = False,
    too_soft: bool = False,
    chroma_level: str = "soft",
    near_face: bool = True,
    undertone_allowed: bool = True,
) -> RatingDecision:
    """
    在基础评级上依次执行：冷暖硬失败 → 清浊封顶 → 色板匹配提升 → 冷暖保护

    规则之间只通过当前评级衔接，与基础评级如何得出无关。
    """
    decision = RatingDecision(rating=base_rating)
    caps = decision.caps_applied

    if has_true_conflict:
        decision.rating = RATING_RISKY
        caps.append("undertone_hard_fail")
        return decision

    neon_near_face = chroma_level == "neon" and near_face

    if too_vivid:
        if neon_near_face:
            if decision.rating in (RATING_GREAT, RATING_GOOD):
                decision.rating = RATING_OK
                decision.clarity_cap = RATING_OK
                caps.append("neon_nearface_cap_ok")
            decision.vivid_warning = True
        elif chroma_level in ("very_vivid", "vivid") and near_face:
            if decision.rating == RATING_GREAT:
                decision.rating = RATING_GOOD
                decision.clarity_cap = RATING_GOOD
                caps.append("vivid_nearface_cap_good")
            decision.vivid_warning = True
        elif decision.rating == RATING_GREAT:
            decision.rating = RATING_GOOD
            decision.clarity_cap = RATING_GOOD
            caps.append("clarity_mismatch_cap_good")
            decision.vivid_warning = chroma_level in _VIVID_LEVELS
        elif chroma_level in _VIVID_LEVELS:
            decision.vivid_warning = True

    if too_soft and decision.rating == RATING_GREAT:
        decision.rating = RATING_GOOD
        decision.clarity_cap = RATING_GOOD
        caps.append("too_soft_cap_good")

    if (
        undertone_allowed
        and min_de <= _PALETTE_MATCH_DELTA_E
        and decision.rating in (RATING_OK, RATING_RISKY)
        and not neon_near_face
    ):
        decision.rating = RATING_GOOD
        caps.append("palette_match_upgrade_good")

    if undertone_allowed and decision.rating == RATING_RISKY and min_de <= thresholds["ok"]:
        decision.rating = RATING_OK
        caps.append("undertone_protection_ok")

    return decision


def compute_color_score(
    garment_hex: str,
    parent_season: str,
    depth: str | None = None,
    clarity: str | None = None,
    micro_season: str | None = None,
    undertone: str | None = None,
    near_face: bool = True,
    registry: PaletteRegistry | None = None,
) -> ColorScore:
    """计算某件服装颜色对用户的适配评级。"""
    garment_lab = hex_to_lab(garment_hex)
    if garment_lab is None:
        logger.debug("【color_score】无法解析颜色: %r", garment_hex)
        explanation = insufficient("Could not analyze color", f"Invalid color hex code: {garment_hex}")
        return ColorScore(
            rating=RATING_INSUFFICIENT,
            summary=explanation.summary,
            bullets=explanation.bullets,
        )

    if registry is None:
        registry = get_palette_registry()

    user_undertone = undertone or expected_undertone(parent_season)
    if micro_season is None:
        micro_season = determine_micro_season(parent_season, depth, clarity, user_undertone)

    # 同一父季型下的所有细分季型都参与比较
    by_micro: dict[str, float] = {}
    min_de = math.inf
    closest_color: PaletteColor | None = None
    closest_group: str | None = None
    best_micro: str | None = None
    for sub_season in registry.get_micro_seasons_for_parent(parent_season):
        palette = registry.get_micro_season_palette(sub_season)
        sub_min = math.inf
        for group in COLOR_GROUPS:
            for color in palette.group(group):
                de = delta_e(garment_lab, color.lab)
                sub_min = min(sub_min, de)
                if de < min_de:
                    min_de, closest_color, closest_group, best_micro = de, color, group, sub_season
        by_micro[sub_season] = sub_min

    if closest_color is None:
        logger.warning("【color_score】%s 没有可比较的参考色", parent_season)
        explanation = insufficient(
            "Could not determine color palette", "No palette colors available for comparison"
        )
        return ColorScore(
            rating=RATING_INSUFFICIENT,
            summary=explanation.summary,
            bullets=explanation.bullets,
            micro_season=micro_season,
        )

    g_undertone = garment_undertone(garment_lab)
    g_depth = garment_depth(garment_lab)
    g_clarity = garment_clarity(garment_lab)
    g_chroma = chroma(garment_lab)
    attrs = GarmentAttributes(
        undertone=g_undertone,
        depth=g_depth,
        clarity=g_clarity,
        chroma=round(g_chroma, 2),
        hue_angle=round(hue_angle(garment_lab), 1),
    )
    compat = check_attribute_compatibility(
        g_undertone, g_depth, g_clarity, parent_season, depth, clarity
    )

    thresholds = DEEP_THRESHOLDS if garment_lab.L < _DEEP_L else STANDARD_THRESHOLDS
    base = _base_rating(min_de, thresholds)

    user_clarity = "clear" if clarity == "vivid" else clarity
    level = _chroma_level(g_chroma)
    garment_vivid = g_clarity == "clear" or g_chroma >= 45
    garment_muted = g_clarity == "muted" or g_chroma < 20
    too_vivid = user_clarity == "muted" and garment_vivid
    too_soft = user_clarity == "clear" and garment_muted

    decision = apply_rating_caps(
        base,
        min_de,
        thresholds,
        has_true_conflict=compat.has_true_conflict,
        too_vivid=too_vivid,
        too_soft=too_soft,
        chroma_level=level,
        near_face=near_face,
        undertone_allowed=is_undertone_allowed(g_undertone, user_undertone),
    )
    explanation = build_explanation(
        decision.rating,
        parent_season,
        compat=compat,
        chroma_level=level,
        too_vivid=too_vivid,
        too_soft=too_soft,
        vivid_warning=decision.vivid_warning,
        clarity_cap=decision.clarity_cap,
    )

    logger.debug(
        "【color_score】%s → %s (base=%s, ΔE=%.2f, %s/%s, caps=%s)",
        garment_hex, decision.rating, base, min_de, best_micro, closest_group,
        decision.caps_applied,
    )

    return ColorScore(
        rating=decision.rating,
        summary=explanation.summary,
        bullets=explanation.bullets,
        base_rating=base,
        delta_e=min_de,
        micro_season=micro_season,
        best_micro_season=best_micro,
        closest_color=closest_color,
        closest_group=closest_group,
        delta_e_by_micro_season=by_micro,
        garment_attributes=attrs,
        compatibility=compat,
        chroma_level=level,
        caps_applied=decision.caps_applied,
    )


def passes_suggested_filter(
    garment_hex: str,
    parent_season: str,
    depth: str | None = None,
    clarity: str | None = None,
    micro_season: str | None = None,
) -> bool:
    """推荐商品只保留 great / good。"""
    score = compute_color_score(garment_hex, parent_season, depth, clarity, micro_season)
    return score.rating in (RATING_GREAT, RATING_GOOD)
