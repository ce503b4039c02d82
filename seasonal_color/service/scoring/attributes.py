"""
服装颜色属性
============

从 Lab 推导服装的冷暖 (undertone)、深浅 (depth)、清浊 (clarity)，
并与用户画像做兼容性打分。优先级：冷暖 > 清浊 > 深浅。
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from seasonal_color.utils.color_space import Lab

_WARM_PARENTS = ("spring", "autumn")

# 用户冷暖 → 允许的服装冷暖（olive 对暖调用户友好）
_ALLOWED_UNDERTONES: dict[str, tuple[str, ...]] = {
    "warm": ("warm", "neutral", "olive"),
    "cool": ("cool", "neutral"),
    "neutral": ("warm", "cool", "neutral", "olive"),
}

_DEPTH_ORDER = {"light": 0, "medium": 1, "deep": 2}


def chroma(lab: Lab) -> float:
    return math.hypot(lab.a, lab.b)


def hue_angle(lab: Lab) -> float:
    """色相角（度），范围 [0, 360)。"""
    h = math.degrees(math.atan2(lab.b, lab.a))
    return h + 360.0 if h < 0 else h


def garment_undertone(lab: Lab) -> str:
    """返回 warm / cool / neutral / olive。"""
    c = chroma(lab)
    h = hue_angle(lab)

    # 无彩色：黑白灰
    if c < 10:
        return "neutral"

    # 橄榄/卡其/鼠尾草：偏黄带一点绿
    if lab.b > 8 and lab.a < 0 and abs(lab.a) <= 12:
        return "olive"
    if 90 <= h <= 140 and lab.b > 0:
        return "olive"

    if h <= 110 or h >= 320:
        return "warm"
    return "cool"


def garment_depth(lab: Lab) -> str:
    if lab.L > 70:
        return "light"
    if lab.L > 45:
        return "medium"
    return "deep"


def garment_clarity(lab: Lab) -> str:
    c = chroma(lab)
    if c < 20:
        return "muted"
    if c <= 30:
        return "medium"
    return "clear"


def expected_undertone(parent_season: str) -> str:
    return "warm" if parent_season in _WARM_PARENTS else "cool"


def is_undertone_allowed(garment: str, user: str) -> bool:
    allowed = _ALLOWED_UNDERTONES.get(user, ("warm", "cool", "neutral", "olive"))
    return garment in allowed


def is_true_undertone_conflict(garment: str, user: str) -> bool:
    """只有 暖(含 olive) ↔ 冷 才算真正冲突。"""
    if garment == "olive" and user == "warm":
        return False
    if garment == "neutral" or user == "neutral":
        return False
    garment_warm = garment in ("warm", "olive")
    garment_cool = garment == "cool"
    return (garment_warm and user == "cool") or (garment_cool and user == "warm")


@dataclass
class AttributeCompatibility:
    undertone_score: float
    clarity_score: float
    depth_score: float
    reasons: list[str] = field(default_factory=list)
    has_undertone_mismatch: bool = False
    has_clarity_mismatch: bool = False
    has_true_conflict: bool = False

    @property
    def score(self) -> float:
        return self.undertone_score + self.clarity_score + self.depth_score


def check_attribute_compatibility(
    g_undertone: str,
    g_depth: str,
    g_clarity: str,
    user_season: str,
    user_depth: str | None,
    user_clarity: str | None,
) -> AttributeCompatibility:
    reasons: list[str] = []
    expected = expected_undertone(user_season)

    # 冷暖
    mismatch = conflict = False
    if g_undertone == expected:
        u_score = 1.0
        reasons.append("undertone_match")
    elif g_undertone == "olive" and expected == "warm":
        u_score = 0.8
        reasons.append("undertone_olive_warm_compatible")
    elif g_undertone == "neutral":
        u_score = 0.5
        reasons.append("undertone_neutral")
    elif is_undertone_allowed(g_undertone, expected):
        u_score = 0.3
        reasons.append("undertone_compatible")
    elif is_true_undertone_conflict(g_undertone, expected):
        u_score = -2.0
        mismatch = conflict = True
        reasons.append("undertone_true_conflict")
    else:
        u_score = -0.5
        mismatch = True
        reasons.append("undertone_mismatch")

    # 清浊
    clarity = "clear" if user_clarity == "vivid" else user_clarity
    clarity_mismatch = False
    if g_clarity == clarity:
        c_score = 1.0
        reasons.append("clarity_match")
    elif (g_clarity == "medium" and clarity in ("muted", "clear")) or (
        clarity == "medium" and g_clarity in ("muted", "clear")
    ):
        c_score = 0.0
        reasons.append("clarity_adjacent")
    else:
        c_score = -1.5
        clarity_mismatch = True
        reasons.append("clarity_mismatch")

    # 深浅（用户深浅缺失时按 deep 处理）
    if g_depth == user_depth:
        d_score = 0.5
        reasons.append("depth_match")
    elif abs(_DEPTH_ORDER[g_depth] - _DEPTH_ORDER.get(user_depth or "deep", 2)) == 1:
        d_score = 0.25
        reasons.append("depth_adjacent")
    else:
        d_score = -1.0
        reasons.append("depth_mismatch")

    return AttributeCompatibility(
        undertone_score=u_score,
        clarity_score=c_score,
        depth_score=d_score,
        reasons=reasons,
        has_undertone_mismatch=mismatch,
        has_clarity_mismatch=clarity_mismatch,
        has_true_conflict=conflict,
    )
