"""
评分说明文案
============

按评级和评级原因生成一句总结 + 三条要点：
1. 对脸部的影响（正文）
2. 问题所在（小字注释）
3. 穿搭建议（小字注释）

同一个评级可能有不同原因（冷暖冲突、过于鲜艳、过于柔和），文案随原因变化。
"""

from __future__ import annotations

from dataclasses import dataclass

from seasonal_color.service.scoring.attributes import AttributeCompatibility


@dataclass(frozen=True)
class ExplanationBullet:
    text: str
    is_micronote: bool = False


@dataclass(frozen=True)
class Explanation:
    summary: str
    bullets: tuple[ExplanationBullet, ...]


def _bullets(main: str, note1: str, note2: str) -> tuple[ExplanationBullet, ...]:
    return (
        ExplanationBullet(main),
        ExplanationBullet(note1, is_micronote=True),
        ExplanationBullet(note2, is_micronote=True),
    )


def insufficient(summary: str, reason: str) -> Explanation:
    """无法评分时的说明（只有一条正文）"""
    return Explanation(summary=summary, bullets=(ExplanationBullet(reason),))


def _great() -> Explanation:
    return Explanation(
        summary="This color matches your undertone and clarity very well.",
        bullets=_bullets(
            "It brightens your features and blends naturally with your own coloring.",
            "The warmth and softness align with your natural coloring, "
            "so it won't create shadows or wash you out.",
            "Especially flattering near your face, perfect for tops, scarves, or accessories.",
        ),
    )


def _good(too_vivid: bool, too_soft: bool, vivid_warning: bool) -> Explanation:
    if vivid_warning and too_vivid:
        return Explanation(
            summary="This color works for you, but it's bold.",
            bullets=_bullets(
                "The saturation is higher than your natural coloring prefers.",
                "Works well as a statement piece or in small doses.",
                "Balance with softer colors in your palette near the face, or use as an accent.",
            ),
        )
    if too_soft:
        return Explanation(
            summary="This color is close to your palette but softer than ideal.",
            bullets=_bullets(
                "It may look slightly muted against your vibrant coloring.",
                "You'll still look good wearing it.",
                "Add brighter accessories or makeup to maintain your natural vibrancy.",
            ),
        )
    return Explanation(
        summary="This color is close to your palette.",
        bullets=_bullets(
            "It works well overall, but is slightly off in clarity or depth.",
            "You'll still look good wearing it near the face.",
            "Works best as a top with a neckline opening "
            "or layered with a color that matches your season.",
        ),
    )


_INTENSITY = {"neon": "very intense", "very_vivid": "quite saturated"}


def _ok(too_vivid: bool, too_soft: bool, clarity_cap: str | None, chroma_level: str) -> Explanation:
    if clarity_cap and too_vivid:
        intensity = _INTENSITY.get(chroma_level, "bold")
        return Explanation(
            summary=f"This color is {intensity} for your muted coloring.",
            bullets=_bullets(
                "High saturation can overpower your natural softness.",
                "May create visual competition near your face.",
                "Best worn away from the face (pants, skirt, bag) or as a small accent.",
            ),
        )
    if too_soft:
        return Explanation(
            summary="This color may look washed out on you.",
            bullets=_bullets(
                "The muted tone doesn't match your natural vibrancy.",
                "Can make you look less energetic or vibrant.",
                "Best for layering under brighter pieces or worn away from the face.",
            ),
        )
    return Explanation(
        summary="Not a perfect match, but wearable.",
        bullets=_bullets(
            "It may create mild shadowing or reduce brightness.",
            "Better with styling: open neckline, layers, makeup, accessories.",
            "Best worn away from the face (pants, skirt) or layered with a color from your palette.",
        ),
    )


def _risky(
    parent_season: str,
    compat: AttributeCompatibility | None,
    too_vivid: bool,
    chroma_level: str,
) -> Explanation:
    true_conflict = compat is not None and compat.has_true_conflict
    neon_for_muted = too_vivid and chroma_level == "neon"

    if true_conflict:
        tone = "warm" if parent_season in ("spring", "autumn") else "cool"
        issue = f"conflicts strongly with your {tone} undertone"
        bullets = _bullets(
            "The undertone clashes strongly with your skin's natural coloring.",
            "The undertone mismatch can make skin look tired, grey, or sallow.",
            "Best avoided near the face. If wearing, keep it far from your face (pants, skirt, shoes).",
        )
    elif neon_for_muted:
        issue = "is too intense for your muted coloring"
        bullets = _bullets(
            "This intensity level can overpower your natural softness.",
            "Very saturated colors can make you look washed out or create visual competition.",
            "Best as a small accent only. Avoid wearing it as a top or near your face.",
        )
    else:
        issue = (
            "conflicts with your clarity"
            if compat is not None and compat.has_clarity_mismatch
            else "is far from your palette"
        )
        bullets = _bullets(
            "It may create dullness, greyness, or heavy contrast near the face.",
            "The mismatch can emphasize shadows and reduce brightness.",
            "If you still want to wear it, use it away from the face "
            "or add a layer in your season's colors near your face.",
        )
    return Explanation(summary=f"This color {issue}.", bullets=bullets)


def build_explanation(
    rating: str,
    parent_season: str,
    compat: AttributeCompatibility | None = None,
    chroma_level: str = "soft",
    too_vivid: bool = False,
    too_soft: bool = False,
    vivid_warning: bool = False,
    clarity_cap: str | None = None,
) -> Explanation:
    """按评级 + 原因选择文案"""
    if rating == "great":
        return _great()
    if rating == "good":
        return _good(too_vivid, too_soft, vivid_warning)
    if rating == "ok":
        return _ok(too_vivid, too_soft, clarity_cap, chroma_level)
    return _risky(parent_season, compat, too_vivid, chroma_level)
