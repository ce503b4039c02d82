"""季型分类常量：4 个父季型、12 个细分季型、4 个色组。"""

from __future__ import annotations

PARENT_SEASONS: tuple[str, ...] = ("spring", "summer", "autumn", "winter")

# 固定枚举顺序，分类器按此顺序扫描色板（决定平局时的先到先得）
MICRO_SEASONS: tuple[str, ...] = (
    "light_spring", "warm_spring", "bright_spring",
    "soft_summer", "cool_summer", "light_summer",
    "deep_autumn", "soft_autumn", "warm_autumn",
    "bright_winter", "cool_winter", "deep_winter",
)

MICRO_TO_PARENT: dict[str, str] = {
    "light_spring": "spring",
    "warm_spring": "spring",
    "bright_spring": "spring",
    "soft_summer": "summer",
    "cool_summer": "summer",
    "light_summer": "summer",
    "deep_autumn": "autumn",
    "soft_autumn": "autumn",
    "warm_autumn": "autumn",
    "bright_winter": "winter",
    "cool_winter": "winter",
    "deep_winter": "winter",
}

# neutrals: 基础百搭色 / accents: 协调点缀色 / brights: 高饱和亮色 / softs: 低饱和柔和色
COLOR_GROUPS: tuple[str, ...] = ("neutrals", "accents", "brights", "softs")

DEPTHS: tuple[str, ...] = ("light", "medium", "deep")
CLARITIES: tuple[str, ...] = ("muted", "medium", "clear", "vivid")
UNDERTONES: tuple[str, ...] = ("warm", "cool", "neutral")


def parent_season_of(micro_season: str) -> str:
    """细分季型 → 父季型，未知季型抛 ValueError。"""
    try:
        return MICRO_TO_PARENT[micro_season]
    except KeyError:
        raise ValueError(f"未知细分季型: {micro_season!r}") from None
