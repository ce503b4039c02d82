"""
季型色板注册表
==============

启动时把全部参考色 HEX 一次性预计算为 Lab，之后只读。

- 任何一个 HEX 非法 → PaletteConfigError（静态配置错误，启动即失败）
- 只提供读取接口，没有任何修改 API
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from seasonal_color.config.settings import get_settings
from seasonal_color.service.palette.palette_data import MICRO_SEASON_PALETTES
from seasonal_color.service.season.taxonomy import (
    COLOR_GROUPS,
    MICRO_SEASONS,
    PARENT_SEASONS,
    parent_season_of,
)
from seasonal_color.utils.color_space import Lab, hex_to_lab

logger = logging.getLogger(__name__)


class PaletteConfigError(ValueError):
    """色板静态数据错误（非法 HEX、未知季型或色组）。"""


# ==================== 数据结构 ====================

@dataclass(frozen=True)
class PaletteColor:
    name: str
    hex: str
    lab: Lab


@dataclass(frozen=True)
class SeasonPalette:
    neutrals: tuple[PaletteColor, ...] = ()
    accents: tuple[PaletteColor, ...] = ()
    brights: tuple[PaletteColor, ...] = ()
    softs: tuple[PaletteColor, ...] = ()

    def group(self, group: str) -> tuple[PaletteColor, ...]:
        if group not in COLOR_GROUPS:
            raise ValueError(f"未知色组: {group!r}")
        return getattr(self, group)

    def all_colors(self) -> list[PaletteColor]:
        return [color for group in COLOR_GROUPS for color in self.group(group)]


@dataclass(frozen=True)
class PaletteEntry:
    """分类器扫描用的 (细分季型, 色组, 参考色) 三元组。"""
    micro_season: str
    group: str
    color: PaletteColor


# ==================== 注册表 ====================

def _build_color(micro_season: str, group: str, item: Any) -> PaletteColor:
    if isinstance(item, Mapping):
        name, hex_str = item.get("name"), item.get("hex")
    else:
        try:
            name, hex_str = item
        except (TypeError, ValueError):
            raise PaletteConfigError(
                f"{micro_season}.{group} 中的条目格式错误: {item!r}"
            ) from None

    if not isinstance(name, str) or not name:
        raise PaletteConfigError(f"{micro_season}.{group} 中的条目缺少名称: {item!r}")

    lab = hex_to_lab(hex_str)
    if lab is None:
        raise PaletteConfigError(
            f"无法计算 Lab: {name} ({hex_str!r}) in {micro_season}.{group}"
        )
    return PaletteColor(name=name, hex=hex_str, lab=lab)


class PaletteRegistry:
    """细分季型色板注册表（构建后只读）"""

    def __init__(self, raw: Mapping[str, Mapping[str, Any]]) -> None:
        unknown = [key for key in raw if key not in MICRO_SEASONS]
        if unknown:
            raise PaletteConfigError(f"未知细分季型: {unknown}")

        palettes: dict[str, SeasonPalette] = {}
        entries: list[PaletteEntry] = []

        # 固定枚举顺序：细分季型 → 色组 → 数据中的顺序
        for micro_season in MICRO_SEASONS:
            if micro_season not in raw:
                continue
            groups = raw[micro_season]
            if not isinstance(groups, Mapping):
                raise PaletteConfigError(f"{micro_season} 必须是 色组 → 颜色列表 的映射")
            bad_groups = [g for g in groups if g not in COLOR_GROUPS]
            if bad_groups:
                raise PaletteConfigError(f"{micro_season} 中存在未知色组: {bad_groups}")

            built: dict[str, tuple[PaletteColor, ...]] = {}
            for group in COLOR_GROUPS:
                colors = tuple(
                    _build_color(micro_season, group, item)
                    for item in groups.get(group, ())
                )
                built[group] = colors
                entries.extend(PaletteEntry(micro_season, group, c) for c in colors)

            palettes[micro_season] = SeasonPalette(**built)

        self._palettes: Mapping[str, SeasonPalette] = MappingProxyType(palettes)
        self._entries: tuple[PaletteEntry, ...] = tuple(entries)

    # ---------- 构建 ----------

    @classmethod
    def builtin(cls) -> PaletteRegistry:
        return cls(MICRO_SEASON_PALETTES)

    @classmethod
    def from_json(cls, path: str | Path) -> PaletteRegistry:
        """从 JSON 文件构建（结构同 palette_data，多余的 lab 字段会被忽略）。"""
        path = Path(path)
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise PaletteConfigError(f"色板文件读取失败: {path}: {e}") from e
        if not isinstance(raw, dict):
            raise PaletteConfigError(f"色板文件顶层必须是对象: {path}")
        return cls(raw)

    # ---------- 读取 ----------

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def micro_seasons(self) -> tuple[str, ...]:
        return tuple(self._palettes)

    def get_micro_season_palette(self, micro_season: str) -> SeasonPalette | None:
        return self._palettes.get(micro_season)

    def get_micro_seasons_for_parent(self, parent_season: str) -> list[str]:
        if parent_season not in PARENT_SEASONS:
            raise ValueError(f"未知父季型: {parent_season!r}")
        return [m for m in self._palettes if parent_season_of(m) == parent_season]

    def entries(self) -> Iterator[PaletteEntry]:
        return iter(self._entries)

    def to_dict(self, include_lab: bool = False) -> dict[str, dict[str, list[dict]]]:
        """导出为 JSON 友好的结构（from_json 可直接读回）。"""
        out: dict[str, dict[str, list[dict]]] = {}
        for micro_season, palette in self._palettes.items():
            out[micro_season] = {}
            for group in COLOR_GROUPS:
                items = []
                for color in palette.group(group):
                    item: dict[str, Any] = {"name": color.name, "hex": color.hex}
                    if include_lab:
                        item["lab"] = {"L": color.lab.L, "a": color.lab.a, "b": color.lab.b}
                    items.append(item)
                out[micro_season][group] = items
        return out


@lru_cache
def get_palette_registry() -> PaletteRegistry:
    """
    获取进程级色板注册表（带缓存）

    配置了 PALETTE_FILE 时从 JSON 加载，否则使用内置色板。
    """
    palette_file = get_settings().PALETTE_FILE
    if palette_file:
        registry = PaletteRegistry.from_json(palette_file)
        source = str(palette_file)
    else:
        registry = PaletteRegistry.builtin()
        source = "builtin"

    logger.info(
        "【palette】色板注册表构建完成: source=%s, 细分季型=%d, 参考色=%d",
        source, len(registry.micro_seasons), len(registry),
    )
    return registry
