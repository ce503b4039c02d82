"""
颜色空间转换模块
================

将设备颜色（HEX / sRGB）转换为感知均匀的 CIE Lab，
供 ΔE 距离计算与季型色板匹配使用。

算法：HEX → sRGB → linear RGB → XYZ(D65, 0~100) → CIE Lab。

非法 HEX 一律返回 None，从不抛异常（用户输入的正常降级路径）。
"""

from __future__ import annotations

import re
from dataclasses import dataclass


# ==================== 数据结构 ====================

@dataclass(frozen=True)
class RGB:
    r: int
    g: int
    b: int


@dataclass(frozen=True)
class XYZ:
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class Lab:
    L: float
    a: float
    b: float


_HEX6_RE = re.compile(r"[0-9a-fA-F]{6}")


# ==================== HEX 解析 ====================

def hex_to_rgb(hex_str: str) -> RGB | None:
    """解析 '#RRGGBB' / '#RGB'（大小写不敏感，'#' 可省略），失败返回 None。"""
    if not isinstance(hex_str, str):
        return None

    h = hex_str.strip()
    if h.startswith("#"):
        h = h[1:]

    # 3 位简写：每个半字节重复一次 (#F0A → #FF00AA)
    if len(h) == 3:
        h = "".join(c + c for c in h)

    if len(h) != 6 or not _HEX6_RE.fullmatch(h):
        return None

    return RGB(int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))


def rgb_to_hex(rgb: RGB) -> str:
    return f"#{rgb.r:02X}{rgb.g:02X}{rgb.b:02X}"


def normalize_hex(hex_str: str) -> str | None:
    """返回规范化的 '#RRGGBB'（大写），无法解析时返回 None。"""
    rgb = hex_to_rgb(hex_str)
    if rgb is None:
        return None
    return rgb_to_hex(rgb)


# ==================== sRGB → XYZ → Lab ====================

def _srgb_to_linear(c: float) -> float:
    """sRGB 分量 [0,1] → 线性 RGB [0,1]。"""
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def rgb_to_xyz(rgb: RGB) -> XYZ:
    """sRGB [0-255] → XYZ (D65 白点，0~100)。"""
    rl = _srgb_to_linear(rgb.r / 255.0)
    gl = _srgb_to_linear(rgb.g / 255.0)
    bl = _srgb_to_linear(rgb.b / 255.0)

    # sRGB → XYZ 矩阵 (D65)
    x = (rl * 0.4124564 + gl * 0.3575761 + bl * 0.1804375) * 100.0
    y = (rl * 0.2126729 + gl * 0.7151522 + bl * 0.0721750) * 100.0
    z = (rl * 0.0193339 + gl * 0.1191920 + bl * 0.9503041) * 100.0
    return XYZ(x, y, z)


# D65 白点
_XN = 95.047
_YN = 100.000
_ZN = 108.883

_DELTA = 6.0 / 29.0


def _lab_f(t: float) -> float:
    """Lab 转换中的 f(t) 函数。"""
    if t > _DELTA ** 3:
        return t ** (1.0 / 3.0)
    return t / (3.0 * _DELTA * _DELTA) + 4.0 / 29.0


def xyz_to_lab(xyz: XYZ) -> Lab:
    """XYZ → CIE Lab。"""
    fx = _lab_f(xyz.x / _XN)
    fy = _lab_f(xyz.y / _YN)
    fz = _lab_f(xyz.z / _ZN)
    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)
    return Lab(L, a, b)


def rgb_to_lab(rgb: RGB) -> Lab:
    return xyz_to_lab(rgb_to_xyz(rgb))


def hex_to_lab(hex_str: str) -> Lab | None:
    """HEX → CIE Lab，HEX 非法时返回 None。"""
    rgb = hex_to_rgb(hex_str)
    if rgb is None:
        return None
    return rgb_to_lab(rgb)
