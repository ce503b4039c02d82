"""
CIEDE2000 色差
==============

ΔE00：Sharma, Wu, Dalal (2005) 给出的完整公式，参考条件 kL = kC = kH = 1。

ΔE 参考：
  - < 1    人眼几乎不可察觉
  - 1~2    仔细观察可察觉
  - 2~10   一眼可见
  - > 10   明显不同的颜色
"""

from __future__ import annotations

import math

from seasonal_color.utils.color_space import Lab

_POW25_7 = 25.0 ** 7

_KL = 1.0
_KC = 1.0
_KH = 1.0


def _hue_deg(b: float, a_prime: float) -> float:
    """色相角（度），范围 [0, 360)。"""
    if b == 0.0 and a_prime == 0.0:
        return 0.0
    h = math.degrees(math.atan2(b, a_prime))
    return h + 360.0 if h < 0.0 else h


def delta_e(lab1: Lab, lab2: Lab) -> float:
    """ΔE CIEDE2000 距离，非负且对称。"""
    L1, a1, b1 = lab1.L, lab1.a, lab1.b
    L2, a2, b2 = lab2.L, lab2.a, lab2.b

    # Step 1: a' 轴旋转补偿
    c1 = math.hypot(a1, b1)
    c2 = math.hypot(a2, b2)
    c_bar = (c1 + c2) / 2.0
    c_bar7 = c_bar ** 7
    g = 0.5 * (1.0 - math.sqrt(c_bar7 / (c_bar7 + _POW25_7)))

    a1p = a1 * (1.0 + g)
    a2p = a2 * (1.0 + g)
    c1p = math.hypot(a1p, b1)
    c2p = math.hypot(a2p, b2)
    h1p = _hue_deg(b1, a1p)
    h2p = _hue_deg(b2, a2p)

    # Step 2: ΔL', ΔC', ΔH'
    dLp = L2 - L1
    dCp = c2p - c1p

    chroma_product = c1p * c2p
    dh = h2p - h1p
    if chroma_product == 0.0:
        dhp = 0.0
    elif abs(dh) <= 180.0:
        dhp = dh
    elif dh > 180.0:
        dhp = dh - 360.0
    else:
        dhp = dh + 360.0

    dHp = 2.0 * math.sqrt(chroma_product) * math.sin(math.radians(dhp) / 2.0)

    # Step 3: 均值（色相均值在跨 0° 时有分支，必须严格按标准）
    L_bar_p = (L1 + L2) / 2.0
    c_bar_p = (c1p + c2p) / 2.0

    h_sum = h1p + h2p
    if chroma_product == 0.0:
        h_bar_p = h_sum
    elif abs(h1p - h2p) <= 180.0:
        h_bar_p = h_sum / 2.0
    elif h_sum < 360.0:
        h_bar_p = (h_sum + 360.0) / 2.0
    else:
        h_bar_p = (h_sum - 360.0) / 2.0

    # Step 4: 权重函数
    t = (
        1.0
        - 0.17 * math.cos(math.radians(h_bar_p - 30.0))
        + 0.24 * math.cos(math.radians(2.0 * h_bar_p))
        + 0.32 * math.cos(math.radians(3.0 * h_bar_p + 6.0))
        - 0.20 * math.cos(math.radians(4.0 * h_bar_p - 63.0))
    )
    d_theta = 30.0 * math.exp(-(((h_bar_p - 275.0) / 25.0) ** 2))
    c_bar_p7 = c_bar_p ** 7
    rc = 2.0 * math.sqrt(c_bar_p7 / (c_bar_p7 + _POW25_7))

    l_off = (L_bar_p - 50.0) ** 2
    sl = 1.0 + (0.015 * l_off) / math.sqrt(20.0 + l_off)
    sc = 1.0 + 0.045 * c_bar_p
    sh = 1.0 + 0.015 * c_bar_p * t
    rt = -math.sin(math.radians(2.0 * d_theta)) * rc

    # Step 5: 合成
    l_term = dLp / (_KL * sl)
    c_term = dCp / (_KC * sc)
    h_term = dHp / (_KH * sh)

    total = l_term * l_term + c_term * c_term + h_term * h_term + rt * c_term * h_term
    # 浮点误差可能产生极小负值
    return math.sqrt(max(total, 0.0))
