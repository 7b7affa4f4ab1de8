"""
功耗估算模块 - Power Estimation Module

根据已选配件估算整机功耗，并预留 20% 余量。
Estimate total system draw from the selected parts, with 20% headroom applied.
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import List, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from ..schemas import Build, PartCategory


BASELINE_WATTS = 50
"""主板、风扇及待机损耗 - Motherboard, fans and idle losses"""

MEMORY_WATTS = 10
SSD_WATTS = 5
HDD_WATTS = 10

# 余量比例 6/5 = 1.2，用分数运算避免浮点误差
HEADROOM_NUM = 6
HEADROOM_DEN = 5


def with_headroom(watts: float) -> int:
    """watts × 1.2，向上取整"""
    return math.ceil(Fraction(watts) * HEADROOM_NUM / HEADROOM_DEN)


def load_contributors(build: "Build") -> List[Tuple["PartCategory", float]]:
    """
    负载来源 - Load Contributors

    返回实际计入功耗的配件类别及其瓦数，按计算顺序排列。
    Categories that actually add load, with the watts each one adds.
    """
    contributors: List[Tuple["PartCategory", float]] = []

    cpu = build.get("cpu")
    if cpu is not None and cpu.tdp:
        contributors.append(("cpu", cpu.tdp))

    gpu = build.get("gpu")
    if gpu is not None and gpu.tdp:
        contributors.append(("gpu", gpu.tdp))

    # 内存条数不建模，按固定值估算
    if build.get("memory") is not None:
        contributors.append(("memory", MEMORY_WATTS))
    if build.get("ssd") is not None:
        contributors.append(("ssd", SSD_WATTS))
    if build.get("hdd") is not None:
        contributors.append(("hdd", HDD_WATTS))

    return contributors


def estimate_wattage(build: "Build") -> int:
    """
    估算整机功耗 - Estimate System Wattage

    参数 Parameters:
        build: 类别 → 配件
               Category → part mapping

    返回 Returns:
        含 20% 余量的预估功耗（W）
        Estimated draw in watts, 20% headroom included
    """
    total = BASELINE_WATTS + sum(Fraction(watts) for _, watts in load_contributors(build))
    return with_headroom(total)
