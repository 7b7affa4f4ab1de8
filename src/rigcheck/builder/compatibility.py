"""兼容性检查模块

六条规则按固定顺序独立执行，任一侧缺少参数时跳过该规则（默认兼容）。
Six independent rules run in a fixed order; a rule is skipped when either side
lacks the attribute it compares.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, FrozenSet, List, Optional, Tuple, TYPE_CHECKING

from ..schemas import CompatibilityIssue
from .power import estimate_wattage, load_contributors, with_headroom

if TYPE_CHECKING:
    from ..schemas import Build

logger = logging.getLogger(__name__)


# 主板板型 → 可容纳它的机箱规格（机箱字符串包含任一项即视为兼容）
FORM_FACTOR_FIT: Dict[str, FrozenSet[str]] = {
    "mini-itx": frozenset({"mini-itx", "micro-atx", "atx", "mid-tower", "full-tower"}),
    "micro-atx": frozenset({"micro-atx", "atx", "mid-tower", "full-tower"}),
    "atx": frozenset({"atx", "mid-tower", "full-tower"}),
    "e-atx": frozenset({"full-tower", "e-atx"}),
}


def _norm(value: str) -> str:
    return value.strip().lower()


def _fmt(value: float) -> str:
    """去掉多余的 .0，如 300.0 显示为 300"""
    return f"{value:g}"


def check_socket(build: "Build") -> Optional[CompatibilityIssue]:
    cpu = build.get("cpu")
    motherboard = build.get("motherboard")
    if cpu is None or motherboard is None:
        return None
    if not cpu.socket or not motherboard.socket:
        return None
    if _norm(cpu.socket) == _norm(motherboard.socket):
        return None
    return CompatibilityIssue(
        severity="error",
        message=(
            f"CPU socket ({cpu.socket}) doesn't match "
            f"Motherboard socket ({motherboard.socket})"
        ),
        categories=("cpu", "motherboard"),
    )


def check_memory_type(build: "Build") -> Optional[CompatibilityIssue]:
    memory = build.get("memory")
    motherboard = build.get("motherboard")
    if memory is None or motherboard is None:
        return None
    if not memory.memory_type or not motherboard.memory_type:
        return None
    if _norm(memory.memory_type) == _norm(motherboard.memory_type):
        return None
    return CompatibilityIssue(
        severity="error",
        message=(
            f"Memory type ({memory.memory_type}) incompatible with "
            f"Motherboard ({motherboard.memory_type})"
        ),
        categories=("memory", "motherboard"),
    )


def check_form_factor(build: "Build") -> Optional[CompatibilityIssue]:
    motherboard = build.get("motherboard")
    case = build.get("case")
    if motherboard is None or case is None:
        return None
    board_ff = _norm(motherboard.form_factor)
    case_ff = _norm(case.form_factor)
    if not board_ff or not case_ff:
        return None
    # 未收录的主板板型视为不兼容
    fits = FORM_FACTOR_FIT.get(board_ff, frozenset())
    if any(entry in case_ff for entry in fits):
        return None
    return CompatibilityIssue(
        severity="error",
        message=(
            f"Motherboard form factor ({board_ff.upper()}) may not fit in "
            f"{case_ff.upper()} case"
        ),
        categories=("motherboard", "case"),
    )


def check_gpu_clearance(build: "Build") -> Optional[CompatibilityIssue]:
    gpu = build.get("gpu")
    case = build.get("case")
    if gpu is None or case is None:
        return None
    if not gpu.length_mm or not case.max_gpu_length_mm:
        return None
    if gpu.length_mm <= case.max_gpu_length_mm:
        return None
    return CompatibilityIssue(
        severity="error",
        message=f"GPU too long ({_fmt(gpu.length_mm)}mm) for case (max {_fmt(case.max_gpu_length_mm)}mm)",
        categories=("gpu", "case"),
    )


_SEVERITY_RANK = {None: 0, "warning": 1, "error": 2}


def _psu_severity(rated: float, estimated: int) -> Optional[str]:
    if rated < estimated:
        return "error"
    # rated < estimated × 1.2
    if rated * 5 < estimated * 6:
        return "warning"
    return None


def _psu_culprits(build: "Build", rated: float, severity: str) -> Tuple:
    """去掉后能降低问题等级的负载来源"""
    culprits = []
    for category, _ in load_contributors(build):
        without = {k: v for k, v in build.items() if k != category}
        reduced = _psu_severity(rated, estimate_wattage(without))
        if _SEVERITY_RANK[reduced] < _SEVERITY_RANK[severity]:
            culprits.append(category)
    return tuple(culprits)


def check_psu_margin(build: "Build") -> Optional[CompatibilityIssue]:
    psu = build.get("psu")
    if psu is None or not psu.watt:
        return None
    estimated = estimate_wattage(build)
    severity = _psu_severity(psu.watt, estimated)
    if severity is None:
        return None
    if severity == "error":
        message = f"PSU ({_fmt(psu.watt)}W) may be insufficient. Estimated need: {estimated}W"
    else:
        message = f"PSU has low headroom. Recommended: {with_headroom(estimated)}W"
    return CompatibilityIssue(
        severity=severity,
        message=message,
        categories=("psu",) + _psu_culprits(build, psu.watt, severity),
    )


def check_cooler_clearance(build: "Build") -> Optional[CompatibilityIssue]:
    cooler = build.get("cooler")
    case = build.get("case")
    if cooler is None or case is None:
        return None
    if not cooler.height_mm or not case.max_cooler_height_mm:
        return None
    if cooler.height_mm <= case.max_cooler_height_mm:
        return None
    return CompatibilityIssue(
        severity="error",
        message=(
            f"CPU Cooler too tall ({_fmt(cooler.height_mm)}mm) for case "
            f"(max {_fmt(case.max_cooler_height_mm)}mm)"
        ),
        categories=("cooler", "case"),
    )


RULES: Tuple[Callable[["Build"], Optional[CompatibilityIssue]], ...] = (
    check_socket,
    check_memory_type,
    check_form_factor,
    check_gpu_clearance,
    check_psu_margin,
    check_cooler_clearance,
)


def check_compatibility(build: "Build") -> List[CompatibilityIssue]:
    """检查硬件兼容性

    Args:
        build: 类别 → 配件，缺失的类别不产生约束

    Returns:
        兼容性问题列表（按规则声明顺序），空列表表示无问题
    """
    issues: List[CompatibilityIssue] = []
    for rule in RULES:
        issue = rule(build)
        if issue is not None:
            issues.append(issue)
    logger.debug(
        "compatibility checked: %d parts, %d issues", len(build), len(issues)
    )
    return issues
