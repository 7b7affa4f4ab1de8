"""装机建议模块 - 缺件提醒、散热建议与整体状态"""

from __future__ import annotations

from typing import List, Sequence, TYPE_CHECKING

from ..schemas import BuildAdvice, BuildReport
from .compatibility import check_compatibility
from .power import estimate_wattage

if TYPE_CHECKING:
    from ..schemas import Build, CompatibilityIssue


HIGH_END_CPU_MARKERS = ("i7", "i9", "ryzen 7", "ryzen 9")


def advise(build: "Build") -> List[BuildAdvice]:
    """根据已选配件给出缺件提醒和推荐"""
    advice: List[BuildAdvice] = []
    cpu = build.get("cpu")
    gpu = build.get("gpu")

    if gpu is not None and build.get("psu") is None:
        advice.append(
            BuildAdvice(
                kind="missing",
                message=(
                    f"You have a graphics card ({gpu.name}) in your build. "
                    "Don't forget to add a power supply!"
                ),
                suggestion="Add a Power Supply",
            )
        )

    if cpu is not None and build.get("memory") is None:
        advice.append(
            BuildAdvice(
                kind="missing",
                message="You'll need memory to complete your build.",
                suggestion="Add Memory",
            )
        )

    if cpu is not None and build.get("motherboard") is None:
        advice.append(
            BuildAdvice(
                kind="missing",
                message=(
                    "Your CPU needs a compatible motherboard. "
                    "Make sure to choose one that matches your CPU socket."
                ),
                suggestion="Add a Motherboard",
            )
        )

    if cpu is not None and build.get("cooler") is None:
        cpu_name = cpu.name.lower()
        if any(marker in cpu_name for marker in HIGH_END_CPU_MARKERS):
            advice.append(
                BuildAdvice(
                    kind="recommendation",
                    message=(
                        f"Consider adding a CPU cooler for your {cpu.name}. "
                        "High-performance CPUs benefit from aftermarket cooling."
                    ),
                    suggestion="Add a CPU Cooler",
                )
            )

    return advice


def status_message(
    issues: Sequence["CompatibilityIssue"],
    advice: Sequence[BuildAdvice],
) -> str:
    if issues:
        return "Compatibility issues detected in your build"
    if any(item.kind == "missing" for item in advice):
        return "Some components may be missing"
    if advice:
        return "Build looks good! Here are some suggestions"
    return "Your build is looking great!"


def check_build(build: "Build") -> BuildReport:
    """
    整体检查 - Full Build Check

    汇总兼容性问题、预估功耗、装机建议和状态文案。
    Bundle compatibility issues, estimated wattage, advice and a status line.
    """
    issues = check_compatibility(build)
    advice = advise(build)
    return BuildReport(
        issues=issues,
        estimated_wattage=estimate_wattage(build),
        advice=advice,
        status=status_message(issues, advice),
    )
