"""RigCheck｜装机兼容性与功耗引擎"""

from .builder import (
    InvalidCandidateError,
    check_build,
    check_compatibility,
    classify,
    estimate_wattage,
)
from .schemas import Build, CompatibilityIssue, CompatibilityLevel, Part

# 对外三个纯函数的常用别名
evaluate = check_compatibility

__all__ = [
    "Build",
    "CompatibilityIssue",
    "CompatibilityLevel",
    "InvalidCandidateError",
    "Part",
    "check_build",
    "check_compatibility",
    "classify",
    "estimate_wattage",
    "evaluate",
]
