"""Builder 模块：兼容性检查、功耗估算与候选分级"""

from .compatibility import check_compatibility, FORM_FACTOR_FIT, RULES
from .power import estimate_wattage
from .classifier import classify, InvalidCandidateError, RelevanceMode
from .advisor import advise, check_build, status_message

__all__ = [
    "check_compatibility",
    "FORM_FACTOR_FIT",
    "RULES",
    "estimate_wattage",
    "classify",
    "InvalidCandidateError",
    "RelevanceMode",
    "advise",
    "check_build",
    "status_message",
]
