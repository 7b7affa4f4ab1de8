"""
候选配件分级模块 - Candidate Classification Module

判断把某个候选配件放入当前配置后的兼容等级，用于选择列表中置灰或标记不兼容项。
Classify the compatibility tier a candidate part would introduce into the
current build, so selection lists can gray out or flag incompatible options.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Literal, TYPE_CHECKING

from ..schemas import CompatibilityIssue, CompatibilityLevel
from .compatibility import check_compatibility

if TYPE_CHECKING:
    from ..schemas import Build, Part, PartCategory

logger = logging.getLogger(__name__)

RelevanceMode = Literal["tagged", "message"]

DEFAULT_RELEVANCE: RelevanceMode = "tagged"


class InvalidCandidateError(ValueError):
    """候选配件结构不合法（缺少名称或类别不符）"""


def _validate_candidate(category: "PartCategory", candidate: "Part") -> None:
    if not candidate.sku.strip() or not candidate.name.strip():
        raise InvalidCandidateError("candidate part requires a non-empty sku and name")
    if candidate.category != category:
        raise InvalidCandidateError(
            f"candidate {candidate.sku} is a {candidate.category} part, not {category}"
        )


def _is_relevant(
    issue: CompatibilityIssue,
    category: "PartCategory",
    candidate: "Part",
    relevance: RelevanceMode,
) -> bool:
    if relevance == "tagged":
        return category in issue.categories
    # 文本匹配：消息中包含类别名或候选名称。
    # 消息提到其他类别但恰好含相同词时会误判（如 "CPU Cooler" 命中 cpu）。
    msg = issue.message.lower()
    return category.lower() in msg or candidate.name.lower() in msg


def overlay(build: "Build", category: "PartCategory", candidate: "Part") -> Dict:
    """返回替换了指定类别的新配置，原配置不变"""
    derived = dict(build)
    derived[category] = candidate
    return derived


def classify(
    category: "PartCategory",
    candidate: "Part",
    build: "Build",
    relevance: RelevanceMode = DEFAULT_RELEVANCE,
) -> CompatibilityLevel:
    """
    候选配件兼容等级 - Candidate Compatibility Level

    参数 Parameters:
        category: 候选配件所在类别
                  Slot the candidate would occupy
        candidate: 候选配件
                   Candidate part
        build: 当前配置（不会被修改）
               Current build, left untouched
        relevance: "tagged" 按问题涉及的类别过滤，"message" 按消息文本过滤
                   "tagged" filters by the categories an issue concerns,
                   "message" by substring match on the message text
                  电源余量问题只标记电源本身，以及去掉后能降低问题等级的负载配件
                  A PSU-margin issue is tagged with the PSU and with each load
                  part whose removal would lower its severity, so flat-rate
                  memory or storage is not blamed for a GPU overload

    返回 Returns:
        perfect / incompatible / warning / good 及相关问题
        The tier plus the relevant issues

    异常 Raises:
        InvalidCandidateError: 候选配件缺少名称或类别不符
                               Candidate lacks a name or belongs to another category
    """
    if relevance not in ("tagged", "message"):
        raise ValueError(f"unknown relevance mode: {relevance}")
    _validate_candidate(category, candidate)

    issues = check_compatibility(overlay(build, category, candidate))
    relevant: List[CompatibilityIssue] = [
        issue for issue in issues if _is_relevant(issue, category, candidate, relevance)
    ]
    logger.debug(
        "classified %s %s: %d/%d relevant issues",
        category,
        candidate.sku,
        len(relevant),
        len(issues),
    )

    if not relevant:
        return CompatibilityLevel(level="perfect", issues=[], message="Fully compatible")
    if any(issue.severity == "error" for issue in relevant):
        return CompatibilityLevel(level="incompatible", issues=relevant, message="Not compatible")
    if any(issue.severity == "warning" for issue in relevant):
        return CompatibilityLevel(level="warning", issues=relevant, message="Potential issues")
    return CompatibilityLevel(level="good", issues=[], message="Compatible")
