from __future__ import annotations

import math
from typing import Any, Dict, List, Literal, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


PartCategory = Literal[
    "cpu",
    "motherboard",
    "memory",
    "gpu",
    "psu",
    "case",
    "cooler",
    "ssd",
    "hdd",
    "monitor",
    "keyboard",
    "mouse",
    "headset",
]

Severity = Literal["error", "warning"]
LevelName = Literal["perfect", "good", "warning", "incompatible"]


MEASUREMENT_FIELDS = (
    "price",
    "tdp",
    "watt",
    "length_mm",
    "height_mm",
    "max_gpu_length_mm",
    "max_cooler_height_mm",
)
TEXT_FIELDS = ("socket", "memory_type", "form_factor")


class Part(BaseModel):
    """配件实体 - 空字符串 / 0 表示未指定，缺失或格式错误的参数同样视为未指定"""

    model_config = ConfigDict(frozen=True, extra="ignore")

    # 标识
    sku: str = Field(min_length=1, description="唯一标识")
    name: str = Field(min_length=1, description="产品名称")
    category: PartCategory
    brand: Optional[str] = None
    price: float = 0

    # 兼容性参数
    socket: str = Field(default="", description="CPU/主板插槽")
    memory_type: str = Field(default="", description="内存类型 DDR4/DDR5")
    form_factor: str = Field(default="", description="板型 / 机箱规格")
    tdp: float = Field(default=0, description="热设计功耗(W)")
    watt: float = Field(default=0, description="电源额定功率(W)")

    # 尺寸
    length_mm: float = Field(default=0, description="显卡长度(mm)")
    height_mm: float = Field(default=0, description="散热器高度(mm)")
    max_gpu_length_mm: float = Field(default=0, description="机箱显卡限长(mm)")
    max_cooler_height_mm: float = Field(default=0, description="机箱散热器限高(mm)")

    @field_validator(*MEASUREMENT_FIELDS, mode="before")
    @classmethod
    def coerce_measurement(cls, value: Any) -> Any:
        if value is None or isinstance(value, bool):
            return 0
        try:
            number = float(value)
        except (TypeError, ValueError):
            return 0
        # NaN、无穷大、负数都不是有效测量值
        if not math.isfinite(number) or number < 0:
            return 0
        return number

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> Any:
        if value is None:
            return ""
        if not isinstance(value, str):
            return str(value)
        return value


Build = Mapping[PartCategory, Part]


class CompatibilityIssue(BaseModel):
    model_config = ConfigDict(frozen=True)

    severity: Severity
    message: str
    categories: Tuple[PartCategory, ...] = ()


class CompatibilityLevel(BaseModel):
    level: LevelName
    issues: List[CompatibilityIssue] = Field(default_factory=list)
    message: str


class BuildAdvice(BaseModel):
    kind: Literal["missing", "recommendation"]
    message: str
    suggestion: Optional[str] = None


class BuildReport(BaseModel):
    issues: List[CompatibilityIssue] = Field(default_factory=list)
    estimated_wattage: int
    advice: List[BuildAdvice] = Field(default_factory=list)
    status: str


def check_slots(build: Mapping[str, Part]) -> None:
    """每个类别槽位只能放本类别的配件"""
    for slot, part in build.items():
        if part.category != slot:
            raise ValueError(f"part {part.sku} is a {part.category} part, not {slot}")


class BuildRequest(BaseModel):
    parts: Dict[PartCategory, Part] = Field(default_factory=dict)

    @model_validator(mode="after")
    def parts_match_slots(self) -> "BuildRequest":
        check_slots(self.parts)
        return self


class ClassifyRequest(BaseModel):
    category: PartCategory
    candidate: Part
    build: Dict[PartCategory, Part] = Field(default_factory=dict)

    @model_validator(mode="after")
    def build_matches_slots(self) -> "ClassifyRequest":
        check_slots(self.build)
        return self


class CompatibilityResponse(BaseModel):
    issues: List[CompatibilityIssue] = Field(default_factory=list)
    estimated_wattage: int


class PowerResponse(BaseModel):
    estimated_wattage: int
