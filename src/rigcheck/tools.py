from __future__ import annotations

from typing import List, Protocol

from langchain_core.tools import tool
from pydantic import BaseModel, Field

from .builder import check_build, check_compatibility, classify, estimate_wattage
from .builder.classifier import DEFAULT_RELEVANCE, RelevanceMode
from .schemas import Part, PartCategory


class PartsCatalogProtocol(Protocol):
    def all_parts(self) -> List[Part]: ...
    def by_category(self, category: str) -> List[Part]: ...
    def find_by_sku(self, sku: str) -> Part | None: ...
    def build_from_skus(self, skus: List[str]) -> dict: ...


class BuildSkusInput(BaseModel):
    skus: List[str] = Field(default_factory=list, description="SKUs of the parts in the current build")


class ClassifyPartInput(BaseModel):
    category: PartCategory = Field(description="Slot the candidate would occupy, such as cpu, gpu, case")
    sku: str = Field(description="SKU of the candidate part")
    skus: List[str] = Field(default_factory=list, description="SKUs of the parts in the current build")


class Toolset:
    def __init__(self, catalog: PartsCatalogProtocol, *, relevance: RelevanceMode = DEFAULT_RELEVANCE):
        self.catalog = catalog
        self.relevance = relevance

    def register(self):
        catalog = self.catalog
        relevance = self.relevance

        @tool("check_compatibility", args_schema=BuildSkusInput)
        def check_compatibility_tool(skus: List[str]) -> List[dict]:
            """Check socket, memory, form factor, clearance and PSU margin of a build."""
            build = catalog.build_from_skus(skus)
            return [issue.model_dump() for issue in check_compatibility(build)]

        @tool("estimate_power", args_schema=BuildSkusInput)
        def estimate_power(skus: List[str]) -> int:
            """Estimate system power draw in watts, 20% headroom included."""
            return estimate_wattage(catalog.build_from_skus(skus))

        @tool("classify_part", args_schema=ClassifyPartInput)
        def classify_part(category: str, sku: str, skus: List[str]) -> dict:
            """Classify how compatible a candidate part is with the current build."""
            candidate = catalog.find_by_sku(sku)
            if candidate is None:
                raise ValueError(f"unknown sku: {sku}")
            build = catalog.build_from_skus(skus)
            return classify(category, candidate, build, relevance=relevance).model_dump()

        @tool("build_report", args_schema=BuildSkusInput)
        def build_report(skus: List[str]) -> dict:
            """Summarise issues, estimated wattage, missing parts and suggestions."""
            return check_build(catalog.build_from_skus(skus)).model_dump()

        return {
            "check_compatibility": check_compatibility_tool,
            "estimate_power": estimate_power,
            "classify_part": classify_part,
            "build_report": build_report,
        }
