from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List

from .schemas import Part, PartCategory

logger = logging.getLogger(__name__)


class PartCatalog:
    """
    配件目录 - Part Catalog

    只读的内存配件目录，供工具层和 HTTP 层按 SKU 查找配件。
    Read-only in-memory catalog used by the outer layers to resolve SKUs.
    """

    def __init__(self, parts: Iterable[Part]):
        self._parts: List[Part] = list(parts)
        self._by_sku: Dict[str, Part] = {p.sku: p for p in self._parts}

    @classmethod
    def from_json(cls, data_path: Path) -> "PartCatalog":
        """从 JSON 列表文件加载 - Load from a JSON list file"""
        with data_path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
        catalog = cls(Part.model_validate(item) for item in raw)
        logger.info("loaded %d parts from %s", len(catalog.all_parts()), data_path)
        return catalog

    def all_parts(self) -> List[Part]:
        return list(self._parts)

    def by_category(self, category: str) -> List[Part]:
        return [p for p in self._parts if p.category == category]

    def find_by_sku(self, sku: str) -> Part | None:
        return self._by_sku.get(sku)

    def build_from_skus(self, skus: Iterable[str]) -> Dict[PartCategory, Part]:
        """
        按 SKU 组装配置 - Assemble a build from SKUs

        未知 SKU 被忽略；同一类别出现多次时后者覆盖前者。
        Unknown SKUs are skipped; a later SKU replaces an earlier one in the same category.
        """
        build: Dict[PartCategory, Part] = {}
        for sku in skus:
            part = self.find_by_sku(sku)
            if part is None:
                logger.debug("unknown sku skipped: %s", sku)
                continue
            build[part.category] = part
        return build
