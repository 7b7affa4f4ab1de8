import json

import pytest

from rigcheck.catalog import PartCatalog
from rigcheck.tools import Toolset


@pytest.fixture
def catalog(gaming_build, part):
    extras = [
        part("cpu", "Core i5-14600K", sku="CPU-14600K", socket="LGA1700", tdp=125),
        part("psu", "400W Bronze", sku="PSU-400B", watt=400),
    ]
    return PartCatalog(list(gaming_build.values()) + extras)


@pytest.fixture
def gaming_skus(gaming_build):
    return [p.sku for p in gaming_build.values()]


def test_catalog_build_from_skus_skips_unknown(catalog, gaming_skus):
    build = catalog.build_from_skus(gaming_skus + ["NOPE-1"])
    assert set(build) == {"cpu", "motherboard", "memory", "gpu", "psu", "case", "cooler"}


def test_catalog_later_sku_replaces_same_category(catalog, gaming_skus):
    build = catalog.build_from_skus(gaming_skus + ["PSU-400B"])
    assert build["psu"].watt == 400


def test_catalog_from_json(tmp_path, gaming_build):
    path = tmp_path / "parts.json"
    path.write_text(
        json.dumps([p.model_dump() for p in gaming_build.values()], ensure_ascii=False),
        encoding="utf-8",
    )
    catalog = PartCatalog.from_json(path)

    assert len(catalog.all_parts()) == 7
    assert [p.name for p in catalog.by_category("gpu")] == ["RTX 4070 SUPER"]


def test_compatibility_tool_detects_socket_mismatch(catalog, gaming_skus):
    tools = Toolset(catalog).register()
    issues = tools["check_compatibility"].invoke({"skus": gaming_skus + ["CPU-14600K"]})

    assert len(issues) == 1
    assert "LGA1700" in issues[0]["message"]


def test_estimate_power_tool(catalog, gaming_skus):
    tools = Toolset(catalog).register()
    assert tools["estimate_power"].invoke({"skus": gaming_skus}) == 414
    assert tools["estimate_power"].invoke({"skus": []}) == 60


def test_classify_part_tool(catalog, gaming_skus):
    tools = Toolset(catalog).register()
    result = tools["classify_part"].invoke(
        {"category": "cpu", "sku": "CPU-14600K", "skus": gaming_skus}
    )
    assert result["level"] == "incompatible"


def test_classify_part_tool_unknown_sku(catalog, gaming_skus):
    tools = Toolset(catalog).register()
    with pytest.raises(ValueError):
        tools["classify_part"].invoke({"category": "cpu", "sku": "CPU-NOPE", "skus": gaming_skus})


def test_build_report_tool(catalog, gaming_skus):
    tools = Toolset(catalog).register()
    report = tools["build_report"].invoke({"skus": gaming_skus})

    assert report["issues"] == []
    assert report["estimated_wattage"] == 414
    assert report["status"] == "Your build is looking great!"
