import pytest

from rigcheck.schemas import Part


def make_part(category: str, name: str = "Test Part", **specs) -> Part:
    sku = specs.pop("sku", f"{category.upper()}-{name.replace(' ', '-').upper()}")
    return Part(sku=sku, name=name, category=category, brand="Generic", price=999, **specs)


@pytest.fixture
def part():
    return make_part


@pytest.fixture
def gaming_build():
    """各项都兼容、电源余量充足的配置"""
    return {
        "cpu": make_part("cpu", "Ryzen 5 7600", socket="AM5", tdp=65),
        "motherboard": make_part(
            "motherboard", "B650 Tomahawk", socket="AM5", memory_type="DDR5", form_factor="ATX"
        ),
        "memory": make_part("memory", "DDR5 32GB 6000", memory_type="DDR5"),
        "gpu": make_part("gpu", "RTX 4070 SUPER", length_mm=300, tdp=220),
        "psu": make_part("psu", "750W Gold", watt=750),
        "case": make_part(
            "case",
            "Airflow Case",
            form_factor="ATX Mid Tower",
            max_gpu_length_mm=360,
            max_cooler_height_mm=165,
        ),
        "cooler": make_part("cooler", "AG620 Tower", height_mm=157),
    }
