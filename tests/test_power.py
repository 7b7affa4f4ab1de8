from rigcheck.builder import estimate_wattage
from rigcheck.builder.power import load_contributors, with_headroom


def test_empty_build_is_baseline_with_headroom():
    assert estimate_wattage({}) == 60


def test_cpu_gpu_and_memory(part):
    build = {
        "cpu": part("cpu", "Ryzen 5 5600", tdp=65),
        "gpu": part("gpu", "RX 7700", tdp=220),
        "memory": part("memory", "16GB Kit"),
    }
    assert estimate_wattage(build) == 414


def test_storage_variants(part):
    assert estimate_wattage({"ssd": part("ssd", "990 Pro")}) == with_headroom(55)
    assert estimate_wattage({"hdd": part("hdd", "IronWolf")}) == 72
    assert estimate_wattage({"ssd": part("ssd", "990 Pro"), "hdd": part("hdd", "IronWolf")}) == 78


def test_peripherals_and_unrated_parts_add_nothing(part):
    build = {
        "monitor": part("monitor", "27in 1440p"),
        "keyboard": part("keyboard", "TKL"),
        "cpu": part("cpu", "Unknown CPU"),
        "case": part("case", "Mid Tower"),
    }
    assert estimate_wattage(build) == 60
    assert load_contributors(build) == []


def test_headroom_rounds_up_without_float_drift():
    assert with_headroom(100) == 120
    assert with_headroom(345) == 414
    assert with_headroom(51) == 62
