# tests/test_colors.py
"""
Tests for the color ↔ prime registry.

Run: pytest -v
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from primegraph.colors import ColorRegistry, current_registry, use_registry
from primegraph.primes import primes_up_to
from primegraph.runtime import APPLY

BASE = [
    ("white", 1), ("gray", 1), ("red", 2), ("blue", 3),
    ("green", 5), ("yellow", 7), ("cyan", 11), ("magenta", 13),
]


@pytest.mark.parametrize("color,prime", BASE, ids=[c for c, _ in BASE])
def test_base_table(registry, color, prime):
    assert registry.prime_for_color(color) == prime
    assert registry.prime_for_color(color.upper()) == prime


def test_prime_one_maps_back_to_white(registry):
    assert registry.color_for_prime(1) == "white"
    assert registry.color_for_prime(11) == "cyan"


def test_unknown_color(registry):
    assert registry.prime_for_color("chartreuse") is None
    assert "chartreuse" not in registry
    assert "Red" in registry


def test_allocation_is_monotonic_and_stable(registry):
    assert registry.color_for_prime(17) == "orange"
    assert registry.color_for_prime(19) == "pink"
    assert registry.color_for_prime(17) == "orange"
    assert registry.prime_for_color("orange") == 17
    assert registry.prime_for_color("PINK") == 19


def test_allocation_wraps_with_cycle_suffix():
    reg = ColorRegistry(palette=["orange", "pink"])
    assert reg.preallocate([17, 19, 23, 29, 31]) == ["orange", "pink", "orange2", "pink2", "orange3"]
    # still one prime per label
    assert [reg.prime_for_color(c) for c in ("orange", "pink", "orange2", "pink2", "orange3")] == [17, 19, 23, 29, 31]


def test_available_colors_order(registry):
    assert registry.available_colors() == ["white", "red", "blue", "green", "yellow", "cyan", "magenta"]
    registry.color_for_prime(23)
    assert registry.available_colors()[-1] == "orange"
    assert ("orange", 23) in registry.all_colors()
    assert len(registry) == 8


def test_register(registry):
    registry.register("Gold", 31)
    assert registry.prime_for_color("gold") == 31
    assert registry.color_for_prime(31) == "gold"
    registry.register("gold", 31)  # same pair again is fine

    with pytest.raises(ValueError):
        registry.register("gold", 37)
    with pytest.raises(ValueError):
        registry.register("silver", 2)
    with pytest.raises(ValueError):
        registry.register("silver", 4)


def test_allocation_skips_registered_labels(registry):
    registry.register("orange", 41)
    assert registry.color_for_prime(43) == "pink"
    assert registry.prime_for_color("orange") == 41


def test_color_value(registry):
    assert registry.color_value("red") == "#ff4444"
    assert registry.color_value("GRAY") == "#e0e0e0"
    assert registry.color_value("chartreuse") == "chartreuse"

    reg = ColorRegistry(palette=["orange"])
    reg.preallocate([17, 19])
    assert reg.color_value("orange2") == "#ff8844"


@pytest.mark.parametrize("color,value", [
    ("orange", "#ff8844"), ("pink", "#ff88ff"), ("purple", "#8844ff"), ("brown", "#884444"),
    ("lime", "#88ff44"), ("teal", "#44ff88"), ("indigo", "#4444ff"), ("violet", "#ff44ff"),
    ("coral", "#ff8844"), ("salmon", "#ff8888"),
])
def test_extended_palette_values(registry, color, value):
    assert registry.color_value(color) == value


def test_preallocate_gives_reproducible_colors():
    primes = primes_up_to(120)[6:]
    a, b = ColorRegistry(), ColorRegistry()
    assert a.preallocate(primes) == b.preallocate(primes)


def test_concurrent_allocation_never_duplicates():
    reg = ColorRegistry()
    primes = primes_up_to(2000)[6:]
    with ThreadPoolExecutor(max_workers=8) as pool:
        colors = list(pool.map(reg.color_for_prime, primes * 3))
    assert len(set(colors)) == len(primes)
    for p in primes:
        assert reg.prime_for_color(reg.color_for_prime(p)) == p


def test_palette_from_settings():
    APPLY({"COLORS": {"EXTENDED_PALETTE": ["gold", "silver"]}})
    reg = ColorRegistry.from_settings()
    assert reg.preallocate([17, 19, 23]) == ["gold", "silver", "gold2"]


def test_current_registry_is_context_wide():
    reg = current_registry()
    assert current_registry() is reg
    mine = ColorRegistry()
    use_registry(mine)
    assert current_registry() is mine


def test_empty_palette_rejected():
    with pytest.raises(ValueError):
        ColorRegistry(palette=[])
