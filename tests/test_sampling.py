"""Tests for random input sampling."""

from __future__ import annotations

import random

import pytest

from quick_sort_studio.config import AppConfig
from quick_sort_studio.errors import InvalidInput
from quick_sort_studio.sampling import random_values, values_for_config


def test_random_values_in_range() -> None:
    values = random_values(200, min_value=15, max_value=94, rng=random.Random(1))
    assert len(values) == 200
    assert all(15 <= value <= 94 for value in values)


def test_seeded_rng_is_repeatable() -> None:
    first = random_values(12, rng=random.Random(3))
    second = random_values(12, rng=random.Random(3))
    assert first == second


def test_values_for_config_uses_size_and_bounds() -> None:
    cfg = AppConfig(array_size=5, min_value=7, max_value=7)
    assert values_for_config(cfg, rng=random.Random(0)) == [7, 7, 7, 7, 7]


@pytest.mark.parametrize(
    ("size", "low", "high"),
    [(0, 1, 10), (-3, 1, 10), (4, 10, 1)],
)
def test_invalid_requests_raise(size: int, low: int, high: int) -> None:
    with pytest.raises(InvalidInput):
        random_values(size, min_value=low, max_value=high)
