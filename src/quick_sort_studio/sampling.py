"""Random input arrays for the visualizer."""

from __future__ import annotations

import random
from typing import Optional

from quick_sort_studio.config import AppConfig
from quick_sort_studio.errors import InvalidInput


def random_values(
    size: int,
    *,
    min_value: int = 15,
    max_value: int = 94,
    rng: Optional[random.Random] = None,
) -> list[int]:
    """Return ``size`` integers drawn uniformly from ``[min_value, max_value]``."""
    if size < 1:
        raise InvalidInput(f"array size must be positive, got {size}")
    if max_value < min_value:
        raise InvalidInput(f"empty value range {min_value}..{max_value}")
    source = rng or random.Random()
    return [source.randint(min_value, max_value) for _ in range(size)]


def values_for_config(
    cfg: AppConfig, *, rng: Optional[random.Random] = None
) -> list[int]:
    return random_values(
        cfg.array_size, min_value=cfg.min_value, max_value=cfg.max_value, rng=rng
    )
