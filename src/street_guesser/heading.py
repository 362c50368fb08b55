"""Initial camera heading that faces away from the road."""

from __future__ import annotations

import random
from collections.abc import Sequence
from itertools import combinations

from .geo import angular_separation, normalize_heading
from .models import RoadLink


def _flip(rng: random.Random) -> float:
    # Both branches are equal modulo 360; the coin flip is kept for symmetry.
    return -180.0 if rng.random() < 0.5 else 180.0


def widest_pair(links: Sequence[RoadLink]) -> tuple[float, float]:
    """Return the two headings with the largest angular separation.

    Ties keep the earliest pair in link order.
    """
    if len(links) < 2:
        raise ValueError("At least two links are required")

    best = (links[0], links[1])
    best_separation = -1.0
    for first, second in combinations(links, 2):
        separation = angular_separation(first, second)
        if separation > best_separation:
            best_separation = separation
            best = (first, second)
    return best


def road_bisector(links: Sequence[RoadLink]) -> float:
    """Bisector of the widest link pair, before the away-rotation is applied."""
    first, second = widest_pair(links)
    h1 = normalize_heading(first)
    h2 = normalize_heading(second)
    midpoint = normalize_heading(h1 + angular_separation(h1, h2) / 2)
    if normalize_heading(h2 - h1) > 180.0:
        midpoint = normalize_heading(midpoint + 180.0)
    return midpoint


def select_heading(links: Sequence[RoadLink], rng: random.Random | None = None) -> float:
    """Pick the initial view heading in [0, 360) given a panorama's road links."""
    rng = rng or random.Random()
    if not links:
        return rng.random() * 360.0
    if len(links) == 1:
        return normalize_heading(links[0] + _flip(rng))
    return normalize_heading(road_bisector(links) + _flip(rng))
