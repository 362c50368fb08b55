"""Weighted geographic sampling over populated landmasses."""

from __future__ import annotations

import random
from collections.abc import Sequence

from .models import GeoPoint, Region

# Weights approximate relative Street View coverage density.
REGIONS: tuple[Region, ...] = (
    Region(min_lat=-56, max_lat=-10, min_lng=-75, max_lng=-35, weight=0.8),  # South America
    Region(min_lat=-35, max_lat=37, min_lng=-20, max_lng=55, weight=1.0),  # Africa
    Region(min_lat=5, max_lat=60, min_lng=-130, max_lng=-60, weight=1.0),  # North America
    Region(min_lat=30, max_lat=72, min_lng=-10, max_lng=40, weight=1.2),  # Europe
    Region(min_lat=-45, max_lat=10, min_lng=110, max_lng=155, weight=0.7),  # Oceania / SE Asia
    Region(min_lat=5, max_lat=50, min_lng=65, max_lng=150, weight=1.0),  # Asia
)


def total_weight(regions: Sequence[Region]) -> float:
    if not regions:
        raise ValueError("At least one region is required")
    total = sum(region.weight for region in regions)
    if total <= 0:
        raise ValueError("Region weights must sum to a positive total")
    return total


def choose_region(regions: Sequence[Region] = REGIONS, rng: random.Random | None = None) -> Region:
    """Pick a region with probability proportional to its weight."""
    rng = rng or random.Random()
    pick = rng.random() * total_weight(regions)
    accumulated = 0.0
    for region in regions:
        accumulated += region.weight
        if pick <= accumulated:
            return region
    return regions[-1]


def sample_point(regions: Sequence[Region] = REGIONS, rng: random.Random | None = None) -> GeoPoint:
    """Draw a point uniformly in latitude and longitude inside a weighted region.

    The draw is not area-uniform: rectangles near the poles are over-sampled per
    square kilometre. Game balance depends on this, so it is kept as is.
    """
    rng = rng or random.Random()
    region = choose_region(regions, rng)
    return GeoPoint(
        lat=rng.uniform(region.min_lat, region.max_lat),
        lng=rng.uniform(region.min_lng, region.max_lng),
    )
