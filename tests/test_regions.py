from __future__ import annotations

import random
from collections import Counter

import pytest

from street_guesser.models import Region
from street_guesser.regions import REGIONS, choose_region, sample_point, total_weight


def test_region_selection_converges_to_weight_fraction() -> None:
    rng = random.Random(1234)
    draws = 60_000
    counts = Counter(choose_region(REGIONS, rng) for _ in range(draws))
    total = total_weight(REGIONS)

    for region in REGIONS:
        assert counts[region] / draws == pytest.approx(region.weight / total, abs=0.01)


def test_sampled_points_fall_inside_a_region() -> None:
    rng = random.Random(5)
    for _ in range(2_000):
        point = sample_point(REGIONS, rng)
        assert any(
            r.min_lat <= point.lat <= r.max_lat and r.min_lng <= point.lng <= r.max_lng for r in REGIONS
        )


def test_zero_weight_region_is_never_chosen() -> None:
    regions = (Region(0, 10, 0, 10, 0.0), Region(20, 30, 20, 30, 1.0))
    rng = random.Random(3)

    assert {choose_region(regions, rng) for _ in range(500)} == {regions[1]}


def test_point_is_uniform_in_lat_lng_within_region() -> None:
    region = Region(-10, 10, 100, 140, 1.0)
    rng = random.Random(9)
    points = [sample_point((region,), rng) for _ in range(20_000)]

    mean_lat = sum(p.lat for p in points) / len(points)
    mean_lng = sum(p.lng for p in points) / len(points)
    assert mean_lat == pytest.approx(0.0, abs=0.3)
    assert mean_lng == pytest.approx(120.0, abs=0.6)


def test_invalid_region_sets_are_rejected() -> None:
    with pytest.raises(ValueError):
        total_weight(())
    with pytest.raises(ValueError):
        total_weight((Region(0, 1, 0, 1, 0.0),))
    with pytest.raises(ValueError):
        Region(10, 0, 0, 1, 1.0)
    with pytest.raises(ValueError):
        Region(0, 1, 0, 1, -1.0)
