from __future__ import annotations

import asyncio
import random
import time

import pytest

from street_guesser.acquisition import MAX_ATTEMPTS, SEARCH_RADIUS_METERS, LocationAcquirer, NoLocationFound
from street_guesser.models import GeoPoint, PanoramaResult
from street_guesser.providers import OUTDOOR_SOURCE, DemoImageryProvider, ProviderError


class ScriptedProvider:
    """Fails ``failures`` times, then returns a panorama at the queried point."""

    def __init__(self, failures: int = 0, error: Exception | None = None) -> None:
        self.failures = failures
        self.error = error or ProviderError("ZERO_RESULTS")
        self.calls: list[tuple[GeoPoint, float, str]] = []

    def lookup(self, point: GeoPoint, radius_meters: float, source: str = OUTDOOR_SOURCE) -> PanoramaResult:
        self.calls.append((point, radius_meters, source))
        if len(self.calls) <= self.failures:
            raise self.error
        return PanoramaResult(id=f"pano-{len(self.calls)}", true_point=point, links=(0.0, 180.0))


class SlowProvider:
    def lookup(self, point: GeoPoint, radius_meters: float, source: str = OUTDOOR_SOURCE) -> PanoramaResult:
        time.sleep(0.2)
        return PanoramaResult(id="late", true_point=point)


def test_acquire_returns_first_success() -> None:
    provider = ScriptedProvider(failures=3)
    acquirer = LocationAcquirer(provider, rng=random.Random(1))

    result = asyncio.run(acquirer.acquire())

    assert result.id == "pano-4"
    assert len(provider.calls) == 4
    assert all(radius == SEARCH_RADIUS_METERS and source == "outdoor" for _, radius, source in provider.calls)


def test_each_attempt_draws_a_fresh_point() -> None:
    provider = ScriptedProvider(failures=5)
    asyncio.run(LocationAcquirer(provider, rng=random.Random(2)).acquire())

    points = [point for point, _, _ in provider.calls]
    assert len(set(points)) == len(points)


def test_acquire_gives_up_after_budget() -> None:
    provider = ScriptedProvider(failures=10_000)
    acquirer = LocationAcquirer(provider, rng=random.Random(3))

    with pytest.raises(NoLocationFound) as excinfo:
        asyncio.run(acquirer.acquire())

    assert MAX_ATTEMPTS == 40
    assert excinfo.value.attempts == 40
    assert len(provider.calls) == 40


def test_unexpected_provider_errors_cost_one_attempt() -> None:
    provider = ScriptedProvider(failures=2, error=ConnectionError("reset"))

    result = asyncio.run(LocationAcquirer(provider, rng=random.Random(4)).acquire())

    assert result.id == "pano-3"


def test_timed_out_lookup_counts_as_failed_attempt() -> None:
    acquirer = LocationAcquirer(SlowProvider(), rng=random.Random(5), max_attempts=2, lookup_timeout_seconds=0.01)

    with pytest.raises(NoLocationFound):
        asyncio.run(acquirer.acquire())


def test_demo_provider_snaps_within_radius() -> None:
    provider = DemoImageryProvider(rng=random.Random(6), failure_rate=0.0)
    query = GeoPoint(45.0, 7.0)

    result = provider.lookup(query, SEARCH_RADIUS_METERS)

    assert result.id.startswith("demo-")
    assert abs(result.true_point.lat - query.lat) < 0.5
    assert len(result.links) == 2


def test_demo_provider_can_always_fail() -> None:
    provider = DemoImageryProvider(rng=random.Random(7), failure_rate=1.0)

    with pytest.raises(ProviderError) as excinfo:
        provider.lookup(GeoPoint(0, 0), SEARCH_RADIUS_METERS)

    assert excinfo.value.status == "ZERO_RESULTS"
