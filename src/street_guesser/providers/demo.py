"""Offline imagery backend for local play and tests."""

from __future__ import annotations

import math
import random

from street_guesser.geo import EARTH_RADIUS_KM, normalize_heading
from street_guesser.models import GeoPoint, PanoramaResult

from .base import OUTDOOR_SOURCE, ProviderError


class DemoImageryProvider:
    """Deterministic stand-in for a real imagery service (not real coverage data).

    Each lookup fails with ``failure_rate`` probability, mimicking empty ocean or
    desert cells; otherwise it "snaps" the query to a nearby synthetic panorama
    on a straight road.
    """

    def __init__(self, rng: random.Random | None = None, failure_rate: float = 0.3) -> None:
        if not 0.0 <= failure_rate <= 1.0:
            raise ValueError(f"failure_rate must be within [0, 1], got {failure_rate}")
        self._rng = rng or random.Random()
        self._failure_rate = failure_rate
        self.calls = 0

    def lookup(self, point: GeoPoint, radius_meters: float, source: str = OUTDOOR_SOURCE) -> PanoramaResult:
        self.calls += 1
        if self._rng.random() < self._failure_rate:
            raise ProviderError("ZERO_RESULTS")

        offset_km = self._rng.uniform(0.0, radius_meters / 1000.0)
        bearing = math.radians(self._rng.uniform(0.0, 360.0))
        d_lat = math.degrees(offset_km * math.cos(bearing) / EARTH_RADIUS_KM)
        cos_lat = max(math.cos(math.radians(point.lat)), 1e-6)
        d_lng = math.degrees(offset_km * math.sin(bearing) / (EARTH_RADIUS_KM * cos_lat))

        lat = max(-90.0, min(90.0, point.lat + d_lat))
        lng = (point.lng + d_lng + 180.0) % 360.0 - 180.0
        road = normalize_heading(self._rng.uniform(0.0, 360.0))
        return PanoramaResult(
            id=f"demo-{self.calls}-{lat:.5f},{lng:.5f}",
            true_point=GeoPoint(lat=lat, lng=lng),
            links=(road, normalize_heading(road + 180.0)),
        )
