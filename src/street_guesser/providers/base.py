"""Boundary for street-level imagery lookups."""

from typing import Protocol

from street_guesser.models import GeoPoint, PanoramaResult

OUTDOOR_SOURCE = "outdoor"


class ProviderError(RuntimeError):
    """Raised when a single panorama lookup fails (no results, denied, transport error)."""

    def __init__(self, status: str, message: str | None = None) -> None:
        super().__init__(message or f"Imagery lookup failed: {status}")
        self.status = status


class ImageryProvider(Protocol):
    """Finds the nearest panorama to a point within a search radius."""

    def lookup(self, point: GeoPoint, radius_meters: float, source: str = OUTDOOR_SOURCE) -> PanoramaResult:
        """Return the nearest panorama or raise ``ProviderError``."""
