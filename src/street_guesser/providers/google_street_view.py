"""Google Street View metadata backend.

The metadata endpoint is free to query and reports whether a panorama exists
near a location, but it does not return road links. Panoramas found this way
therefore carry no links and get a random initial heading.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import requests

from street_guesser.models import GeoPoint, PanoramaResult

from .base import OUTDOOR_SOURCE, ImageryProvider, ProviderError

METADATA_URL = "https://maps.googleapis.com/maps/api/streetview/metadata"


@dataclass(slots=True)
class GoogleStreetViewProvider(ImageryProvider):
    """Looks up outdoor panoramas through the Street View Static metadata API."""

    api_key: str
    timeout_seconds: float = 10.0
    session: requests.Session = field(default_factory=requests.Session)

    def lookup(self, point: GeoPoint, radius_meters: float, source: str = OUTDOOR_SOURCE) -> PanoramaResult:
        params = {
            "location": f"{point.lat},{point.lng}",
            "radius": int(radius_meters),
            "source": source,
            "key": self.api_key,
        }
        try:
            response = self.session.get(METADATA_URL, params=params, timeout=self.timeout_seconds)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            raise ProviderError("HTTP_ERROR", f"Street View request failed: {exc}") from exc
        except ValueError as exc:
            raise ProviderError("INVALID_RESPONSE", "Street View returned a non-JSON body") from exc

        return self._parse(payload)

    @staticmethod
    def _parse(payload: dict) -> PanoramaResult:
        status = payload.get("status", "UNKNOWN_ERROR")
        if status != "OK":
            raise ProviderError(status, payload.get("error_message"))

        pano_id = payload.get("pano_id")
        location = payload.get("location") or {}
        if not pano_id or "lat" not in location or "lng" not in location:
            raise ProviderError("INVALID_RESPONSE", "Street View response is missing pano_id or location")

        return PanoramaResult(
            id=str(pano_id),
            true_point=GeoPoint(lat=float(location["lat"]), lng=float(location["lng"])),
            links=tuple(float(link["heading"]) for link in payload.get("links", []) if "heading" in link),
        )
