"""Distance, scoring and compass helpers."""

from __future__ import annotations

import math
from urllib.parse import urlencode

from .models import GeoPoint

EARTH_RADIUS_KM = 6371.0
MAX_ROUND_SCORE = 5000
SCORE_DECAY_KM = 2000.0

_CARDINALS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW", "N")


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def normalize_heading(degrees: float) -> float:
    """Reduce any angle to [0, 360)."""
    value = degrees % 360.0
    # -1e-15 % 360 rounds up to 360.0 in floating point.
    return 0.0 if value >= 360.0 else value


def angular_separation(a: float, b: float) -> float:
    """Shorter-arc difference between two headings, in [0, 180]."""
    diff = abs(normalize_heading(a) - normalize_heading(b))
    return 360.0 - diff if diff > 180.0 else diff


def distance_km(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance via the haversine formula."""
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    d_lat = math.radians(b.lat - a.lat)
    d_lng = math.radians(b.lng - a.lng)

    h = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
    h = min(1.0, max(0.0, h))
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def score_from_distance(distance: float) -> int:
    score = _round_half_up(MAX_ROUND_SCORE * math.exp(-distance / SCORE_DECAY_KM))
    return max(0, min(MAX_ROUND_SCORE, score))


def heading_to_cardinal(heading: float) -> str:
    """Map a heading to one of the 8 compass points."""
    return _CARDINALS[_round_half_up(normalize_heading(heading) / 45.0)]


def rounded_heading(heading: float) -> int:
    return _round_half_up(normalize_heading(heading)) % 360


def format_compass(heading: float) -> str:
    """Compass point plus whole degrees, e.g. ``NE (47°)``."""
    return f"{heading_to_cardinal(heading)} ({rounded_heading(heading)}°)"


def street_view_url(point: GeoPoint, pano_id: str | None = None) -> str:
    params = {"api": "1", "map_action": "pano", "viewpoint": f"{point.lat},{point.lng}"}
    if pano_id:
        params["pano"] = pano_id
    return f"https://www.google.com/maps/@?{urlencode(params)}"
