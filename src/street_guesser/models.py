from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

RoadLink = float


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """Latitude/longitude pair in degrees."""

    lat: float
    lng: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError(f"Latitude out of range [-90, 90]: {self.lat}")
        if not -180.0 <= self.lng <= 180.0:
            raise ValueError(f"Longitude out of range [-180, 180]: {self.lng}")

    def as_pair(self) -> list[float]:
        return [self.lat, self.lng]


@dataclass(frozen=True, slots=True)
class Region:
    """Weighted rectangular sampling zone."""

    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float
    weight: float

    def __post_init__(self) -> None:
        if self.min_lat >= self.max_lat:
            raise ValueError(f"Region needs min_lat < max_lat, got {self.min_lat} >= {self.max_lat}")
        if self.min_lng >= self.max_lng:
            raise ValueError(f"Region needs min_lng < max_lng, got {self.min_lng} >= {self.max_lng}")
        if self.weight < 0:
            raise ValueError(f"Region weight must be non-negative, got {self.weight}")


@dataclass(frozen=True, slots=True)
class PanoramaResult:
    id: str
    true_point: GeoPoint
    links: tuple[RoadLink, ...] = ()


class RoundPhase(str, Enum):
    GUESS = "guess"
    REVEAL = "reveal"


@dataclass(slots=True)
class Round:
    index: int
    pano_id: str
    true_point: GeoPoint
    view_heading: float
    view_pitch: int = 0
    phase: RoundPhase = RoundPhase.GUESS
    guess_point: GeoPoint | None = None
    distance_km: float = 0.0
    round_score: int = 0


@dataclass(slots=True)
class Session:
    total_score: int = 0
    rounds_played: int = 0
    history: list[GeoPoint] = field(default_factory=list)

    def record(self, round_: Round) -> None:
        self.total_score += round_.round_score
        self.history.append(round_.true_point)

    def reset(self) -> None:
        self.total_score = 0
        self.rounds_played = 0
        self.history.clear()
