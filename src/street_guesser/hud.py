"""Display values for the heads-up overlay."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from .engine import RoundEngine
from .geo import format_compass, heading_to_cardinal, normalize_heading, rounded_heading, street_view_url
from .models import RoundPhase


@dataclass(slots=True)
class HudSnapshot:
    round_index: int
    total_score: int
    phase: str | None
    loading: bool
    distance: str
    round_score: int
    compass: str | None
    cardinal: str | None
    heading_degrees: int | None
    true_location_url: str | None = None

    def as_dict(self) -> dict:
        return asdict(self)


def build_hud(engine: RoundEngine) -> HudSnapshot:
    """Snapshot what the overlay shows for the engine's current state."""
    current = engine.round
    distance = current.distance_km if current else 0.0
    heading = normalize_heading(current.view_heading) if current else None
    revealed = current is not None and current.phase is RoundPhase.REVEAL

    return HudSnapshot(
        round_index=engine.round_index,
        total_score=engine.session.total_score,
        phase=current.phase.value if current else None,
        loading=engine.loading,
        distance=f"{distance:.1f} km",
        round_score=current.round_score if current else 0,
        compass=format_compass(heading) if heading is not None else None,
        cardinal=heading_to_cardinal(heading) if heading is not None else None,
        heading_degrees=rounded_heading(heading) if heading is not None else None,
        true_location_url=street_view_url(current.true_point, current.pano_id) if revealed else None,
    )
