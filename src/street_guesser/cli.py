"""CLI-side handler wrapping the async round engine."""

from __future__ import annotations

import asyncio

from street_guesser.engine import RoundEngine
from street_guesser.hud import HudSnapshot, build_hud
from street_guesser.models import GeoPoint, Round


class CliGameHandler:
    """Simple sync-friendly facade over the async round engine."""

    def __init__(self, engine: RoundEngine) -> None:
        self._engine = engine
        self._runner = asyncio.Runner()

    @property
    def engine(self) -> RoundEngine:
        return self._engine

    def start_round(self) -> Round | None:
        return self._runner.run(self._engine.start_round())

    def next_round(self) -> Round | None:
        return self._runner.run(self._engine.advance())

    def guess(self, point: GeoPoint) -> bool:
        return self._engine.submit_guess(point)

    def reveal(self) -> Round | None:
        return self._engine.reveal()

    def restart(self) -> None:
        self._engine.restart()

    def hud(self) -> HudSnapshot:
        return build_hud(self._engine)

    def close(self) -> None:
        self._runner.close()


def parse_point(text: str) -> GeoPoint:
    """Parse ``"lat,lng"`` (comma or whitespace separated) into a point."""
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError(f"Expected 'lat,lng', got {text!r}")
    return GeoPoint(lat=float(parts[0]), lng=float(parts[1]))
