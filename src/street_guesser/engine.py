"""Guess/reveal round state machine."""

from __future__ import annotations

import logging
import math
import random

from .acquisition import LocationAcquirer, NoLocationFound
from .geo import distance_km, score_from_distance
from .heading import select_heading
from .models import GeoPoint, Round, RoundPhase, Session
from .rendering import WORLD_CENTER, WORLD_ZOOM, MapRenderer, NullRenderer


class InvalidTransition(RuntimeError):
    """Raised in strict mode when an operation is called in the wrong phase."""


class RoundEngine:
    """Owns the current round and the session score.

    ``start_round`` and ``advance`` suspend while a panorama is acquired; every
    other operation is synchronous. Wrong-phase calls are ignored (logged at
    debug level) unless the engine is built with ``strict=True``.
    """

    def __init__(
        self,
        acquirer: LocationAcquirer,
        *,
        renderer: MapRenderer | None = None,
        rng: random.Random | None = None,
        strict: bool = False,
        logger: logging.Logger | None = None,
    ) -> None:
        self._acquirer = acquirer
        self._renderer = renderer or NullRenderer()
        self._rng = rng or random.Random()
        self._strict = strict
        self._logger = logger or logging.getLogger("street_guesser.engine")

        self._session = Session()
        self._round: Round | None = None
        self._round_index = 0
        self._epoch = 0
        self._loading = False

    @property
    def session(self) -> Session:
        return self._session

    @property
    def round(self) -> Round | None:
        return self._round

    @property
    def round_index(self) -> int:
        return self._round_index

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def phase(self) -> RoundPhase | None:
        return self._round.phase if self._round else None

    async def start_round(self) -> Round | None:
        """Acquire a panorama and begin a new round in the guess phase.

        Raises ``NoLocationFound`` when acquisition runs out of attempts; the
        round is not started and no retry is made here. Returns ``None`` when
        the result arrived for a round that has since been superseded.
        """
        self._round_index += 1
        self._session.rounds_played += 1
        tag = (self._epoch, self._round_index)

        self._round = None
        self._loading = True
        self._renderer.reset_map(WORLD_CENTER, WORLD_ZOOM)
        try:
            panorama = await self._acquirer.acquire()
        except NoLocationFound:
            if tag != self._tag():
                self._logger.info("stale_acquisition_discarded", extra={"issued_for": tag[1]})
                return None
            self._logger.warning("round_not_started", extra={"round": self._round_index})
            raise
        finally:
            if tag == self._tag():
                self._loading = False

        if tag != self._tag():
            self._logger.info(
                "stale_acquisition_discarded",
                extra={"issued_for": tag[1], "current": self._round_index, "pano_id": panorama.id},
            )
            return None

        heading = select_heading(panorama.links, self._rng)
        pitch = math.floor(self._rng.uniform(-5.0, 5.0))
        self._round = Round(
            index=self._round_index,
            pano_id=panorama.id,
            true_point=panorama.true_point,
            view_heading=heading,
            view_pitch=pitch,
        )
        self._renderer.show_panorama(panorama.id, heading, pitch)
        self._logger.info(
            "round_started",
            extra={"round": self._round_index, "pano_id": panorama.id, "heading": heading},
        )
        return self._round

    def submit_guess(self, point: GeoPoint) -> bool:
        """Record (or move) the guess for the current round."""
        if not self._check(self._round is not None and self._round.phase is RoundPhase.GUESS, "submit_guess"):
            return False

        self._round.guess_point = point
        self._renderer.place_guess_marker(point)
        return True

    def reveal(self) -> Round | None:
        """Score the guess, update the session and move to the reveal phase."""
        current = self._round
        allowed = current is not None and current.phase is RoundPhase.GUESS and current.guess_point is not None
        if not self._check(allowed, "reveal"):
            return None

        current.distance_km = distance_km(current.guess_point, current.true_point)
        current.round_score = score_from_distance(current.distance_km)
        current.phase = RoundPhase.REVEAL
        self._session.record(current)

        self._renderer.place_true_marker(current.true_point)
        self._renderer.draw_line(current.guess_point, current.true_point)
        self._renderer.fit_view([current.guess_point, current.true_point])

        self._logger.info(
            "round_revealed",
            extra={
                "round": current.index,
                "distance_km": current.distance_km,
                "round_score": current.round_score,
                "total_score": self._session.total_score,
            },
        )
        self._logger.debug("round_history", extra={"history": [p.as_pair() for p in self._session.history]})
        return current

    async def advance(self) -> Round | None:
        """Start the next round once the current one has been revealed."""
        if not self._check(self._round is not None and self._round.phase is RoundPhase.REVEAL, "advance"):
            return None
        return await self.start_round()

    def restart(self) -> None:
        """Reset the session; any acquisition still in flight becomes stale."""
        self._epoch += 1
        self._round_index = 0
        self._round = None
        self._loading = False
        self._session.reset()
        self._renderer.reset_map(WORLD_CENTER, WORLD_ZOOM)
        self._logger.info("session_restarted", extra={"epoch": self._epoch})

    def _tag(self) -> tuple[int, int]:
        return self._epoch, self._round_index

    def _check(self, allowed: bool, operation: str) -> bool:
        if allowed:
            return True

        phase = self.phase.value if self.phase else None
        if self._strict:
            raise InvalidTransition(f"{operation} is not allowed in phase {phase!r}")
        self._logger.debug("invalid_transition", extra={"operation": operation, "phase": phase})
        return False
