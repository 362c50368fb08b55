"""Retry-driven panorama acquisition."""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Sequence

from .models import PanoramaResult, Region
from .providers import OUTDOOR_SOURCE, ImageryProvider, ProviderError
from .regions import REGIONS, sample_point

MAX_ATTEMPTS = 40
SEARCH_RADIUS_METERS = 50_000


class NoLocationFound(RuntimeError):
    """Raised when no panorama was found within the attempt budget."""

    def __init__(self, attempts: int) -> None:
        super().__init__(f"No panorama found after {attempts} attempts")
        self.attempts = attempts


class LocationAcquirer:
    """Scans random candidate points until the provider yields a usable panorama.

    Attempts run one at a time with no delay in between; each one draws a fresh
    point from the weighted region sampler.
    """

    def __init__(
        self,
        provider: ImageryProvider,
        *,
        regions: Sequence[Region] = REGIONS,
        rng: random.Random | None = None,
        max_attempts: int = MAX_ATTEMPTS,
        radius_meters: float = SEARCH_RADIUS_METERS,
        lookup_timeout_seconds: float | None = 10.0,
        logger: logging.Logger | None = None,
    ) -> None:
        self._provider = provider
        self._regions = regions
        self._rng = rng or random.Random()
        self._max_attempts = max_attempts
        self._radius_meters = radius_meters
        self._lookup_timeout_seconds = lookup_timeout_seconds
        self._logger = logger or logging.getLogger("street_guesser.acquisition")

    async def acquire(self) -> PanoramaResult:
        """Return the first usable panorama or raise ``NoLocationFound``."""
        for attempt in range(1, self._max_attempts + 1):
            candidate = sample_point(self._regions, self._rng)
            try:
                result = await asyncio.wait_for(
                    asyncio.to_thread(self._provider.lookup, candidate, self._radius_meters, OUTDOOR_SOURCE),
                    timeout=self._lookup_timeout_seconds,
                )
            except asyncio.TimeoutError:
                self._logger.warning(
                    "acquisition_attempt_timeout",
                    extra={"attempt": attempt, "lat": candidate.lat, "lng": candidate.lng},
                )
                continue
            except ProviderError as exc:
                self._logger.debug(
                    "acquisition_attempt_failed",
                    extra={"attempt": attempt, "status": exc.status, "lat": candidate.lat, "lng": candidate.lng},
                )
                continue
            except Exception:  # noqa: BLE001 - any lookup failure only costs one attempt.
                self._logger.exception("acquisition_attempt_error", extra={"attempt": attempt})
                continue

            if result is None or not result.id:
                self._logger.debug("acquisition_attempt_empty", extra={"attempt": attempt})
                continue

            self._logger.info(
                "panorama_acquired",
                extra={"attempt": attempt, "pano_id": result.id, "links": len(result.links)},
            )
            return result

        self._logger.warning("acquisition_exhausted", extra={"attempts": self._max_attempts})
        raise NoLocationFound(self._max_attempts)
