"""CLI startup entrypoint for Street Guesser."""

from __future__ import annotations

import random
from collections import Counter
from typing import Callable

import typer
from rich import print
from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table

from street_guesser.acquisition import LocationAcquirer, NoLocationFound
from street_guesser.cli import CliGameHandler, parse_point
from street_guesser.config import settings
from street_guesser.engine import RoundEngine
from street_guesser.geo import distance_km, score_from_distance
from street_guesser.models import GeoPoint, Round
from street_guesser.providers import DemoImageryProvider, GoogleStreetViewProvider, ImageryProvider
from street_guesser.regions import REGIONS, choose_region, total_weight
from street_guesser.rendering import ConsoleRenderer, MapRenderer, NullRenderer
from street_guesser.telemetry import configure_logging

app = typer.Typer(help="Street Guesser round engine")


def _build_provider(backend: str, rng: random.Random, failure_rate: float) -> ImageryProvider:
    if backend.lower() == "google" and settings.maps_api_key:
        return GoogleStreetViewProvider(
            api_key=settings.maps_api_key,
            timeout_seconds=settings.lookup_timeout_seconds,
        )
    return DemoImageryProvider(rng=rng, failure_rate=failure_rate)


def _build_engine(
    *,
    renderer: MapRenderer | None = None,
    backend: str | None = None,
    seed: int | None = None,
    failure_rate: float | None = None,
) -> RoundEngine:
    rng = random.Random(seed if seed is not None else settings.random_seed)
    provider = _build_provider(
        backend or settings.provider_backend,
        rng,
        settings.demo_failure_rate if failure_rate is None else failure_rate,
    )
    acquirer = LocationAcquirer(provider, rng=rng, lookup_timeout_seconds=settings.lookup_timeout_seconds)
    return RoundEngine(acquirer, renderer=renderer or NullRenderer(), rng=rng)


def _point_option(value: str | None) -> GeoPoint | None:
    if value is None:
        return None
    try:
        return parse_point(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command()
def start() -> None:
    """Show runtime backend configuration."""
    print(
        {
            "app_name": settings.app_name,
            "provider_backend": settings.provider_backend,
            "maps_api_key_configured": bool(settings.maps_api_key),
            "lookup_timeout_seconds": settings.lookup_timeout_seconds,
            "random_seed": settings.random_seed,
        }
    )


@app.command()
def score(
    guess: str = typer.Option(..., help="Guess as 'lat,lng'"),
    truth: str = typer.Option(..., help="True location as 'lat,lng'"),
) -> None:
    """Compute distance and score between a guess and a true location."""
    guess_point = _point_option(guess)
    true_point = _point_option(truth)
    distance = distance_km(guess_point, true_point)
    print({"distance_km": round(distance, 1), "score": score_from_distance(distance)})


@app.command()
def sample(
    count: int = typer.Option(10_000, min=1, help="Number of region draws"),
    seed: int = typer.Option(None, help="Random seed"),
) -> None:
    """Draw regions and compare observed frequencies with weight fractions."""
    rng = random.Random(seed)
    counts = Counter(choose_region(REGIONS, rng) for _ in range(count))
    total = total_weight(REGIONS)

    table = Table(title=f"Region frequencies over {count} draws")
    for column in ("lat", "lng", "weight share", "observed"):
        table.add_column(column)
    for region in REGIONS:
        table.add_row(
            f"{region.min_lat:g}..{region.max_lat:g}",
            f"{region.min_lng:g}..{region.max_lng:g}",
            f"{region.weight / total:.3f}",
            f"{counts[region] / count:.3f}",
        )
    Console().print(table)


def _acquire_with_prompt(
    console: Console, handler: CliGameHandler, action: Callable[[], Round | None]
) -> Round | None:
    while True:
        try:
            return action()
        except NoLocationFound as exc:
            console.print(f"[red]{exc}[/red]")
            answer = Prompt.ask("Could not find a location. Retry?", choices=["y", "n"], default="y", console=console)
            if answer == "n":
                print({"error": str(exc), "attempts": exc.attempts, "retryable": True})
                raise typer.Exit(code=1)
            # The failed round never started, so a retry is a fresh start.
            action = handler.start_round


@app.command()
def play(
    backend: str = typer.Option(None, help="Imagery backend: google/demo"),
    seed: int = typer.Option(None, help="Random seed for reproducible sessions"),
    failure_rate: float = typer.Option(None, min=0.0, max=1.0, help="Demo backend lookup failure rate"),
    verbose: bool = typer.Option(False, help="Log engine events"),
) -> None:
    """Play rounds interactively in the terminal."""
    console = Console()
    if verbose:
        configure_logging(settings.log_level)

    handler = CliGameHandler(
        _build_engine(renderer=ConsoleRenderer(console), backend=backend, seed=seed, failure_rate=failure_rate)
    )
    try:
        current = _acquire_with_prompt(console, handler, handler.start_round)
        while current is not None:
            revealed = None
            while revealed is None:
                prompt = "Guess 'lat,lng' (Enter to reveal, q to quit)"
                answer = Prompt.ask(prompt, default="", show_default=False, console=console).strip()
                if answer.lower() == "q":
                    return
                if not answer:
                    revealed = handler.reveal()
                    if revealed is None:
                        console.print("[yellow]Place a guess before revealing.[/yellow]")
                    continue
                try:
                    handler.guess(parse_point(answer))
                except ValueError as exc:
                    console.print(f"[red]{exc}[/red]")

            print(handler.hud().as_dict())
            answer = Prompt.ask("Next round? (Enter/n = next, q = quit)", default="", show_default=False, console=console)
            if answer.strip().lower() == "q":
                return
            current = _acquire_with_prompt(console, handler, handler.next_round)
    finally:
        session = handler.engine.session
        print({"total_score": session.total_score, "rounds_played": session.rounds_played})
        handler.close()


if __name__ == "__main__":
    app()
