"""Contracts and simple sinks for the map and panorama display surface."""

from __future__ import annotations

from typing import Protocol

from rich.console import Console

from .geo import format_compass
from .models import GeoPoint

WORLD_CENTER = GeoPoint(lat=20.0, lng=0.0)
WORLD_ZOOM = 2


class MapRenderer(Protocol):
    """Displays markers, lines and the panorama; the engine decides what to show."""

    def reset_map(self, center: GeoPoint, zoom: int) -> None:
        """Clear round overlays and return to the world view."""

    def show_panorama(self, pano_id: str, heading: float, pitch: int) -> None:
        """Display a panorama at the given view direction."""

    def place_guess_marker(self, point: GeoPoint) -> None:
        """Place (or move) the player's guess marker."""

    def place_true_marker(self, point: GeoPoint) -> None:
        """Mark the true location of the round."""

    def draw_line(self, start: GeoPoint, end: GeoPoint) -> None:
        """Connect the guess to the true location."""

    def fit_view(self, points: list[GeoPoint]) -> None:
        """Frame the map around the given points."""


class NullRenderer:
    """Renderer that ignores every command."""

    def reset_map(self, center: GeoPoint, zoom: int) -> None:
        return None

    def show_panorama(self, pano_id: str, heading: float, pitch: int) -> None:
        return None

    def place_guess_marker(self, point: GeoPoint) -> None:
        return None

    def place_true_marker(self, point: GeoPoint) -> None:
        return None

    def draw_line(self, start: GeoPoint, end: GeoPoint) -> None:
        return None

    def fit_view(self, points: list[GeoPoint]) -> None:
        return None


class ConsoleRenderer:
    """Terminal renderer used by the interactive CLI.

    The true location is only printed once the round is revealed.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def reset_map(self, center: GeoPoint, zoom: int) -> None:
        self._console.rule("[bold]New round")

    def show_panorama(self, pano_id: str, heading: float, pitch: int) -> None:
        self._console.print(f"Panorama [cyan]{pano_id}[/cyan] facing {format_compass(heading)}, pitch {pitch}°")

    def place_guess_marker(self, point: GeoPoint) -> None:
        self._console.print(f"Guess placed at [yellow]{point.lat:.4f}, {point.lng:.4f}[/yellow]")

    def place_true_marker(self, point: GeoPoint) -> None:
        self._console.print(f"True location: [green]{point.lat:.4f}, {point.lng:.4f}[/green]")

    def draw_line(self, start: GeoPoint, end: GeoPoint) -> None:
        return None

    def fit_view(self, points: list[GeoPoint]) -> None:
        return None
