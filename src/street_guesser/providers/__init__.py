"""Imagery provider backends (Street View lookups)."""

from .base import OUTDOOR_SOURCE, ImageryProvider, ProviderError
from .demo import DemoImageryProvider
from .google_street_view import GoogleStreetViewProvider

__all__ = [
    "DemoImageryProvider",
    "GoogleStreetViewProvider",
    "ImageryProvider",
    "OUTDOOR_SOURCE",
    "ProviderError",
]
