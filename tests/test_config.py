from __future__ import annotations

import random

from street_guesser.config import Settings
from street_guesser.providers import DemoImageryProvider, GoogleStreetViewProvider


def test_settings_read_prefixed_environment(monkeypatch) -> None:
    monkeypatch.setenv("STREET_GUESSER_PROVIDER_BACKEND", "google")
    monkeypatch.setenv("STREET_GUESSER_MAPS_API_KEY", "secret")
    monkeypatch.setenv("STREET_GUESSER_RANDOM_SEED", "42")

    configured = Settings(_env_file=None)

    assert configured.provider_backend == "google"
    assert configured.maps_api_key == "secret"
    assert configured.random_seed == 42
    assert configured.demo_failure_rate == 0.3


def test_google_backend_falls_back_to_demo_without_key(monkeypatch) -> None:
    from street_guesser import main

    monkeypatch.setattr(main.settings, "maps_api_key", None)
    assert isinstance(main._build_provider("google", random.Random(0), 0.0), DemoImageryProvider)

    monkeypatch.setattr(main.settings, "maps_api_key", "k")
    assert isinstance(main._build_provider("google", random.Random(0), 0.0), GoogleStreetViewProvider)
