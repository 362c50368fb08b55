from __future__ import annotations

import importlib

import pytest

from street_guesser.cli import parse_point
from street_guesser.models import GeoPoint


def test_console_entrypoint_exposes_app() -> None:
    pytest.importorskip("typer")

    module = importlib.import_module("street_guesser.main")

    assert hasattr(module, "app")
    assert module.app is not None


def test_parse_point_accepts_comma_or_space() -> None:
    assert parse_point("12.5, -7") == GeoPoint(12.5, -7.0)
    assert parse_point("-33.8 151.2") == GeoPoint(-33.8, 151.2)
    with pytest.raises(ValueError):
        parse_point("12.5")


def test_score_command_prints_distance_and_score() -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from street_guesser.main import app

    result = typer_testing.CliRunner().invoke(app, ["score", "--guess", "0,0", "--truth", "0,180"])

    assert result.exit_code == 0
    assert "20015.1" in result.stdout
    assert "'score': 0" in result.stdout


def test_score_command_rejects_bad_point() -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from street_guesser.main import app

    result = typer_testing.CliRunner().invoke(app, ["score", "--guess", "north", "--truth", "0,0"])

    assert result.exit_code != 0


def test_play_runs_a_round_with_demo_backend() -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from street_guesser.main import app

    result = typer_testing.CliRunner().invoke(
        app,
        ["play", "--backend", "demo", "--seed", "11", "--failure-rate", "0"],
        input="\n10,20\n\nq\n",
        catch_exceptions=False,
    )

    assert result.exit_code == 0
    assert "Place a guess before revealing" in result.stdout
    assert "True location" in result.stdout
    assert "'rounds_played': 1" in result.stdout


def test_play_exits_with_error_when_player_aborts_failed_acquisition() -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from street_guesser.main import app

    result = typer_testing.CliRunner().invoke(
        app,
        ["play", "--backend", "demo", "--seed", "1", "--failure-rate", "1"],
        input="n\n",
    )

    assert result.exit_code == 1
    assert "No panorama found after 40 attempts" in result.stdout
    assert "'retryable': True" in result.stdout
    assert "'rounds_played': 1" in result.stdout


def test_sample_command_lists_every_region() -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from street_guesser.main import app
    from street_guesser.regions import REGIONS

    result = typer_testing.CliRunner().invoke(app, ["sample", "--count", "100", "--seed", "1"])

    assert result.exit_code == 0
    assert "Region frequencies over 100 draws" in result.stdout
    for region in REGIONS:
        assert f"{region.min_lat:g}..{region.max_lat:g}" in result.stdout


def test_start_command_shows_configuration() -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from street_guesser.main import app

    result = typer_testing.CliRunner().invoke(app, ["start"])

    assert result.exit_code == 0
    assert "provider_backend" in result.stdout
