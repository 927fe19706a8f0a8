"""Fixtures for end-to-end tests of the `itemflow` list commands."""

import json

import pytest
from click.testing import CliRunner

from itemflow import config

# pylint: disable=redefined-outer-name


@pytest.fixture
def runner(monkeypatch):
    """Return a CliRunner isolated from the caller's ITEMFLOW environment."""
    for name in (config.PREMIUM_ENV_VAR, config.DATA_PATH_ENV_VAR):
        monkeypatch.delenv(name, raising=False)
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated working directory."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def base_args(tmp_path):
    """Global options keeping the flight recorder out of the user's log dir."""
    return ["--no-flight-recorder", "--log-path", str(tmp_path / "itemflow.log")]


@pytest.fixture
def fixture_file(tmp_path):
    """Write a small fixture file and return its path."""
    path = tmp_path / "fixture.json"
    path.write_text(
        json.dumps(
            {
                "friends": [{"id": "x1", "name": "Xavier", "phone": "555-9999"}],
                "cached_friends": None,
                "cards": [],
                "transfers": [],
            }
        ),
        encoding="utf-8",
    )
    return path
