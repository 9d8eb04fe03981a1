"""Shared pytest fixtures for coatcheck tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from coatcheck.domain.room import CoatRoom
from coatcheck.services import attendant


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host config and ``COATCHECK_*`` variables out of every test."""
    monkeypatch.delenv("COATCHECK_CONFIG", raising=False)
    for var in ("COATCHECK_VERBOSE", "COATCHECK_QUIET", "COATCHECK_JSON_OUTPUT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def room() -> CoatRoom:
    """A bare coat room with no subscribers."""
    return CoatRoom()


@pytest.fixture
def narration() -> Generator[list[str]]:
    """Narration lines captured for the duration of the test."""
    with attendant.capture_narration() as lines:
        yield lines


@pytest.fixture
def attended_room(room: CoatRoom, narration: list[str]) -> CoatRoom:
    """A coat room with the attendant attached; narration is captured."""
    attendant.attach(room)
    return room
