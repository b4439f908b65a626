"""Shared fixtures for commitgrid tests."""
from datetime import datetime, timezone

import pytest

from commitgrid.domain import StatsWindow


# Wednesday afternoon, so today's grid offset is 3
FIXED_NOW = datetime(2024, 5, 15, 14, 30, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def window():
    return StatsWindow(now=FIXED_NOW)


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Point HOME at an empty directory so no user config is picked up."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("COMMITGRID_CONFIG", raising=False)
    return home
