"""Shared pytest fixtures for tilemath tests."""

import numpy as np
import pytest

from tilemath import checks
from tilemath.projection import MAX_COORDINATE_EPSG3857


@pytest.fixture(autouse=True)
def checks_enabled(monkeypatch):
    """Run every test with precondition checks on, whatever the local settings say."""
    monkeypatch.setattr(checks, "ENABLED", True)


@pytest.fixture
def sample_locations():
    """Provide lon/lat pairs spread over the globe, away from tile edges."""
    return [
        (13.4, 52.5),
        (-122.42, 37.77),
        (151.21, -33.87),
        (-58.38, -34.6),
        (103.82, 1.35),
        (-0.13, 51.51),
    ]


@pytest.fixture
def merc_range():
    """Provide Web Mercator coordinates sweeping the full extent."""
    return np.linspace(-MAX_COORDINATE_EPSG3857, MAX_COORDINATE_EPSG3857, 2001)
