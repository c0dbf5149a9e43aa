"""
Shared pytest fixtures for RoadRisk.
"""
import os
from datetime import date

import pytest

# Select "test" environment before settings load
os.environ["ENV"] = "test"
os.environ["DEBUG"] = "true"
os.environ.pop("ZONE_CATALOG_PATH", None)

from roadrisk.core.types import IncidentRecord, ZoneDefinition  # noqa: E402


def build_incident(
    incident_id: str = "acc_0_0",
    latitude: float = 40.0,
    longitude: float = -74.0,
    severity: str = "minor",
    **overrides,
) -> IncidentRecord:
    """IncidentRecord with sensible defaults for tests."""
    fields = dict(
        id=incident_id,
        latitude=latitude,
        longitude=longitude,
        date=date(2024, 3, 14),
        time="08:45",
        severity=severity,
        location="Test Street",
        weather="clear",
        road_type="urban",
        casualties=0,
    )
    fields.update(overrides)
    return IncidentRecord(**fields)


@pytest.fixture
def make_incident():
    """Factory for IncidentRecord values."""
    return build_incident


@pytest.fixture
def make_incidents():
    """Factory for n identical-position incidents with a given severity."""

    def _make(n: int, severity: str = "minor", latitude: float = 40.0, longitude: float = -74.0):
        return [
            build_incident(f"acc_{severity}_{i}", latitude, longitude, severity)
            for i in range(n)
        ]

    return _make


@pytest.fixture
def zone_10k() -> ZoneDefinition:
    """Zone with population 10,000 centred on (40.0, -74.0)."""
    return ZoneDefinition(
        id="zone_test",
        name="Test Zone",
        latitude=40.0,
        longitude=-74.0,
        population=10_000,
    )


@pytest.fixture
def test_client():
    """FastAPI TestClient for integration testing."""
    from fastapi.testclient import TestClient

    from roadrisk.api.main import app

    with TestClient(app) as client:
        yield client
