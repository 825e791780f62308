import random
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from mockflights.core.dependencies import get_flight_service
from mockflights.main import app
from mockflights.services import FlightSearchService


FIXED_NOW = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


def fixed_clock():
    return FIXED_NOW


@pytest.fixture
def service():
    return FlightSearchService(
        rng=random.Random(1234), clock=fixed_clock, delay_enabled=False
    )


@pytest.fixture
def client(service):
    app.dependency_overrides[get_flight_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
