"""
Service dependencies for FastAPI routes
"""

from mockflights.core.config import settings
from mockflights.services import FlightSearchService


def get_flight_service() -> FlightSearchService:
    """
    Flight service dependency for FastAPI routes.
    Each request gets its own service so no generator state is shared.
    """
    return FlightSearchService(
        delay_enabled=settings.MOCK_DELAYS,
        delay_range_ms=(settings.MOCK_DELAY_MIN_MS, settings.MOCK_DELAY_MAX_MS),
    )
