"""
Flight Search Service - Main entry point for flight searches
Validates requests, runs the synthesizer and ranks its output
"""
import asyncio
import logging
import random
from datetime import datetime
from typing import Callable, Optional, Tuple

from mockflights.core.exceptions import ValidationError
from mockflights.models import (
    FlightOffer, FlightSearchRequest, FlightSearchResponse, SearchMetadata
)
from mockflights.services.generation import FlightSynthesizer, rank_offers, isoformat_utc
from mockflights.services.generation.helpers import utc_now

logger = logging.getLogger(__name__)

# Route synthesized for the detail endpoint
DETAIL_ORIGIN = "LAX"
DETAIL_DESTINATION = "NRT"
DETAIL_DATE = "2024-03-15"


class FlightSearchService:
    """
    Search façade over the flight synthesizer.

    Stateless apart from its random source: every search builds fresh offers,
    nothing is cached or persisted between calls.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = utc_now,
        delay_enabled: bool = True,
        delay_range_ms: Tuple[int, int] = (500, 2000)
    ):
        self.rng = rng or random.Random()
        self.clock = clock
        self.delay_enabled = delay_enabled
        self.delay_range_ms = delay_range_ms

    async def search(self, request: FlightSearchRequest) -> FlightSearchResponse:
        """
        Search for flights based on criteria.

        Raises:
            ValidationError: origin, destination or departureDate is missing
        """
        if not request.origin or not request.destination or not request.departure_date:
            logger.info("Rejected flight search with missing required fields")
            raise ValidationError("Origin, destination, and departure date are required")

        await self._simulate_latency()

        synthesizer = FlightSynthesizer(rng=self.rng, clock=self.clock)
        candidates = synthesizer.generate(
            origin=request.origin,
            destination=request.destination,
            departure_date=request.departure_date,
            passengers=request.passengers,
            max_price=request.max_price
        )
        flights = rank_offers(candidates, request.max_price)

        logger.info(
            "Flight search %s -> %s on %s for %d passenger(s): %d result(s)",
            request.origin, request.destination, request.departure_date,
            request.passengers, len(flights)
        )

        return FlightSearchResponse(
            flights=flights,
            search_meta=SearchMetadata(
                origin=request.origin,
                destination=request.destination,
                departure_date=request.departure_date,
                return_date=request.return_date,
                passengers=request.passengers,
                search_time=isoformat_utc(self.clock()),
                total_results=len(flights)
            )
        )

    def get_flight(self, flight_id: str) -> FlightOffer:
        """
        Return a freshly synthesized offer carrying the requested ID.

        There is no offer store, so this never returns a flight from an
        earlier search and repeated calls with the same ID differ.
        """
        if not flight_id or not flight_id.strip():
            raise ValidationError("Flight ID is required")

        synthesizer = FlightSynthesizer(rng=self.rng, clock=self.clock)
        offers = rank_offers(
            synthesizer.generate(DETAIL_ORIGIN, DETAIL_DESTINATION, DETAIL_DATE, passengers=1)
        )
        return offers[0].model_copy(update={"id": flight_id})

    async def _simulate_latency(self):
        """Sleep for a random interval to mimic an upstream provider call."""
        if not self.delay_enabled:
            return
        low, high = self.delay_range_ms
        delay_ms = random.randint(low, high)
        logger.debug("Simulating upstream latency of %d ms", delay_ms)
        await asyncio.sleep(delay_ms / 1000)
