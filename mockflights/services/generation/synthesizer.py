"""
Flight offer synthesizer.

Builds randomized but route-aware flight offers from the reference tables.
All randomness comes from an injectable random.Random, so a seeded source
reproduces a search exactly.
"""
import random
from datetime import datetime
from typing import Callable, List, Optional

from mockflights.models import (
    Deal, DealType, FlightEndpoint, FlightOffer, Price, PriceBreakdown
)
from . import reference_data as ref
from .helpers import (
    add_minutes_to_clock,
    booking_link,
    epoch_millis,
    format_clock,
    format_duration,
    get_deal_message,
    utc_now,
)


MIN_CANDIDATES = 8
MAX_CANDIDATES = 20

STOP_PENALTY = 50
RED_EYE_DISCOUNT = -30
TAX_RATE = 0.15
CARBON_PER_MINUTE = 0.12
DEAL_PROBABILITY = 0.3

CURRENCY = "USD"
PROVIDER = "Skyscanner"
CABIN_LABEL = "Economy"


def is_red_eye(departure_hour: int) -> bool:
    """Departures before 08:00 or after 20:59 get the red-eye discount."""
    return departure_hour < 8 or departure_hour > 20


def compute_total_price(
    base_price: int,
    stops: int,
    departure_hour: int,
    price_factor: float,
    variation: int,
    passengers: int
) -> int:
    """
    Total fare for all passengers.

    The per-seat fare is computed first and only then multiplied, so the
    total is always an exact multiple of the passenger count.
    """
    adjustment = RED_EYE_DISCOUNT if is_red_eye(departure_hour) else 0
    per_seat = round((base_price + stops * STOP_PENALTY + adjustment) * price_factor + variation)
    return per_seat * passengers


def split_price(total: int, fees: int) -> PriceBreakdown:
    taxes = int(total * TAX_RATE)
    return PriceBreakdown(base=total - taxes - fees, taxes=taxes, fees=fees)


class FlightSynthesizer:
    """
    Generates synthetic flight offers for a route.

    Not thread-safe when sharing an rng; create one per search.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = utc_now
    ):
        self.rng = rng or random.Random()
        self.clock = clock

    def generate(
        self,
        origin: str,
        destination: str,
        departure_date: str,
        passengers: int = 1,
        max_price: Optional[float] = None
    ) -> List[FlightOffer]:
        """
        Draw between 8 and 20 candidate offers, dropping those over budget.

        Args:
            origin: Origin airport code (any case)
            destination: Destination airport code (any case)
            departure_date: Date string, echoed on both endpoints
            passengers: Price multiplier
            max_price: Optional ceiling on the passenger-multiplied total

        Returns:
            Surviving offers in generation order (not yet ranked)
        """
        stamp = epoch_millis(self.clock())
        candidate_count = self.rng.randint(MIN_CANDIDATES, MAX_CANDIDATES)

        offers = []
        for index in range(candidate_count):
            offer = self._build_offer(
                f"flight-{stamp}-{index}",
                origin, destination, departure_date, passengers, max_price
            )
            if offer is not None:
                offers.append(offer)

        return offers

    def _build_offer(
        self,
        offer_id: str,
        origin: str,
        destination: str,
        departure_date: str,
        passengers: int,
        max_price: Optional[float]
    ) -> Optional[FlightOffer]:
        rng = self.rng

        airline = rng.choice(ref.AIRLINES)
        flight_number = f"{ref.get_airline_code(airline)} {rng.randint(1000, 9999)}"
        aircraft = rng.choice(ref.AIRCRAFT_TYPES)

        departure_hour = rng.randint(6, 22)
        departure_minute = rng.randint(0, 59)

        duration_minutes = ref.get_route_duration(origin, destination) + rng.randint(-60, 59)

        stops = self._draw_stops()

        total = compute_total_price(
            ref.get_route_price(origin, destination),
            stops,
            departure_hour,
            ref.get_airline_price_factor(airline),
            rng.randint(-100, 99),
            passengers
        )
        if max_price is not None and total > max_price:
            return None

        breakdown = split_price(total, fees=rng.randint(20, 69))
        amenities = rng.sample(ref.AMENITIES, rng.randint(3, 7))
        deal = self._draw_deal()

        departure = self._endpoint(
            origin, departure_date, format_clock(departure_hour, departure_minute)
        )
        # Arrival keeps the departure date even when the clock wraps past midnight.
        arrival = self._endpoint(
            destination, departure_date,
            add_minutes_to_clock(departure_hour, departure_minute, duration_minutes)
        )

        carbon = int(duration_minutes * CARBON_PER_MINUTE + rng.uniform(0, 50))

        return FlightOffer(
            id=offer_id,
            airline=airline,
            flight_number=flight_number,
            aircraft=aircraft,
            departure=departure,
            arrival=arrival,
            duration=format_duration(duration_minutes),
            stops=stops,
            price=Price(total=total, currency=CURRENCY, breakdown=breakdown),
            cabin_class=CABIN_LABEL,
            amenities=amenities,
            booking_link=booking_link(flight_number),
            provider=PROVIDER,
            carbon_emission=carbon,
            deals=deal
        )

    def _draw_stops(self) -> int:
        # P(0)=0.6, P(1)=0.32, P(2)=0.08
        if self.rng.random() < 0.6:
            return 0
        return 1 if self.rng.random() < 0.8 else 2

    def _draw_deal(self) -> Optional[Deal]:
        if self.rng.random() >= DEAL_PROBABILITY:
            return None
        deal_type = self.rng.choice(list(DealType))
        savings = self.rng.randint(50, 199)
        return Deal(
            deal_type=deal_type,
            message=get_deal_message(deal_type, savings),
            savings=savings
        )

    def _draw_terminal(self) -> Optional[str]:
        if self.rng.random() < 0.5:
            return f"Terminal {self.rng.randint(1, 5)}"
        return None

    def _endpoint(self, iata: str, date: str, clock_time: str) -> FlightEndpoint:
        return FlightEndpoint(
            airport=ref.get_airport_name(iata),
            iata=iata.upper(),
            city=ref.get_city_name(iata),
            country=ref.get_country_name(iata),
            time=clock_time,
            date=date,
            terminal=self._draw_terminal()
        )
