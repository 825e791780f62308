import random
import re
from datetime import datetime, timezone

import pytest

from mockflights.models import DealType
from mockflights.services.generation import (
    FlightSynthesizer,
    add_minutes_to_clock,
    compute_total_price,
    format_duration,
    get_deal_message,
    is_red_eye,
    split_price,
)
from mockflights.services.generation import reference_data as ref


FIXED_NOW = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)
FIXED_MILLIS = 1709294400000


def make_synth(seed):
    return FlightSynthesizer(rng=random.Random(seed), clock=lambda: FIXED_NOW)


def parse_duration(text):
    match = re.fullmatch(r"(\d+)h (\d+)m", text)
    assert match, text
    return int(match.group(1)) * 60 + int(match.group(2))


def test_compute_total_price_rules():
    assert compute_total_price(350, 0, 10, 1.0, 0, 1) == 350
    # stops add 50 each, red-eye subtracts 30
    assert compute_total_price(350, 2, 10, 1.0, 0, 1) == 450
    assert compute_total_price(350, 0, 6, 1.0, 0, 1) == 320
    assert compute_total_price(350, 0, 21, 1.0, 0, 1) == 320
    assert compute_total_price(350, 0, 20, 1.0, 0, 1) == 350
    assert compute_total_price(500, 1, 12, 0.7, -40, 1) == 345
    assert compute_total_price(500, 1, 12, 0.7, -40, 3) == 1035


def test_red_eye_window():
    assert is_red_eye(6)
    assert is_red_eye(7)
    assert not is_red_eye(8)
    assert not is_red_eye(20)
    assert is_red_eye(21)
    assert is_red_eye(22)


def test_split_price_identity():
    breakdown = split_price(1001, fees=37)
    assert breakdown.taxes == 150
    assert breakdown.fees == 37
    assert breakdown.base + breakdown.taxes + breakdown.fees == 1001


def test_clock_helpers():
    assert format_duration(315) == "5h 15m"
    assert format_duration(60) == "1h 0m"
    assert add_minutes_to_clock(9, 15, 325) == "14:40"
    assert add_minutes_to_clock(22, 30, 120) == "00:30"


def test_deal_messages():
    assert get_deal_message(DealType.PRICE_ALERT, 75) == "Price dropped $75! Book now to save."
    assert get_deal_message(DealType.LAST_MINUTE, 120) == "Last-minute deal! Save $120 on this flight."
    assert get_deal_message(DealType.EARLY_BIRD, 50) == "Early bird special! Save $50 by booking in advance."


@pytest.mark.parametrize("seed", range(25))
def test_generated_offer_invariants(seed):
    offers = make_synth(seed).generate("LAX", "JFK", "2024-03-15", passengers=1)

    assert 8 <= len(offers) <= 20
    ids = [offer.id for offer in offers]
    assert len(set(ids)) == len(ids)

    for offer in offers:
        assert offer.id.startswith(f"flight-{FIXED_MILLIS}-")
        assert offer.airline in ref.AIRLINES
        assert offer.aircraft in ref.AIRCRAFT_TYPES
        code, digits = offer.flight_number.split(" ")
        assert code == ref.get_airline_code(offer.airline)
        assert 1000 <= int(digits) <= 9999
        assert offer.booking_link == f"https://skyscanner.com/booking/{code}-{digits}"
        assert offer.provider == "Skyscanner"
        assert offer.cabin_class == "Economy"

        assert offer.stops in (0, 1, 2)

        breakdown = offer.price.breakdown
        assert offer.price.currency == "USD"
        assert breakdown.base + breakdown.taxes + breakdown.fees == offer.price.total
        assert breakdown.taxes == int(offer.price.total * 0.15)
        assert 20 <= breakdown.fees <= 69

        assert 3 <= len(offer.amenities) <= 7
        assert len(set(offer.amenities)) == len(offer.amenities)
        assert set(offer.amenities) <= set(ref.AMENITIES)

        minutes = parse_duration(offer.duration)
        assert 315 - 60 <= minutes <= 315 + 60
        assert int(minutes * 0.12) <= offer.carbon_emission <= int(minutes * 0.12 + 50)

        if offer.deals is not None:
            assert 50 <= offer.deals.savings <= 199
            assert offer.deals.message == get_deal_message(offer.deals.deal_type, offer.deals.savings)


@pytest.mark.parametrize("seed", range(10))
def test_endpoints_and_arrival_clock(seed):
    for offer in make_synth(seed).generate("lax", "jfk", "2024-03-15"):
        assert offer.departure.iata == "LAX"
        assert offer.arrival.iata == "JFK"
        assert offer.departure.city == "Los Angeles"
        assert offer.arrival.airport == "John F. Kennedy International Airport"
        assert offer.arrival.country == "United States"

        hour, minute = (int(part) for part in offer.departure.time.split(":"))
        assert 6 <= hour <= 22
        expected = add_minutes_to_clock(hour, minute, parse_duration(offer.duration))
        assert offer.arrival.time == expected

        # arrival keeps the departure date even past midnight
        assert offer.arrival.date == offer.departure.date == "2024-03-15"

        for endpoint in (offer.departure, offer.arrival):
            assert endpoint.terminal is None or re.fullmatch(r"Terminal [1-5]", endpoint.terminal)


def test_price_traces_to_route_base():
    for offer in make_synth(7).generate("LAX", "JFK", "2024-03-15"):
        hour = int(offer.departure.time[:2])
        adjustment = -30 if is_red_eye(hour) else 0
        factor = ref.get_airline_price_factor(offer.airline)
        expected = (350 + offer.stops * 50 + adjustment) * factor
        assert abs(offer.price.total - expected) <= 101


def test_same_seed_reproduces_offers():
    first = make_synth(99).generate("JFK", "CDG", "2024-05-01", passengers=2)
    second = make_synth(99).generate("JFK", "CDG", "2024-05-01", passengers=2)
    assert [o.model_dump() for o in first] == [o.model_dump() for o in second]


@pytest.mark.parametrize("seed", [1, 2, 3, 42])
def test_passenger_count_scales_total_exactly(seed):
    single = make_synth(seed).generate("LAX", "JFK", "2024-03-15", passengers=1)
    double = make_synth(seed).generate("LAX", "JFK", "2024-03-15", passengers=2)

    assert len(single) == len(double)
    for one, two in zip(single, double):
        assert one.airline == two.airline
        assert one.flight_number == two.flight_number
        assert two.price.total == 2 * one.price.total


def test_max_price_discards_candidates():
    offers = make_synth(5).generate("LAX", "NRT", "2024-03-15", max_price=900)
    assert all(offer.price.total <= 900 for offer in offers)
    assert len(offers) <= 20


def test_unreachable_budget_yields_empty_list():
    assert make_synth(5).generate("LAX", "JFK", "2024-03-15", max_price=1) == []


def test_unknown_route_uses_fallbacks():
    offers = make_synth(11).generate("AAA", "BBB", "2024-03-15")
    assert offers
    for offer in offers:
        assert offer.departure.airport == "AAA Airport"
        assert offer.departure.city == "AAA"
        assert offer.arrival.country == "Unknown"
        assert 420 <= parse_duration(offer.duration) <= 540
