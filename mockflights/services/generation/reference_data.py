"""
Static reference tables used to seed realistic-looking offers.

Every lookup is total: unknown keys fall back to a fixed default instead
of raising, and IATA codes are matched case-insensitively.
"""

from typing import Dict, Tuple


# Mapping of IATA codes to airport details
AIRPORT_DATA = {
    'LAX': {'name': 'Los Angeles International Airport', 'city': 'Los Angeles', 'country': 'United States'},
    'JFK': {'name': 'John F. Kennedy International Airport', 'city': 'New York', 'country': 'United States'},
    'NRT': {'name': 'Narita International Airport', 'city': 'Tokyo', 'country': 'Japan'},
    'CDG': {'name': 'Charles de Gaulle Airport', 'city': 'Paris', 'country': 'France'},
    'LHR': {'name': 'Heathrow Airport', 'city': 'London', 'country': 'United Kingdom'},
    'DXB': {'name': 'Dubai International Airport', 'city': 'Dubai', 'country': 'United Arab Emirates'},
    'SIN': {'name': 'Singapore Changi Airport', 'city': 'Singapore', 'country': 'Singapore'},
    'HKG': {'name': 'Hong Kong International Airport', 'city': 'Hong Kong', 'country': 'Hong Kong'},
}

# Carrier data: code and price multiplier (budget < 1.0 < premium)
CARRIER_DATA = {
    'American Airlines': {'code': 'AA', 'price_factor': 1.0},
    'Delta Air Lines': {'code': 'DL', 'price_factor': 1.05},
    'United Airlines': {'code': 'UA', 'price_factor': 1.0},
    'JetBlue Airways': {'code': 'B6', 'price_factor': 0.9},
    'Southwest Airlines': {'code': 'WN', 'price_factor': 0.85},
    'Alaska Airlines': {'code': 'AS', 'price_factor': 0.95},
    'Spirit Airlines': {'code': 'NK', 'price_factor': 0.7},
    'Frontier Airlines': {'code': 'F9', 'price_factor': 0.75},
    'Japan Airlines': {'code': 'JL', 'price_factor': 1.15},
    'ANA': {'code': 'NH', 'price_factor': 1.15},
    'Emirates': {'code': 'EK', 'price_factor': 1.3},
    'Qatar Airways': {'code': 'QR', 'price_factor': 1.25},
    'Lufthansa': {'code': 'LH', 'price_factor': 1.1},
    'British Airways': {'code': 'BA', 'price_factor': 1.1},
    'Air France': {'code': 'AF', 'price_factor': 1.05},
    'KLM': {'code': 'KL', 'price_factor': 1.05},
    'Singapore Airlines': {'code': 'SQ', 'price_factor': 1.2},
    'Cathay Pacific': {'code': 'CX', 'price_factor': 1.15},
}

AIRLINES = tuple(CARRIER_DATA)

AIRCRAFT_TYPES = (
    'Boeing 737', 'Boeing 777', 'Boeing 787', 'Airbus A320', 'Airbus A330',
    'Airbus A350', 'Airbus A380', 'Boeing 747', 'Embraer E175',
)

AMENITIES = (
    'WiFi', 'In-flight Entertainment', 'Power Outlets', 'USB Ports',
    'Meal Service', 'Beverages', 'Extra Legroom', 'Priority Boarding',
    'Carry-on Included', 'Checked Bag Included',
)

# (origin, destination) -> base block time in minutes, per direction
ROUTE_DURATIONS: Dict[Tuple[str, str], int] = {
    ('LAX', 'NRT'): 665, ('NRT', 'LAX'): 600,
    ('LAX', 'CDG'): 690, ('CDG', 'LAX'): 720,
    ('LAX', 'JFK'): 315, ('JFK', 'LAX'): 360,
    ('LAX', 'LHR'): 660, ('LHR', 'LAX'): 690,
    ('JFK', 'CDG'): 450, ('CDG', 'JFK'): 480,
    ('JFK', 'NRT'): 840, ('NRT', 'JFK'): 780,
    ('JFK', 'LHR'): 420, ('LHR', 'JFK'): 450,
}

# (origin, destination) -> base one-way fare in USD
ROUTE_PRICES: Dict[Tuple[str, str], int] = {
    ('LAX', 'NRT'): 850, ('NRT', 'LAX'): 850,
    ('LAX', 'CDG'): 750, ('CDG', 'LAX'): 750,
    ('LAX', 'JFK'): 350, ('JFK', 'LAX'): 350,
    ('LAX', 'LHR'): 800, ('LHR', 'LAX'): 800,
    ('JFK', 'CDG'): 650, ('CDG', 'JFK'): 650,
    ('JFK', 'NRT'): 950, ('NRT', 'JFK'): 950,
    ('JFK', 'LHR'): 550, ('LHR', 'JFK'): 550,
}

DEFAULT_AIRLINE_CODE = 'XX'
DEFAULT_PRICE_FACTOR = 1.0
DEFAULT_ROUTE_DURATION = 480  # 8 hours
DEFAULT_ROUTE_PRICE = 500
DEFAULT_COUNTRY = 'Unknown'


def get_airline_code(airline: str) -> str:
    """Get the 2-letter carrier code for an airline name."""
    carrier = CARRIER_DATA.get(airline)
    return carrier['code'] if carrier else DEFAULT_AIRLINE_CODE


def get_airline_price_factor(airline: str) -> float:
    carrier = CARRIER_DATA.get(airline)
    return carrier['price_factor'] if carrier else DEFAULT_PRICE_FACTOR


def _route_key(origin: str, destination: str) -> Tuple[str, str]:
    return origin.upper(), destination.upper()


def get_route_duration(origin: str, destination: str) -> int:
    """Get the base flight duration in minutes for a directed route."""
    return ROUTE_DURATIONS.get(_route_key(origin, destination), DEFAULT_ROUTE_DURATION)


def get_route_price(origin: str, destination: str) -> int:
    """Get the base fare in USD for a directed route."""
    return ROUTE_PRICES.get(_route_key(origin, destination), DEFAULT_ROUTE_PRICE)


def get_airport_name(iata: str) -> str:
    code = iata.upper()
    airport = AIRPORT_DATA.get(code)
    return airport['name'] if airport else f"{code} Airport"


def get_city_name(iata: str) -> str:
    code = iata.upper()
    airport = AIRPORT_DATA.get(code)
    return airport['city'] if airport else code


def get_country_name(iata: str) -> str:
    airport = AIRPORT_DATA.get(iata.upper())
    return airport['country'] if airport else DEFAULT_COUNTRY
