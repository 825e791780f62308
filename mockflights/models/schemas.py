"""
FastAPI Request/Response Models for the Mock Flights API
JSON field names are camelCase; Python attributes stay snake_case
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from enum import Enum


class CabinClass(str, Enum):
    """Cabin class options"""
    ECONOMY = "economy"
    BUSINESS = "business"
    FIRST = "first"


class DealType(str, Enum):
    """Promotional annotations an offer may carry"""
    PRICE_ALERT = "priceAlert"
    LAST_MINUTE = "lastMinute"
    EARLY_BIRD = "earlyBird"


class FlightSearchRequest(BaseModel):
    """
    Flight search request model.

    origin, destination and departureDate are optional at the schema level;
    their presence is checked by the search service so a missing field
    produces the API's own 400 error body.
    """
    origin: Optional[str] = Field(default=None, description="Origin airport IATA code")
    destination: Optional[str] = Field(default=None, description="Destination airport IATA code")
    departure_date: Optional[str] = Field(default=None, alias="departureDate", description="Departure date")
    return_date: Optional[str] = Field(default=None, alias="returnDate", description="Return date")
    passengers: int = Field(default=1, ge=1, le=9, description="Number of passengers")
    cabin_class: CabinClass = Field(default=CabinClass.ECONOMY, alias="class", description="Cabin class")
    max_price: Optional[float] = Field(default=None, alias="maxPrice", description="Price ceiling (total, USD)")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "origin": "LAX",
                "destination": "JFK",
                "departureDate": "2024-03-15",
                "passengers": 1,
                "class": "economy",
                "maxPrice": 800
            }
        }


class FlightEndpoint(BaseModel):
    """Departure or arrival side of an offer"""
    airport: str
    iata: str
    city: str
    country: str
    time: str = Field(..., pattern=r"^([0-1][0-9]|2[0-3]):[0-5][0-9]$", description="Local clock time")
    date: str
    terminal: Optional[str] = None


class PriceBreakdown(BaseModel):
    base: int
    taxes: int
    fees: int


class Price(BaseModel):
    """Price information"""
    total: int = Field(..., description="Total price for all passengers")
    currency: str = Field(default="USD", description="Currency code")
    breakdown: PriceBreakdown


class Deal(BaseModel):
    deal_type: DealType = Field(..., alias="type")
    message: str
    savings: int

    class Config:
        populate_by_name = True


class FlightOffer(BaseModel):
    """A single synthetic flight result"""
    id: str = Field(..., description="Offer ID, unique within one search")
    airline: str
    flight_number: str = Field(..., alias="flightNumber")
    aircraft: str
    departure: FlightEndpoint
    arrival: FlightEndpoint
    duration: str = Field(..., description='Duration rendered as "<h>h <m>m"')
    stops: int = Field(..., ge=0, le=2, description="Number of stops")
    price: Price
    cabin_class: str = Field(default="Economy", alias="class")
    amenities: List[str]
    booking_link: str = Field(..., alias="bookingLink")
    provider: str
    carbon_emission: int = Field(..., alias="carbonEmission", description="Estimated kg CO2")
    deals: Optional[Deal] = None

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "id": "flight-1710460800000-0",
                "airline": "Delta Air Lines",
                "flightNumber": "DL 4821",
                "aircraft": "Boeing 737",
                "departure": {
                    "airport": "Los Angeles International Airport",
                    "iata": "LAX",
                    "city": "Los Angeles",
                    "country": "United States",
                    "time": "09:15",
                    "date": "2024-03-15",
                    "terminal": "Terminal 4"
                },
                "arrival": {
                    "airport": "John F. Kennedy International Airport",
                    "iata": "JFK",
                    "city": "New York",
                    "country": "United States",
                    "time": "14:40",
                    "date": "2024-03-15"
                },
                "duration": "5h 25m",
                "stops": 0,
                "price": {
                    "total": 402,
                    "currency": "USD",
                    "breakdown": {"base": 307, "taxes": 60, "fees": 35}
                },
                "class": "Economy",
                "amenities": ["WiFi", "Beverages", "USB Ports"],
                "bookingLink": "https://skyscanner.com/booking/DL-4821",
                "provider": "Skyscanner",
                "carbonEmission": 61
            }
        }


class SearchMetadata(BaseModel):
    """Search result metadata, echoing the request"""
    origin: str
    destination: str
    departure_date: str = Field(..., alias="departureDate")
    return_date: Optional[str] = Field(default=None, alias="returnDate")
    passengers: int
    search_time: str = Field(..., alias="searchTime", description="ISO 8601 generation timestamp")
    total_results: int = Field(..., alias="totalResults")

    class Config:
        populate_by_name = True


class FlightSearchResponse(BaseModel):
    """Flight search response model"""
    flights: List[FlightOffer] = Field(..., description="Offers sorted by ascending total price")
    search_meta: SearchMetadata = Field(..., alias="searchMeta")

    class Config:
        populate_by_name = True


class ErrorResponse(BaseModel):
    """Error response model"""
    error: str = Field(..., description="Human-readable error message")

    class Config:
        json_schema_extra = {
            "example": {
                "error": "Origin, destination, and departure date are required"
            }
        }
