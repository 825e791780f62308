"""
API models package
"""

from .schemas import (
    FlightSearchRequest,
    FlightSearchResponse,
    FlightOffer,
    FlightEndpoint,
    Price,
    PriceBreakdown,
    Deal,
    DealType,
    SearchMetadata,
    ErrorResponse,
    CabinClass
)

__all__ = [
    'FlightSearchRequest',
    'FlightSearchResponse',
    'FlightOffer',
    'FlightEndpoint',
    'Price',
    'PriceBreakdown',
    'Deal',
    'DealType',
    'SearchMetadata',
    'ErrorResponse',
    'CabinClass'
]
