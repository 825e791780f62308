"""
Flight generation services
"""

from .flight_service import FlightSearchService

__all__ = ['FlightSearchService']
