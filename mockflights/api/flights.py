"""
Flight API endpoints
"""

import logging

from fastapi import APIRouter, Depends, status

from mockflights.core.dependencies import get_flight_service
from mockflights.core.exceptions import FlightServiceError, InternalError
from mockflights.models import (
    FlightSearchRequest, FlightSearchResponse, FlightOffer, ErrorResponse
)
from mockflights.services import FlightSearchService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/flights", tags=["flights"])


@router.post(
    "/search",
    response_model=FlightSearchResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse, "description": "Missing required fields"},
        500: {"model": ErrorResponse, "description": "Internal server error"}
    },
    summary="Search for flights",
    description="Generate mock flight offers for a route, cheapest first"
)
async def search_flights(
    request: FlightSearchRequest,
    service: FlightSearchService = Depends(get_flight_service)
) -> FlightSearchResponse:
    """
    Search for flights based on criteria

    - **origin**: Origin airport IATA code
    - **destination**: Destination airport IATA code
    - **departureDate**: Departure date
    - **returnDate**: Optional return date, echoed in searchMeta
    - **passengers**: Number of passengers (1-9), multiplies the price
    - **class**: Cabin class (economy, business, first)
    - **maxPrice**: Optional ceiling on the total price

    Returns offers sorted by ascending total price.
    """
    try:
        return await service.search(request)
    except FlightServiceError:
        raise
    except Exception:
        logger.exception("Error searching flights")
        raise InternalError()


@router.get(
    "/{flight_id}",
    response_model=FlightOffer,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse, "description": "Missing flight ID"},
        500: {"model": ErrorResponse, "description": "Internal server error"}
    },
    summary="Get flight details",
    description="Synthesize a single offer labelled with the requested ID"
)
async def get_flight_details(
    flight_id: str,
    service: FlightSearchService = Depends(get_flight_service)
) -> FlightOffer:
    """
    Offers are not stored, so the returned flight is generated on the spot
    and only its id matches the request.
    """
    try:
        return service.get_flight(flight_id)
    except FlightServiceError:
        raise
    except Exception:
        logger.exception("Error getting flight details")
        raise InternalError()
