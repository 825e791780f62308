"""
Budget filtering and price ranking of generated offers
"""
from typing import Iterable, List, Optional

from mockflights.models import FlightOffer


def within_budget(offer: FlightOffer, max_price: Optional[float]) -> bool:
    return max_price is None or offer.price.total <= max_price


def rank_offers(
    offers: Iterable[FlightOffer],
    max_price: Optional[float] = None
) -> List[FlightOffer]:
    """
    Drop offers above max_price and sort the rest by ascending total.

    sorted() is stable, so equally priced offers keep generation order.
    """
    return sorted(
        (offer for offer in offers if within_budget(offer, max_price)),
        key=lambda offer: offer.price.total
    )
