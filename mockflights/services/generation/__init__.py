from .synthesizer import FlightSynthesizer, compute_total_price, split_price, is_red_eye
from .ranking import rank_offers, within_budget
from .helpers import (
    format_clock,
    format_duration,
    add_minutes_to_clock,
    get_deal_message,
    isoformat_utc
)

__all__ = [
    'FlightSynthesizer',
    'compute_total_price',
    'split_price',
    'is_red_eye',
    'rank_offers',
    'within_budget',
    'format_clock',
    'format_duration',
    'add_minutes_to_clock',
    'get_deal_message',
    'isoformat_utc'
]
