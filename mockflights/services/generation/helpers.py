"""
Helper utilities for offer generation
"""
from datetime import datetime, timezone

from mockflights.models import DealType


MINUTES_PER_DAY = 24 * 60

DEAL_MESSAGES = {
    DealType.PRICE_ALERT: "Price dropped ${savings}! Book now to save.",
    DealType.LAST_MINUTE: "Last-minute deal! Save ${savings} on this flight.",
    DealType.EARLY_BIRD: "Early bird special! Save ${savings} by booking in advance.",
}


def format_clock(hour: int, minute: int) -> str:
    """Render a wall-clock time as zero-padded HH:MM."""
    return f"{hour:02d}:{minute:02d}"


def format_duration(total_minutes: int) -> str:
    """Render a duration in minutes as "<h>h <m>m"."""
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h {minutes}m"


def add_minutes_to_clock(hour: int, minute: int, duration_minutes: int) -> str:
    """
    Add a duration to a clock time, wrapping modulo 24 hours.

    Only the clock time is returned; callers that need a date keep the
    departure date as-is.
    """
    total = (hour * 60 + minute + duration_minutes) % MINUTES_PER_DAY
    return format_clock(*divmod(total, 60))


def get_deal_message(deal_type: DealType, savings: int) -> str:
    template = DEAL_MESSAGES.get(deal_type, "Special deal! Save ${savings}.")
    return template.format(savings=savings)


def booking_link(flight_number: str) -> str:
    return f"https://skyscanner.com/booking/{flight_number.replace(' ', '-')}"


def epoch_millis(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


def isoformat_utc(moment: datetime) -> str:
    """ISO 8601 with millisecond precision and a trailing Z."""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
