"""
Time Window Translator
======================

Turns "2 hours" into the timestamp two hours ago.
"""

from datetime import datetime, timedelta, timezone


SCALE_SECONDS = {
    "hours": 3600,
    "mins": 60,
    "secs": 1,
}

# Cutoff for windows reaching back further than datetime can represent
EARLIEST_DATE = datetime.min.replace(tzinfo=timezone.utc)


class UnsupportedScaleError(ValueError):
    """The requested scale is not one of SCALE_SECONDS."""


def scale_to_seconds(value: int, scale: str) -> int:
    """
    Convert a value+scale pair into seconds.

    Raises:
        UnsupportedScaleError: If scale is not hours, mins or secs
    """
    try:
        return value * SCALE_SECONDS[scale]
    except KeyError:
        raise UnsupportedScaleError(f"Unsupported scale: {scale}")


def seconds_to_date(seconds: int) -> datetime:
    """
    Current UTC time minus `seconds`.

    Windows larger than the representable range clamp to EARLIEST_DATE.
    """
    try:
        return datetime.now(timezone.utc) - timedelta(seconds=seconds)
    except OverflowError:
        return EARLIEST_DATE
