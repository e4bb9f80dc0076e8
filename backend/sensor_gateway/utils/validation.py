"""
Input Validation Utilities
===========================

Presence checks for the two things clients send us: a measure in a JSON
body and a time window in the URL.

Author: Sensor Gateway Team
"""

import re
from typing import Any, Optional, Union


_DIGITS = re.compile(r'^[0-9]+$')


def parse_positive_int(raw: Optional[str]) -> Optional[int]:
    """
    Parse a path segment as a positive integer.

    Args:
        raw: Raw string from the URL (e.g., "2")

    Returns:
        The integer if it is > 0, otherwise None (missing, non-numeric, zero)
    """
    if raw is None or not _DIGITS.match(raw.strip()):
        return None
    value = int(raw.strip())
    return value if value > 0 else None


def extract_measure(payload: Any) -> Optional[Union[str, int, float]]:
    """
    Pull the "measure" field out of a decoded JSON body.

    Args:
        payload: Whatever json decoding produced

    Returns:
        The measure if present and non-empty, otherwise None.
        Only strings and numbers count; booleans, lists and objects don't.
    """
    if not isinstance(payload, dict):
        return None
    measure = payload.get("measure")
    if isinstance(measure, bool) or not isinstance(measure, (str, int, float)):
        return None
    if not measure:
        return None
    return measure
