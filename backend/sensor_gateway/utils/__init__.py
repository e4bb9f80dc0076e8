"""
Utility modules for the sensor gateway.
"""

from sensor_gateway.utils.validation import (
    parse_positive_int,
    extract_measure,
)
from sensor_gateway.utils.time_window import (
    SCALE_SECONDS,
    EARLIEST_DATE,
    UnsupportedScaleError,
    scale_to_seconds,
    seconds_to_date,
)
from sensor_gateway.utils.auth import (
    verify_bearer_token,
    require_write_token,
    require_delete_token,
)

__all__ = [
    "parse_positive_int",
    "extract_measure",
    "SCALE_SECONDS",
    "EARLIEST_DATE",
    "UnsupportedScaleError",
    "scale_to_seconds",
    "seconds_to_date",
    "verify_bearer_token",
    "require_write_token",
    "require_delete_token",
]
