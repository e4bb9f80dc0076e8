"""
Models Package
==============

Data shapes the API returns. Import from here instead of the individual files.

Example:
    from sensor_gateway.models import Measurement, MeasureListResponse
"""

from .measure import (
    Measurement,
    MeasureListResponse,
    MessageResponse,
)

__all__ = [
    "Measurement",
    "MeasureListResponse",
    "MessageResponse",
]
