"""
Measurement Models
==================
Pydantic models for what the gateway sends back to clients.

A measurement is stored as {"value": <as submitted>, "date": <server time>}.
MongoDB's _id is never part of these models, so it can never leak into a
response.

Author: Sensor Gateway Team
"""

from pydantic import BaseModel, Field
from typing import Union
from datetime import datetime


# =============================================================================
# RESPONSE MODELS - What backend returns to clients
# =============================================================================

class Measurement(BaseModel):
    """
    A single stored sensor measurement.

    Fields:
        value: The measure exactly as it was submitted (usually a string)
        date: When the gateway received it (set by the server, UTC)

    Example:
        {"value": "23.5", "date": "2026-10-19T10:15:00+00:00"}
    """
    value: Union[str, int, float] = Field(..., description="Measured value as submitted")
    date: datetime = Field(..., description="Server receipt timestamp")


class MeasureListResponse(BaseModel):
    """
    Response for GET /read/{value}/{scale}.

    At most 100 measurements, all newer than the requested window.
    """
    measures: list[Measurement] = Field(..., description="Measurements inside the window")


class MessageResponse(BaseModel):
    """Plain {"message": ...} body used by every other response."""
    message: str = Field(..., description="Human-readable result")
