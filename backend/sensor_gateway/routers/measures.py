"""
Measures API Router
===================

The three endpoints sensors and dashboards use.

ALL ENDPOINTS:
-------------
POST   /sensor                - Save a measurement      (Bearer write token)
GET    /read/{value}/{scale}  - Measurements since now - value*scale
DELETE /measures              - Delete every measurement (Bearer delete token)

HOW IT WORKS:
------------
1. The auth dependency rejects bad tokens before the handler runs
2. The handler checks its input (400 if it is missing or invalid)
3. We call the MeasureStore to do the work
4. We answer with JSON: {"message": ...} or {"measures": [...]}

Anything unexpected inside a handler becomes a 500 with
{"message": "Error not expected: ..."}.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool

from sensor_gateway.errors import MeasureAPIError, unexpected_errors
from sensor_gateway.models import Measurement, MeasureListResponse, MessageResponse
from sensor_gateway.services import MeasureStore
from sensor_gateway.utils import (
    UnsupportedScaleError,
    extract_measure,
    parse_positive_int,
    require_delete_token,
    require_write_token,
    scale_to_seconds,
    seconds_to_date,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["measures"])


# =============================================================================
# DEPENDENCY INJECTION
# =============================================================================

def get_measure_store(request: Request) -> MeasureStore:
    """
    Get the store the app opened at startup.

    Every endpoint that needs the database uses this.
    """
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise MeasureAPIError(500, "Server not fully started yet")
    return store


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("/sensor", status_code=202, response_model=MessageResponse)
async def create_measure(
    request: Request,
    _token: str = Depends(require_write_token),
    store: MeasureStore = Depends(get_measure_store),
):
    """
    Save a measurement.

    Send us:
        {"measure": "23.5"}

    The date is set here, at the moment we receive it.
    """
    with unexpected_errors():
        try:
            payload = await request.json()
        except ValueError:
            payload = None

        measure = extract_measure(payload)
        if measure is None:
            raise MeasureAPIError(400, "Please send a valid JSON")

        saved = await run_in_threadpool(store.save, measure)
        if not saved:
            raise MeasureAPIError(500, "Failed to save data")

        logger.info(f"Saved measure: {measure}")
        return MessageResponse(message=f"Saved: {measure}")


@router.get("/read/{value}/{scale}", response_model=MeasureListResponse)
def read_measures(
    value: str,
    scale: str,
    store: MeasureStore = Depends(get_measure_store),
):
    """
    Get the measurements from the last `value` `scale`.

    Scale is one of: hours, mins, secs
    - /read/2/hours = everything from the last 2 hours
    - /read/30/mins = everything from the last 30 minutes

    Returns at most 100 measurements.
    """
    with unexpected_errors():
        amount = parse_positive_int(value)
        if amount is None or not scale:
            raise MeasureAPIError(400, "Please send a valid value and scale")

        try:
            seconds = scale_to_seconds(amount, scale)
        except UnsupportedScaleError:
            raise MeasureAPIError(400, "Not implemented")

        cutoff = seconds_to_date(seconds)
        documents = store.read(cutoff)
        return MeasureListResponse(measures=[Measurement(**doc) for doc in documents])


@router.delete("/measures", response_model=MessageResponse)
def delete_measures(
    _token: str = Depends(require_delete_token),
    store: MeasureStore = Depends(get_measure_store),
):
    """
    Delete ALL measurements.

    There's no undo! Make sure you want to do this.
    """
    with unexpected_errors():
        if not store.delete_all():
            raise MeasureAPIError(500, "Failed to delete data")

        logger.info("All measures deleted")
        return MessageResponse(message="Deleted")
