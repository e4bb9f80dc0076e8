"""
API Errors
==========
Exceptions the handlers raise and the JSON body FastAPI turns them into.

Every error the gateway answers with looks like {"message": "..."}.
"""

import logging
from contextlib import contextmanager
from typing import Optional

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class MeasureAPIError(Exception):
    """
    An error with a known HTTP status and client-facing message.

    Args:
        status_code: HTTP status to answer with
        message: Text placed in the "message" field
        headers: Extra response headers (e.g. WWW-Authenticate)
    """

    def __init__(self, status_code: int, message: str, headers: Optional[dict[str, str]] = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.headers = headers


async def measure_api_error_handler(request: Request, exc: MeasureAPIError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message},
        headers=exc.headers,
    )


@contextmanager
def unexpected_errors():
    """
    Error boundary around a handler body.

    Anything that is not already an API error becomes a 500 with
    {"message": "Error not expected: <description>"}.
    """
    try:
        yield
    except (MeasureAPIError, HTTPException):
        raise
    except Exception as e:
        logger.exception(f"Unexpected error while handling request: {e}")
        raise MeasureAPIError(500, f"Error not expected: {e}") from e
