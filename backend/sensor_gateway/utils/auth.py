"""
Bearer Token Checks
===================

FastAPI dependencies guarding the write and delete endpoints.

Expected header: "Authorization: Bearer <token>"
The tokens come from the Config built at startup (app.state.config).

Responses:
- Missing header or wrong token -> 401
- Header that isn't "Bearer <token>" -> 400
"""

import secrets
from typing import Optional

from fastapi import Header, Request

from sensor_gateway.errors import MeasureAPIError


def _auth_error(status_code: int, message: str, error: Optional[str] = None) -> MeasureAPIError:
    challenge = "Bearer" if error is None else f'Bearer error="{error}"'
    return MeasureAPIError(status_code, message, headers={"WWW-Authenticate": challenge})


def verify_bearer_token(authorization: Optional[str], expected: str) -> str:
    """
    Verify the bearer token from the Authorization header.

    Args:
        authorization: Value of Authorization header
        expected: Token configured for this route

    Returns:
        The verified token

    Raises:
        MeasureAPIError: 401 if the header is missing or the token is wrong,
            400 if the header is malformed
    """
    if not authorization:
        raise _auth_error(401, "Missing Authorization header. Expected: Bearer <token>")

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1]:
        raise _auth_error(400, "Invalid Authorization format. Expected: Bearer <token>", "invalid_request")

    token = parts[1]
    if not secrets.compare_digest(token.encode("utf-8"), expected.encode("utf-8")):
        raise _auth_error(401, "Unauthorized", "invalid_token")

    return token


def require_write_token(
    request: Request,
    authorization: Optional[str] = Header(None),
) -> str:
    """Dependency for routes that store measurements."""
    return verify_bearer_token(authorization, request.app.state.config.token_write)


def require_delete_token(
    request: Request,
    authorization: Optional[str] = Header(None),
) -> str:
    """Dependency for routes that delete measurements."""
    return verify_bearer_token(authorization, request.app.state.config.token_delete)
