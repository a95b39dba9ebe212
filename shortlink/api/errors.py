"""Translation of workflow failures into HTTP responses."""

from typing import Optional

from fastapi.responses import JSONResponse

from ..services.links import ErrorKind, Failure

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.STORAGE: 500,
    ErrorKind.CONFIGURATION: 500,
}


def error_response(kind: ErrorKind, message: str, headers: Optional[dict] = None) -> JSONResponse:
    """Build the JSON error body for a failure category.

    Args:
        kind: Failure category.
        message: Stable, client-safe message.
        headers: Extra response headers.

    Returns:
        JSON response with the mapped status code.
    """
    return JSONResponse(
        status_code=STATUS_BY_KIND[kind],
        content={"detail": message, "error_code": kind.value},
        headers=headers,
    )


def failure_response(failure: Failure, headers: Optional[dict] = None) -> JSONResponse:
    """Build the HTTP response for a workflow failure."""
    return error_response(failure.kind, failure.message, headers)
