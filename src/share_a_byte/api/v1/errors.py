"""Translation of service errors into HTTP responses."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from share_a_byte.core.errors import ErrorKind, RecordNotFoundError, ShareAByteError

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.AUTHORIZATION: status.HTTP_403_FORBIDDEN,
    ErrorKind.DOMAIN_STATE: status.HTTP_409_CONFLICT,
    ErrorKind.DEPENDENCY: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def status_for(exc: ShareAByteError) -> int:
    """Return the HTTP status code for a service error."""
    if isinstance(exc, RecordNotFoundError):
        return status.HTTP_404_NOT_FOUND
    return STATUS_BY_KIND[exc.kind]


async def share_a_byte_error_handler(_request: Request, exc: ShareAByteError) -> JSONResponse:
    """Render a service error as ``{"detail", "kind"}``."""
    return JSONResponse(
        status_code=status_for(exc),
        content={"detail": exc.message, "kind": exc.kind.value},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the service error handler on the application."""
    app.add_exception_handler(ShareAByteError, share_a_byte_error_handler)  # type: ignore[arg-type]
