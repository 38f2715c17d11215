"""Application-wide HTTP error handlers."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as 400 Bad Request.

    FastAPI answers 422 by default; clients of this API expect 400 for
    any missing or invalid field.
    """
    logfire.warn(
        "Request validation failed",
        path=request.url.path,
        errors=jsonable_encoder(exc.errors()),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach error handlers to the application."""
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
