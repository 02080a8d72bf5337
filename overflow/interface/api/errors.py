"""Exception handlers shared by every route."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


def _error_path(loc: tuple) -> str:
    return "".join(f".{part}" for part in loc)


def validation_error_body(exc: RequestValidationError) -> dict:
    """Render request validation failures as field-level descriptors.

    Args:
        exc: The validation error raised while parsing the request

    Returns:
        ``{"message": "Validation failed", "errors": [...]}`` where every item
        carries ``path`` (``.body.ans.text``), ``message`` and ``errorCode``
    """
    return {
        "message": "Validation failed",
        "errors": [
            {
                "path": _error_path(tuple(error.get("loc", ()))),
                "message": error.get("msg", "invalid value"),
                "errorCode": f"{error.get('type', 'value')}.openapi.validation",
            }
            for error in exc.errors()
        ],
    }


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logfire.warn(
        "Request validation failed", path=request.url.path, errors=len(exc.errors())
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=validation_error_body(exc),
    )


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Dict details are sent as the body; string details become ``{"error": ...}``."""
    content = exc.detail if isinstance(exc.detail, dict) else {"error": exc.detail}
    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal Server Error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach the exception handlers to the application."""
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
