"""Error Handlers — global exception handlers (the error responder).

Invariants:
    - GrubDashError → its http_status with {"error": message}
    - RequestValidationError (unparseable or non-object body) → 400
    - Unknown path → 404, known path with wrong method → 405
    - Exception (catch-all) → 500, never leaks internal details
    - Every error body has the same shape: {"error": <message>}

Design Decisions:
    - Four-layer handler: domain (GrubDashError), body parsing (RequestValidationError),
      routing fallbacks (HTTPException), catch-all (Exception)
    - Client rejections logged at INFO: they are expected traffic, not faults
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import GrubDashError

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Request body must be a JSON object"
INTERNAL_ERROR_MESSAGE = "Something went wrong!"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_grubdash_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _register_grubdash_error_handler(app: FastAPI) -> None:
    """Register handler for rejected pipelines."""

    @app.exception_handler(GrubDashError)
    async def grubdash_error_handler(request: Request, exc: GrubDashError):
        logger.info(
            f"Request rejected: {exc.message}",
            extra={
                "error_code": exc.code,
                "status_code": exc.http_status,
                "path": request.url.path,
                "method": request.method,
                "resource": exc.context.resource,
                "resource_id": exc.context.resource_id,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register handler for bodies FastAPI could not parse into a JSON object."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Invalid body on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "method": request.method},
        )
        return error_response(status.HTTP_400_BAD_REQUEST, INVALID_BODY_MESSAGE)


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing fallbacks (unknown path, unsupported method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        path = request.url.path
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            message = f"Path not found: {path}"
        elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            message = f"{request.method} not allowed for {path}"
        else:
            message = str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": message},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
        )
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE,
        )
