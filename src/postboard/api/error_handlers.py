"""Global exception handlers.

Learn: Every failure leaves the API as JSON, never as a half-written
success:
    PostboardError         → {"error": message} with the error's status
    RequestValidationError → 400 {"errors": [{"msg", "path", "location"}, ...]}
    SQLAlchemyError / any  → 500 {"error": "Internal server error"}, details
                             only in the log
"""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from postboard.errors import PostboardError

logger = structlog.get_logger()

INTERNAL_ERROR = {"error": "Internal server error"}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(PostboardError)
    async def postboard_error_handler(request: Request, exc: PostboardError):
        if exc.status_code >= 500:
            logger.error("http.error", path=request.url.path, error=exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = [format_validation_error(e) for e in exc.errors()]
        logger.info("http.validation_failed", path=request.url.path, errors=errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors}
        )

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("storage.unhandled", path=request.url.path, error=str(exc))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=INTERNAL_ERROR
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error("http.unhandled", path=request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=INTERNAL_ERROR
        )


def format_validation_error(error: dict) -> dict:
    """One pydantic error → {"msg", "path", "location"}.

    Messages raised by our own field validators are reported verbatim,
    without pydantic's "Value error, " prefix.
    """
    loc = error.get("loc", ())
    location = str(loc[0]) if loc else ""
    path = ".".join(str(part) for part in loc[1:])

    msg = error.get("msg", "Invalid value")
    cause = (error.get("ctx") or {}).get("error")
    if error.get("type") == "value_error" and cause:
        msg = str(cause)

    return {"msg": msg, "path": path, "location": location}
