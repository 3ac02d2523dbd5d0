import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def error_payload(
    *,
    error: str,
    type_: str,
    code: Optional[str] = None,
    details: Any = None,
) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"error": error, "code": code, "type": type_}
    if details is not None:
        payload["details"] = details
    return payload


class QuizBuilderException(Exception):
    """Base exception for the quiz builder.

    Raised from service functions invoked by request handlers so the handlers
    registered in ``register_exception_handlers`` can translate them.
    """

    status_code: int = 400
    default_code: Optional[str] = None
    default_message: str = "Request failed"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Any = None,
    ) -> None:
        self.message = message if message is not None else self.default_message
        self.code = code if code is not None else self.default_code
        self.status_code = status_code if status_code is not None else self.status_code
        self.details = details
        super().__init__(self.message)


class QuizValidationError(QuizBuilderException):
    """The creation payload broke one or more schema rules."""

    status_code = 400
    default_code = "validation_error"
    default_message = "Validation failed"

    def __init__(self, violations: List[Dict[str, str]], message: Optional[str] = None) -> None:
        self.violations = violations
        super().__init__(message, details=violations)


class MalformedIdentifierError(QuizBuilderException):
    status_code = 400
    default_code = "invalid_identifier"
    default_message = "Invalid quiz identifier"


class QuizNotFoundError(QuizBuilderException):
    status_code = 404
    default_code = "quiz_not_found"
    default_message = "Quiz not found"


class StorageError(QuizBuilderException):
    """Any persistence failure other than a missing row.

    The persistence layer logs the original cause, which stays on
    ``__cause__`` and is never rendered to the client.
    """

    status_code = 500
    default_code = "storage_error"
    default_message = "Internal server error. Please try again later."


def register_exception_handlers(app: FastAPI) -> None:
    """Register the quiz builder exception handlers on a FastAPI app."""

    @app.exception_handler(QuizBuilderException)
    async def _quiz_builder_exception_handler(_request: Request, exc: QuizBuilderException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_payload(
                error=exc.message,
                code=exc.code,
                type_=exc.__class__.__name__,
                details=exc.details,
            ),
        )

    @app.exception_handler(RequestValidationError)
    async def _request_validation_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
        details = [
            {"field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"), "message": err.get("msg", "")}
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=400,
            content=error_payload(
                error="Validation failed",
                code="validation_error",
                type_=exc.__class__.__name__,
                details=details,
            ),
        )

    @app.exception_handler(StarletteHTTPException)
    async def _http_exception_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
        detail = getattr(exc, "detail", None)
        if isinstance(detail, str):
            error, details = detail, None
        else:
            error, details = "Request failed", detail
        return JSONResponse(
            status_code=exc.status_code,
            content=error_payload(
                error=error,
                code="http_exception",
                type_=exc.__class__.__name__,
                details=details,
            ),
        )

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(_request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception: %s", exc)
        return JSONResponse(
            status_code=500,
            content=error_payload(
                error="Internal server error. Please try again later.",
                code="internal_error",
                type_="InternalServerError",
            ),
        )
