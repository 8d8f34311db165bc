"""Error Handlers: global exception handlers for the message board API.

Invariants:
    - MessageBoardError → its own status and body (JSON or empty)
    - Unmatched route or method (Starlette 404/405) → 404, empty body
    - Client disconnect mid-body → logged, nothing persisted
    - Exception (catch-all) → 500 JSON, never leaks internal details

Design Decisions:
    - Extracted from main.py, registered explicitly by register_error_handlers()
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import ClientDisconnect

from message_board.api.responses import error_response, internal_error_response
from message_board.core.errors import (
    ErrorSeverity, MessageBoardError, RouteNotFoundError,
)

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.ERROR,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_message_board_error_handler(app)
    _register_http_error_handler(app)
    _register_client_disconnect_handler(app)
    _register_generic_error_handler(app)


def _register_message_board_error_handler(app: FastAPI) -> None:

    @app.exception_handler(MessageBoardError)
    async def message_board_error_handler(request: Request, exc: MessageBoardError):
        """Handle all domain and storage errors."""
        logger.log(
            _LOG_LEVELS[exc.severity],
            f"MessageBoardError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
                "status_code": exc.http_status,
            },
        )
        return error_response(exc)


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Routing misses (404, 405) all answer 404 with no body."""
        if exc.status_code in (
            status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
        ):
            not_found = RouteNotFoundError(request.method, request.url.path)
            logger.info(
                not_found.message,
                extra={"error_code": not_found.code, "path": request.url.path},
            )
            return error_response(not_found)
        return Response(status_code=exc.status_code, headers=exc.headers)


def _register_client_disconnect_handler(app: FastAPI) -> None:

    @app.exception_handler(ClientDisconnect)
    async def client_disconnect_handler(request: Request, exc: ClientDisconnect):
        """Body read aborted by the client; the handler never reached storage."""
        logger.warning(
            f"Client disconnected during {request.method} {request.url.path}",
            extra={"path": request.url.path, "method": request.method},
        )
        return Response(status_code=status.HTTP_400_BAD_REQUEST)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return internal_error_response()
