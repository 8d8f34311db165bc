"""Response Rendering: every response shape the board produces.

Invariants:
    - 200 JSON {"timestamp": N} for a stored message
    - 200 HTML document for a message listing, rendered with autoescaping
    - Error responses follow MessageBoardError.to_response(): JSON body or empty body
    - Starlette sets content-length from the encoded body on every response
"""

from pathlib import Path
from typing import Sequence

from fastapi import Request
from fastapi.responses import HTMLResponse, JSONResponse, Response
from fastapi.templating import Jinja2Templates
from jinja2 import Environment, FileSystemLoader

from message_board.core.domain_types import Timestamp
from message_board.core.errors import MessageBoardError
from message_board.models.message import Message
from message_board.schemas.message import ErrorResponse, TimestampResponse

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(
    env=Environment(loader=FileSystemLoader(TEMPLATES_DIR), autoescape=True),
)


def timestamp_response(timestamp: Timestamp) -> JSONResponse:
    return JSONResponse(
        content=TimestampResponse(timestamp=timestamp).model_dump(),
    )


def messages_page(request: Request, messages: Sequence[Message]) -> HTMLResponse:
    """Render messages as an HTML list: 'username (timestamp): message'."""
    return templates.TemplateResponse(
        request, "messages.html", {"messages": messages},
    )


def error_response(exc: MessageBoardError) -> Response:
    payload = exc.to_response()
    if payload is None:
        return Response(status_code=exc.http_status)
    return JSONResponse(status_code=exc.http_status, content=payload)


def internal_error_response() -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error="An unexpected error occurred").model_dump(),
    )
