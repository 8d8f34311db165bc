"""Message Routes: POST / stores a message, GET / lists messages as HTML.

Invariants:
    - The DB session (and its pooled connection) is acquired before the handler body runs
    - POST reads the whole body before touching the database and parses it as
      a form regardless of content-type;
      a missing 'message' field means zero inserts
    - GET validates 'before'/'after' before querying; a bad value means no query
    - Handlers raise MessageBoardError; error responses are built by api/error_handlers.py
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.datastructures import QueryParams

from message_board.api.responses import messages_page, timestamp_response
from message_board.core.parse_new_message import parse_new_message
from message_board.core.parse_time_range import parse_time_range
from message_board.infrastructure.database import get_db
from message_board.schemas.message import ErrorResponse, TimestampResponse
from message_board.services.message_store import insert_message, query_messages

logger = logging.getLogger(__name__)
router = APIRouter(tags=["messages"])


@router.post(
    "/",
    response_model=TimestampResponse,
    responses={500: {"model": ErrorResponse}},
)
async def post_message(
    request: Request, db: AsyncSession = Depends(get_db),
) -> JSONResponse:
    """Store a form-encoded message (fields: message, username).

    The body is parsed as application/x-www-form-urlencoded whatever the
    content-type header says; bytes are decoded as UTF-8, invalid ones replaced.
    """
    body = await request.body()
    fields = QueryParams(body.decode("utf-8", errors="replace"))
    new_message = parse_new_message(fields)
    timestamp = await insert_message(db, new_message)
    logger.info(
        f"Message posted by {new_message.username}",
        extra={"assigned_timestamp": timestamp, "path": request.url.path},
    )
    return timestamp_response(timestamp)


@router.get("/", response_class=HTMLResponse)
async def list_messages(
    request: Request, db: AsyncSession = Depends(get_db),
) -> HTMLResponse:
    """List messages, optionally filtered by ?before=<int>&after=<int>."""
    params = request.query_params if request.url.query else None
    time_range = parse_time_range(params)
    messages = await query_messages(db, time_range)
    return messages_page(request, messages)
