"""Message Store: insert and time-range query against the messages table.

Invariants:
    - insert_message commits exactly one row or none (rollback on failure)
    - query_messages applies strict inequalities: timestamp < before, timestamp > after
    - Results are ordered by timestamp (insertion order)
    - SQLAlchemyError is logged and re-raised as StorageWriteError / StorageReadError;
      no retry
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from message_board.core.domain_types import NewMessage, TimeRange, Timestamp
from message_board.core.errors import StorageReadError, StorageWriteError
from message_board.models.message import Message

logger = logging.getLogger(__name__)


async def insert_message(db: AsyncSession, new_message: NewMessage) -> Timestamp:
    """Persist a message and return its server-assigned timestamp."""
    row = Message(username=new_message.username, message=new_message.message)
    try:
        db.add(row)
        await db.commit()
        await db.refresh(row)
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(
            f"Error writing to database: {e}",
            extra={"error_code": "STORAGE_WRITE_FAILURE", "operation": "insert"},
        )
        raise StorageWriteError() from e
    logger.debug(
        "Message stored", extra={"assigned_timestamp": row.timestamp},
    )
    return Timestamp(row.timestamp)


def build_query(time_range: TimeRange):
    """SELECT for the messages inside time_range, oldest first."""
    query = select(Message)
    if time_range.before is not None:
        query = query.where(Message.timestamp < time_range.before)
    if time_range.after is not None:
        query = query.where(Message.timestamp > time_range.after)
    return query.order_by(Message.timestamp)


async def query_messages(db: AsyncSession, time_range: TimeRange) -> list[Message]:
    """Fetch all messages strictly inside time_range."""
    try:
        result = await db.execute(build_query(time_range))
        messages = list(result.scalars().all())
    except SQLAlchemyError as e:
        logger.error(
            f"Error querying database: {e}",
            extra={"error_code": "STORAGE_READ_FAILURE", "operation": "query"},
        )
        raise StorageReadError() from e
    logger.debug("Messages loaded", extra={"message_count": len(messages)})
    return messages
