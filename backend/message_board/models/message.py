"""Message ORM: the single persisted entity of the board.

Invariants:
    - timestamp is assigned by the database on insert, exactly once
    - timestamp strictly increases with each insert (identity sequence)
    - username and message are non-nullable text; no update or delete path exists

Design Decisions:
    - timestamp doubles as the primary key: BIGSERIAL on PostgreSQL,
      INTEGER rowid alias on SQLite (BigInteger would not autoincrement there)
"""

from sqlalchemy import BigInteger, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from message_board.core.domain_types import DEFAULT_USERNAME
from message_board.db.base import Base

TimestampType = BigInteger().with_variant(Integer, "sqlite")


class Message(Base):
    """One posted message."""
    __tablename__ = "messages"
    __table_args__ = {"sqlite_autoincrement": True}

    timestamp: Mapped[int] = mapped_column(
        TimestampType, primary_key=True, autoincrement=True,
    )
    username: Mapped[str] = mapped_column(
        Text, nullable=False, default=DEFAULT_USERNAME,
    )
    message: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"Message(timestamp={self.timestamp!r}, username={self.username!r})"
