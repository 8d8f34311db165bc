"""ORM Models: SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - A single table: messages

Design Decisions:
    - Models imported here so Base.metadata is populated for create_all and alembic
"""

from message_board.models.message import Message  # noqa: F401
