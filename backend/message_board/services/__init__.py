"""Services Layer: storage operations over an injected AsyncSession.

Invariants:
    - Services never build HTTP responses; they return values or raise MessageBoardError
    - Every SQLAlchemy failure is logged here and converted to a storage error
"""
