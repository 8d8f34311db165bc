"""Pydantic Schemas: JSON response contracts for the API.

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
