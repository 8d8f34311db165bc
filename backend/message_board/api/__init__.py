"""API Layer: FastAPI routes, response rendering and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
"""
