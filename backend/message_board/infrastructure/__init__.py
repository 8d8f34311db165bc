"""Infrastructure Layer: database pool and logging setup.

Invariants:
    - Infrastructure never imports from api/ or services/
    - Driver errors are mapped to core/errors.py types at this boundary
"""
