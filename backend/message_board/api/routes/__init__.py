"""Route Modules: one file per resource.

Invariants:
    - Each module defines its own APIRouter
    - Routes never contain business logic (delegate to core/ parsing and services/)
"""
