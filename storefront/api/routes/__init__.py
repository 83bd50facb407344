"""Route Modules — one file per concern.

Invariants:
    - Each module defines its own APIRouter (or a factory producing one)
    - Routes never contain business logic (delegate to services)
"""
