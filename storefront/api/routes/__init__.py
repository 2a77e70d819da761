"""Route Modules — one file per resource.

Invariants:
    - Each module defines its own APIRouter with tags; the prefix comes from settings
    - Routes never contain business logic (delegate to the store)
"""
