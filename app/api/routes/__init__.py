"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes hold no data of their own (delegate to core/ via Depends)
"""
