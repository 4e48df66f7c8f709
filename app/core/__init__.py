"""Core Layer — domain logic with no HTTP, no async, no IO.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
"""
