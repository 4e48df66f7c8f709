"""Pydantic Schemas — response validation for API endpoints.

Invariants:
    - Schemas describe the wire contract, never internal records

Design Decisions:
    - Separate from core dataclasses: schemas are API contracts
"""
