"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary; the core trusts its inputs
    - Update schemas are partial: only fields the client sent reach the store

Design Decisions:
    - Separate from core records: schemas are API contracts, records are domain state
"""
