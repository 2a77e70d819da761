"""Core — pure domain logic for the commerce store.

Invariants:
    - Core never imports from api/ or infrastructure/ (dependency arrows point inward)
    - No IO, no async: every operation is synchronous and completes

Design Decisions:
    - Not-found is returned as None, never raised (boundary decides how to surface it)
"""
