"""Infrastructure — process-level concerns (logging) kept out of the core.

Invariants:
    - Nothing here holds domain state
"""
