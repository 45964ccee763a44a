"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Token issuing, role checks, attendance transitions and grade math are
      deterministic given their inputs (clock injected where time matters)

Design Decisions:
    - Functional core separated from imperative shell: repositories and routes
      own the IO, core/ owns the rules
"""
