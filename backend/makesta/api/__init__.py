"""API Layer — FastAPI routes, request dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses (downloads excepted)
    - Every error leaves through the MakestaError handler shape

Design Decisions:
    - Thin routes: validation in schemas, rules in core/, persistence in repositories/
"""
