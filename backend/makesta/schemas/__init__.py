"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - JSON uses camelCase; snake_case field names are also accepted on input
    - Domain enums from core/ used for constrained string fields
    - Password hashes never appear in any response schema

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
